import json
import os

from fastapi.testclient import TestClient

from defaults import PROPERTIES_FILE
from main import app, get_store


def upload_path(uploads, url):
    return os.path.join(uploads.root, url.split("?")[0][len("/uploads/"):])


def test_list_is_empty_on_fresh_store(client):
    r = client.get("/api/properties")
    assert r.status_code == 200
    assert r.json() == []
    assert "no-store" in r.headers["cache-control"]


def test_create_requires_admin(client, property_payload):
    r = client.post("/api/properties", json=property_payload())
    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Basic"


def test_create_and_fetch_property(client, make_property):
    prop_id = make_property()
    r = client.get(f"/api/properties/{prop_id}")
    assert r.status_code == 200
    prop = r.json()
    assert prop["id"] == prop_id
    assert prop["title"] == "Valley View Cottage"
    assert prop["propertyType"] == "House"
    assert prop["specs"]["bedrooms"] == "3"
    assert prop["areaDisplay"] == "1,200 sq ft"
    assert prop["createdAt"] == prop["updatedAt"]
    assert prop["featured"] is False


def test_create_rejects_missing_fields(client, admin_auth, property_payload):
    payload = property_payload()
    del payload["title"]
    r = client.post("/api/properties", json=payload, auth=admin_auth)
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required field: title"

    r = client.post("/api/properties", json=property_payload(description=""), auth=admin_auth)
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required field: description"


def test_create_rejects_unknown_category(client, admin_auth, property_payload):
    r = client.post("/api/properties", json=property_payload(category="rent"), auth=admin_auth)
    assert r.status_code == 400
    assert r.json()["detail"].startswith("Invalid value for category")


def test_create_rejects_invalid_json(client, admin_auth):
    r = client.post(
        "/api/properties",
        content=b"{oops",
        headers={"Content-Type": "application/json"},
        auth=admin_auth,
    )
    assert r.status_code == 400


def test_create_multipart_saves_media(client, admin_auth, uploads, property_payload):
    r = client.post(
        "/api/properties",
        data={"propertyData": json.dumps(property_payload())},
        files=[
            ("image-0", ("Front View.JPG", b"jpeg-bytes", "image/jpeg")),
            ("video-0", ("tour.mp4", b"mp4-bytes", "video/mp4")),
        ],
        auth=admin_auth,
    )
    assert r.status_code == 201, r.text
    prop_id = r.json()["id"]

    prop = client.get(f"/api/properties/{prop_id}").json()
    assert prop["images"][0] == "/images/cottage.jpg"
    new_image = prop["images"][1]
    assert new_image.startswith(f"/uploads/{prop_id}/image-0-")
    assert new_image.split("?")[0].endswith("front_view.jpg")
    assert os.path.exists(upload_path(uploads, new_image))
    assert len(prop["videoUrls"]) == 1
    assert prop["videoUrl"] == prop["videoUrls"][0]


def test_create_multipart_requires_valid_property_data(client, admin_auth):
    r = client.post(
        "/api/properties",
        data={"propertyData": "{bad"},
        files={"image-0": ("a.jpg", b"jpeg", "image/jpeg")},
        auth=admin_auth,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid propertyData JSON"


def test_get_missing_property(client):
    r = client.get("/api/properties/nope")
    assert r.status_code == 404
    assert r.json()["detail"] == "Property not found"


def test_list_applies_filters(client, make_property):
    make_property()
    lease_id = make_property(category="lease", location="Mall Road, Mussoorie", price="₹ 40,000")
    make_property(location="Goa", price="₹ 3 Crore")

    r = client.get("/api/properties", params={"category": "lease"})
    assert [p["id"] for p in r.json()] == [lease_id]

    r = client.get("/api/properties", params={"location": "Uttarakhand"})
    assert len(r.json()) == 2

    r = client.get("/api/properties/filtered", params={"priceMax": "100000"})
    assert [p["id"] for p in r.json()] == [lease_id]


def test_options(client, make_property):
    make_property()
    make_property(location="Nainital", propertyType="Plot")
    assert client.get("/api/properties/options").json() == {
        "locations": ["Nainital", "Rajpur Road"],
        "propertyTypes": ["House", "Plot"],
    }


def test_featured_respects_settings_count_and_order(client, make_property):
    ids = [make_property(featured=True, featuredOrder=n) for n in (4, 1, 3, 2)]
    make_property()

    featured = client.get("/api/properties/featured").json()
    assert [p["featuredOrder"] for p in featured] == [1, 2, 3]

    featured = client.get("/api/properties/featured", params={"limit": 10}).json()
    assert [p["id"] for p in featured] == [ids[1], ids[3], ids[2], ids[0]]


def test_featured_order_updates(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.post(
        "/api/properties/featured-order",
        json={"updates": [{"id": prop_id, "featuredOrder": 1}]},
        auth=admin_auth,
    )
    assert r.status_code == 200
    assert r.json() == {"success": True, "results": [{"id": prop_id, "success": True}]}

    prop = client.get(f"/api/properties/{prop_id}").json()
    assert prop["featured"] is True
    assert prop["featuredOrder"] == 1


def test_featured_order_partial_failure(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.post(
        "/api/properties/featured-order",
        json={"updates": [{"id": prop_id, "featuredOrder": 2}, {"id": "ghost", "featuredOrder": 1}]},
        auth=admin_auth,
    )
    assert r.status_code == 207
    body = r.json()
    assert body["success"] is False
    assert body["results"][1] == {"id": "ghost", "success": False, "error": "Property not found"}
    assert client.get(f"/api/properties/{prop_id}").json()["featuredOrder"] == 2


def test_featured_order_requires_updates(client, admin_auth):
    r = client.post("/api/properties/featured-order", json={"updates": []}, auth=admin_auth)
    assert r.status_code == 400


def test_update_json_merges_fields(client, admin_auth, make_property):
    prop_id = make_property()
    before = client.get(f"/api/properties/{prop_id}").json()

    r = client.put(
        f"/api/properties/{prop_id}",
        json={"title": "Renovated Cottage", "id": "hijack", "createdAt": "1999-01-01T00:00:00.000Z"},
        auth=admin_auth,
    )
    assert r.status_code == 200
    assert r.json()["success"] is True

    after = client.get(f"/api/properties/{prop_id}").json()
    assert after["title"] == "Renovated Cottage"
    assert after["id"] == prop_id
    assert after["createdAt"] == before["createdAt"]
    assert after["price"] == before["price"]
    assert after["updatedAt"] >= before["updatedAt"]


def test_update_multipart_appends_images(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.put(
        f"/api/properties/{prop_id}",
        data={"propertyData": json.dumps({"title": "With photo"})},
        files={"image-0": ("back.png", b"png-bytes", "image/png")},
        auth=admin_auth,
    )
    assert r.status_code == 200, r.text
    prop = client.get(f"/api/properties/{prop_id}").json()
    assert prop["title"] == "With photo"
    assert prop["images"][0] == "/images/cottage.jpg"
    assert prop["images"][1].startswith(f"/uploads/{prop_id}/image-0-")


def test_update_multipart_requires_property_data(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.put(
        f"/api/properties/{prop_id}",
        files={"image-0": ("back.png", b"png-bytes", "image/png")},
        auth=admin_auth,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Property data is required"


def test_update_missing_property(client, admin_auth):
    r = client.put("/api/properties/nope", json={"title": "x"}, auth=admin_auth)
    assert r.status_code == 404


def test_delete_removes_record_and_media(client, admin_auth, uploads, property_payload):
    r = client.post(
        "/api/properties",
        data={"propertyData": json.dumps(property_payload())},
        files={"image-0": ("a.jpg", b"jpeg", "image/jpeg")},
        auth=admin_auth,
    )
    prop_id = r.json()["id"]
    assert os.path.isdir(os.path.join(uploads.root, prop_id))

    r = client.delete(f"/api/properties/{prop_id}", auth=admin_auth)
    assert r.status_code == 200
    assert not os.path.exists(os.path.join(uploads.root, prop_id))
    assert client.get(f"/api/properties/{prop_id}").status_code == 404
    assert client.delete(f"/api/properties/{prop_id}", auth=admin_auth).status_code == 404


def test_corrupt_data_file_returns_500(store):
    os.makedirs(store.data_dir, exist_ok=True)
    with open(store.path(PROPERTIES_FILE), "w", encoding="utf-8") as f:
        f.write("[{")
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/api/properties")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}


def test_update_rejects_invalid_fields_and_keeps_record(client, admin_auth, make_property):
    prop_id = make_property()
    before = client.get(f"/api/properties/{prop_id}").json()

    for body in ({"specs": "3 BHK"}, {"category": "rent"}, {"featuredOrder": "first"}, {"title": ""}):
        r = client.put(f"/api/properties/{prop_id}", json=body, auth=admin_auth)
        assert r.status_code == 400, body

    assert client.get(f"/api/properties/{prop_id}").json() == before
    assert client.get("/api/properties").status_code == 200


def test_update_multipart_rejects_invalid_property_data(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.put(
        f"/api/properties/{prop_id}",
        data={"propertyData": json.dumps({"category": "rent"})},
        auth=admin_auth,
        files={"image-0": ("back.png", b"png-bytes", "image/png")},
    )
    assert r.status_code == 400
    assert client.get(f"/api/properties/{prop_id}").json()["category"] == "buy"


def test_update_normalizes_numeric_fields(client, admin_auth, make_property):
    prop_id = make_property()
    r = client.put(
        f"/api/properties/{prop_id}",
        json={"featured": True, "featuredOrder": "2", "specs": {"bedrooms": 4}},
        auth=admin_auth,
    )
    assert r.status_code == 200
    prop = client.get(f"/api/properties/{prop_id}").json()
    assert prop["featuredOrder"] == 2
    assert prop["specs"]["bedrooms"] == "4"


def test_featured_tolerates_string_orders_in_data_file(client, store):
    store.save(PROPERTIES_FILE, [
        {"id": "a", "featured": True, "featuredOrder": "2"},
        {"id": "b", "featured": True, "featuredOrder": 1},
        {"id": "c", "featured": True, "featuredOrder": "top"},
    ])
    r = client.get("/api/properties/featured", params={"limit": 10})
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["b", "a", "c"]


def test_property_responses_carry_price_display(client, make_property):
    prop_id = make_property(price="₹ 1,50,00,000")
    assert client.get(f"/api/properties/{prop_id}").json()["priceDisplay"] == "₹ 1.5 Crore"
