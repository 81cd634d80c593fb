import os
import tempfile

import pytest

_tmp = tempfile.mkdtemp(prefix="realestate-tests-")
os.environ["DATA_DIR"] = os.path.join(_tmp, "data")
os.environ["UPLOAD_DIR"] = os.path.join(_tmp, "uploads")
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

from fastapi.testclient import TestClient  # noqa: E402

from database import JSONStore  # noqa: E402
from main import app, get_store, get_uploads  # noqa: E402
from uploads import UploadStore  # noqa: E402


@pytest.fixture
def store(tmp_path):
    return JSONStore(str(tmp_path / "data"))


@pytest.fixture
def uploads(tmp_path):
    return UploadStore(str(tmp_path / "uploads"))


@pytest.fixture
def client(store, uploads):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_uploads] = lambda: uploads
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_auth():
    return ("admin", "admin360")


@pytest.fixture
def property_payload():
    def _payload(**overrides):
        payload = {
            "title": "Valley View Cottage",
            "price": "₹ 85 Lakh",
            "location": "Rajpur Road, Dehradun",
            "description": "Two storey cottage with a garden.",
            "specs": {"bedrooms": 3, "bathrooms": 2, "area": "1200"},
            "features": ["Garden", "Parking"],
            "category": "buy",
            "propertyType": "House",
            "images": ["/images/cottage.jpg"],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def make_property(client, admin_auth, property_payload):
    def _make(**overrides):
        r = client.post("/api/properties", json=property_payload(**overrides), auth=admin_auth)
        assert r.status_code == 201, r.text
        return r.json()["id"]

    return _make
