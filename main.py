import json
import logging
import os
import re
from typing import Any, Dict, List, Optional

from fastapi import Body, Depends, FastAPI, File, Form, HTTPException, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from werkzeug.utils import secure_filename

import config
from auth import require_admin, verify_admin
from database import JSONStore, new_id, utc_now
from defaults import (
    ABOUT_FILE,
    CONTACT_MESSAGES_FILE,
    CONTACT_PAGE_FILE,
    CONTENT_FILE,
    GUIDE_FILE,
    HOME_CONTENT_FILE,
    INQUIRIES_FILE,
    PROPERTIES_FILE,
    PROPERTY_PAGE_FILE,
    REGIONS_FILE,
    SETTINGS_FILE,
    default_about_content,
    default_contact_page,
    default_guide,
    default_home_content,
    default_property_page,
    default_regions,
    default_settings,
)
from listings import (
    featured_properties,
    filter_properties,
    format_area,
    format_indian_price,
    merge_uploaded_media,
    property_options,
)
from schemas import (
    AboutContent,
    AdminLogin,
    ContactCreate,
    ContentCreate,
    ContentDelete,
    ContentSlugUpdate,
    ContentUpdate,
    FeaturedOrderRequest,
    GuideContent,
    HomePageContent,
    InquiryCreate,
    PropertyCreate,
    PropertyPageContent,
    SettingsUpdate,
    StatusUpdate,
)
from uploads import BANNER_IMAGE_TYPES, PAGE_IMAGE_TYPES, UploadStore, save_property_media

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="360° Real Estate API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Static hosting for uploaded images and videos
os.makedirs(config.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR), name="uploads")

store = JSONStore(config.DATA_DIR)
upload_store = UploadStore(config.UPLOAD_DIR)

NO_STORE = "no-store, no-cache, must-revalidate, proxy-revalidate"
JSON_FORM_FIELDS = ("specs", "features", "amenities", "images", "videoUrls", "agent", "nearby", "location_details")
SOCIAL_NETWORKS = ("facebook", "instagram", "youtube", "whatsapp")


def get_store() -> JSONStore:
    return store


def get_uploads() -> UploadStore:
    return upload_store


# Utility

def validation_message(errors: List[Dict[str, Any]]) -> str:
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
    field = ".".join(loc) or "body"
    if err.get("type") in ("missing", "string_too_short"):
        return f"Missing required field: {field}"
    return f"Invalid value for {field}: {err.get('msg')}"


def validate_payload(model, data: Any):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=validation_message(e.errors()))


def slugify(title: str) -> str:
    slug = re.sub(r"[^\w\s]", "", title.lower().strip())
    return re.sub(r"\s+", "-", slug)


def is_multipart(request: Request) -> bool:
    return "multipart/form-data" in request.headers.get("content-type", "")


async def json_body(request: Request) -> Dict[str, Any]:
    try:
        data = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON in request body")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return data


def form_property_data(form) -> Dict[str, Any]:
    raw = form.get("propertyData")
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="Invalid propertyData JSON")
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="Invalid propertyData JSON")
        return data

    # Older admin forms post every field flat, with nested values stringified.
    data: Dict[str, Any] = {}
    for key, value in form.multi_items():
        if not isinstance(value, str):
            continue
        if key in JSON_FORM_FIELDS:
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                logger.warning("Could not parse form field %s as JSON", key)
        data[key] = value
    return data


def present_property(doc: Dict[str, Any]) -> Dict[str, Any]:
    item = dict(doc)
    item["areaDisplay"] = format_area(doc.get("specs"), doc.get("propertyType"))
    item["priceDisplay"] = format_indian_price(doc.get("price"))
    return item


def stamp(doc: Dict[str, Any]) -> Dict[str, Any]:
    doc["updatedAt"] = utc_now()
    return doc


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": validation_message(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def no_store_api_responses(request: Request, call_next):
    response = await call_next(request)
    if request.url.path.startswith("/api/"):
        response.headers.setdefault("Cache-Control", NO_STORE)
    return response


@app.get("/")
def root():
    return {"name": "360° Real Estate API", "status": "ok"}


# ----------------------- Admin -----------------------
@app.post("/api/admin/login")
def admin_login(payload: AdminLogin):
    if not verify_admin(payload.username, payload.password):
        logger.warning("Failed admin login for %s", payload.username)
        raise HTTPException(status_code=401, detail="Invalid admin credentials")
    return {"authenticated": True}


# ----------------------- Properties -----------------------
def _property_filters(category, location, property_type, price_min, price_max, bhk_option) -> Dict[str, Optional[str]]:
    return {
        "category": category,
        "location": location,
        "propertyType": property_type,
        "priceMin": price_min,
        "priceMax": price_max,
        "bhkOption": bhk_option,
    }


@app.get("/api/properties")
def list_properties(
    category: Optional[str] = None,
    location: Optional[str] = None,
    property_type: Optional[str] = Query(None, alias="propertyType"),
    price_min: Optional[str] = Query(None, alias="priceMin"),
    price_max: Optional[str] = Query(None, alias="priceMax"),
    bhk_option: Optional[str] = Query(None, alias="bhkOption"),
    db: JSONStore = Depends(get_store),
):
    filters = _property_filters(category, location, property_type, price_min, price_max, bhk_option)
    properties = db.get_documents(PROPERTIES_FILE)
    results = filter_properties(properties, filters)
    logger.info("Returning %d of %d properties for %s", len(results), len(properties),
                {k: v for k, v in filters.items() if v})
    return [present_property(p) for p in results]


@app.get("/api/properties/filtered")
def list_filtered_properties(
    category: Optional[str] = None,
    location: Optional[str] = None,
    property_type: Optional[str] = Query(None, alias="propertyType"),
    price_min: Optional[str] = Query(None, alias="priceMin"),
    price_max: Optional[str] = Query(None, alias="priceMax"),
    db: JSONStore = Depends(get_store),
):
    filters = _property_filters(category, location, property_type, price_min, price_max, None)
    return [present_property(p) for p in filter_properties(db.get_documents(PROPERTIES_FILE), filters)]


@app.get("/api/properties/options")
def get_property_options(db: JSONStore = Depends(get_store)):
    return property_options(db.get_documents(PROPERTIES_FILE))


@app.get("/api/properties/featured")
def list_featured_properties(limit: Optional[int] = None, db: JSONStore = Depends(get_store)):
    if limit is None:
        settings = db.load(SETTINGS_FILE, default_settings)
        try:
            limit = int(settings.get("featuredPropertiesCount") or 0)
        except (TypeError, ValueError):
            limit = 0
    return [present_property(p) for p in featured_properties(db.get_documents(PROPERTIES_FILE), limit)]


@app.post("/api/properties/featured-order", dependencies=[Depends(require_admin)])
def update_featured_order(payload: FeaturedOrderRequest, db: JSONStore = Depends(get_store)):
    if not payload.updates:
        raise HTTPException(status_code=400, detail="Invalid request: updates array is required")

    results = []
    with db.transaction(PROPERTIES_FILE) as properties:
        by_id = {p.get("id"): p for p in properties}
        for update in payload.updates:
            if not update.id:
                results.append({"id": update.id, "success": False, "error": "Property ID is required"})
                continue
            prop = by_id.get(update.id)
            if prop is None:
                results.append({"id": update.id, "success": False, "error": "Property not found"})
                continue
            prop["featuredOrder"] = update.featured_order
            if update.featured_order is not None:
                prop["featured"] = True
            stamp(prop)
            results.append({"id": update.id, "success": True})

    if all(r["success"] for r in results):
        return {"success": True, "results": results}
    return JSONResponse(status_code=207, content={"success": False, "results": results})


@app.get("/api/properties/{prop_id}")
def get_property(prop_id: str, db: JSONStore = Depends(get_store)):
    doc = db.find_document(PROPERTIES_FILE, prop_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Property not found")
    return present_property(doc)


@app.post("/api/properties", status_code=201, dependencies=[Depends(require_admin)])
async def create_property(
    request: Request,
    db: JSONStore = Depends(get_store),
    files: UploadStore = Depends(get_uploads),
):
    form = None
    if is_multipart(request):
        form = await request.form()
        data = form_property_data(form)
    else:
        data = await json_body(request)

    payload = validate_payload(PropertyCreate, data)
    doc = payload.to_doc(exclude_none=True)
    now = utc_now()
    doc.update(id=new_id(), createdAt=now, updatedAt=now)

    if form is not None:
        media = await save_property_media(files, doc["id"], form, config.MAX_VIDEO_BYTES)
        doc["images"] = doc.get("images", []) + media["images"]
        doc["videoUrls"] = doc.get("videoUrls", []) + media["videoUrls"]
    if doc.get("videoUrls") and not doc.get("videoUrl"):
        doc["videoUrl"] = doc["videoUrls"][0]

    db.create_document(PROPERTIES_FILE, doc)
    logger.info("Created property %s (%s)", doc["id"], doc["title"])
    return {"id": doc["id"]}


@app.put("/api/properties/{prop_id}", dependencies=[Depends(require_admin)])
async def update_property(
    prop_id: str,
    request: Request,
    db: JSONStore = Depends(get_store),
    files: UploadStore = Depends(get_uploads),
):
    if not db.find_document(PROPERTIES_FILE, prop_id):
        raise HTTPException(status_code=404, detail="Property not found")

    media = None
    if is_multipart(request):
        form = await request.form()
        raw = form.get("propertyData")
        if not isinstance(raw, str):
            raise HTTPException(status_code=400, detail="Property data is required")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="Invalid property data format")
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="Invalid property data format")
        media = await save_property_media(files, prop_id, form, config.MAX_VIDEO_BYTES)
    else:
        data = await json_body(request)

    data.pop("id", None)
    data.pop("createdAt", None)
    data.pop("updatedAt", None)

    # Media files are written above; the record itself is merged under the file lock.
    with db.transaction(PROPERTIES_FILE) as properties:
        index = next((i for i, p in enumerate(properties) if p.get("id") == prop_id), None)
        if index is None:
            raise HTTPException(status_code=404, detail="Property not found")
        existing = properties[index]
        if media is not None:
            data = merge_uploaded_media(existing, data, media)
        else:
            videos = data.get("videoUrls")
            if isinstance(videos, list) and videos and not data.get("videoUrl"):
                data["videoUrl"] = videos[0]

        payload = validate_payload(PropertyCreate, {**existing, **data})
        updated = payload.to_doc(exclude_none=True)
        updated["id"] = prop_id
        if existing.get("createdAt"):
            updated["createdAt"] = existing["createdAt"]
        properties[index] = stamp(updated)

    logger.info("Updated property %s", prop_id)
    return {"success": True, "message": "Property updated successfully"}


@app.delete("/api/properties/{prop_id}", dependencies=[Depends(require_admin)])
def delete_property(
    prop_id: str,
    db: JSONStore = Depends(get_store),
    files: UploadStore = Depends(get_uploads),
):
    if not db.delete_documents(PROPERTIES_FILE, [prop_id]):
        raise HTTPException(status_code=404, detail="Property not found")
    files.remove_dir(prop_id)
    logger.info("Deleted property %s", prop_id)
    return {"success": True}


# ----------------------- Content pages -----------------------
@app.get("/api/content")
def list_content(db: JSONStore = Depends(get_store)):
    pages = db.get_documents(CONTENT_FILE)
    return sorted(pages, key=lambda p: p.get("updatedAt") or "", reverse=True)


@app.post("/api/content", dependencies=[Depends(require_admin)])
def create_content(payload: ContentCreate, db: JSONStore = Depends(get_store)):
    doc = payload.to_doc(exclude_none=True)
    doc["slug"] = payload.slug or slugify(payload.title)
    doc["metaTitle"] = payload.meta_title or payload.title
    now = utc_now()
    doc.update(id=new_id(), createdAt=now, updatedAt=now)

    with db.transaction(CONTENT_FILE) as pages:
        if any(p.get("slug") == doc["slug"] for p in pages):
            raise HTTPException(status_code=400, detail="Content with this slug already exists")
        pages.append(doc)
    logger.info("Created content page %s", doc["slug"])
    return doc


@app.put("/api/content", dependencies=[Depends(require_admin)])
def update_content(payload: ContentUpdate, db: JSONStore = Depends(get_store)):
    changes = payload.to_doc(exclude_none=True)
    with db.transaction(CONTENT_FILE) as pages:
        index = next((i for i, p in enumerate(pages) if p.get("id") == payload.id), None)
        if index is None:
            raise HTTPException(status_code=404, detail="Content not found")
        slug = changes.get("slug")
        if slug and slug != pages[index].get("slug") and any(p.get("slug") == slug for p in pages):
            raise HTTPException(status_code=400, detail="Content with this slug already exists")
        pages[index] = stamp({**pages[index], **changes})
        updated = pages[index]
    return updated


@app.delete("/api/content", dependencies=[Depends(require_admin)])
def delete_content(payload: ContentDelete, db: JSONStore = Depends(get_store)):
    if not payload.id:
        raise HTTPException(status_code=400, detail="Content ID is required")
    if not db.delete_documents(CONTENT_FILE, [payload.id]):
        raise HTTPException(status_code=404, detail="Content not found")
    return {"success": True}


@app.get("/api/content/{slug}")
def get_content(slug: str, db: JSONStore = Depends(get_store)):
    doc = db.find_document(CONTENT_FILE, slug, key="slug")
    if not doc:
        raise HTTPException(status_code=404, detail="Content not found")
    return doc


@app.put("/api/content/{slug}", dependencies=[Depends(require_admin)])
def update_content_by_slug(slug: str, payload: ContentSlugUpdate, db: JSONStore = Depends(get_store)):
    changes = payload.to_doc(exclude_none=True)
    changes.pop("id", None)
    with db.transaction(CONTENT_FILE) as pages:
        index = next((i for i, p in enumerate(pages) if p.get("slug") == slug), None)
        if index is None:
            raise HTTPException(status_code=404, detail="Content not found")
        new_slug = changes.get("slug")
        if new_slug and new_slug != slug and any(p.get("slug") == new_slug for p in pages):
            raise HTTPException(status_code=400, detail="Content with this slug already exists")
        pages[index] = stamp({**pages[index], **changes})
        updated = pages[index]
    return updated


@app.delete("/api/content/{slug}", dependencies=[Depends(require_admin)])
def delete_content_by_slug(slug: str, db: JSONStore = Depends(get_store)):
    with db.transaction(CONTENT_FILE) as pages:
        kept = [p for p in pages if p.get("slug") != slug]
        if len(kept) == len(pages):
            raise HTTPException(status_code=404, detail="Content not found")
        pages[:] = kept
    return {"success": True}


# ----------------------- Page documents -----------------------
@app.get("/api/home-content")
def get_home_content(db: JSONStore = Depends(get_store)):
    return db.load(HOME_CONTENT_FILE, default_home_content)


@app.post("/api/home-content", dependencies=[Depends(require_admin)])
def save_home_content(payload: HomePageContent, db: JSONStore = Depends(get_store)):
    doc = stamp(payload.to_doc())
    doc["id"] = "home-page"
    db.save(HOME_CONTENT_FILE, doc)
    logger.info("Home page content updated")
    return doc


@app.get("/api/about")
def get_about(db: JSONStore = Depends(get_store)):
    return db.load(ABOUT_FILE, default_about_content)


@app.post("/api/about", dependencies=[Depends(require_admin)])
def save_about(payload: AboutContent, db: JSONStore = Depends(get_store)):
    doc = stamp(payload.to_doc())
    db.save(ABOUT_FILE, doc)
    logger.info("About page content updated")
    return doc


@app.get("/api/contact-page")
def get_contact_page(db: JSONStore = Depends(get_store)):
    return db.load(CONTACT_PAGE_FILE, default_contact_page)


@app.post("/api/contact-page", dependencies=[Depends(require_admin)])
def save_contact_page(data: Dict[str, Any] = Body(...), db: JSONStore = Depends(get_store)):
    with db.transaction(CONTACT_PAGE_FILE, default_contact_page) as content:
        content.update(data)
        stamp(content)
    return {"message": "Contact page content updated successfully", "content": content}


@app.get("/api/property-page")
def get_property_page(db: JSONStore = Depends(get_store)):
    return db.load(PROPERTY_PAGE_FILE, default_property_page)


@app.post("/api/property-page", dependencies=[Depends(require_admin)])
def save_property_page(payload: PropertyPageContent, db: JSONStore = Depends(get_store)):
    db.save(PROPERTY_PAGE_FILE, stamp(payload.to_doc()))
    return {"success": True}


@app.get("/api/uttarakhand-guide")
def get_guide(db: JSONStore = Depends(get_store)):
    return db.load(GUIDE_FILE, default_guide)


@app.post("/api/uttarakhand-guide", dependencies=[Depends(require_admin)])
def save_guide(payload: GuideContent, db: JSONStore = Depends(get_store)):
    doc = stamp(payload.to_doc())
    db.save(GUIDE_FILE, doc)
    return doc


# ----------------------- Settings -----------------------
def merge_settings(current: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a settings form over the stored settings.

    The older admin screen posts ``siteEmail``/``sitePhone``/``siteAddress``
    and nested ``seo``/``social`` objects; both shapes are accepted.
    """
    seo = data.get("seo") or {}
    social = data.get("social") or {}
    links = data.get("socialLinks") or {}
    current_links = current.get("socialLinks") or {}

    virtual_tours = data.get("enableVirtualTours")
    if virtual_tours is None:
        virtual_tours = data.get("showVirtualTours")
    if virtual_tours is None:
        virtual_tours = current.get("enableVirtualTours", True)

    updated = dict(current)
    updated.update(
        siteName=data["siteName"],
        contactEmail=data["contactEmail"],
        phoneNumber=data.get("phoneNumber") or data.get("sitePhone") or current.get("phoneNumber"),
        mainLocation=data.get("mainLocation") or data.get("siteAddress") or current.get("mainLocation"),
        metaTitle=data.get("metaTitle") or seo.get("metaTitle") or current.get("metaTitle"),
        metaDescription=data.get("metaDescription") or seo.get("metaDescription") or current.get("metaDescription"),
        featuredPropertiesCount=str(data.get("featuredPropertiesCount") or current.get("featuredPropertiesCount") or "3"),
        enableVirtualTours=bool(virtual_tours),
        socialLinks={
            name: links.get(name) or social.get(name) or current_links.get(name) or ""
            for name in SOCIAL_NETWORKS
        },
    )
    return stamp(updated)


@app.get("/api/settings")
def get_settings(db: JSONStore = Depends(get_store)):
    return db.load(SETTINGS_FILE, default_settings)


@app.post("/api/settings", dependencies=[Depends(require_admin)])
def save_settings(payload: SettingsUpdate, db: JSONStore = Depends(get_store)):
    with db.transaction(SETTINGS_FILE, default_settings) as settings:
        updated = merge_settings(settings, payload.to_doc())
        settings.clear()
        settings.update(updated)
    return {"success": True, "message": "Settings updated successfully", "settings": updated}


# ----------------------- Regions -----------------------
@app.get("/api/regions")
def list_regions(db: JSONStore = Depends(get_store)):
    return db.load(REGIONS_FILE, default_regions)


@app.get("/api/regions/{region_id}")
def get_region(region_id: str, db: JSONStore = Depends(get_store)):
    for region in db.load(REGIONS_FILE, default_regions):
        if region.get("id") == region_id:
            return region
    raise HTTPException(status_code=404, detail="Region not found")


# ----------------------- Inquiries -----------------------
def _newest_first(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(records, key=lambda r: r.get("createdAt") or "", reverse=True)


def _set_status(db: JSONStore, name: str, record_id: Optional[str], update: StatusUpdate, label: str):
    if not record_id:
        raise HTTPException(status_code=400, detail=f"Missing {label.lower()} ID")
    status = update.normalized_status()
    if status is None:
        raise HTTPException(status_code=400, detail="Invalid or missing status")
    with db.transaction(name) as records:
        record = next((r for r in records if r.get("id") == record_id), None)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        record["status"] = status
        stamp(record)
    return record


def _delete_records(db: JSONStore, name: str, record_id: Optional[str], ids: Optional[str], label: str):
    if record_id:
        if not db.delete_documents(name, [record_id]):
            raise HTTPException(status_code=404, detail=f"{label} not found")
        logger.info("Deleted %s %s", label.lower(), record_id)
        return {"success": True}
    if ids:
        wanted = [i.strip() for i in ids.split(",") if i.strip()]
        deleted = db.delete_documents(name, wanted)
        if not deleted:
            raise HTTPException(status_code=404, detail=f"No {label.lower()} records found with the provided IDs")
        logger.info("Deleted %d %s records", deleted, label.lower())
        return {"success": True, "deleted": deleted}
    raise HTTPException(status_code=400, detail=f"No {label.lower()} ID provided")


@app.post("/api/inquiries", status_code=201)
def create_inquiry(payload: InquiryCreate, db: JSONStore = Depends(get_store)):
    now = utc_now()
    doc = payload.to_doc(exclude_none=True)
    doc.update(id=new_id(), status="new", createdAt=now, updatedAt=now)
    db.create_document(INQUIRIES_FILE, doc)
    logger.info("Inquiry saved with ID %s", doc["id"])
    return {"id": doc["id"], "success": True}


@app.get("/api/inquiries", dependencies=[Depends(require_admin)])
def list_inquiries(db: JSONStore = Depends(get_store)):
    return _newest_first(db.get_documents(INQUIRIES_FILE))


@app.patch("/api/inquiries", dependencies=[Depends(require_admin)])
def update_inquiry_status(payload: StatusUpdate, db: JSONStore = Depends(get_store)):
    inquiry = _set_status(db, INQUIRIES_FILE, payload.id, payload, "Inquiry")
    return {"success": True, "inquiry": inquiry}


@app.delete("/api/inquiries", dependencies=[Depends(require_admin)])
def delete_inquiries(
    id: Optional[str] = None,
    ids: Optional[str] = None,
    db: JSONStore = Depends(get_store),
):
    return _delete_records(db, INQUIRIES_FILE, id, ids, "Inquiry")


@app.get("/api/inquiries/{inquiry_id}", dependencies=[Depends(require_admin)])
def get_inquiry(inquiry_id: str, db: JSONStore = Depends(get_store)):
    doc = db.find_document(INQUIRIES_FILE, inquiry_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return doc


@app.patch("/api/inquiries/{inquiry_id}", dependencies=[Depends(require_admin)])
def update_inquiry(inquiry_id: str, payload: StatusUpdate, db: JSONStore = Depends(get_store)):
    inquiry = _set_status(db, INQUIRIES_FILE, inquiry_id, payload, "Inquiry")
    return {"success": True, "inquiry": inquiry}


# ----------------------- Contact form -----------------------
@app.post("/api/contact")
def submit_contact(payload: ContactCreate, db: JSONStore = Depends(get_store)):
    now = utc_now()
    message = payload.model_dump()
    message.update(id=new_id(), status="new", createdAt=now)
    db.create_document(CONTACT_MESSAGES_FILE, message)
    logger.info("Contact message saved with ID %s", message["id"])

    # Mirror into inquiries so the admin sees every lead in one list.
    first_name, _, last_name = payload.name.strip().partition(" ")
    inquiry = {
        "id": message["id"],
        "firstName": first_name,
        "lastName": last_name.strip(),
        "email": payload.email,
        "phone": payload.phone,
        "subject": payload.subject or "Contact Form Message",
        "message": payload.message,
        "inquiryType": "contact-form",
        "status": "new",
        "createdAt": now,
        "updatedAt": now,
    }
    try:
        db.create_document(INQUIRIES_FILE, inquiry)
    except Exception:
        logger.exception("Could not mirror contact message %s into inquiries", message["id"])

    return {"id": message["id"], "message": "Your message has been received. We will contact you soon!"}


@app.get("/api/contact", dependencies=[Depends(require_admin)])
def list_contact_messages(db: JSONStore = Depends(get_store)):
    return _newest_first(db.get_documents(CONTACT_MESSAGES_FILE))


@app.patch("/api/contact", dependencies=[Depends(require_admin)])
def update_contact_status(payload: StatusUpdate, db: JSONStore = Depends(get_store)):
    message = _set_status(db, CONTACT_MESSAGES_FILE, payload.id, payload, "Message")
    return {"success": True, "message": message}


@app.delete("/api/contact", dependencies=[Depends(require_admin)])
def delete_contact_messages(
    id: Optional[str] = None,
    ids: Optional[str] = None,
    db: JSONStore = Depends(get_store),
):
    return _delete_records(db, CONTACT_MESSAGES_FILE, id, ids, "Message")


# ----------------------- Uploads -----------------------
def _section_prefix(section_id: Optional[str]) -> str:
    return f"section-{secure_filename(section_id or '') or 'general'}"


@app.post("/api/upload", dependencies=[Depends(require_admin)])
async def upload_file(file: Optional[UploadFile] = File(None), files: UploadStore = Depends(get_uploads)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")
    url = await files.save(file, prefix="upload", type_prefix="image/", max_bytes=config.MAX_UPLOAD_BYTES)
    return {"url": url, "success": True, "message": "File uploaded successfully"}


@app.post("/api/home-content/upload", dependencies=[Depends(require_admin)])
async def upload_home_image(
    image: Optional[UploadFile] = File(None),
    section_id: Optional[str] = Form(None, alias="sectionId"),
    files: UploadStore = Depends(get_uploads),
):
    if image is None:
        raise HTTPException(status_code=400, detail="No image file provided")
    url = await files.save(
        image,
        subdir="home-content",
        prefix=_section_prefix(section_id),
        allowed_types=PAGE_IMAGE_TYPES,
        max_bytes=config.MAX_PAGE_IMAGE_BYTES,
    )
    return {"url": url, "success": True}


@app.post("/api/about/upload", dependencies=[Depends(require_admin)])
async def upload_about_image(
    image: Optional[UploadFile] = File(None),
    section_id: Optional[str] = Form(None, alias="sectionId"),
    files: UploadStore = Depends(get_uploads),
):
    if image is None:
        raise HTTPException(status_code=400, detail="No image file provided")
    url = await files.save(
        image,
        subdir="about-content",
        prefix=_section_prefix(section_id),
        allowed_types=PAGE_IMAGE_TYPES,
        max_bytes=config.MAX_PAGE_IMAGE_BYTES,
    )
    return {"url": url, "success": True}


@app.post("/api/contact-page/upload", dependencies=[Depends(require_admin)])
async def upload_contact_page_image(
    image: Optional[UploadFile] = File(None),
    section_id: Optional[str] = Form(None, alias="sectionId"),
    files: UploadStore = Depends(get_uploads),
):
    if image is None:
        raise HTTPException(status_code=400, detail="No image provided")
    url = await files.save(
        image,
        subdir="contact-page",
        prefix=f"contact-{_section_prefix(section_id)}",
        type_prefix="image/",
        max_bytes=config.MAX_UPLOAD_BYTES,
    )
    return {"url": url, "message": "Image uploaded successfully"}


@app.post("/api/property-page/upload", dependencies=[Depends(require_admin)])
async def upload_property_page_image(
    file: Optional[UploadFile] = File(None),
    files: UploadStore = Depends(get_uploads),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    url = await files.save(
        file,
        subdir="property-page",
        prefix="banner",
        allowed_types=BANNER_IMAGE_TYPES,
        max_bytes=config.MAX_UPLOAD_BYTES,
    )
    return {"url": url}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
