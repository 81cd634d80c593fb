"""
Property search and display helpers.

Prices are stored the way the admin typed them ("₹ 1,25,00,000",
"₹ 2.5 Crore", "85 Lakh"), so range filters parse them on every search.
Land is quoted in Nali, the local Uttarakhand unit (1 Nali ≈ 2160 sq ft).
"""
import re
from typing import Any, Dict, Iterable, List, Optional

NALI_TO_SQFT = 2160
CRORE = 10_000_000
LAKH = 100_000

UTTARAKHAND_PLACES = [
    "uttarakhand", "uttrakhand", "dehradun", "nainital", "mussoorie", "haridwar",
    "rishikesh", "almora", "ranikhet", "bhimtal", "pithoragarh", "tehri", "chamoli",
    "rudraprayag", "uttarkashi", "bageshwar", "champawat", "corbett", "ramnagar",
    "binsar", "mukteshwar", "garhwal", "kumaon", "pauri",
]

DEFAULT_LOCATIONS = ["Dehradun", "Mussoorie", "Nainital", "Uttarakhand"]
DEFAULT_PROPERTY_TYPES = ["Apartment", "House", "Land", "Plot"]

_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_CRORE = re.compile(r"\b(?:cr|crs|crore|crores)\b", re.IGNORECASE)
_LAKH = re.compile(r"\b(?:l|lac|lacs|lakh|lakhs)\b", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_price(price: Any) -> Optional[float]:
    """Turn a display price into rupees, or None if it holds no number."""
    if price is None or isinstance(price, bool):
        return None
    if isinstance(price, (int, float)):
        return float(price)
    text = str(price).replace(",", "")
    if _CRORE.search(text) or _LAKH.search(text):
        match = _NUMBER.search(text)
        if not match:
            return None
        multiplier = CRORE if _CRORE.search(text) else LAKH
        return float(match.group()) * multiplier
    digits = re.sub(r"[^\d]", "", text)
    return float(digits) if digits else None


def parse_bound(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _location_matches(location: str, wanted: str) -> bool:
    location = location.lower().strip()
    if location == wanted:
        return True
    return any(part.strip() == wanted for part in location.split(","))


def _in_uttarakhand(location: str) -> bool:
    location = location.lower()
    return any(place in location for place in UTTARAKHAND_PLACES)


def _bedrooms(prop: Dict[str, Any]) -> str:
    specs = prop.get("specs") or {}
    value = specs.get("bedrooms") or prop.get("bedrooms")
    return str(value).strip() if value not in (None, "") else ""


def filter_properties(properties: Iterable[Dict[str, Any]], filters: Dict[str, Optional[str]]) -> List[Dict[str, Any]]:
    """Linear scan over ``properties`` keeping the ones every given filter accepts."""
    category = (filters.get("category") or "").strip().lower()
    location = (filters.get("location") or "").strip().lower()
    property_type = (filters.get("propertyType") or "").strip().lower()
    bhk = (filters.get("bhkOption") or "").strip()
    price_min = parse_bound(filters.get("priceMin"))
    price_max = parse_bound(filters.get("priceMax"))

    result = []
    for prop in properties:
        if category and str(prop.get("category") or "").lower() != category:
            continue
        if location:
            prop_location = prop.get("location") or ""
            if not prop_location:
                continue
            if location == "uttarakhand":
                if not _in_uttarakhand(prop_location):
                    continue
            elif not _location_matches(prop_location, location):
                continue
        if property_type and str(prop.get("propertyType") or "").strip().lower() != property_type:
            continue
        if bhk:
            bedrooms = _bedrooms(prop)
            if bedrooms and bedrooms != bhk:
                continue
        if price_min is not None or price_max is not None:
            price = parse_price(prop.get("price"))
            if price is None:
                continue
            if price_min is not None and price < price_min:
                continue
            if price_max is not None and price > price_max:
                continue
        result.append(prop)
    return result


def property_options(properties: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    locations = set()
    types = set()
    for prop in properties:
        location = prop.get("location") or ""
        if location:
            city = location.split(",")[0].strip()
            if city:
                locations.add(city)
            if "uttarakhand" in location.lower():
                locations.add("Uttarakhand")
        if prop.get("propertyType"):
            types.add(str(prop["propertyType"]).lower())

    property_types = [t[:1].upper() + t[1:] for t in sorted(types)]
    return {
        "locations": sorted(locations) or list(DEFAULT_LOCATIONS),
        "propertyTypes": property_types or list(DEFAULT_PROPERTY_TYPES),
    }


def _featured_order(prop: Dict[str, Any]) -> Optional[int]:
    value = prop.get("featuredOrder")
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _featured_sort_key(prop: Dict[str, Any]):
    order = _featured_order(prop)
    return (order is None, order or 0)


def featured_properties(properties: Iterable[Dict[str, Any]], limit: Optional[int] = None) -> List[Dict[str, Any]]:
    featured = [p for p in properties if p.get("featured")]
    featured.sort(key=_featured_sort_key)
    if limit is not None and limit > 0:
        return featured[:limit]
    return featured


def sqft_to_nali(sqft: float) -> float:
    return sqft / NALI_TO_SQFT


def _number(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _NUMBER.search(str(value or "").replace(",", ""))
    return float(match.group()) if match else None


def _format_number(value: float) -> str:
    return f"{value:,.0f}" if value == int(value) else f"{value:,.2f}".rstrip("0").rstrip(".")


def format_area(specs: Optional[Dict[str, Any]], property_type: Optional[str] = None) -> str:
    """Human readable size: Nali for plots and land, sq ft for everything else."""
    specs = specs or {}
    kind = (property_type or "").lower()
    is_land = "plot" in kind or "land" in kind

    nali = specs.get("naliSize")
    if nali:
        nali = str(nali)
        return nali if "nali" in nali.lower() else f"{nali} Nali"

    land_size = specs.get("landSize")
    if is_land and land_size:
        text = str(land_size)
        if "nali" in text.lower():
            return text
        value = _number(text)
        if value is None:
            return text
        if "sq" in text.lower():
            return f"{sqft_to_nali(value):.0f} Nali"
        return f"{_format_number(value)} Nali"

    area = _number(specs.get("area"))
    if not area:
        return ""
    if is_land:
        return f"{sqft_to_nali(area):.0f} Nali"
    return f"{_format_number(area)} sq ft"


def format_indian_price(price: Any) -> str:
    value = parse_price(price)
    if not value:
        return "₹ 0"
    if value >= CRORE:
        return f"₹ {value / CRORE:.2f}".rstrip("0").rstrip(".") + " Crore"
    if value >= LAKH:
        return f"₹ {value / LAKH:.2f}".rstrip("0").rstrip(".") + " Lakh"
    return f"₹ {_format_number(value)}"


def merge_uploaded_media(existing: Dict[str, Any], data: Dict[str, Any], media: Dict[str, List[str]]) -> Dict[str, Any]:
    """Fold newly uploaded image and video URLs into an update payload.

    Images append to the list the form sent, or to the stored list when the
    form sent none. Videos append to the form's ``videoUrls`` when present,
    otherwise to the stored ones; ``videoUrl`` follows the first new video.
    """
    merged = dict(data)
    base_images = data["images"] if isinstance(data.get("images"), list) else existing.get("images") or []
    if media["images"]:
        merged["images"] = list(base_images) + media["images"]

    new_videos = media["videoUrls"]
    if isinstance(data.get("videoUrls"), list):
        videos = list(data["videoUrls"]) + new_videos
        merged["videoUrls"] = videos
        merged["videoUrl"] = videos[0] if videos else ""
    else:
        stored = list(existing.get("videoUrls") or [])
        merged["videoUrls"] = stored + new_videos
        if new_videos:
            merged["videoUrl"] = new_videos[0]
        elif not merged.get("videoUrl") and stored:
            merged["videoUrl"] = stored[0]
    return merged
