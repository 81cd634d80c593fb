"""
Website Schemas (flat JSON files via Pydantic)
Each array-backed model = one JSON file in the data directory
- Property -> properties.json
- Inquiry -> inquiries.json
- ContactMessage -> contact-messages.json
- ContentPage -> content.json

Stored keys are camelCase because the front-end reads the files' shape
directly; attributes are snake_case with camelCase aliases.
"""

from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

Category = Literal["buy", "lease"]
InquiryStatus = Literal["new", "seen", "responded"]
ContentStatus = Literal["draft", "published"]

STATUS_ALIASES = {"in-progress": "seen", "completed": "responded"}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_doc(self, **kwargs) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, **kwargs)


class OpenModel(CamelModel):
    """Keeps keys it does not declare, for documents the admin edits freely."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ----------------------- Properties -----------------------

class Specs(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    bedrooms: str = "0"
    bathrooms: str = "0"
    area: str = "0 sq ft"
    land_size: str = "0 Nali"
    nali_size: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v not in (None, "")}
        return data


class Agent(OpenModel):
    name: str = ""
    title: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = None


class LocationDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: str
    altitude: Optional[str] = None
    climate: Optional[str] = None
    accessibility: List[str] = []


class PropertyCreate(OpenModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow", coerce_numbers_to_str=True
    )

    title: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    specs: Specs
    features: List[str]
    category: Category
    property_type: str = Field(..., min_length=1)

    amenities: List[str] = []
    images: List[str] = []
    video_url: Optional[str] = None
    video_urls: List[str] = []
    featured: bool = False
    featured_order: Optional[int] = None
    agent: Optional[Agent] = None
    nearby: Optional[Dict[str, str]] = None
    location_details: Optional[LocationDetails] = Field(default=None, alias="location_details")

    dimensions: Optional[str] = None
    facing: Optional[str] = None
    water_source: Optional[str] = None
    road_access: Optional[str] = None
    electricity: Optional[str] = None
    view: Optional[str] = None


class FeaturedOrderUpdate(CamelModel):
    id: Optional[str] = None
    featured_order: Optional[int] = None


class FeaturedOrderRequest(BaseModel):
    updates: List[FeaturedOrderUpdate] = []


# ----------------------- Content pages -----------------------

class ContentCreate(OpenModel):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = None
    content: str = ""
    status: ContentStatus = "draft"
    type: str = "page"
    meta_title: Optional[str] = None
    meta_description: str = ""
    featured_image: Optional[str] = None
    sections: Optional[List[Dict[str, Any]]] = None
    order: Optional[int] = None


class ContentUpdate(OpenModel):
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)


class ContentSlugUpdate(OpenModel):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)


class ContentDelete(BaseModel):
    id: Optional[str] = None


# ----------------------- Singleton pages -----------------------

class HomePageContent(OpenModel):
    hero_title: str = Field(..., min_length=1)
    featured_section_title: str = Field(..., min_length=1)


class AboutContent(OpenModel):
    title: str = Field(..., min_length=1)
    main_content: str = Field(..., min_length=1)


class PropertyPageContent(OpenModel):
    hero_heading: str = Field(..., min_length=1)
    hero_subheading: str = Field(..., min_length=1)


class GuideContent(OpenModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class SettingsUpdate(OpenModel):
    site_name: str = Field(..., min_length=1)
    contact_email: str = Field(..., min_length=1)


# ----------------------- Inquiries & contact -----------------------

class InquiryCreate(CamelModel):
    first_name: str = ""
    last_name: str = ""
    email: EmailStr
    phone: str = ""
    subject: str = ""
    message: str = Field(..., min_length=1)
    inquiry_type: str = "contact-form"
    property_id: Optional[str] = None


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = ""
    subject: str = ""
    message: str = Field(..., min_length=1)


class StatusUpdate(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None

    def normalized_status(self) -> Optional[str]:
        status = STATUS_ALIASES.get(self.status, self.status)
        return status if status in get_args(InquiryStatus) else None


class AdminLogin(BaseModel):
    username: str = "admin"
    password: str
