from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class SocialLinkResponse(BaseSchema):
    id: UUID
    platform: str
    url: str
    icon_name: Optional[str] = None
    is_active: bool
    order_index: int


class SocialLinkCreate(BaseSchema):
    platform: str
    url: str
    icon_name: Optional[str] = None


class PublicSocialLink(BaseSchema):
    id: UUID
    platform: str
    url: str
    icon_name: Optional[str] = None


class SiteConfigResponse(BaseSchema):
    id: UUID
    site_name: str
    mobile_no: Optional[str] = None
    whatsapp_no: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    updated_at: Optional[datetime] = None


class SiteConfigUpdate(BaseSchema):
    site_name: Optional[str] = None
    mobile_no: Optional[str] = None
    whatsapp_no: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None


class FAQResponse(BaseSchema):
    id: UUID
    question: str
    answer: str


class TestimonialResponse(BaseSchema):
    id: UUID
    client_name: str
    client_role: Optional[str] = None
    content: str
    rating: Optional[int] = None


class MarketingFeed(BaseSchema):
    faqs: List[FAQResponse]
    testimonials: List[TestimonialResponse]
    social_links: List[PublicSocialLink]
    site_config: Optional[SiteConfigResponse] = None
