import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, Integer, DateTime, Uuid
from nextstep.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class SocialLink(Base):
    __tablename__ = "social_media_links"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    platform = Column(String, nullable=False)
    url = Column(String, nullable=False)
    icon_name = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class SiteConfig(Base):
    __tablename__ = "site_config"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    site_name = Column(String, nullable=False)
    mobile_no = Column(String, nullable=True)
    whatsapp_no = Column(String, nullable=True)
    address = Column(String, nullable=True)
    email = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class FAQ(Base):
    __tablename__ = "faqs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    question = Column(String, nullable=False)
    answer = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_name = Column(String, nullable=False)
    client_role = Column(String, nullable=True)
    content = Column(String, nullable=False)
    rating = Column(Integer, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    order_index = Column(Integer, nullable=False, default=0)
