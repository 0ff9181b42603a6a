import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from nextstep.core.config import SITE_NAME
from nextstep.core.ordering import next_order_index
from nextstep.site.models import FAQ, SiteConfig, SocialLink, Testimonial
from nextstep.site.schemas import SiteConfigUpdate, SocialLinkCreate

logger = logging.getLogger(__name__)

FEATURED_TESTIMONIALS_LIMIT = 3


# Marketing feed
def list_active_faqs(db: Session) -> List[FAQ]:
    return db.query(FAQ).filter(FAQ.is_active.is_(True)).order_by(FAQ.order_index.asc()).all()

def list_featured_testimonials(db: Session, limit: int = FEATURED_TESTIMONIALS_LIMIT) -> List[Testimonial]:
    return (
        db.query(Testimonial)
        .filter(Testimonial.is_featured.is_(True))
        .order_by(Testimonial.order_index.asc())
        .limit(limit)
        .all()
    )


# Social links
def list_social_links(db: Session, active_only: bool = False) -> List[SocialLink]:
    query = db.query(SocialLink)
    if active_only:
        query = query.filter(SocialLink.is_active.is_(True))
    return query.order_by(SocialLink.order_index.asc()).all()

def get_social_link(db: Session, link_id: UUID) -> Optional[SocialLink]:
    return db.query(SocialLink).filter(SocialLink.id == link_id).first()

def add_social_link(db: Session, link: SocialLinkCreate) -> SocialLink:
    platform, url = link.platform.strip(), link.url.strip()
    if not platform or not url:
        raise HTTPException(status_code=400, detail="Platform and URL are required.")

    new_link = SocialLink(
        id=uuid4(),
        platform=platform,
        url=url,
        icon_name=(link.icon_name or "").strip() or None,
        is_active=True,
        order_index=next_order_index(db, SocialLink.order_index),
    )
    db.add(new_link)
    db.commit()
    db.refresh(new_link)
    return new_link

def toggle_social_link(db: Session, link: SocialLink) -> SocialLink:
    link.is_active = not link.is_active
    db.commit()
    db.refresh(link)
    return link

def delete_social_link(db: Session, link: SocialLink) -> SocialLink:
    db.delete(link)
    db.commit()
    return link


# Site config
def get_site_config(db: Session) -> Optional[SiteConfig]:
    return db.query(SiteConfig).first()

def save_site_config(db: Session, form: SiteConfigUpdate) -> SiteConfig:
    """
    Creates the singleton config on first save, otherwise updates it in place.

    Blank fields are stored as null; a blank site name falls back to the
    default site name.
    """
    values = {
        "site_name": (form.site_name or "").strip() or SITE_NAME,
        "mobile_no": (form.mobile_no or "").strip() or None,
        "whatsapp_no": (form.whatsapp_no or "").strip() or None,
        "address": (form.address or "").strip() or None,
        "email": (form.email or "").strip() or None,
    }

    config = get_site_config(db)
    if config:
        for field, value in values.items():
            setattr(config, field, value)
        config.updated_at = datetime.now(timezone.utc)
    else:
        config = SiteConfig(id=uuid4(), **values)
        db.add(config)
        logger.info("Created site config %s", config.id)

    db.commit()
    db.refresh(config)
    return config
