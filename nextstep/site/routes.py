from uuid import UUID
from typing import Dict, List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.core.database import get_db
from nextstep.core.dependency import require_admin
from nextstep.profiles.models import Profile
from nextstep.site.schemas import (
    FAQResponse,
    MarketingFeed,
    PublicSocialLink,
    SiteConfigResponse,
    SiteConfigUpdate,
    SocialLinkCreate,
    SocialLinkResponse,
    TestimonialResponse,
)
from nextstep.site.service import (
    add_social_link,
    delete_social_link,
    get_site_config,
    get_social_link,
    list_active_faqs,
    list_featured_testimonials,
    list_social_links,
    save_site_config,
    toggle_social_link,
)

router = APIRouter(prefix="/site", tags=["Site"])
admin_router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=MarketingFeed,
    summary="Public content for the marketing page",
    description="Active FAQs, featured testimonials, active social links and contact details.",
    responses={
        200: {"description": "Content retrieved successfully."},
        500: {"description": "Failed to load site content."},
    },
)
def read_marketing_feed_route(db: Session = Depends(get_db)) -> MarketingFeed:
    try:
        config = get_site_config(db)
        return MarketingFeed(
            faqs=[FAQResponse.model_validate(f) for f in list_active_faqs(db)],
            testimonials=[TestimonialResponse.model_validate(t) for t in list_featured_testimonials(db)],
            social_links=[PublicSocialLink.model_validate(s) for s in list_social_links(db, active_only=True)],
            site_config=SiteConfigResponse.model_validate(config) if config else None,
        )
    except Exception as e:
        logger.error(f"Failed to load marketing feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to load site content")


@admin_router.get(
    "/social-links",
    response_model=List[SocialLinkResponse],
    summary="List all social links",
    responses={
        200: {"description": "Links retrieved successfully."},
        403: {"description": "Not an admin."},
    },
)
def list_social_links_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> List[SocialLinkResponse]:
    try:
        return list_social_links(db)
    except Exception as e:
        logger.error(f"Failed to list social links: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve social links")


@admin_router.post(
    "/social-links",
    response_model=SocialLinkResponse,
    summary="Add a social link",
    responses={
        200: {"description": "Social link added."},
        400: {"description": "Missing platform or URL."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to add social link."},
    },
)
def add_social_link_route(
    link: SocialLinkCreate,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> SocialLinkResponse:
    try:
        return add_social_link(db, link)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to add social link: {e}")
        raise HTTPException(status_code=500, detail="Failed to add social link.")


@admin_router.post(
    "/social-links/{link_id}/toggle",
    response_model=SocialLinkResponse,
    summary="Show or hide a social link",
    responses={
        200: {"description": "Link updated."},
        403: {"description": "Not an admin."},
        404: {"description": "Link not found."},
    },
)
def toggle_social_link_route(
    link_id: UUID,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> SocialLinkResponse:
    link = get_social_link(db, link_id)
    if link is None:
        raise HTTPException(status_code=404, detail="Social link not found")
    try:
        return toggle_social_link(db, link)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to toggle social link {link_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update social link")


@admin_router.delete(
    "/social-links/{link_id}",
    response_model=Dict[str, str],
    summary="Delete a social link",
    responses={
        200: {"description": "Link deleted."},
        403: {"description": "Not an admin."},
        404: {"description": "Link not found."},
        500: {"description": "Failed to delete social link."},
    },
)
def delete_social_link_route(
    link_id: UUID,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> Dict[str, str]:
    link = get_social_link(db, link_id)
    if link is None:
        raise HTTPException(status_code=404, detail="Social link not found")
    try:
        delete_social_link(db, link)
        return {"detail": "Social link deleted."}
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete social link {link_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete social link")


@admin_router.get(
    "/site-config",
    response_model=Optional[SiteConfigResponse],
    summary="Get the site configuration",
    responses={
        200: {"description": "Config returned, null if never saved."},
        403: {"description": "Not an admin."},
    },
)
def read_site_config_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> Optional[SiteConfigResponse]:
    try:
        return get_site_config(db)
    except Exception as e:
        logger.error(f"Failed to load site config: {e}")
        raise HTTPException(status_code=500, detail="Failed to load site config")


@admin_router.put(
    "/site-config",
    response_model=SiteConfigResponse,
    summary="Save the site configuration",
    responses={
        200: {"description": "Site configuration saved."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to save config."},
    },
)
def save_site_config_route(
    form: SiteConfigUpdate,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> SiteConfigResponse:
    try:
        return save_site_config(db, form)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to save site config: {e}")
        raise HTTPException(status_code=500, detail="Failed to save config.")
