from uuid import UUID
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.core.database import get_db
from nextstep.core.dependency import get_current_profile, require_admin
from nextstep.notices.schemas import NoticeCreate, NoticeFeed, NoticeResponse
from nextstep.notices.service import count_unread, create_notice, get_notice, get_recent_notices, mark_read
from nextstep.profiles.models import Profile

router = APIRouter(prefix="/dashboard/notices", tags=["Dashboard"])
admin_router = APIRouter(prefix="/admin/notices", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=NoticeFeed,
    summary="Get recent notices",
    description="The 10 most recent notices and how many of them are unread.",
    responses={
        200: {"description": "Notices retrieved successfully."},
        401: {"description": "Unauthorized."},
        500: {"description": "Failed to retrieve notices."},
    },
)
def read_notices_route(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> NoticeFeed:
    try:
        notices = get_recent_notices(db, profile.id)
        return NoticeFeed(
            notices=[NoticeResponse.model_validate(n) for n in notices],
            unread_count=count_unread(notices),
        )
    except Exception as e:
        logger.error(f"Failed to fetch notices for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve notices")


@router.post(
    "/{notice_id}/read",
    response_model=NoticeResponse,
    summary="Mark a notice as read",
    responses={
        200: {"description": "Notice marked as read."},
        401: {"description": "Unauthorized."},
        404: {"description": "Notice not found."},
        500: {"description": "Failed to update notice."},
    },
)
def mark_notice_read_route(
    notice_id: UUID,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> NoticeResponse:
    notice = get_notice(db, notice_id, profile.id)
    if notice is None:
        raise HTTPException(status_code=404, detail="Notice not found")
    try:
        return mark_read(db, notice)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to mark notice {notice_id} as read: {e}")
        raise HTTPException(status_code=500, detail="Failed to update notice")


@admin_router.post(
    "",
    response_model=NoticeResponse,
    summary="Send a notice to a user",
    responses={
        200: {"description": "Notice sent successfully."},
        400: {"description": "Missing title or message."},
        403: {"description": "Not an admin."},
        404: {"description": "Recipient not found."},
        500: {"description": "Failed to send notice."},
    },
)
def send_notice_route(
    body: NoticeCreate,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> NoticeResponse:
    try:
        return create_notice(db, admin.id, body.user_id, body.title, body.message)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to send notice to profile {body.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to send notice.")
