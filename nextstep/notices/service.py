import logging
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from nextstep.notices.models import Notice
from nextstep.profiles.service import get_profile

logger = logging.getLogger(__name__)

RECENT_NOTICES_LIMIT = 10


def create_notice(db: Session, admin_profile_id: UUID, recipient_profile_id: UUID, title: str, message: str) -> Notice:
    title, message = title.strip(), message.strip()
    if not title or not message:
        raise HTTPException(status_code=400, detail="Please select a user and fill in both title and message.")
    if get_profile(db, recipient_profile_id) is None:
        raise HTTPException(status_code=404, detail="User not found")

    notice = Notice(
        id=uuid4(),
        user_id=recipient_profile_id,
        admin_id=admin_profile_id,
        title=title,
        message=message,
        is_read=False,
    )
    db.add(notice)
    db.commit()
    db.refresh(notice)
    return notice

def get_recent_notices(db: Session, profile_id: UUID, limit: int = RECENT_NOTICES_LIMIT) -> List[Notice]:
    return (
        db.query(Notice)
        .filter(Notice.user_id == profile_id)
        .order_by(Notice.created_at.desc())
        .limit(limit)
        .all()
    )

def count_unread(notices: Iterable[Notice]) -> int:
    # tally of the loaded page only, not a global count
    return sum(1 for n in notices if not n.is_read)

def get_notice(db: Session, notice_id: UUID, profile_id: UUID) -> Optional[Notice]:
    return db.query(Notice).filter(Notice.id == notice_id, Notice.user_id == profile_id).first()

def mark_read(db: Session, notice: Notice) -> Notice:
    """One-way transition; already read notices are returned untouched."""
    if notice.is_read:
        return notice
    notice.is_read = True
    db.commit()
    db.refresh(notice)
    return notice
