# nextstep/core/dependency.py
from functools import lru_cache

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.auth.schemas import Identity
from nextstep.auth.service import get_current_identity
from nextstep.chatbot.service import ChatService
from nextstep.core.database import get_db
from nextstep.profiles.models import Profile
from nextstep.profiles.service import is_admin, resolve_profile


def get_current_profile(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> Profile:
    return resolve_profile(db, identity)


def require_admin(profile: Profile = Depends(get_current_profile)) -> Profile:
    if not is_admin(profile):
        raise HTTPException(status_code=403, detail="You do not have admin permissions.")
    return profile


@lru_cache(maxsize=None)
def _chat_service() -> ChatService:
    return ChatService()


def get_chat_service() -> ChatService:
    return _chat_service()
