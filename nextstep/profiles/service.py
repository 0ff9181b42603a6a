import logging
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from nextstep.auth.schemas import Identity
from nextstep.profiles.models import Profile, ROLE_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)


def is_admin(profile: Optional[Profile]) -> bool:
    """Single authorization predicate for every admin-only operation."""
    return profile is not None and profile.role == ROLE_ADMIN


def get_profile_by_user_id(db: Session, user_id: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def get_profile(db: Session, profile_id: UUID) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def list_profiles(db: Session) -> List[Profile]:
    return db.query(Profile).order_by(Profile.created_at.desc()).all()


def resolve_profile(db: Session, identity: Identity) -> Profile:
    """
    Returns the profile for an identity, creating it on first visit.

    Args:
        db (Session): DB session.
        identity (Identity): Verified caller identity.

    Returns:
        Profile: Existing or newly created profile.

    Raises:
        HTTPException: If the profile cannot be created, e.g. when a
            concurrent request created it first.
    """
    profile = get_profile_by_user_id(db, identity.id)
    if profile:
        return profile

    profile = Profile(
        id=uuid4(),
        user_id=identity.id,
        full_name=identity.name or identity.email,
        role=ROLE_USER,
    )
    try:
        db.add(profile)
        db.commit()
        db.refresh(profile)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create profile for identity {identity.id}: {e}")
        raise HTTPException(status_code=500, detail="Could not create profile.")

    logger.info("Created profile %s for identity %s", profile.id, identity.id)
    return profile


def toggle_user_role(db: Session, acting_user_id: str, target_profile_id: UUID, current_role: str) -> Profile:
    """
    Flips a profile between admin and user.

    Args:
        db (Session): DB session.
        acting_user_id (str): Identity id of the admin performing the change.
        target_profile_id (UUID): Profile to change.
        current_role (str): Role the caller sees on the target.

    Returns:
        Profile: The updated profile.

    Raises:
        HTTPException: 404 if the target is missing, 400 if the caller
            targets their own profile.
    """
    target = get_profile(db, target_profile_id)
    if target is None:
        raise HTTPException(status_code=404, detail="User not found")
    if target.user_id == acting_user_id:
        raise HTTPException(status_code=400, detail="You cannot change your own role.")

    new_role = ROLE_USER if current_role == ROLE_ADMIN else ROLE_ADMIN
    target.role = new_role
    db.commit()
    db.refresh(target)
    logger.info("Profile %s role changed to %s by identity %s", target.id, new_role, acting_user_id)
    return target
