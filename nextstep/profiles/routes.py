from uuid import UUID
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.core.database import get_db
from nextstep.core.dependency import get_current_profile, require_admin
from nextstep.profiles.models import Profile
from nextstep.profiles.schemas import ProfileOut, RoleToggleRequest
from nextstep.profiles.service import list_profiles, toggle_user_role

router = APIRouter(prefix="/dashboard/profile", tags=["Dashboard"])
admin_router = APIRouter(prefix="/admin/users", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=ProfileOut,
    summary="Get or create the caller's profile",
    responses={
        200: {"description": "Profile returned."},
        401: {"description": "Unauthorized."},
        500: {"description": "Could not create profile."},
    },
)
def read_own_profile_route(profile: Profile = Depends(get_current_profile)) -> ProfileOut:
    return ProfileOut.model_validate(profile)


@admin_router.get(
    "",
    response_model=List[ProfileOut],
    summary="List all profiles",
    description="Newest profiles first.",
    responses={
        200: {"description": "Profiles retrieved successfully."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to retrieve profiles."},
    },
)
def list_profiles_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> List[ProfileOut]:
    try:
        return list_profiles(db)
    except Exception as e:
        logger.error(f"Failed to list profiles for admin {admin.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve users")


@admin_router.post(
    "/{profile_id}/role",
    response_model=ProfileOut,
    summary="Promote or demote a user",
    description="Flips the target between admin and user. Requires confirm=true and never applies to the caller.",
    responses={
        200: {"description": "Role updated."},
        400: {"description": "Own profile targeted or change not confirmed."},
        403: {"description": "Not an admin."},
        404: {"description": "User not found."},
        500: {"description": "Failed to update user role."},
    },
)
def toggle_user_role_route(
    profile_id: UUID,
    body: RoleToggleRequest,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> ProfileOut:
    if not body.confirm:
        raise HTTPException(status_code=400, detail="Role change must be confirmed.")
    try:
        return toggle_user_role(db, admin.user_id, profile_id, body.current_role)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update role of profile {profile_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update user role: {e}")
