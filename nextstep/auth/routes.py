import logging

from fastapi import APIRouter, Depends

from nextstep.auth.schemas import Identity, MeResponse
from nextstep.auth.service import get_current_identity
from nextstep.core.dependency import get_current_profile
from nextstep.profiles.models import Profile
from nextstep.profiles.schemas import ProfileOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get the verified identity and its profile",
    description="Resolves the caller's profile, creating it on first visit.",
    responses={
        200: {"description": "Identity and profile returned"},
        401: {"description": "Unauthorized"},
        500: {"description": "Could not create profile"},
    },
)
def get_me_route(
    identity: Identity = Depends(get_current_identity),
    profile: Profile = Depends(get_current_profile),
) -> MeResponse:
    return MeResponse(identity=identity, profile=ProfileOut.model_validate(profile))
