"""
Profile routes for the authenticated identity.
"""
from fastapi import APIRouter

from medilocker.core.session_guard import CurrentIdentity
from medilocker.routers.deps import AuthServiceDep
from medilocker.schemas.auth import ProfileResponse, ProfileUpdate, UserResponse

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(identity: CurrentIdentity, service: AuthServiceDep) -> ProfileResponse:
    """Get the caller's profile."""
    user = await service.get_profile(identity.identity_id)
    return ProfileResponse(user=UserResponse.model_validate(user))


@router.put("", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    identity: CurrentIdentity,
    service: AuthServiceDep,
) -> ProfileResponse:
    """Update the caller's display name."""
    user = await service.update_profile(identity.identity_id, update.name)
    return ProfileResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )
