"""
Identity listing for authenticated callers.
"""
from fastapi import APIRouter

from medilocker.core.session_guard import CurrentIdentity
from medilocker.routers.deps import StoreDep
from medilocker.schemas.auth import UserListResponse, UserResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=UserListResponse)
async def list_users(identity: CurrentIdentity, store: StoreDep) -> UserListResponse:
    """Registered identities, newest first, without password hashes."""
    users = await store.list_identities(limit=100)
    return UserListResponse(users=[UserResponse.model_validate(user) for user in users])
