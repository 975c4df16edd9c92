"""
Pydantic schemas package.
"""
from medilocker.schemas.activity import (
    ActivityCreate,
    ActivityListResponse,
    ActivityLoggedResponse,
    ActivityResponse,
)
from medilocker.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    ProfileUpdate,
    RegisterRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdate",
    "UserResponse",
    "AuthResponse",
    "ProfileResponse",
    "UserListResponse",
    # Activity
    "ActivityCreate",
    "ActivityResponse",
    "ActivityListResponse",
    "ActivityLoggedResponse",
]
