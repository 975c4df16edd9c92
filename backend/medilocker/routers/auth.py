"""
Registration and login routes.
"""
from fastapi import APIRouter, status

from medilocker.routers.deps import AuthServiceDep
from medilocker.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, service: AuthServiceDep) -> AuthResponse:
    """Register a new user and return a bearer token for it."""
    result = await service.register(payload.name, payload.email, payload.password)
    return AuthResponse(
        message="User registered successfully!",
        token=result.token,
        user=UserResponse.model_validate(result.identity),
    )


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    result = await service.login(payload.email, payload.password)
    return AuthResponse(
        message="Login successful!",
        token=result.token,
        user=UserResponse.model_validate(result.identity),
    )
