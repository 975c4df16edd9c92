"""
Auth and profile Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from medilocker.core.security import MAX_PASSWORD_BYTES, password_too_long

# Passwords are never stripped; names and emails are
DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
EmailAddress = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]


class RegisterRequest(BaseModel):
    """Schema for registering a new identity."""

    name: DisplayName
    email: EmailAddress
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

    @field_validator("email")
    @classmethod
    def email_has_at(cls, value: str) -> str:
        local, sep, domain = value.partition("@")
        if not sep or not local or not domain:
            raise ValueError("must be an email address")
        return value


class LoginRequest(BaseModel):
    """Schema for email + password login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ProfileUpdate(BaseModel):
    """Schema for updating the caller's profile. Only the name is mutable."""

    name: DisplayName


class UserResponse(BaseModel):
    """Public view of an identity. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class AuthResponse(BaseModel):
    """Schema for register/login responses."""

    success: bool = True
    message: str
    token: str
    user: UserResponse


class ProfileResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: UserResponse


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserResponse]
