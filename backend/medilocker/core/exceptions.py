"""
Error taxonomy for the auth core.

Every error carries the HTTP status and the stable message it surfaces
with. Handlers in ``medilocker.main`` render them as
``{"detail": message, "type": kind}``.
"""
from typing import Any

from fastapi import status


class MedilockerError(Exception):
    """Base class for errors surfaced directly to the HTTP caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "ServerError"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"detail": self.message, "type": self.kind}


class ValidationError(MedilockerError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "ValidationError"
    message = "Validation failed"


class DuplicateEmail(MedilockerError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "DuplicateEmail"
    message = "User already exists with this email"


class InvalidCredentials(MedilockerError):
    """Login failure. Unknown email and wrong password share this error."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "InvalidCredentials"
    message = "Invalid email or password"


class Unauthorized(MedilockerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "Unauthorized"
    message = "Access token required"


class Forbidden(MedilockerError):
    status_code = status.HTTP_403_FORBIDDEN
    kind = "Forbidden"
    message = "Invalid or expired token"


class NotFound(MedilockerError):
    status_code = status.HTTP_404_NOT_FOUND
    kind = "NotFound"
    message = "User not found"


class StorageFailure(MedilockerError):
    """Backing store unreachable or rejected the operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind = "StorageFailure"
    message = "Storage unavailable"


class TokenError(MedilockerError):
    """Raised by the token authority when a token cannot be accepted."""

    status_code = status.HTTP_403_FORBIDDEN
    kind = "Forbidden"
    message = "Invalid or expired token"


class TokenInvalid(TokenError):
    message = "Invalid token"


class TokenExpired(TokenError):
    message = "Token expired"
