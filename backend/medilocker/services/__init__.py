"""
Services package for business logic layer.
"""
from medilocker.services.auth_service import AuthResult, AuthService

__all__ = [
    "AuthService",
    "AuthResult",
]
