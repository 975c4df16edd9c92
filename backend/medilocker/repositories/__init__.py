"""
Repository package for data access layer.
"""
from medilocker.repositories.activity import ActivityLedger
from medilocker.repositories.base import BaseRepository
from medilocker.repositories.identity import CredentialStore, normalize_email

__all__ = [
    "BaseRepository",
    "CredentialStore",
    "ActivityLedger",
    "normalize_email",
]
