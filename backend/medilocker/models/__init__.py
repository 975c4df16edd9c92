"""
SQLAlchemy models package.
All models are imported here for easy access and Alembic discovery.
"""
from medilocker.models.activity import ActivityKind, ActivityRecord
from medilocker.models.identity import Identity

__all__ = [
    "Identity",
    "ActivityRecord",
    "ActivityKind",
]
