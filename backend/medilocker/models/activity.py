"""
Activity model - append-only audit entries attributed to an identity.
"""
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from sqlalchemy import DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from medilocker.core.database import Base


class ActivityKind(str, Enum):
    """Actions recorded by the auth core itself."""

    REGISTRATION = "REGISTRATION"
    LOGIN = "LOGIN"
    PROFILE_UPDATE = "PROFILE_UPDATE"


class ActivityRecord(Base):
    """
    Immutable activity entry.

    ``identity_id`` is a plain indexed reference: the ledger keeps records
    for identities but does not own them.
    """

    __tablename__ = "activities"
    __table_args__ = (
        Index("ix_activities_identity_timestamp", "identity_id", "timestamp"),
    )

    # Integer key doubles as insertion order for records sharing a timestamp
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    identity_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
    )
    action: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    details: Mapped[str] = mapped_column(
        Text,
        default="",
        nullable=False,
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ActivityRecord {self.action} by {self.identity_id}>"
