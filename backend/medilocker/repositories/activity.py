"""
Activity ledger: append-only activity records per identity.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from medilocker.core.exceptions import StorageFailure
from medilocker.core.logging import get_logger
from medilocker.models.activity import ActivityRecord
from medilocker.repositories.base import BaseRepository

logger = get_logger(__name__)


class ActivityLedger(BaseRepository[ActivityRecord]):
    """Repository for ActivityRecord model operations. No updates, no deletes."""

    model = ActivityRecord

    async def record(
        self,
        identity_id: UUID,
        action: str,
        details: str = "",
        *,
        timestamp: Optional[datetime] = None,
    ) -> ActivityRecord:
        """Append and commit one record. Storage errors raise StorageFailure."""
        activity = ActivityRecord(
            identity_id=identity_id,
            action=action,
            details=details,
        )
        if timestamp is not None:
            activity.timestamp = timestamp

        try:
            return await self._add(activity)
        except SQLAlchemyError as e:
            logger.error(
                "Activity write failed",
                identity_id=str(identity_id),
                action=action,
                error=str(e),
            )
            raise StorageFailure() from e

    async def list_recent(self, identity_id: UUID, limit: int) -> list[ActivityRecord]:
        """Most recent records for an identity, newest first, at most ``limit``."""
        if limit <= 0:
            return []

        stmt = (
            select(ActivityRecord)
            .where(ActivityRecord.identity_id == identity_id)
            .order_by(ActivityRecord.timestamp.desc(), ActivityRecord.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
