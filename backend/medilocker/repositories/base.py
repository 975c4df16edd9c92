"""
Base repository with common data access helpers.
Implements the Repository pattern for data access abstraction.
"""
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from medilocker.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model.

    Subclasses should set the `model` class attribute to the SQLAlchemy model.
    Mutations commit immediately: every write is its own transaction.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, id: UUID | int) -> ModelType | None:
        """Get a single record by its primary key."""
        return await self.session.get(self.model, id)

    async def _commit(self) -> None:
        """Flush and commit pending changes, rolling back on failure."""
        try:
            await self.session.flush()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def _add(self, db_obj: ModelType) -> ModelType:
        """Insert a record and commit it."""
        self.session.add(db_obj)
        await self._commit()
        return db_obj
