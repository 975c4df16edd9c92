"""
Credential store: identity persistence with unique, normalized emails.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from medilocker.core.exceptions import DuplicateEmail, NotFound
from medilocker.models.identity import Identity
from medilocker.repositories.base import BaseRepository


def normalize_email(email: str) -> str:
    """Canonical stored form of an email; used on every read and write."""
    return email.strip().lower()


class CredentialStore(BaseRepository[Identity]):
    """Repository for Identity model operations."""

    model = Identity

    async def create(self, name: str, email: str, password_hash: str) -> Identity:
        """
        Insert a new identity.

        The unique index on ``email`` is the authority on duplicates, so two
        concurrent registrations cannot both pass.
        """
        identity = Identity(
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
        )
        try:
            return await self._add(identity)
        except IntegrityError as e:
            raise DuplicateEmail() from e

    async def find_by_email(self, email: str) -> Optional[Identity]:
        stmt = select(Identity).where(Identity.email == normalize_email(email))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, identity_id: UUID) -> Optional[Identity]:
        return await self.get_by_id(identity_id)

    async def reload(self, identity: Identity) -> Identity:
        """Re-read an identity whose attributes were expired by a rollback."""
        await self.session.refresh(identity)
        return identity

    async def update_name(self, identity_id: UUID, name: str) -> Identity:
        """Rename an identity. Raises NotFound if it no longer exists."""
        identity = await self.find_by_id(identity_id)
        if identity is None:
            raise NotFound()

        identity.name = name
        await self._commit()
        return identity

    async def list_identities(self, *, limit: int = 100) -> list[Identity]:
        """Newest identities first."""
        stmt = (
            select(Identity)
            .order_by(Identity.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
