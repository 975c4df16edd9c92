"""
Tests for the credential store and the activity ledger.
"""
import random
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from medilocker.core.database import Database
from medilocker.core.exceptions import DuplicateEmail, NotFound, StorageFailure
from medilocker.repositories.activity import ActivityLedger
from medilocker.repositories.identity import CredentialStore, normalize_email


class TestCredentialStore:
    """Tests for CredentialStore."""

    async def test_create_and_find(self, session: AsyncSession):
        store = CredentialStore(session)

        identity = await store.create("A", "a@x.com", "hash")

        assert identity.id is not None
        assert identity.created_at is not None
        assert (await store.find_by_email("a@x.com")).id == identity.id
        assert (await store.find_by_id(identity.id)).name == "A"

    async def test_email_is_normalized_on_write_and_read(self, session: AsyncSession):
        store = CredentialStore(session)

        identity = await store.create("A", "  A@X.com ", "hash")

        assert identity.email == "a@x.com"
        assert (await store.find_by_email("a@X.COM")).id == identity.id

    async def test_duplicate_email_rejected_by_constraint(self, session: AsyncSession):
        """The unique index alone rejects a second insert, without any pre-check."""
        store = CredentialStore(session)
        await store.create("A", "a@x.com", "hash")

        with pytest.raises(DuplicateEmail):
            await store.create("B", "A@x.com", "other-hash")

        # Session is usable after the rejected insert
        assert (await store.find_by_email("a@x.com")).name == "A"

    async def test_duplicate_from_another_session(self, database: Database):
        async with database.session_factory() as first:
            await CredentialStore(first).create("A", "a@x.com", "hash")

        async with database.session_factory() as second:
            with pytest.raises(DuplicateEmail):
                await CredentialStore(second).create("A2", "a@x.com", "hash")

    async def test_find_missing(self, session: AsyncSession):
        store = CredentialStore(session)

        assert await store.find_by_email("nobody@x.com") is None
        assert await store.find_by_id(uuid4()) is None

    async def test_update_name(self, session: AsyncSession):
        store = CredentialStore(session)
        identity = await store.create("A", "a@x.com", "hash")

        updated = await store.update_name(identity.id, "Alice")

        assert updated.name == "Alice"
        assert updated.email == "a@x.com"
        assert updated.password_hash == "hash"

    async def test_reload_after_rollback(self, session: AsyncSession):
        """An identity expired by a rolled back write can be read again."""
        store = CredentialStore(session)
        identity = await store.create("A", "a@x.com", "$2b$04$hash")
        await session.rollback()

        reloaded = await store.reload(identity)

        assert reloaded is identity
        assert reloaded.name == "A"
        assert reloaded.email == "a@x.com"

    async def test_update_name_missing_identity(self, session: AsyncSession):
        store = CredentialStore(session)

        with pytest.raises(NotFound):
            await store.update_name(uuid4(), "Alice")

    async def test_list_identities_newest_first(self, session: AsyncSession):
        store = CredentialStore(session)
        for i in range(3):
            await store.create(f"user{i}", f"user{i}@x.com", "hash")

        identities = await store.list_identities(limit=2)

        assert [identity.name for identity in identities] == ["user2", "user1"]

    def test_normalize_email(self):
        assert normalize_email(" Mixed@Example.COM ") == "mixed@example.com"


class TestActivityLedger:
    """Tests for ActivityLedger."""

    async def test_record_and_list(self, session: AsyncSession):
        ledger = ActivityLedger(session)
        identity_id = uuid4()

        record = await ledger.record(identity_id, "LOGIN", "User A logged in")

        assert record.id is not None
        assert record.timestamp is not None
        records = await ledger.list_recent(identity_id, 10)
        assert [(r.action, r.details) for r in records] == [("LOGIN", "User A logged in")]

    async def test_list_is_newest_first_and_bounded(self, session: AsyncSession):
        """Records come back by timestamp descending whatever the insertion order."""
        ledger = ActivityLedger(session)
        identity_id = uuid4()
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        minutes = list(range(15))
        random.Random(7).shuffle(minutes)

        for minute in minutes:
            await ledger.record(
                identity_id,
                "HOSPITAL_SEARCH",
                str(minute),
                timestamp=base + timedelta(minutes=minute),
            )

        records = await ledger.list_recent(identity_id, 10)

        assert len(records) == 10
        assert [r.details for r in records] == [str(m) for m in range(14, 4, -1)]
        timestamps = [r.timestamp for r in records]
        assert timestamps == sorted(timestamps, reverse=True)

    async def test_equal_timestamps_keep_insertion_order(self, session: AsyncSession):
        ledger = ActivityLedger(session)
        identity_id = uuid4()
        moment = datetime(2026, 1, 1, tzinfo=timezone.utc)

        for label in ("first", "second", "third"):
            await ledger.record(identity_id, "NOTE", label, timestamp=moment)

        records = await ledger.list_recent(identity_id, 10)

        assert [r.details for r in records] == ["third", "second", "first"]

    async def test_list_is_scoped_to_identity(self, session: AsyncSession):
        ledger = ActivityLedger(session)
        mine, theirs = uuid4(), uuid4()
        await ledger.record(mine, "LOGIN", "mine")
        await ledger.record(theirs, "LOGIN", "theirs")

        records = await ledger.list_recent(mine, 10)

        assert [r.details for r in records] == ["mine"]

    async def test_non_positive_limit_returns_nothing(self, session: AsyncSession):
        ledger = ActivityLedger(session)
        identity_id = uuid4()
        await ledger.record(identity_id, "LOGIN", "")

        assert await ledger.list_recent(identity_id, 0) == []

    async def test_storage_error_surfaces_as_storage_failure(self, session: AsyncSession):
        ledger = ActivityLedger(session)
        session.commit = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error"))
        )

        with pytest.raises(StorageFailure):
            await ledger.record(uuid4(), "LOGIN", "")
