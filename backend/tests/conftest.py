"""
Shared fixtures: an isolated SQLite database and application per test.
"""
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from medilocker.core.config import Settings
from medilocker.core.database import Database
from medilocker.core.security import PasswordHasher, TokenAuthority
from medilocker.main import create_app

TEST_SECRET = "medilocker-test-signing-secret-0123456789"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file with cheap bcrypt."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'medilocker.db'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        hash_workers=2,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Synchronous test client with lifespan (table creation) applied."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    db = Database(settings)
    await db.init()
    yield db
    await db.close()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as db_session:
        yield db_session


@pytest.fixture
def hasher() -> Generator[PasswordHasher, None, None]:
    password_hasher = PasswordHasher(rounds=4, max_workers=2)
    yield password_hasher
    password_hasher.shutdown()


@pytest.fixture
def token_authority() -> TokenAuthority:
    return TokenAuthority(secret=TEST_SECRET)


@pytest.fixture
def sample_user() -> dict:
    return {"name": "A", "email": "a@x.com", "password": "secret1"}
