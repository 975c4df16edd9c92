"""
Shared route dependencies: repositories and the auth service.
"""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from medilocker.core.database import get_db_session
from medilocker.core.security import PasswordHasher, TokenAuthority
from medilocker.core.session_guard import get_token_authority
from medilocker.repositories.activity import ActivityLedger
from medilocker.repositories.identity import CredentialStore
from medilocker.services.auth_service import AuthService


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_credential_store(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CredentialStore:
    """Dependency to get the credential store."""
    return CredentialStore(session)


async def get_activity_ledger(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ActivityLedger:
    """Dependency to get the activity ledger."""
    return ActivityLedger(session)


async def get_auth_service(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    ledger: Annotated[ActivityLedger, Depends(get_activity_ledger)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenAuthority, Depends(get_token_authority)],
) -> AuthService:
    return AuthService(store=store, ledger=ledger, hasher=hasher, tokens=tokens)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
StoreDep = Annotated[CredentialStore, Depends(get_credential_store)]
LedgerDep = Annotated[ActivityLedger, Depends(get_activity_ledger)]
