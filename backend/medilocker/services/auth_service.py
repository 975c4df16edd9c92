"""
Auth service - registration, login and profile updates.

Orchestrates the credential store, password hasher, token authority and
activity ledger for a single request. Each step is its own committed
operation; nothing is rolled back if a later step fails.
"""
from dataclasses import dataclass
from uuid import UUID

from medilocker.core.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    NotFound,
    StorageFailure,
)
from medilocker.core.logging import get_logger
from medilocker.core.security import PasswordHasher, TokenAuthority
from medilocker.models.activity import ActivityKind
from medilocker.models.identity import Identity
from medilocker.repositories.activity import ActivityLedger
from medilocker.repositories.identity import CredentialStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """A freshly issued token and the identity it was issued for."""

    token: str
    identity: Identity


class AuthService:
    """Request-scoped orchestration of the auth core."""

    def __init__(
        self,
        store: CredentialStore,
        ledger: ActivityLedger,
        hasher: PasswordHasher,
        tokens: TokenAuthority,
    ) -> None:
        self.store = store
        self.ledger = ledger
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Register a new identity and issue its first token.

        Raises:
            DuplicateEmail: the email is already registered
        """
        # Early exit saves a bcrypt round trip; the unique index still decides
        if await self.store.find_by_email(email) is not None:
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail()

        password_hash = await self.hasher.hash(password)
        identity = await self.store.create(name, email, password_hash)
        token = self.tokens.issue(identity.id, identity.email)

        await self._record(
            identity,
            ActivityKind.REGISTRATION,
            f"User {identity.name} registered successfully",
        )
        logger.info("Identity registered", identity_id=str(identity.id))

        return AuthResult(token=token, identity=identity)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same InvalidCredentials,
        and both pay for one bcrypt verification.
        """
        identity = await self.store.find_by_email(email)
        password_hash = identity.password_hash if identity is not None else None

        if not await self.hasher.verify(password, password_hash) or identity is None:
            logger.info("Login rejected")
            raise InvalidCredentials()

        token = self.tokens.issue(identity.id, identity.email)

        await self._record(
            identity,
            ActivityKind.LOGIN,
            f"User {identity.name} logged in",
        )
        logger.info("Identity logged in", identity_id=str(identity.id))

        return AuthResult(token=token, identity=identity)

    async def get_profile(self, identity_id: UUID) -> Identity:
        identity = await self.store.find_by_id(identity_id)
        if identity is None:
            raise NotFound()
        return identity

    async def update_profile(self, identity_id: UUID, name: str) -> Identity:
        """Rename the identity and record the change."""
        identity = await self.store.update_name(identity_id, name)

        await self._record(
            identity,
            ActivityKind.PROFILE_UPDATE,
            "User updated profile information",
        )
        logger.info("Profile updated", identity_id=str(identity.id))

        return identity

    async def _record(self, identity: Identity, kind: ActivityKind, details: str) -> None:
        """
        Write an activity; a ledger failure never undoes a completed operation.

        The failed write rolls back the shared session, which expires the
        already committed identity, so it is reloaded before the caller uses it.
        """
        identity_id = identity.id
        try:
            await self.ledger.record(identity_id, kind.value, details)
        except StorageFailure:
            logger.exception(
                "Failed to record activity",
                identity_id=str(identity_id),
                action=kind.value,
            )
            await self.store.reload(identity)
