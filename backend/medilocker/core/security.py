"""
Security primitives: password hashing and signed bearer tokens.
"""
import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from medilocker.core.config import Settings
from medilocker.core.exceptions import TokenExpired, TokenInvalid, ValidationError
from medilocker.core.logging import get_logger

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """
    bcrypt hashing on a bounded thread pool.

    Hashing and verification are CPU bound, so both are pushed onto a
    dedicated executor and never run on the event loop.
    """

    def __init__(self, rounds: int = 10, max_workers: int = 4) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="password-hasher",
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.bcrypt_rounds, max_workers=settings.hash_workers)

    async def hash(self, plaintext: str) -> str:
        """Hash a password for storage."""
        if password_too_long(plaintext):
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._context.hash, plaintext)

    async def verify(self, plaintext: str, password_hash: Optional[str]) -> bool:
        """
        Verify a password against its stored hash.

        With no stored hash, or a password longer than bcrypt can see, a
        dummy verification of the same cost runs and the result is False.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, self._verify_sync, plaintext, password_hash
        )

    def _verify_sync(self, plaintext: str, password_hash: Optional[str]) -> bool:
        if password_hash is None or password_too_long(plaintext):
            self._context.dummy_verify()
            return False
        try:
            return self._context.verify(plaintext, password_hash)
        except (ValueError, TypeError):
            logger.warning("Stored password hash is not a recognised bcrypt hash")
            return False

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)


@dataclass(frozen=True)
class TokenClaims:
    """Identity reference decoded from a verified bearer token."""

    identity_id: UUID
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenAuthority:
    """Issues and verifies HMAC-signed JWT bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        validity: timedelta = timedelta(hours=24),
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.validity = validity

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenAuthority":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            validity=timedelta(hours=settings.jwt_expiration_hours),
        )

    def issue(
        self,
        identity_id: UUID,
        email: str,
        now: Optional[datetime] = None,
    ) -> str:
        """Create a signed token for an identity, valid for ``validity``."""
        issued_at = now or datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(identity_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.validity).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and decode the identity reference.

        Raises:
            TokenExpired: the signature is valid but ``exp`` has passed
            TokenInvalid: anything else wrong with the token
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpired() from e
        except JWTError as e:
            logger.debug("Rejected bearer token", error=str(e))
            raise TokenInvalid() from e

        try:
            return TokenClaims(
                identity_id=UUID(payload["sub"]),
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenInvalid() from e
