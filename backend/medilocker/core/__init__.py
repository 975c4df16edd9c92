"""
Core package containing configuration, database, security, and logging.
"""
from medilocker.core.config import Settings, get_settings
from medilocker.core.database import Base, Database, DbSession, get_db_session
from medilocker.core.logging import configure_logging, get_logger
from medilocker.core.security import PasswordHasher, TokenAuthority, TokenClaims
from medilocker.core.session_guard import CurrentIdentity, require_identity

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "Database",
    "DbSession",
    "get_db_session",
    "configure_logging",
    "get_logger",
    "PasswordHasher",
    "TokenAuthority",
    "TokenClaims",
    "CurrentIdentity",
    "require_identity",
]
