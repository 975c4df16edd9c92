"""
Centralized configuration management with Pydantic Settings.
All environment variables are validated and typed.

The signing secret and the database URL have no defaults: a process
started without them fails while building its settings.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Medilocker Auth API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern="^(development|staging|production)$")

    # Server
    host: str = "0.0.0.0"
    port: int = 5001

    # Database
    database_url: str = Field(min_length=1)
    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_echo: bool = False

    # Tokens
    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = Field(default=24, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    hash_workers: int = Field(default=4, ge=1)

    # Activity ledger
    activity_page_size: int = Field(default=10, ge=1)

    # CORS - stored as comma-separated string to avoid JSON parsing issues
    allowed_origins_str: str = Field(default="*", alias="ALLOWED_ORIGINS")

    @property
    def allowed_origins(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    # Observability
    sentry_dsn: Optional[str] = None
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
