"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL is validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SUPPORTED_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_database rejects an empty or
    non-async DATABASE_URL.
    """

    # App
    app_name: str = "bookhaven"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: sqlite+aiosqlite (local/dev) or postgresql+asyncpg
    database_url: str = "sqlite+aiosqlite:///./bookhaven.db"
    database_echo: bool = False
    # Pool overrides, Postgres only (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    # No migrations: create tables from ORM metadata on startup.
    create_tables_on_startup: bool = True

    # CORS (static website origins)
    allowed_origins: str = "http://localhost:5500,http://127.0.0.1:5500,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"
    # Cover images travel inline as data URIs.
    max_request_size: int = 10 * 1024 * 1024  # 10MB

    # Rate limiting (slowapi) on write endpoints
    rate_limit_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database(self) -> "Settings":
        """Require an async DATABASE_URL for a supported driver."""
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file "
                "(e.g. sqlite+aiosqlite:///./bookhaven.db)."
            )
        if not self.database_url.startswith(_SUPPORTED_DRIVERS):
            raise ValueError(
                f"DATABASE_URL must use one of {', '.join(_SUPPORTED_DRIVERS)}, "
                f"got: {self.database_url.split('://', 1)[0]!r}"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
