"""Application configuration loaded from environment variables."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # SQLite works out of the box; point at Postgres in production
    DATABASE_URL: str = "sqlite:///./reports.db"

    # Shared secret expected in the x-api-key header of webhook calls.
    # Unset means every intake request is rejected with 401.
    WEBHOOK_API_KEY: SecretStr | None = None
    WEBHOOK_TEST_TIMEOUT_SEC: float = 10.0

    # When True, status updates must follow new -> reviewed -> resolved.
    STRICT_STATUS_TRANSITIONS: bool = False

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./reports.db or postgresql://)"
            )
        return v.strip()

    @field_validator("WEBHOOK_API_KEY")
    @classmethod
    def validate_webhook_api_key(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None or not v.get_secret_value().strip():
            return None
        return v

    @field_validator("WEBHOOK_TEST_TIMEOUT_SEC")
    @classmethod
    def validate_webhook_test_timeout(cls, v: float) -> float:
        if v <= 0 or v > 60:
            raise ValueError(
                "WEBHOOK_TEST_TIMEOUT_SEC must be greater than 0 and at most 60"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
