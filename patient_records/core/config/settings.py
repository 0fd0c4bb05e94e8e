"""
Application settings module.

This module provides configuration settings for the application, including
server addresses for the REST and gRPC surfaces, the database connection and
logging options.
"""

# Standard Library Imports
import logging
from functools import lru_cache
from typing import Self

# Third-Party Imports
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # API Information
    API_TITLE: str = "Patient Records API"
    API_DESCRIPTION: str = "Create and read patient records over REST and gRPC"
    API_VERSION: str = "1.0.0"

    # Environment
    ENVIRONMENT: str = "development"  # development, test, production
    PROJECT_NAME: str = "Patient Records"
    API_V1_STR: str = "/api/v1"

    # Server Settings
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000
    UVICORN_WORKERS: int = 1

    # gRPC Settings
    GRPC_ENABLED: bool = True
    GRPC_HOST: str = "[::]"
    GRPC_PORT: int = 50051

    # CORS Settings
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_CREDENTIALS: bool = True

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./patient_records.db"
    DB_ECHO_LOG: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Monitoring and Error Tracking (Sentry)
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.2

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def ensure_async_database_url(self) -> Self:
        """Rewrite a plain SQLite URL to use the aiosqlite driver."""
        db_url = self.DATABASE_URL
        if db_url.startswith("sqlite:///") and "aiosqlite" not in db_url:
            self.DATABASE_URL = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
            logger.info(f"Set DATABASE_URL to {self.DATABASE_URL}")
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    This function enables dependency injection of settings in FastAPI.

    Returns:
        The application settings instance
    """
    return Settings()
