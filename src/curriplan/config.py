"""
Application Configuration

Uses Pydantic Settings for type-safe environment variable management.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # ========================================================================
    # APPLICATION
    # ========================================================================

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    DEBUG: bool = False

    PORT: int = Field(default=3001, description="HTTP listening port")
    API_PREFIX: str = Field(default="/api", description="Common prefix for all API routes")

    FRONTEND_URL: str = Field(
        default="http://localhost:5173",
        description="Browser origin allowed to call the API (CORS)",
    )

    # ========================================================================
    # DATABASE
    # ========================================================================

    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "curriplan"
    DB_PASSWORD: str = ""
    DB_NAME: str = Field(default="curriculum_db", description="Database (schema) name")

    DATABASE_URL: str | None = Field(
        default=None,
        description="Full async SQLAlchemy URL; overrides the DB_* parts when set",
    )

    DB_POOL_SIZE: int = Field(default=10, ge=1, description="Fixed connection pool capacity")
    DB_POOL_TIMEOUT: float = Field(
        default=30.0, gt=0, description="Seconds to wait for a pooled connection"
    )

    # ========================================================================
    # COMPUTED PROPERTIES
    # ========================================================================

    @property
    def database_url(self) -> str:
        """Async connection string for the curriculum database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        credentials = self.DB_USER
        if self.DB_PASSWORD:
            credentials = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return (
            f"postgresql+asyncpg://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == "production"

    @property
    def is_local(self) -> bool:
        """Check if running locally."""
        return self.ENVIRONMENT == "local"


# Global settings instance
settings = Settings()
