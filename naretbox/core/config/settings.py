"""
Application settings module.

This module provides configuration settings for the application, including
the clinic's scheduling policy, database connection and logging level.
"""

# Standard Library Imports
import logging
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Third-Party Imports
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from naretbox.domain.services.scheduling_engine import SchedulingPolicy

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # API Information
    API_TITLE: str = "Naretbox API"
    API_DESCRIPTION: str = "Clinical questionnaire scoring and appointment scheduling"
    API_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Environment
    TESTING: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production, test

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./naretbox.db"
    ASYNC_DATABASE_URL: str | None = None  # Derived from DATABASE_URL if None
    DB_ECHO_LOG: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Scheduling policy
    TIMEZONE: str = "Europe/Madrid"
    WORKDAY_START_HOUR: int = Field(default=9, ge=0, le=23)
    WORKDAY_END_HOUR: int = Field(default=18, ge=1, le=24)
    SLOT_DURATION_MINUTES: int = Field(default=60, gt=0)
    BOOKING_HORIZON_DAYS: int = Field(default=14, gt=0)

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

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @model_validator(mode="after")
    def ensure_consistent_values(self) -> "Settings":
        """Derive ASYNC_DATABASE_URL and check the working-hours window."""
        if self.WORKDAY_END_HOUR <= self.WORKDAY_START_HOUR:
            raise ValueError("WORKDAY_END_HOUR must be later than WORKDAY_START_HOUR")

        if not self.ASYNC_DATABASE_URL:
            db_url = self.DATABASE_URL
            if db_url.startswith("sqlite:///") and "aiosqlite" not in db_url:
                self.ASYNC_DATABASE_URL = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
            else:
                self.ASYNC_DATABASE_URL = db_url
            logger.debug("Set ASYNC_DATABASE_URL to %s", self.ASYNC_DATABASE_URL)

        return self

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)

    def scheduling_policy(self) -> SchedulingPolicy:
        """Build the scheduling policy consumed by the scheduling engine."""
        return SchedulingPolicy(
            timezone=self.timezone,
            workday_start_hour=self.WORKDAY_START_HOUR,
            workday_end_hour=self.WORKDAY_END_HOUR,
            slot_duration_minutes=self.SLOT_DURATION_MINUTES,
            horizon_days=self.BOOKING_HORIZON_DAYS,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    This function enables dependency injection of settings in FastAPI and
    can be overridden in tests.

    Returns:
        The application settings instance
    """
    return Settings()
