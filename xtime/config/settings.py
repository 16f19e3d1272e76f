"""
xtime Settings - Runtime configuration management.

This module provides access to configuration settings with environment
variable support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimezoneSettings(BaseSettings):
    """Timezone Settings.

    Environment variables:
        XTIME_TIMEZONE: IANA zone name used as the default Location before
            set_location() is called. Default: the system local timezone.
    """

    timezone: Optional[str] = Field(
        default=None,
        description="Default timezone name; None means the system local zone",
    )

    model_config = SettingsConfigDict(env_prefix="XTIME_")

    @field_validator("timezone")
    @classmethod
    def blank_means_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class LoggingSettings(BaseSettings):
    """Logging Settings."""

    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    model_config = SettingsConfigDict(env_prefix="XTIME_LOG_")


# Cache settings to avoid repeated env access
@lru_cache
def get_timezone_settings() -> TimezoneSettings:
    """Get timezone settings with caching."""
    return TimezoneSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings with caching."""
    return LoggingSettings()


# Clear settings cache (for testing)
def clear_settings_cache() -> None:
    """Clear settings cache."""
    get_timezone_settings.cache_clear()
    get_logging_settings.cache_clear()


__all__ = [
    "TimezoneSettings",
    "LoggingSettings",
    "get_timezone_settings",
    "get_logging_settings",
    "clear_settings_cache",
]
