"""
xtime Configuration Package - environment-driven settings.
"""

from .settings import (
    LoggingSettings,
    TimezoneSettings,
    clear_settings_cache,
    get_logging_settings,
    get_timezone_settings,
)

__all__ = [
    "LoggingSettings",
    "TimezoneSettings",
    "clear_settings_cache",
    "get_logging_settings",
    "get_timezone_settings",
]
