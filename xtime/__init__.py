"""
xtime - timezone-aware now, period boundaries, formatting and parsing.
"""

from dotenv import load_dotenv

from xtime.core.timeutil import (
    LAYOUT_YMD,
    LAYOUT_YMDHIS,
    TimeUtility,
    default_utility,
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    format,
    get_location,
    now,
    parse,
    reset_location,
    set_location,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
    today,
    tomorrow,
    unix,
    yesterday,
    ymd,
    ymd_his,
)
from xtime.errors import (
    ErrorCodes,
    InvalidInstantError,
    InvalidLocationError,
    ParseError,
    UnsupportedTypeError,
    XtimeError,
)
from xtime.logging import configure_logging, get_logger
from xtime.version import __version__

# Load environment variables from .env file
load_dotenv()

__all__ = [
    "LAYOUT_YMD",
    "LAYOUT_YMDHIS",
    "TimeUtility",
    "default_utility",
    # Location
    "set_location",
    "get_location",
    "reset_location",
    # Current time
    "now",
    "today",
    "tomorrow",
    "yesterday",
    # Boundaries
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    # Formatting and parsing
    "ymd_his",
    "ymd",
    "format",
    "parse",
    "unix",
    # Errors
    "XtimeError",
    "ParseError",
    "UnsupportedTypeError",
    "InvalidLocationError",
    "InvalidInstantError",
    "ErrorCodes",
    # Logging
    "configure_logging",
    "get_logger",
    "__version__",
]
