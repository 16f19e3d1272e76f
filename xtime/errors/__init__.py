"""
Error handling for xtime.

This module provides the exception hierarchy and the error code registry.
"""

from xtime.errors.error_codes import ErrorCodes
from xtime.errors.exceptions import (
    InvalidInstantError,
    InvalidLocationError,
    ParseError,
    UnsupportedTypeError,
    XtimeError,
)

__all__ = [
    # Base exception
    "XtimeError",
    # Exception hierarchy
    "ParseError",
    "UnsupportedTypeError",
    "InvalidLocationError",
    "InvalidInstantError",
    # Error codes
    "ErrorCodes",
]
