"""
Logging system for xtime.

This module provides a centralized logging configuration with console and
rotating file outputs and a global debug flag.
"""

from xtime.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
]
