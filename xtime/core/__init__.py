"""
Core calendar helpers for xtime.
"""

from .timeutil import TimeUtility, default_location, default_utility, resolve_location

__all__ = ["TimeUtility", "default_location", "default_utility", "resolve_location"]
