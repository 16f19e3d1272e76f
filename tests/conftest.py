"""
Global test fixtures for xtime.

The default TimeUtility is process-wide, so every test starts from the
system default Location with a clean settings cache.
"""

import os
import time

import pytest

import xtime
from xtime.config.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_location(monkeypatch):
    """Reset the default Location and settings around each test."""
    monkeypatch.delenv("XTIME_TIMEZONE", raising=False)
    clear_settings_cache()
    xtime.reset_location()
    yield
    xtime.reset_location()
    clear_settings_cache()


@pytest.fixture
def shanghai():
    """Fix the default Location to a zone without DST."""
    xtime.set_location("Asia/Shanghai")
    return xtime.get_location()


@pytest.fixture
def new_york():
    """Fix the default Location to a zone with DST."""
    xtime.set_location("America/New_York")
    return xtime.get_location()


@pytest.fixture
def system_zone():
    """Set the process TZ so the default Location is a DST-observing system zone."""
    previous = os.environ.get("TZ")

    def apply(name):
        os.environ["TZ"] = name
        time.tzset()

    yield apply

    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
