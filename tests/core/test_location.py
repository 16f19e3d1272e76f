"""
Tests for Location management and the current-time accessors.
"""

import threading
from datetime import datetime, time, timedelta, tzinfo

import pandas as pd
import pytest
from dateutil import tz

import xtime
from xtime.config.settings import clear_settings_cache
from xtime.core.timeutil import TimeUtility, default_location, resolve_location
from xtime.errors import ErrorCodes, InvalidLocationError


class TestGetLocation:
    """Test the default and explicitly set Location."""

    def test_default_is_system_local(self):
        loc = xtime.get_location()
        assert loc is not None
        assert loc == tz.gettz()

    def test_default_follows_tz_database_zone(self, system_zone):
        system_zone("America/New_York")
        loc = xtime.get_location()
        assert not isinstance(loc, tz.tzlocal)
        assert loc.utcoffset(datetime(2024, 7, 1, 12, 0)) == timedelta(hours=-4)
        assert loc.utcoffset(datetime(2024, 1, 1, 12, 0)) == timedelta(hours=-5)

    def test_set_location_by_name(self):
        xtime.set_location("Europe/Paris")
        assert str(xtime.get_location()) == "Europe/Paris"

    def test_set_location_by_tzinfo(self):
        tokyo = tz.gettz("Asia/Tokyo")
        xtime.set_location(tokyo)
        assert xtime.get_location() is tokyo

    def test_reset_location(self):
        xtime.set_location("Europe/Paris")
        xtime.reset_location()
        assert xtime.get_location() == tz.gettz()

    def test_unknown_name(self):
        with pytest.raises(InvalidLocationError) as exc_info:
            xtime.set_location("Mars/Olympus_Mons")
        assert exc_info.value.error_code == ErrorCodes.LOCATION_UNKNOWN

    def test_unknown_name_keeps_previous_location(self):
        xtime.set_location("Europe/Paris")
        with pytest.raises(InvalidLocationError):
            xtime.set_location("Mars/Olympus_Mons")
        assert str(xtime.get_location()) == "Europe/Paris"

    def test_wrong_type(self):
        with pytest.raises(InvalidLocationError):
            resolve_location(8)


class TestConfiguredDefault:
    """Test XTIME_TIMEZONE as the default Location."""

    def test_env_timezone(self, monkeypatch):
        monkeypatch.setenv("XTIME_TIMEZONE", "Asia/Shanghai")
        clear_settings_cache()
        assert str(xtime.get_location()) == "Asia/Shanghai"

    def test_explicit_location_wins(self, monkeypatch):
        monkeypatch.setenv("XTIME_TIMEZONE", "Asia/Shanghai")
        clear_settings_cache()
        xtime.set_location("UTC")
        assert str(xtime.get_location()) == "UTC"

    def test_invalid_env_falls_back_to_local(self, monkeypatch):
        monkeypatch.setenv("XTIME_TIMEZONE", "Nowhere/Special")
        clear_settings_cache()
        assert default_location() == tz.gettz()

    def test_blank_env_means_unset(self, monkeypatch):
        monkeypatch.setenv("XTIME_TIMEZONE", "  ")
        clear_settings_cache()
        assert default_location() == tz.gettz()


class TestInstances:
    """Test that TimeUtility instances own their Location."""

    def test_constructor_location(self):
        utility = TimeUtility("Asia/Tokyo")
        xtime.set_location("UTC")
        assert str(utility.get_location()) == "Asia/Tokyo"

    def test_default_instance_backs_module_functions(self):
        xtime.default_utility().set_location("Europe/Paris")
        assert str(xtime.get_location()) == "Europe/Paris"

    def test_concurrent_set_and_get(self):
        utility = TimeUtility("UTC")
        names = ["UTC", "Asia/Tokyo", "Europe/Paris", "America/New_York"]
        seen = []
        errors = []

        def writer(name):
            for _ in range(200):
                utility.set_location(name)

        def reader():
            for _ in range(200):
                loc = utility.get_location()
                if not isinstance(loc, tzinfo):
                    errors.append(loc)
                seen.append(str(loc))

        threads = [threading.Thread(target=writer, args=(n,)) for n in names]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert set(seen) <= set(names)


class TestCurrentTime:
    """Test now, today, tomorrow and yesterday without a reference."""

    def test_now_is_in_active_location(self, shanghai):
        before = pd.Timestamp.now(tz="UTC")
        current = xtime.now()
        after = pd.Timestamp.now(tz="UTC")
        assert before <= current <= after
        assert str(current.tz) == "Asia/Shanghai"

    def test_today_is_midnight(self, shanghai):
        today = xtime.today()
        assert today.time() == time(0, 0, 0)
        assert timedelta(0) <= xtime.now() - today < timedelta(days=1, seconds=1)

    def test_tomorrow_and_yesterday_default_to_now(self, shanghai):
        today = xtime.today()
        assert xtime.tomorrow().date() - today.date() in (timedelta(days=1), timedelta(days=2))
        assert today.date() - xtime.yesterday().date() in (timedelta(days=1), timedelta(days=0))
