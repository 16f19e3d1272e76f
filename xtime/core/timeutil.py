"""
Timezone-aware "now", period boundaries, formatting and parsing.

Boundaries, now() and parsed strings or epochs are timezone-aware
pd.Timestamps expressed in the active Location. A TimeUtility instance owns
its Location; the module-level functions at the bottom delegate to one
process-wide default instance. pd.NaT, the result of parse(None), is not a
time: every helper that reads calendar fields rejects it with
InvalidInstantError.

Reference handling shared by all boundary helpers:
- no reference means "now" in the active Location
- an aware reference is converted to the active Location first
- a naive reference is taken as wall time in the active Location
"""

import math
import re
import threading
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Union

import numpy as np
import pandas as pd
import pytz
from dateutil import tz

from xtime.config.settings import get_timezone_settings
from xtime.errors import (
    ErrorCodes,
    InvalidInstantError,
    InvalidLocationError,
    ParseError,
    UnsupportedTypeError,
)
from xtime.logging import get_logger

logger = get_logger(__name__)

LAYOUT_YMDHIS = "%Y-%m-%d %H:%M:%S"
LAYOUT_YMD = "%Y-%m-%d"

# Maximal run of a single token character, e.g. "YYYY" or "m"
_TOKEN_RUN = re.compile(r"([YymdHis])\1*")

# Exact shape of LAYOUT_YMDHIS; strptime alone accepts single-digit fields
_CANONICAL_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)

_END_OF_DAY = time(23, 59, 59)

LocationLike = Union[tzinfo, str]
Reference = Optional[datetime]
Parsable = Union[None, pd.Timestamp, datetime, str, int, np.integer]


def resolve_location(loc: LocationLike) -> tzinfo:
    """
    Turn a zone name or tzinfo into a tzinfo.

    Args:
        loc: IANA zone name (e.g. 'Asia/Shanghai') or any tzinfo

    Returns:
        The tzinfo to use as a Location

    Raises:
        InvalidLocationError: If the name is unknown or loc is not a tzinfo
    """
    if isinstance(loc, tzinfo):
        return loc

    if isinstance(loc, str):
        try:
            return pytz.timezone(loc)
        except pytz.UnknownTimeZoneError as e:
            logger.error(f"Unknown timezone: {loc}")
            raise InvalidLocationError(
                message=f"Unknown timezone '{loc}'",
                error_code=ErrorCodes.LOCATION_UNKNOWN,
                details={"timezone": loc},
            ) from e

    raise InvalidLocationError(
        message=f"Location must be a tzinfo or zone name, got {type(loc).__name__}",
        error_code=ErrorCodes.LOCATION_UNKNOWN,
        details={"type": type(loc).__name__},
    )


def default_location() -> tzinfo:
    """
    Location used until one is set explicitly.

    XTIME_TIMEZONE wins when it names a known zone; otherwise the system
    zone, read from TZ or /etc/localtime as a tz database file. tzlocal() is
    only the last resort: it exposes no transition table, so pandas cannot
    see DST gaps in it. Never raises.
    """
    name = get_timezone_settings().timezone
    if name:
        try:
            return resolve_location(name)
        except InvalidLocationError:
            logger.warning(
                f"XTIME_TIMEZONE={name!r} is not a known timezone, using system local time"
            )
    system_zone = tz.gettz()
    if system_zone is None:
        logger.debug("System timezone file not found, using tzlocal()")
        return tz.tzlocal()
    return system_zone


class TimeUtility:
    """
    Holder of an active Location plus the calendar helpers that use it.

    Boundary helpers are pure for a given reference and active Location and
    never mutate their input.
    """

    def __init__(self, location: Optional[LocationLike] = None) -> None:
        self._lock = threading.Lock()
        self._location: Optional[tzinfo] = (
            resolve_location(location) if location is not None else None
        )

    # --- Location management ---

    def set_location(self, loc: LocationLike) -> None:
        """Replace the active Location."""
        resolved = resolve_location(loc)
        with self._lock:
            self._location = resolved
        logger.debug(f"Active location set to {resolved}")

    def get_location(self) -> tzinfo:
        """Return the active Location, falling back to default_location()."""
        with self._lock:
            loc = self._location
        if loc is not None:
            return loc
        return default_location()

    def reset_location(self) -> None:
        """Forget an explicitly set Location so the default applies again."""
        with self._lock:
            self._location = None
        logger.debug("Active location reset to default")

    # --- Current time ---

    def now(self) -> pd.Timestamp:
        return pd.Timestamp.now(tz=self.get_location())

    def today(self) -> pd.Timestamp:
        loc = self.get_location()
        return _wall_time(pd.Timestamp.now(tz=loc).date(), time.min, loc)

    def tomorrow(self, ref: Reference = None) -> pd.Timestamp:
        loc = self.get_location()
        day = _reference(ref, loc).date() + timedelta(days=1)
        return _wall_time(day, time.min, loc)

    def yesterday(self, ref: Reference = None) -> pd.Timestamp:
        loc = self.get_location()
        day = _reference(ref, loc).date() - timedelta(days=1)
        return _wall_time(day, time.min, loc)

    # --- Boundaries ---

    def start_of_day(self, ref: Reference = None) -> pd.Timestamp:
        """Start of the reference's day, e.g. "2006-01-01 00:00:00"."""
        loc = self.get_location()
        return _wall_time(_reference(ref, loc).date(), time.min, loc)

    def end_of_day(self, ref: Reference = None) -> pd.Timestamp:
        """End of the reference's day, e.g. "2006-01-01 23:59:59"."""
        loc = self.get_location()
        return _wall_time(_reference(ref, loc).date(), _END_OF_DAY, loc)

    def start_of_week(self, ref: Reference = None) -> pd.Timestamp:
        """
        Monday 00:00:00 of the week containing the reference.

        Weeks run Monday through Sunday, so a Sunday reference maps back six
        days to the Monday before it.
        """
        loc = self.get_location()
        day = _reference(ref, loc).date()
        return _wall_time(day - timedelta(days=day.weekday()), time.min, loc)

    def end_of_week(self, ref: Reference = None) -> pd.Timestamp:
        """Sunday 23:59:59 of the week containing the reference."""
        loc = self.get_location()
        day = _reference(ref, loc).date()
        return _wall_time(day + timedelta(days=6 - day.weekday()), _END_OF_DAY, loc)

    def start_of_month(self, ref: Reference = None) -> pd.Timestamp:
        """First day of the reference's month, e.g. "2016-01-01 00:00:00"."""
        loc = self.get_location()
        day = _reference(ref, loc).date()
        return _wall_time(day.replace(day=1), time.min, loc)

    def end_of_month(self, ref: Reference = None) -> pd.Timestamp:
        """
        Last second of the reference's month, e.g. "2016-01-31 23:59:59".

        31 days past the first of any month always lands in the next month;
        the start of that month minus one second is the answer, whatever the
        month length.
        """
        loc = self.get_location()
        first = _reference(ref, loc).date().replace(day=1)
        following = (first + timedelta(days=31)).replace(day=1)
        return _wall_time(following, time.min, loc) - pd.Timedelta(seconds=1)

    def start_of_year(self, ref: Reference = None) -> pd.Timestamp:
        """Jan 1 00:00:00 of the reference's year."""
        loc = self.get_location()
        year = _reference(ref, loc).year
        return _wall_time(date(year, 1, 1), time.min, loc)

    def end_of_year(self, ref: Reference = None) -> pd.Timestamp:
        """Dec 31 23:59:59 of the reference's year."""
        loc = self.get_location()
        year = _reference(ref, loc).year
        return _wall_time(date(year, 12, 31), _END_OF_DAY, loc)

    # --- Formatting ---

    @staticmethod
    def ymd_his(t: datetime) -> str:
        return _require_time(t).strftime(LAYOUT_YMDHIS)

    @staticmethod
    def ymd(t: datetime) -> str:
        return _require_time(t).strftime(LAYOUT_YMD)

    @staticmethod
    def format(t: datetime, pattern: str) -> str:
        """
        Format an Instant with a token pattern or a native strftime layout.

        Token patterns use runs of Y y m d H i s, so "Y-m-d H:i:s" and
        "YYYY-mm-dd HH:ii:ss" render the same. A pattern containing none of
        those characters is handed to strftime unchanged.

        Args:
            t: Instant to render, in its own timezone
            pattern: Token pattern or strftime layout

        Returns:
            The formatted string
        """
        _require_time(t)
        if not _TOKEN_RUN.search(pattern):
            return t.strftime(pattern)

        year = f"{t.year:04d}"
        fields = {
            "Y": year,
            "y": year[2:4],
            "m": f"{t.month:02d}",
            "d": f"{t.day:02d}",
            "H": f"{t.hour:02d}",
            "i": f"{t.minute:02d}",
            "s": f"{t.second:02d}",
        }
        return _TOKEN_RUN.sub(lambda match: fields[match.group(1)], pattern)

    # --- Parsing ---

    def parse(self, value: Parsable) -> pd.Timestamp:
        """
        Parse a time value from any of the supported representations.

        Args:
            value: None, pd.Timestamp, datetime, "YYYY-MM-DD HH:MM:SS" string,
                or integer epoch seconds

        Returns:
            pd.NaT for None, the same object for a pd.Timestamp, otherwise a
            Timestamp in the active Location (naive for naive datetimes)

        Raises:
            ParseError: If a string does not match the layout or an epoch
                value is out of range
            UnsupportedTypeError: For any other input type
        """
        if value is None:
            return pd.NaT

        if isinstance(value, pd.Timestamp):
            return value

        if isinstance(value, datetime):
            return pd.Timestamp(value)

        if isinstance(value, str):
            return self._parse_string(value)

        # bool is an int subclass but not an epoch value
        if isinstance(value, (bool, np.bool_)):
            raise _unsupported(value)

        if isinstance(value, (int, np.integer)):
            return self._parse_epoch(int(value))

        raise _unsupported(value)

    def unix(self, t: datetime) -> int:
        """Epoch seconds of an Instant; naive values are read in the active Location."""
        return math.floor(_reference(t, self.get_location()).timestamp())

    def _parse_string(self, value: str) -> pd.Timestamp:
        loc = self.get_location()
        try:
            if not _CANONICAL_SHAPE.fullmatch(value):
                raise ValueError(f"does not match {LAYOUT_YMDHIS}")
            naive = datetime.strptime(value, LAYOUT_YMDHIS)
            return pd.Timestamp(naive).tz_localize(
                loc, ambiguous=True, nonexistent="shift_forward"
            )
        except ValueError as e:
            logger.warning(f"Failed to parse time string {value!r}: {e}")
            raise ParseError(
                message=f"Cannot parse {value!r} as YYYY-MM-DD HH:MM:SS",
                error_code=ErrorCodes.PARSE_INVALID_LAYOUT,
                details={"value": value, "layout": LAYOUT_YMDHIS},
            ) from e

    def _parse_epoch(self, seconds: int) -> pd.Timestamp:
        try:
            return pd.Timestamp(seconds, unit="s", tz="UTC").tz_convert(
                self.get_location()
            )
        except (OverflowError, ValueError) as e:
            logger.warning(f"Epoch value out of range: {seconds}")
            raise ParseError(
                message=f"Epoch seconds {seconds} outside the representable range",
                error_code=ErrorCodes.PARSE_OUT_OF_RANGE,
                details={"value": seconds},
            ) from e


def _reference(ref: Reference, loc: tzinfo) -> pd.Timestamp:
    if ref is None:
        return pd.Timestamp.now(tz=loc)
    ts = _require_time(pd.Timestamp(ref))
    if ts.tzinfo is None:
        return ts.tz_localize(loc, ambiguous=True, nonexistent="shift_forward")
    return ts.tz_convert(loc)


def _require_time(t):
    if t is pd.NaT:
        logger.warning("Calendar helper called with NaT")
        raise InvalidInstantError(
            message="NaT is not a time and has no calendar fields",
            error_code=ErrorCodes.INSTANT_NOT_A_TIME,
            details={"value": "NaT"},
        )
    return t


def _wall_time(day: date, clock: time, loc: tzinfo) -> pd.Timestamp:
    # Gaps shift forward; ambiguous times resolve to the DST side
    return pd.Timestamp(datetime.combine(day, clock)).tz_localize(
        loc, ambiguous=True, nonexistent="shift_forward"
    )


def _unsupported(value: object) -> UnsupportedTypeError:
    type_name = type(value).__name__
    logger.warning(f"Cannot parse value of type {type_name}")
    return UnsupportedTypeError(
        message=f"Type not supported: {type_name}",
        error_code=ErrorCodes.PARSE_UNSUPPORTED_TYPE,
        details={"type": type_name},
    )


# Process-wide default instance behind the module-level functions
_default = TimeUtility()


def default_utility() -> TimeUtility:
    """The TimeUtility behind the module-level functions."""
    return _default


def set_location(loc: LocationLike) -> None:
    """Convenience function - alias for TimeUtility.set_location() on the default instance."""
    _default.set_location(loc)


def get_location() -> tzinfo:
    """Convenience function - alias for TimeUtility.get_location() on the default instance."""
    return _default.get_location()


def reset_location() -> None:
    """Convenience function - alias for TimeUtility.reset_location() on the default instance."""
    _default.reset_location()


def now() -> pd.Timestamp:
    return _default.now()


def today() -> pd.Timestamp:
    return _default.today()


def tomorrow(ref: Reference = None) -> pd.Timestamp:
    return _default.tomorrow(ref)


def yesterday(ref: Reference = None) -> pd.Timestamp:
    return _default.yesterday(ref)


def start_of_day(ref: Reference = None) -> pd.Timestamp:
    return _default.start_of_day(ref)


def end_of_day(ref: Reference = None) -> pd.Timestamp:
    return _default.end_of_day(ref)


def start_of_week(ref: Reference = None) -> pd.Timestamp:
    return _default.start_of_week(ref)


def end_of_week(ref: Reference = None) -> pd.Timestamp:
    return _default.end_of_week(ref)


def start_of_month(ref: Reference = None) -> pd.Timestamp:
    return _default.start_of_month(ref)


def end_of_month(ref: Reference = None) -> pd.Timestamp:
    return _default.end_of_month(ref)


def start_of_year(ref: Reference = None) -> pd.Timestamp:
    return _default.start_of_year(ref)


def end_of_year(ref: Reference = None) -> pd.Timestamp:
    return _default.end_of_year(ref)


def ymd_his(t: datetime) -> str:
    """Format as "2006-01-02 15:04:05"."""
    return TimeUtility.ymd_his(t)


def ymd(t: datetime) -> str:
    """Format as "2006-01-02"."""
    return TimeUtility.ymd(t)


def format(t: datetime, pattern: str) -> str:
    """Convenience function - alias for TimeUtility.format()."""
    return TimeUtility.format(t, pattern)


def parse(value: Parsable) -> pd.Timestamp:
    """Convenience function - alias for TimeUtility.parse() on the default instance."""
    return _default.parse(value)


def unix(t: datetime) -> int:
    """Convenience function - alias for TimeUtility.unix() on the default instance."""
    return _default.unix(t)
