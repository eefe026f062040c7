"""Parsing and validation primitives.

Both parsers return a CalendarInstant, or None when the input does not name
a representable point in time. Public operations map None to their own
sentinel result, so nothing here raises for bad input.
"""

import logging
import time
from datetime import datetime, tzinfo

from dateutil import tz
from dateutil.parser import isoparse, parse

from calops import clock
from calops.instant import CalendarInstant
from calops.util import REFERENCE_DATE

logger = logging.getLogger(__name__)

# Failures raised by dateutil, datetime and CalendarInstant on bad input
_PARSE_ERRORS = (ValueError, OverflowError, TypeError, OSError)


def _to_local(dt: datetime) -> datetime:
    """Drop timezone info, converting aware values to local wall time first."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def _resolve_zone(name: str | None, offset: int | None) -> tzinfo | None:
    """Zone lookup for dateutil: numeric offsets, UTC and local names only.

    An abbreviation dateutil cannot map (e.g. "XYZ") raises instead of being
    dropped, so the string is rejected rather than read as local time.
    """
    if offset is not None:
        return tz.UTC if offset == 0 else tz.tzoffset(name, offset)
    if name is None:
        return None
    if name in time.tzname:
        return tz.tzlocal()
    raise ValueError(f"Unknown timezone name '{name}'")


def _default_fields() -> datetime:
    """Fill-in for fields a date string leaves out: Jan 1 of this year, midnight."""
    return datetime(clock.wall_clock().year, 1, 1)


def parse_date(value: str) -> CalendarInstant | None:
    """Interpret a date or date-time string.

    Accepts anything dateutil's general parser understands, e.g.
    "2024-05-15", "2024-05-15T10:30:00", "May 15 2024" or "15 May 2024 10:30".
    """
    if not isinstance(value, str):
        logger.debug(
            "Rejected date %r: expected str, got %s", value, type(value).__name__
        )
        return None
    try:
        parsed = parse(value, default=_default_fields(), tzinfos=_resolve_zone)
        return CalendarInstant.from_datetime(_to_local(parsed))
    except _PARSE_ERRORS as exc:
        logger.debug("Rejected date %r: %s", value, exc)
        return None


def parse_time(value: str) -> CalendarInstant | None:
    """Interpret a time-of-day string anchored on REFERENCE_DATE.

    The string is glued onto the anchor as "2000-01-01T<value>" and read as
    ISO 8601, so "23:30", "23:30:15" and "23:30:15.250" are accepted while
    bare dates or free text are not. Only the time-of-day fields of the
    result are meaningful.
    """
    if not isinstance(value, str):
        logger.debug(
            "Rejected time %r: expected str, got %s", value, type(value).__name__
        )
        return None
    anchored = f"{REFERENCE_DATE.isoformat()}T{value}"
    try:
        parsed = isoparse(anchored)
        return CalendarInstant.from_datetime(_to_local(parsed))
    except _PARSE_ERRORS as exc:
        logger.debug("Rejected time %r: %s", value, exc)
        return None


def instant_from_unix(seconds: int | float) -> CalendarInstant | None:
    """Convert Unix seconds to an instant on the local wall-clock timeline."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        logger.debug("Rejected Unix timestamp %r: not a number", seconds)
        return None
    try:
        return CalendarInstant.from_datetime(datetime.fromtimestamp(seconds))
    except _PARSE_ERRORS as exc:
        logger.debug("Rejected Unix timestamp %r: %s", seconds, exc)
        return None
