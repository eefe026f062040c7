"""Date conversion and add/subtract arithmetic.

Every shift goes through CalendarInstant.from_fields, so an offset that
pushes a field past its normal range rolls into the next unit up:
Jan 31 + 1 month lands in early March, Feb 29 + 1 year lands on Mar 1.
Time shifts run on the REFERENCE_DATE anchor and only the time-of-day
fields are reported, so crossing midnight wraps silently.
"""

import logging
from typing import Literal, TypeAlias

from calops.formats import (
    DEFAULT_DATE_LAYOUT,
    DEFAULT_TIME_LAYOUT,
    DateLayout,
    TimeLayout,
    format_date,
    format_time,
)
from calops.instant import CalendarInstant
from calops.parsing import instant_from_unix, parse_date, parse_time
from calops.util import INVALID_DATE, INVALID_TIME, INVALID_UNIX

logger = logging.getLogger(__name__)

DurationUnit: TypeAlias = Literal[
    "days", "hours", "minutes", "seconds", "months", "years"
]

_FIELD_NAMES = ("year", "month_index", "day", "hour", "minute", "second")

# Mapping from duration units to the calendar field they offset
_UNIT_MAP: dict[DurationUnit, str] = {
    "years": "year",
    "months": "month_index",
    "days": "day",
    "hours": "hour",
    "minutes": "minute",
    "seconds": "second",
}

_DATE_UNITS: frozenset[str] = frozenset({"years", "months", "days"})


def _offset_field(
    instant: CalendarInstant, field: str, amount: int
) -> CalendarInstant:
    """Add amount to one calendar field and renormalize the rest."""
    fields = {name: getattr(instant, name) for name in _FIELD_NAMES}
    fields[field] += amount
    return CalendarInstant.from_fields(**fields, millisecond=instant.millisecond)


def shift(
    value: str,
    amount: int,
    unit: DurationUnit,
    *,
    layout: DateLayout | TimeLayout | None = None,
) -> str:
    """
    Move a date or time string by a signed amount of one unit.

    Args:
        value: Date string for "days", "months" and "years"; time-of-day
            string for "hours", "minutes" and "seconds"
        amount: Signed number of units (negative moves backwards)
        unit: Which unit to shift by
        layout: Output layout; DateLayout for date units, TimeLayout for
            time units (defaults to the module defaults)

    Returns:
        The shifted date ("YYYY-MM-DD" by default) or time ("HH:MM", or
        "HH:MM:SS" for seconds), or INVALID_DATE / INVALID_TIME when the
        input cannot be parsed or the result leaves the supported range

    Example:
        >>> shift("2024-01-31", 1, "months")
        '2024-03-02'
        >>> shift("23:30", 2, "hours")
        '01:30'
    """
    if unit not in _UNIT_MAP:
        valid = ", ".join(sorted(_UNIT_MAP))
        raise ValueError(f"Invalid unit '{unit}'. Valid units: {valid}")

    is_date = unit in _DATE_UNITS
    sentinel = INVALID_DATE if is_date else INVALID_TIME
    layout_type = DateLayout if is_date else TimeLayout
    if layout is None:
        layout = DEFAULT_DATE_LAYOUT if is_date else DEFAULT_TIME_LAYOUT
    elif not isinstance(layout, layout_type):
        raise TypeError(
            f"Shifting by {unit} needs a {layout_type.__name__} layout.\n"
            f"Got {type(layout).__name__!r}: {layout!r}"
        )

    instant = parse_date(value) if is_date else parse_time(value)
    if instant is None:
        return sentinel

    try:
        moved = _offset_field(instant, _UNIT_MAP[unit], amount)
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("Cannot shift %r by %r %s: %s", value, amount, unit, exc)
        return sentinel

    if isinstance(layout, DateLayout):
        return format_date(moved, layout)
    return format_time(moved, seconds=unit == "seconds", layout=layout)


def transform_date(
    date_str: str,
    source_format: str | None = None,
    desired_format: str | None = None,
    *,
    layout: DateLayout = DEFAULT_DATE_LAYOUT,
) -> str:
    """Reformat a date string as a numeric date.

    Note: source_format and desired_format are accepted for call-site
    compatibility but have never affected the result; the output always
    follows `layout`.
    """
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_DATE
    return format_date(instant, layout)


def transform_unix(
    unix_seconds: int,
    desired_format: str | None = None,
    *,
    layout: DateLayout = DEFAULT_DATE_LAYOUT,
) -> str:
    """Format Unix seconds as the local calendar date.

    Note: desired_format is ignored, same as in transform_date.
    """
    instant = instant_from_unix(unix_seconds)
    if instant is None:
        return INVALID_UNIX
    return format_date(instant, layout)


def add_days(
    date_str: str, days: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, days, "days", layout=layout)


def subtract_days(
    date_str: str, days: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, -days, "days", layout=layout)


def add_months(
    date_str: str, months: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, months, "months", layout=layout)


def subtract_months(
    date_str: str, months: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, -months, "months", layout=layout)


def add_years(
    date_str: str, years: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, years, "years", layout=layout)


def subtract_years(
    date_str: str, years: int, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    return shift(date_str, -years, "years", layout=layout)


def add_hours(
    time_str: str, hours: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, hours, "hours", layout=layout)


def subtract_hours(
    time_str: str, hours: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, -hours, "hours", layout=layout)


def add_minutes(
    time_str: str, minutes: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, minutes, "minutes", layout=layout)


def subtract_minutes(
    time_str: str, minutes: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, -minutes, "minutes", layout=layout)


def add_seconds(
    time_str: str, seconds: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, seconds, "seconds", layout=layout)


def subtract_seconds(
    time_str: str, seconds: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    return shift(time_str, -seconds, "seconds", layout=layout)


def add_time_offset(
    time_str: str, offset_seconds: int, *, layout: TimeLayout = DEFAULT_TIME_LAYOUT
) -> str:
    """Move a time of day by a signed offset in seconds, as "HH:MM:SS"."""
    return shift(time_str, offset_seconds, "seconds", layout=layout)
