"""Calendar queries: leap years, week numbers, month lengths, day counts.

Numeric queries return -1 when a date string cannot be parsed. The week
number and age formulas are deliberately simple approximations:

- get_week_number counts Sunday-started weeks from January 1, not ISO 8601
  weeks.
- get_age reads the year offset of (now - birth) laid on the epoch, which
  can be one year off close to a birthday.
"""

import logging
import math

from dateutil.relativedelta import relativedelta

from calops.formats import DEFAULT_DATE_LAYOUT, DateLayout, format_date
from calops.instant import EPOCH, CalendarInstant, first_of_month_ordinal
from calops.parsing import parse_date
from calops.util import DAY, INVALID_DATE, INVALID_NUMBER

logger = logging.getLogger(__name__)

# Day names indexed by datetime.weekday() (Monday = 0)
_DAY_NAMES = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)


def is_leap_year(year: int) -> bool:
    """True if February of `year` has a 29th day. Works for any integer year."""
    return first_of_month_ordinal(year, 3) - first_of_month_ordinal(year, 2) == 29


def get_days_in_month(year: int, month: int) -> int:
    """Number of days in a 1-based month.

    Out-of-range months roll into neighbouring years, so month 13 is January
    of the next year and month 0 is December of the previous one.
    """
    carry, month_index = divmod(month - 1, 12)
    next_carry, next_index = divmod(month, 12)
    first = first_of_month_ordinal(year + carry, month_index + 1)
    following = first_of_month_ordinal(year + next_carry, next_index + 1)
    return following - first


def get_week_number(date_str: str) -> int:
    """1-based week of the year counted in Sunday-started weeks."""
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_NUMBER
    first_day = CalendarInstant.from_fields(instant.year, 0, 1)
    past_days = (instant - first_day) / DAY
    return math.ceil((past_days + first_day.weekday + 1) / 7)


def get_days_remaining_in_month(date_str: str) -> int:
    """Days left in the month after the given date."""
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_NUMBER
    last_day = CalendarInstant.from_fields(instant.year, instant.month_index + 1, 0)
    return last_day.day - instant.day


def get_age(birth_date_str: str) -> int:
    """Whole years since birth, using the epoch-offset approximation."""
    birth = parse_date(birth_date_str)
    if birth is None:
        return INVALID_NUMBER
    elapsed = CalendarInstant.now() - birth
    try:
        age_date = CalendarInstant(millis=elapsed)
    except ValueError as exc:
        logger.debug("Cannot compute age for %r: %s", birth_date_str, exc)
        return INVALID_NUMBER
    return abs(age_date.year - EPOCH.year)


def get_days_until_future_date(future_date_str: str) -> int:
    """Days from now until the date, rounded up; negative for past dates."""
    future = parse_date(future_date_str)
    if future is None:
        return INVALID_NUMBER
    return math.ceil((future - CalendarInstant.now()) / DAY)


def calculate_days_difference(start_date_str: str, end_date_str: str) -> int:
    """Days from start to end, rounded up."""
    start = parse_date(start_date_str)
    end = parse_date(end_date_str)
    if start is None or end is None:
        return INVALID_NUMBER
    return math.ceil((end - start) / DAY)


def get_days_between(start_date_str: str, end_date_str: str) -> int:
    """Whole calendar days from start to end; times of day are ignored."""
    start = parse_date(start_date_str)
    end = parse_date(end_date_str)
    if start is None or end is None:
        return INVALID_NUMBER
    return (end.day_start - start.day_start) // DAY


def get_quarter_of_year(date_str: str) -> int:
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_NUMBER
    return (instant.month_index + 3) // 3


def get_day_of_week(date_str: str) -> str:
    """Upper-case English weekday name, e.g. "MONDAY"."""
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_DATE
    return _DAY_NAMES[instant.to_datetime().weekday()]


def _between(start_date_str: str, end_date_str: str) -> relativedelta | None:
    start = parse_date(start_date_str)
    end = parse_date(end_date_str)
    if start is None or end is None:
        return None
    return relativedelta(end.to_datetime(), start.to_datetime())


def get_months_between(start_date_str: str, end_date_str: str) -> int:
    """Whole months from start to end, truncated toward zero."""
    delta = _between(start_date_str, end_date_str)
    if delta is None:
        return INVALID_NUMBER
    return delta.years * 12 + delta.months


def get_years_between(start_date_str: str, end_date_str: str) -> int:
    """Whole years from start to end, truncated toward zero."""
    delta = _between(start_date_str, end_date_str)
    if delta is None:
        return INVALID_NUMBER
    return delta.years


def get_start_of_week(
    date_str: str, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    """Monday on or before the given date."""
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_DATE
    days_back = instant.to_datetime().weekday()
    try:
        monday = instant.day_start.shifted(-days_back * DAY)
    except ValueError as exc:
        logger.debug("No start of week for %r: %s", date_str, exc)
        return INVALID_DATE
    return format_date(monday, layout)


def get_end_of_week(
    date_str: str, *, layout: DateLayout = DEFAULT_DATE_LAYOUT
) -> str:
    """Sunday on or after the given date."""
    instant = parse_date(date_str)
    if instant is None:
        return INVALID_DATE
    days_ahead = 6 - instant.to_datetime().weekday()
    try:
        sunday = instant.day_start.shifted(days_ahead * DAY)
    except ValueError as exc:
        logger.debug("No end of week for %r: %s", date_str, exc)
        return INVALID_DATE
    return format_date(sunday, layout)


def is_same_date(first_date_str: str, second_date_str: str) -> bool:
    """True if both strings fall on the same calendar day.

    Returns False when either string cannot be parsed.
    """
    first = parse_date(first_date_str)
    second = parse_date(second_date_str)
    if first is None or second is None:
        return False
    return first.day_start == second.day_start


def is_valid_date(date_str: str) -> bool:
    return parse_date(date_str) is not None
