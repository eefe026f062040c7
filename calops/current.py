"""Current date and time as literal zero-padded templates."""

from calops.formats import ISO_DATE, ISO_DATE_TIME, ISO_TIME
from calops.instant import CalendarInstant


def get_current_date() -> str:
    """Today's date as "YYYY-MM-DD"."""
    return ISO_DATE.format(CalendarInstant.now())


def get_current_time() -> str:
    """The current time as "HH:MM:SS"."""
    return ISO_TIME.format(CalendarInstant.now())


def get_current_date_time() -> str:
    """The current date and time as "YYYY-MM-DD HH:MM:SS"."""
    return ISO_DATE_TIME.format(CalendarInstant.now())
