from .arithmetic import (
    DurationUnit,
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_time_offset,
    add_years,
    shift,
    subtract_days,
    subtract_hours,
    subtract_minutes,
    subtract_months,
    subtract_seconds,
    subtract_years,
    transform_date,
    transform_unix,
)
from .current import get_current_date, get_current_date_time, get_current_time
from .formats import (
    DEFAULT_DATE_LAYOUT,
    DEFAULT_TIME_LAYOUT,
    DateLayout,
    TemplateFormat,
    TimeLayout,
)
from .instant import CalendarInstant
from .queries import (
    calculate_days_difference,
    get_age,
    get_day_of_week,
    get_days_between,
    get_days_in_month,
    get_days_remaining_in_month,
    get_days_until_future_date,
    get_end_of_week,
    get_months_between,
    get_quarter_of_year,
    get_start_of_week,
    get_week_number,
    get_years_between,
    is_leap_year,
    is_same_date,
    is_valid_date,
)
from .util import INVALID_DATE, INVALID_NUMBER, INVALID_TIME, INVALID_UNIX

__all__ = [
    "CalendarInstant",
    "DurationUnit",
    "DateLayout",
    "TimeLayout",
    "TemplateFormat",
    "DEFAULT_DATE_LAYOUT",
    "DEFAULT_TIME_LAYOUT",
    "INVALID_DATE",
    "INVALID_TIME",
    "INVALID_UNIX",
    "INVALID_NUMBER",
    "transform_date",
    "transform_unix",
    "shift",
    "add_days",
    "subtract_days",
    "add_months",
    "subtract_months",
    "add_years",
    "subtract_years",
    "add_hours",
    "subtract_hours",
    "add_minutes",
    "subtract_minutes",
    "add_seconds",
    "subtract_seconds",
    "add_time_offset",
    "is_leap_year",
    "get_week_number",
    "get_days_in_month",
    "get_days_remaining_in_month",
    "get_age",
    "get_days_until_future_date",
    "calculate_days_difference",
    "get_days_between",
    "get_quarter_of_year",
    "get_day_of_week",
    "get_months_between",
    "get_years_between",
    "get_start_of_week",
    "get_end_of_week",
    "is_same_date",
    "is_valid_date",
    "get_current_date",
    "get_current_time",
    "get_current_date_time",
]
