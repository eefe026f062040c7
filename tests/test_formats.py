"""Tests for the formatting code paths."""

import pytest

from calops import CalendarInstant, DateLayout, TemplateFormat, TimeLayout
from calops.formats import ISO_DATE, ISO_DATE_TIME, format_date, format_time


@pytest.fixture
def instant() -> CalendarInstant:
    return CalendarInstant.from_fields(2024, 4, 15, 9, 5, 7)


def test_default_date_layout(instant):
    """Test that the default numeric layout is year-month-day."""
    assert format_date(instant) == "2024-05-15"


def test_custom_date_layout(instant):
    """Test reordering fields and changing the separator."""
    layout = DateLayout(order=("day", "month", "year"), separator="/")
    assert format_date(instant, layout) == "15/05/2024"


def test_date_layout_requires_each_field_once():
    """Test that layouts naming a field twice are rejected."""
    with pytest.raises(ValueError, match="must name each field once"):
        DateLayout(order=("year", "year", "day"))  # type: ignore[arg-type]


def test_time_with_and_without_seconds(instant):
    """Test 2-digit time fields."""
    assert format_time(instant) == "09:05"
    assert format_time(instant, seconds=True) == "09:05:07"
    assert format_time(instant, layout=TimeLayout(separator=".")) == "09.05"


def test_template_format(instant):
    """Test literal placeholders."""
    assert ISO_DATE.format(instant) == "2024-05-15"
    assert ISO_DATE_TIME.format(instant) == "2024-05-15 09:05:07"
    assert TemplateFormat("DD/MM/YYYY HH:mm").format(instant) == "15/05/2024 09:05"


def test_paths_diverge_for_short_years():
    """Test that only the template path pads the year to four digits."""
    early = CalendarInstant.from_fields(999, 0, 5)

    assert format_date(early) == "999-01-05"
    assert ISO_DATE.format(early) == "0999-01-05"
