"""Tests for the parsing primitives."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from calops.instant import CalendarInstant
from calops.parsing import instant_from_unix, parse_date, parse_time


def test_parse_iso_date():
    """Test that a plain ISO date parses to local midnight."""
    instant = parse_date("2024-05-15")

    assert instant is not None
    assert instant.to_datetime() == datetime(2024, 5, 15)


def test_parse_date_with_time():
    """Test that date-time strings keep their time of day."""
    iso = parse_date("2024-05-15T10:30:15")
    loose = parse_date("May 15 2024 10:30")

    assert iso is not None and iso.to_datetime() == datetime(2024, 5, 15, 10, 30, 15)
    assert loose is not None and loose.to_datetime() == datetime(2024, 5, 15, 10, 30)


def test_missing_fields_default_to_january_first_of_current_year(frozen_now):
    """Test that partial dates fill in from Jan 1 of the clock's year."""
    month_only = parse_date("May 2024")
    no_year = parse_date("March 3")

    assert month_only is not None
    assert month_only.to_datetime() == datetime(2024, 5, 1)
    assert no_year is not None
    assert no_year.to_datetime() == datetime(frozen_now.year, 3, 3)


@pytest.mark.parametrize(
    "value",
    ["not-a-date", "", "2024-13-45", "2024-02-30", "hello world", None, 20240515],
)
def test_parse_date_invalid_returns_none(value):
    """Test that unusable inputs yield None instead of raising."""
    assert parse_date(value) is None


def test_parse_date_logs_rejection(caplog):
    """Test that rejected input is logged at DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="calops.parsing"):
        parse_date("not-a-date")

    assert "Rejected date 'not-a-date'" in caplog.text


def test_parse_date_converts_offsets_to_local_time():
    """Test that numeric offsets and UTC markers are honoured."""
    offset = parse_date("2024-05-15T10:00:00+05:00")
    utc = parse_date("2024-05-15T10:00:00Z")

    east = timezone(timedelta(hours=5))
    expected_offset = datetime(2024, 5, 15, 10, tzinfo=east).astimezone()
    expected_utc = datetime(2024, 5, 15, 10, tzinfo=timezone.utc).astimezone()
    assert offset is not None
    assert offset.to_datetime() == expected_offset.replace(tzinfo=None)
    assert utc is not None
    assert utc.to_datetime() == expected_utc.replace(tzinfo=None)


def test_parse_date_rejects_unknown_zone_name(caplog):
    """Test that an unrecognised zone abbreviation is not silently dropped."""
    with caplog.at_level(logging.DEBUG, logger="calops.parsing"):
        assert parse_date("2024-05-15 10:00 XYZ") is None

    assert "Unknown timezone name 'XYZ'" in caplog.text


def test_parse_time_anchors_on_reference_date():
    """Test that time strings land on 2000-01-01."""
    instant = parse_time("23:30")

    assert instant is not None
    assert instant.to_datetime() == datetime(2000, 1, 1, 23, 30)


def test_parse_time_with_seconds_and_fraction():
    """Test seconds and fractional seconds."""
    instant = parse_time("23:30:15.250")

    assert instant is not None
    assert (instant.hour, instant.minute, instant.second) == (23, 30, 15)
    assert instant.millisecond == 250


@pytest.mark.parametrize("value", ["25:00", "noon", "", "10:61", None])
def test_parse_time_invalid_returns_none(value):
    """Test that unusable time strings yield None."""
    assert parse_time(value) is None


def test_unix_timestamp_uses_local_time():
    """Test that Unix seconds map onto the local wall clock."""
    instant = instant_from_unix(86_400)

    assert instant == CalendarInstant.from_datetime(datetime.fromtimestamp(86_400))


@pytest.mark.parametrize("value", ["abc", True, float("nan"), 10**20, None])
def test_unix_timestamp_invalid_returns_none(value):
    """Test that non-numeric or out-of-range timestamps yield None."""
    assert instant_from_unix(value) is None
