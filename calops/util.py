"""Utility constants for calops.

Time unit constants represent durations in milliseconds, the resolution
CalendarInstant stores internally.
"""

from datetime import date

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000

# Placeholder date that time-of-day strings are anchored to before parsing
REFERENCE_DATE = date(2000, 1, 1)

# Sentinel results returned instead of raising
INVALID_DATE = "Invalid date format"
INVALID_TIME = "Invalid time format"
INVALID_UNIX = "Invalid Unix timestamp"
INVALID_NUMBER = -1
