"""Wall-clock access.

Every "now"-dependent operation reads the clock through wall_clock() so
tests can pin it with monkeypatch.
"""

from datetime import datetime


def wall_clock() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()
