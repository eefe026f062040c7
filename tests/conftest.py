from datetime import datetime

import pytest

from calops import clock


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the wall clock to 2024-06-15 12:00:00 local time."""
    moment = datetime(2024, 6, 15, 12, 0, 0)
    monkeypatch.setattr(clock, "wall_clock", lambda: moment)
    return moment
