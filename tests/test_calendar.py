from datetime import date, datetime, timezone

import pytest

from streak_tracker.config import settings
from streak_tracker.core.calendar import previous_day, to_day


@pytest.fixture
def new_york(monkeypatch):
    monkeypatch.setattr(settings, "CALENDAR_TIMEZONE", "America/New_York")


def test_date_passes_through():
    assert to_day(date(2026, 3, 1)) == date(2026, 3, 1)


def test_timestamps_on_the_same_day_collapse():
    morning = datetime(2026, 3, 1, 0, 5, tzinfo=timezone.utc)
    night = datetime(2026, 3, 1, 23, 55, tzinfo=timezone.utc)
    assert to_day(morning) == to_day(night) == date(2026, 3, 1)


def test_aware_datetime_uses_calendar_zone(new_york):
    # 03:00 UTC is still the previous evening in New York
    assert to_day(datetime(2026, 3, 2, 3, 0, tzinfo=timezone.utc)) == date(2026, 3, 1)


def test_naive_datetime_is_wall_clock(new_york):
    assert to_day(datetime(2026, 3, 2, 3, 0)) == date(2026, 3, 2)


def test_previous_day_crosses_month_and_leap_day():
    assert previous_day(date(2028, 3, 1)) == date(2028, 2, 29)
    assert previous_day(date(2026, 1, 1)) == date(2025, 12, 31)
