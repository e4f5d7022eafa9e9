# streak_tracker/core/calendar.py
"""
Calendar-day normalization.

Every day comparison in the engine goes through `to_day`, so one policy
applies everywhere: a calendar day is the local date in the zone named by
``CALENDAR_TIMEZONE`` (UTC by default).
"""
from datetime import date, datetime, timedelta
from typing import Union
from zoneinfo import ZoneInfo

from streak_tracker.config import settings


def calendar_zone() -> ZoneInfo:
    return ZoneInfo(settings.CALENDAR_TIMEZONE)


def to_day(value: Union[date, datetime]) -> date:
    """
    - aware datetime → converted to the calendar zone, then truncated
    - naive datetime → assumed to be wall-clock time in the calendar zone
    - date → returned as is
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(calendar_zone())
        return value.date()
    return value


def today() -> date:
    return datetime.now(calendar_zone()).date()


def previous_day(day: date) -> date:
    return day - timedelta(days=1)
