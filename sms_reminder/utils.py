from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo


def tomorrow(tz: ZoneInfo, today: Optional[date] = None) -> date:
    if today is None:
        today = datetime.now(tz).date()
    return today + timedelta(days=1)


def day_bounds(day: date, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


def parse_gcal_start(start: dict, tz: ZoneInfo) -> datetime:
    """Return the start of a Calendar API event as a datetime.

    Timed events are converted to ``tz``; all-day events start at local
    midnight of their date.
    """
    if "dateTime" in start:
        value = start["dateTime"]
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value).astimezone(tz)
    return datetime.combine(date.fromisoformat(start["date"]), time.min, tzinfo=tz)


def normalize_phone_number(number: str) -> str:
    return number.replace(" ", "")
