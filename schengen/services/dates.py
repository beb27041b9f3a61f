"""Calendar-day helpers. All compliance math works on dates, never on timestamps."""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Iterator

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: date | datetime | str) -> date:
    """Return the calendar day for a date, datetime or ISO-8601 string.

    Aware datetimes are converted to UTC before the day is taken, so the same
    instant always maps to the same day. Raises ValueError on blank or
    unparseable input; callers translate that into their own error kind.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a date or ISO-8601 string, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise ValueError("date string is empty")
    if _DATE_ONLY.match(text):
        return date.fromisoformat(text)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return parse_calendar_date(datetime.fromisoformat(text))


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def days_between(later: date, earlier: date) -> int:
    return (later - earlier).days


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end, both inclusive."""
    current = start
    one = timedelta(days=1)
    while current <= end:
        yield current
        current += one


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    if month == 12:
        return first, date(year, 12, 31)
    return first, date(year, month + 1, 1) - timedelta(days=1)
