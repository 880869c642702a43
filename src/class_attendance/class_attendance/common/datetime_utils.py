from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import WEEKDAY_NAMES


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start through end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
