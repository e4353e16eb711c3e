from __future__ import annotations

import calendar
from datetime import date, datetime, time


def month_range(year: int, month: int) -> tuple[datetime, datetime]:
    """First and last instant of a calendar month (both inclusive)."""
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime.combine(date(year, month, last_day), time.max)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
