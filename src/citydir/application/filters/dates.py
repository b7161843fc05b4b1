"""Application filters – quick date filters (today / weekend / this week)."""
from __future__ import annotations

from datetime import datetime, time, timedelta
from enum import Enum
from typing import Iterable

from citydir.domain.events import EventSummary
from citydir.kernel.time import Clock

SATURDAY = 5


class DateFilter(str, Enum):
    ALL = "all"
    TODAY = "today"
    THIS_WEEKEND = "this-weekend"
    THIS_WEEK = "this-week"


def date_range(date_filter: DateFilter, clock: Clock) -> tuple[datetime, datetime] | None:
    """Half-open ``[start, end)`` window for *date_filter*, ``None`` for ``ALL``.

    Boundaries are midnights in the clock's timezone.
    """
    if date_filter is DateFilter.ALL:
        return None
    now = clock.now()
    today = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    next_monday = today + timedelta(days=7 - today.weekday())
    if date_filter is DateFilter.TODAY:
        return today, today + timedelta(days=1)
    if date_filter is DateFilter.THIS_WEEK:
        return today, next_monday
    # weekend: Saturday 00:00 to Monday 00:00; on a weekend day start today
    if today.weekday() >= SATURDAY:
        return today, next_monday
    return next_monday - timedelta(days=2), next_monday


def filter_by_date(
    events: Iterable[EventSummary],
    date_filter: DateFilter,
    clock: Clock,
) -> list[EventSummary]:
    window = date_range(date_filter, clock)
    if window is None:
        return list(events)
    start, end = window
    return [e for e in events if start <= e.date < end]


__all__ = ["DateFilter", "date_range", "filter_by_date"]
