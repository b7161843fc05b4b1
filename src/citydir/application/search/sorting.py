"""Application search – local event ordering.

The server owns ordering in normal operation; this is the fallback used by the
in-memory catalogue and by callers re-sorting a page locally. Every order breaks
ties on ``id`` ascending so equal keys never shuffle between renders.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from citydir.domain.events import EventSummary
from citydir.domain.taxonomy import SortKey

_KEYS: dict[SortKey, Callable[[EventSummary], Any]] = {
    SortKey.DEFAULT: lambda e: (e.date, e.id),
    SortKey.DATE: lambda e: (e.date, e.id),
    SortKey.POPULAR: lambda e: (-e.view_count, e.id),
    SortKey.PRICE_ASC: lambda e: (e.price, e.id),
    SortKey.PRICE_DESC: lambda e: (-e.price, e.id),
}


def sort_events(events: Iterable[EventSummary], key: SortKey = SortKey.DEFAULT) -> list[EventSummary]:
    return sorted(events, key=_KEYS[key])


__all__ = ["sort_events"]
