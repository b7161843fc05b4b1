"""Application search – EventSource protocol and InMemoryEventCatalog."""
from __future__ import annotations

import math
from typing import Iterable, Mapping, Protocol, runtime_checkable

from citydir.application.pagination import ListingPage
from citydir.application.search.sorting import sort_events
from citydir.domain.events import EventDetail, EventSummary
from citydir.domain.geo import BoundingBox, Coordinates
from citydir.domain.taxonomy import SortKey

DEFAULT_LIMIT = 12
DEFAULT_RADIUS_KM = 10.0


def _sort_key(raw: str | None) -> SortKey:
    # unrecognised orders fall back to date ascending, as the API does
    try:
        return SortKey.from_wire(raw)
    except ValueError:
        return SortKey.DATE


@runtime_checkable
class EventSource(Protocol):
    """Anything that answers a listing query with a normalised page."""

    async def fetch(self, params: Mapping[str, str]) -> ListingPage[EventSummary]: ...


class InMemoryEventCatalog:
    """Listing source over an in-memory list, mirroring the API's query semantics.

    Recognised keys: ``type``, ``location``, ``priceCategory``, ``search``,
    ``featured``, ``lat``/``lng``/``radius``, ``sort``, ``page``, ``limit``.
    Unknown keys are ignored.
    """

    def __init__(self, events: Iterable[EventSummary]) -> None:
        self._events = list(events)

    def __len__(self) -> int:
        return len(self._events)

    def add(self, event: EventSummary) -> None:
        self._events.append(event)

    def _matches(self, event: EventSummary, params: Mapping[str, str]) -> bool:
        if params.get("type") and event.type.value != params["type"].lower():
            return False
        if params.get("location") and event.location.lower() != params["location"].lower():
            return False
        if params.get("priceCategory"):
            category = event.price_category.value if event.price_category else None
            if category != params["priceCategory"]:
                return False
        if params.get("featured") and event.featured != (params["featured"] == "true"):
            return False
        if params.get("search"):
            term = params["search"].lower()
            haystack = (event.title, event.description, *event.tags)
            if not any(term in text.lower() for text in haystack):
                return False
        return True

    def _within(self, events: list[EventSummary], params: Mapping[str, str]) -> list[EventSummary]:
        if not (params.get("lat") and params.get("lng")):
            return events
        center = Coordinates(float(params["lat"]), float(params["lng"]))
        box = BoundingBox.around(center, float(params.get("radius") or DEFAULT_RADIUS_KM))
        return [
            e for e in events
            if isinstance(e, EventDetail)
            and e.has_coordinates
            and box.contains(Coordinates(e.latitude, e.longitude))  # type: ignore[arg-type]
        ]

    async def fetch(self, params: Mapping[str, str]) -> ListingPage[EventSummary]:
        results = [e for e in self._events if self._matches(e, params)]
        results = self._within(results, params)
        results = sort_events(results, _sort_key(params.get("sort")))

        limit = max(int(params.get("limit") or DEFAULT_LIMIT), 1)
        page = max(int(params.get("page") or 1), 1)
        page = min(page, max(math.ceil(len(results) / limit), 1))
        start = (page - 1) * limit
        return ListingPage.build(
            results[start:start + limit],
            total_count=len(results),
            page_size=limit,
            page_number=page,
        )

    async def get(self, event_id: str) -> EventSummary | None:
        return next((e for e in self._events if e.id == event_id), None)


__all__ = ["EventSource", "InMemoryEventCatalog"]
