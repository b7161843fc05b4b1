"""HTTP adapter – EventsApi, the listing fetcher for ``/events``."""
from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

from citydir.adapters.http.client import HttpxHttpClient
from citydir.adapters.http.envelope import normalize_listing
from citydir.application.filters import QueryParameters
from citydir.application.pagination import ListingPage
from citydir.domain.events import EventDetail, EventSummary
from citydir.kernel.errors import FetchError, HttpError, ParseError
from citydir.observability.logging import get_logger

log = get_logger(__name__)


def _event_path(event_id: str) -> str:
    return f"/events/{quote(event_id, safe='')}"


class EventsApi:
    """Read access to the directory's event collection.

    :meth:`fetch` raises :class:`FetchError` subclasses and leaves turning them
    into UI state to the caller. The side-channel helpers
    (:meth:`increment_view`, :meth:`related_events`, :meth:`featured_events`)
    log and swallow failures so they can never block the primary content.
    """

    def __init__(self, client: HttpxHttpClient, page_size: int | None = None) -> None:
        self._client = client
        self._page_size = page_size

    async def fetch(self, params: Mapping[str, str]) -> ListingPage[EventSummary]:
        requested = int(params["limit"]) if "limit" in params else self._page_size
        body = await self._client.get_json("/events", params=list(params.items()))
        page = normalize_listing(body, requested)
        log.debug(
            "events.fetched",
            query=dict(params),
            items=len(page.items),
            total=page.total_count,
            page=page.page_number,
        )
        return page

    async def get_event(self, event_id: str) -> EventDetail | None:
        """Return the full record, or ``None`` when the API answers 404."""
        try:
            body = await self._client.get_json(_event_path(event_id))
        except HttpError as exc:
            if exc.status == 404:
                return None
            raise
        payload: Any = body.get("data", body) if isinstance(body, Mapping) else body
        if not isinstance(payload, Mapping):
            raise ParseError(f"Unexpected event payload for {event_id!r}")
        try:
            return EventDetail.from_dict(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed event record {event_id!r}: {exc}", cause=exc) from exc

    async def increment_view(self, event_id: str) -> None:
        """Fire-and-forget view counter bump."""
        try:
            await self._client.post(f"{_event_path(event_id)}/view")
        except FetchError as exc:
            log.warning("events.view_increment_failed", event_id=event_id, error=exc.message)

    async def related_events(self, event: EventSummary, limit: int = 3) -> list[EventSummary]:
        """Other events of the same type, excluding *event* itself."""
        params = QueryParameters([("type", event.type.value), ("limit", str(limit + 1))])
        try:
            page = await self.fetch(params)
        except FetchError as exc:
            log.warning("events.related_failed", event_id=event.id, error=exc.message)
            return []
        return [e for e in page.items if e.id != event.id][:limit]

    async def featured_events(self, limit: int = 6) -> list[EventSummary]:
        params = QueryParameters([("featured", "true"), ("sort", "popular"), ("limit", str(limit))])
        try:
            page = await self.fetch(params)
        except FetchError as exc:
            log.warning("events.featured_failed", error=exc.message)
            return []
        return list(page.items)

    async def latest_event_id(self) -> str | None:
        page = await self.fetch(QueryParameters([("limit", "1"), ("sort", "date")]))
        return page.items[0].id if page.items else None


__all__ = ["EventsApi"]
