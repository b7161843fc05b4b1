"""Application listing – NewEventsWatcher.

Polled by the UI on an interval; flags that the newest event differs from the
one at the top of the listing the user is looking at.
"""
from __future__ import annotations

from typing import Protocol

from citydir.application.pagination import ListingPage
from citydir.domain.events import EventSummary
from citydir.kernel.errors import FetchError
from citydir.observability.logging import get_logger

log = get_logger(__name__)


class LatestEventLookup(Protocol):
    async def latest_event_id(self) -> str | None: ...


class NewEventsWatcher:
    def __init__(self, api: LatestEventLookup) -> None:
        self._api = api
        self._latest_seen: str | None = None
        self.new_events_available = False

    @property
    def latest_seen(self) -> str | None:
        return self._latest_seen

    def remember(self, page: ListingPage[EventSummary]) -> None:
        """Record the top event of a freshly loaded first page."""
        if page.page_number == 1 and page.items:
            self._latest_seen = page.items[0].id
            self.new_events_available = False

    async def check(self) -> bool:
        if self._latest_seen is None:
            return False
        try:
            latest = await self._api.latest_event_id()
        except FetchError as exc:
            log.warning("events.new_check_failed", error=exc.message)
            return False
        if latest is not None and latest != self._latest_seen:
            self.new_events_available = True
        return self.new_events_available

    def dismiss(self) -> None:
        self.new_events_available = False


__all__ = ["LatestEventLookup", "NewEventsWatcher"]
