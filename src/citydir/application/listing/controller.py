"""Application listing – ListingController.

Wires the listing pipeline for one screen::

    UI event -> FilterStateStore -> QueryBuilder -> EventSource.fetch
             -> ListingPage -> PaginationView / EventCards

Overlapping refreshes are allowed (the user may change filters faster than
the API answers). Each refresh takes a ticket from a monotonically increasing
counter, and a completion only lands in :attr:`view` if its ticket is still
the newest one issued.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from citydir.application.filters import DateFilter, FilterState, FilterStateStore, QueryBuilder, filter_by_date
from citydir.application.listing.view import EventCard, ListingViewState, PaginationView
from citydir.application.listing.watcher import NewEventsWatcher
from citydir.application.pagination import MIN_VISIBLE_PAGES, PageNavigator
from citydir.application.search import EventSource
from citydir.config.context import AppContext
from citydir.kernel.errors import FetchError
from citydir.kernel.time import Clock, SystemClock
from citydir.observability.correlation import CorrelationContext, RequestContext
from citydir.observability.logging import get_logger

log = get_logger(__name__)


class ListingController:
    """Owns the filter state and the visible listing of one screen."""

    def __init__(
        self,
        source: EventSource,
        store: FilterStateStore | None = None,
        builder: QueryBuilder | None = None,
        *,
        max_visible: int = 7,
        context: AppContext | None = None,
        clock: Clock | None = None,
        watcher: NewEventsWatcher | None = None,
    ) -> None:
        if max_visible < MIN_VISIBLE_PAGES:
            raise ValueError(f"max_visible must be >= {MIN_VISIBLE_PAGES}")
        self._source = source
        self._store = store or FilterStateStore()
        self._builder = builder or QueryBuilder()
        self._max_visible = max_visible
        self._context = context or AppContext()
        self._clock = clock or SystemClock()
        self._watcher = watcher
        self._view = ListingViewState()
        self._issued = 0
        self.date_filter = DateFilter.ALL

    @property
    def filters(self) -> FilterState:
        return self._store.get()

    @property
    def view(self) -> ListingViewState:
        if self.date_filter is DateFilter.ALL:
            return self._view
        visible = tuple(filter_by_date(self._view.items, self.date_filter, self._clock))
        return dataclasses.replace(self._view, items=visible)

    @property
    def context(self) -> AppContext:
        return self._context

    def cards(self) -> list[EventCard]:
        return self.view.cards(self._context)

    def pagination(self) -> PaginationView | None:
        if self._view.page is None:
            return None
        return PaginationView.for_page(self._view.page, self._max_visible)

    def share_query(self) -> str:
        """Query string reproducing the current filters (no ``limit``)."""
        return QueryBuilder().build(self._store.get()).to_query_string()

    async def refresh(self) -> bool:
        """Fetch the listing for the current filters.

        Returns ``False`` when the result was discarded because a newer
        refresh had been issued in the meantime.
        """
        self._issued += 1
        ticket = self._issued
        params = self._builder.build(self._store.get())
        CorrelationContext.set(RequestContext.new())
        self._view = dataclasses.replace(self._view, is_loading=True, error=None)
        log.debug("listing.refresh_started", ticket=ticket, query=dict(params))

        try:
            page = await self._source.fetch(params)
        except FetchError as exc:
            return self._fail(ticket, exc)
        except asyncio.CancelledError:
            if ticket == self._issued:
                self._view = dataclasses.replace(self._view, is_loading=False)
            raise
        except Exception as exc:  # noqa: BLE001
            # surfaced to the renderer as a failed fetch
            error = FetchError(f"Listing source failed: {exc}", code="source_error", cause=exc)
            return self._fail(ticket, error, exc_info=True)

        if ticket != self._issued:
            log.debug("listing.stale_response_dropped", ticket=ticket, latest=self._issued)
            return False
        self._view = ListingViewState(items=page.items, page=page, is_loading=False, error=None)
        if self._watcher is not None:
            self._watcher.remember(page)
        log.info(
            "listing.refreshed",
            ticket=ticket,
            items=len(page.items),
            total=page.total_count,
            page=page.page_number,
        )
        return True

    def _fail(self, ticket: int, error: FetchError, exc_info: bool = False) -> bool:
        if ticket != self._issued:
            log.debug("listing.stale_failure_dropped", ticket=ticket, latest=self._issued)
            return False
        log.error("listing.fetch_failed", ticket=ticket, exc_info=exc_info, **error.log_fields())
        self._view = ListingViewState(items=(), page=None, is_loading=False, error=error)
        return True

    async def update_filters(self, **partial: Any) -> bool:
        self._store.set(**partial)
        return await self.refresh()

    async def clear_filters(self) -> bool:
        self._store.clear()
        return await self.refresh()

    async def go_to_page(self, n: int) -> bool:
        """Jump to page *n* (clamped). No fetch when it is already current."""
        page = self._view.page
        nav = PageNavigator(self._store.get().page, page.page_count if page else 1)
        target = nav.go_to_page(n)
        if target is None:
            return False
        self._store.set(page=target)
        return await self.refresh()

    async def next_page(self) -> bool:
        return await self.go_to_page(self._store.get().page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self._store.get().page - 1)

    async def retry(self) -> bool:
        """User-initiated retry after an error; there is no automatic retry."""
        return await self.refresh()


__all__ = ["ListingController"]
