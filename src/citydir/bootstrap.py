"""Composition root – build the directory client from settings.

::

    async with open_directory(load_settings()) as directory:
        await directory.listing.refresh()
"""
from __future__ import annotations

import contextlib
import dataclasses
from typing import AsyncIterator

from citydir.adapters.http import EventsApi, HttpxHttpClient
from citydir.application.filters import QueryBuilder
from citydir.application.listing import ListingController, NewEventsWatcher
from citydir.application.nearby import NearbyService
from citydir.application.notifications import NotificationRegistrar
from citydir.config import AppContext, DirectorySettings
from citydir.domain import EventSummary
from citydir.observability.logging import JsonLoggerFactory


@dataclasses.dataclass
class Directory:
    settings: DirectorySettings
    context: AppContext
    client: HttpxHttpClient
    events: EventsApi
    listing: ListingController
    watcher: NewEventsWatcher
    nearby: NearbyService
    notifications: NotificationRegistrar

    async def related(self, event: EventSummary) -> list[EventSummary]:
        return await self.events.related_events(event, self.settings.related_limit)


@contextlib.asynccontextmanager
async def open_directory(
    settings: DirectorySettings,
    context: AppContext | None = None,
    *,
    configure_logging: bool = True,
) -> AsyncIterator[Directory]:
    if configure_logging:
        JsonLoggerFactory.configure(level=settings.log_level.upper())
    context = context or AppContext.from_settings(settings)
    async with HttpxHttpClient.for_settings(settings, context) as client:
        events = EventsApi(client, settings.page_size)
        watcher = NewEventsWatcher(events)
        yield Directory(
            settings=settings,
            context=context,
            client=client,
            events=events,
            listing=ListingController(
                events,
                builder=QueryBuilder(page_size=settings.page_size),
                max_visible=settings.max_visible_pages,
                context=context,
                watcher=watcher,
            ),
            watcher=watcher,
            nearby=NearbyService(client, settings.nearby_radius_km),
            notifications=NotificationRegistrar(client),
        )


__all__ = ["Directory", "open_directory"]
