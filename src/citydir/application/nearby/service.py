"""Application nearby – aggregate what is around a city area.

Accommodation, venues, upcoming events and news are requested concurrently.
Each section degrades to an empty list on its own when its request fails, so
one broken collection never blanks the whole panel.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Mapping, Protocol, Sequence

from citydir.domain.events import EventSummary
from citydir.domain.geo import DEFAULT_COORDINATES, Coordinates, area_for, transport_tips
from citydir.kernel.errors import FetchError
from citydir.observability.logging import get_logger

log = get_logger(__name__)

SECTION_LIMIT = 6
NEWS_LIMIT = 5


class JsonClient(Protocol):
    async def get_json(self, url: str, **kwargs: Any) -> Any: ...


@dataclasses.dataclass(frozen=True)
class NearbyData:
    area: str
    accommodations: tuple[Mapping[str, Any], ...] = ()
    venues: tuple[Mapping[str, Any], ...] = ()
    events: tuple[EventSummary, ...] = ()
    news: tuple[Mapping[str, Any], ...] = ()
    transport: Mapping[str, Any] = dataclasses.field(default_factory=dict)


def _records(body: Any) -> list[Mapping[str, Any]]:
    raw = body if isinstance(body, list) else (body.get("data") if isinstance(body, Mapping) else None)
    return [r for r in raw or [] if isinstance(r, Mapping)]


class NearbyService:
    def __init__(self, client: JsonClient, radius_km: float = 10.0) -> None:
        self._client = client
        self._radius_km = radius_km

    async def _section(self, resource: str, params: Sequence[tuple[str, str]]) -> list[Mapping[str, Any]]:
        try:
            body = await self._client.get_json(f"/{resource}", params=list(params))
        except FetchError as exc:
            log.warning("nearby.section_failed", resource=resource, error=exc.message)
            return []
        return _records(body)

    def _events(self, records: list[Mapping[str, Any]]) -> tuple[EventSummary, ...]:
        events: list[EventSummary] = []
        for record in records:
            try:
                events.append(EventSummary.from_dict(record))
            except (KeyError, TypeError, ValueError) as exc:
                log.warning("nearby.event_skipped", error=str(exc))
        return tuple(events)

    async def gather(self, area: str | None = None, coordinates: Coordinates | None = None) -> NearbyData:
        if area is None:
            area = area_for(coordinates or DEFAULT_COORDINATES)
        event_params = [("location", area), ("upcoming", "true"), ("limit", str(SECTION_LIMIT))]
        if coordinates is not None:
            event_params += [
                ("lat", str(coordinates.latitude)),
                ("lng", str(coordinates.longitude)),
                ("radius", str(self._radius_km)),
            ]

        accommodations, venues, events, news = await asyncio.gather(
            self._section("accommodation", [("location", area), ("limit", str(SECTION_LIMIT))]),
            self._section("venues", [("location", area), ("limit", str(SECTION_LIMIT))]),
            self._section("events", event_params),
            self._section("news", [("limit", str(NEWS_LIMIT))]),
        )
        return NearbyData(
            area=area,
            accommodations=tuple(accommodations),
            venues=tuple(venues),
            events=self._events(events),
            news=tuple(news),
            transport=transport_tips(area),
        )


__all__ = ["JsonClient", "NearbyData", "NearbyService"]
