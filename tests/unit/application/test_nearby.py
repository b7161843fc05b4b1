"""Unit tests for NearbyService area aggregation."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import respx

from citydir.adapters.http import HttpxHttpClient
from citydir.application.nearby import NearbyData, NearbyService
from citydir.domain.geo import Coordinates, transport_tips
from citydir.kernel.errors import HttpError, NetworkError

_EVENT = {"_id": "evt-1", "title": "Beach Party", "date": "2025-11-15T20:00:00Z", "type": "nightlife"}


class FakeJsonClient:
    def __init__(self, responses: dict[str, Any]) -> None:
        self._responses = responses
        self.calls: list[tuple[str, dict[str, str]]] = []

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        self.calls.append((url, dict(kwargs.get("params") or [])))
        answer = self._responses.get(url, [])
        if isinstance(answer, Exception):
            raise answer
        return answer


class TestNearbyService:
    def test_gathers_every_section(self) -> None:
        client = FakeJsonClient(
            {
                "/accommodation": [{"name": "Hotel A"}],
                "/venues": {"data": [{"name": "Club B"}]},
                "/events": [_EVENT],
                "/news": [{"title": "Road works"}],
            }
        )
        data = asyncio.run(NearbyService(client).gather("jomtien"))

        assert isinstance(data, NearbyData)
        assert data.area == "jomtien"
        assert [a["name"] for a in data.accommodations] == ["Hotel A"]
        assert [v["name"] for v in data.venues] == ["Club B"]
        assert [e.id for e in data.events] == ["evt-1"]
        assert len(data.news) == 1
        assert data.transport == transport_tips("jomtien")

    def test_limits_and_upcoming_flag(self) -> None:
        client = FakeJsonClient({})
        asyncio.run(NearbyService(client).gather("naklua"))
        calls = dict(client.calls)
        assert calls["/accommodation"] == {"location": "naklua", "limit": "6"}
        assert calls["/venues"]["limit"] == "6"
        assert calls["/events"] == {"location": "naklua", "upcoming": "true", "limit": "6"}
        assert calls["/news"] == {"limit": "5"}

    def test_coordinates_pick_area_and_radius(self) -> None:
        client = FakeJsonClient({})
        data = asyncio.run(NearbyService(client, radius_km=3).gather(coordinates=Coordinates(12.8875, 100.8850)))
        assert data.area == "jomtien"
        events_params = dict(client.calls)["/events"]
        assert events_params["lat"] == "12.8875"
        assert events_params["lng"] == "100.885"
        assert events_params["radius"] == "3"

    def test_failed_section_is_empty(self) -> None:
        client = FakeJsonClient(
            {
                "/accommodation": HttpError(500),
                "/venues": NetworkError("down"),
                "/events": [_EVENT],
            }
        )
        data = asyncio.run(NearbyService(client).gather("jomtien"))
        assert data.accommodations == ()
        assert data.venues == ()
        assert len(data.events) == 1

    def test_malformed_event_skipped(self) -> None:
        image_map = {**_EVENT, "_id": "evt-2", "images": {"main": "x.jpg"}}
        client = FakeJsonClient({"/events": [_EVENT, {"title": "no id"}, image_map]})
        data = asyncio.run(NearbyService(client).gather("jomtien"))
        assert [e.id for e in data.events] == ["evt-1"]

    @respx.mock
    def test_over_http(self) -> None:
        respx.get(host="api.test", path="/accommodation").mock(return_value=httpx.Response(200, json=[{"name": "A"}]))
        respx.get(host="api.test", path="/venues").mock(return_value=httpx.Response(500))
        respx.get(host="api.test", path="/events").mock(return_value=httpx.Response(200, json={"data": [_EVENT]}))
        respx.get(host="api.test", path="/news").mock(return_value=httpx.Response(200, json=[]))

        async def run() -> NearbyData:
            async with HttpxHttpClient(base_url="http://api.test") as client:
                return await NearbyService(client).gather("central-pattaya")

        data = asyncio.run(run())
        assert len(data.accommodations) == 1
        assert data.venues == ()
        assert [e.title for e in data.events] == ["Beach Party"]
