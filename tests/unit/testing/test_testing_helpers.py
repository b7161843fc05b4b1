"""Unit tests for the shipped test helpers."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from decimal import Decimal

import pytest
from hypothesis import given

from citydir.application.pagination import ListingPage
from citydir.application.search import EventSource
from citydir.domain import EventDetail, EventSummary, EventType
from citydir.kernel.errors import HttpError
from citydir.testing import (
    EventSummaryBuilder,
    FakeClock,
    ScriptedEventSource,
    event_summary_strategy,
)


class TestEventSummaryBuilder:
    def test_defaults_build(self) -> None:
        event = EventSummaryBuilder().build()
        assert event.id == "evt-1"
        assert event.type is EventType.CONCERT

    def test_with_is_immutable(self) -> None:
        base = EventSummaryBuilder()
        free = base.free()
        assert base.attrs["price"] == Decimal("500")
        assert free.build().is_free

    def test_call_with_overrides(self) -> None:
        assert EventSummaryBuilder()(title="Other").title == "Other"

    def test_many(self) -> None:
        assert [e.id for e in EventSummaryBuilder().many(3, prefix="x")] == ["x-1", "x-2", "x-3"]

    def test_build_detail(self) -> None:
        detail = EventSummaryBuilder().build_detail(latitude=1.0, longitude=2.0)
        assert isinstance(detail, EventDetail)
        assert detail.has_coordinates


class TestFakeClock:
    def test_default_is_wednesday(self) -> None:
        assert FakeClock().today().weekday() == 2

    def test_custom(self) -> None:
        fixed = datetime(2026, 1, 1, tzinfo=UTC)
        assert FakeClock(fixed).now() == fixed


class TestScriptedEventSource:
    def test_is_event_source(self) -> None:
        assert isinstance(ScriptedEventSource(), EventSource)

    def test_replays_in_order(self) -> None:
        first = ListingPage.build(EventSummaryBuilder().many(1), total_count=1, page_size=12)
        source = ScriptedEventSource().script(first).script(HttpError(500))

        async def run() -> ListingPage[EventSummary]:
            return await source.fetch({"page": "1"})

        assert asyncio.run(run()) is first
        with pytest.raises(HttpError):
            asyncio.run(run())
        assert source.calls == [{"page": "1"}, {"page": "1"}]
        assert source.pending == 0

    def test_unscripted_is_empty(self) -> None:
        page = asyncio.run(ScriptedEventSource().fetch({}))
        assert page.items == ()


class TestStrategies:
    @given(event_summary_strategy())
    def test_generated_events_are_valid(self, event: EventSummary) -> None:
        assert event.id
        assert event.price >= 0
        assert event.date.tzinfo is not None
