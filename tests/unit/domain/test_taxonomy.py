"""Unit tests for domain taxonomy enums."""

from __future__ import annotations

import pytest

from citydir.domain import EventType, PriceCategory, SortKey


class TestSortKey:
    @pytest.mark.parametrize(
        "key, wire",
        [
            (SortKey.DEFAULT, None),
            (SortKey.POPULAR, "popular"),
            (SortKey.DATE, "date"),
            (SortKey.PRICE_ASC, "price-low"),
            (SortKey.PRICE_DESC, "price-high"),
        ],
    )
    def test_wire_value(self, key: SortKey, wire: str | None) -> None:
        assert key.wire_value == wire

    def test_from_wire_accepts_api_spelling(self) -> None:
        assert SortKey.from_wire("price-low") is SortKey.PRICE_ASC

    def test_from_wire_accepts_ui_spelling(self) -> None:
        assert SortKey.from_wire("price-desc") is SortKey.PRICE_DESC

    def test_from_wire_empty(self) -> None:
        assert SortKey.from_wire(None) is SortKey.DEFAULT
        assert SortKey.from_wire("") is SortKey.DEFAULT

    def test_from_wire_unknown(self) -> None:
        with pytest.raises(ValueError):
            SortKey.from_wire("alphabetical")


class TestLabels:
    def test_every_event_type_has_label(self) -> None:
        assert all(t.label for t in EventType)
        assert EventType.MARKET.label == "Markets"

    def test_price_category_label(self) -> None:
        assert PriceCategory.PREMIUM.label == "Premium (฿2000+)"
