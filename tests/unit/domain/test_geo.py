"""Unit tests for domain geo helpers."""

from __future__ import annotations

import pytest

from citydir.domain.geo import (
    DEFAULT_AREA,
    BoundingBox,
    Coordinates,
    area_for,
    transport_tips,
)


class TestBoundingBox:
    def test_around_equator(self) -> None:
        box = BoundingBox.around(Coordinates(0.0, 0.0), 111.0)
        assert box.min_latitude == pytest.approx(-1.0)
        assert box.max_latitude == pytest.approx(1.0)
        assert box.min_longitude == pytest.approx(-1.0)
        assert box.max_longitude == pytest.approx(1.0)

    def test_longitude_widens_away_from_equator(self) -> None:
        box = BoundingBox.around(Coordinates(60.0, 0.0), 111.0)
        assert box.max_longitude == pytest.approx(2.0)

    def test_contains_inclusive(self) -> None:
        box = BoundingBox(0.0, 1.0, 0.0, 1.0)
        assert box.contains(Coordinates(1.0, 1.0))
        assert box.contains(Coordinates(0.5, 0.0))
        assert not box.contains(Coordinates(1.01, 0.5))

    def test_negative_radius_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox.around(Coordinates(0.0, 0.0), -1)


class TestAreaFor:
    def test_jomtien(self) -> None:
        assert area_for(Coordinates(12.8875, 100.8850)) == "jomtien"

    def test_first_match_wins(self) -> None:
        assert area_for(Coordinates(12.9275, 100.8775)) == "walking-street"

    def test_far_away_is_default(self) -> None:
        assert area_for(Coordinates(13.75, 100.50)) == DEFAULT_AREA


class TestTransportTips:
    def test_known_area(self) -> None:
        tips = transport_tips("jomtien")
        assert tips["baht_bus"] == "From Central Pattaya (20 THB)"
        assert "Family-friendly" in tips["tips"]

    def test_unknown_area_falls_back(self) -> None:
        assert transport_tips("pratumnak") == transport_tips(DEFAULT_AREA)

    def test_returns_copy(self) -> None:
        tips = transport_tips("naklua")
        tips["parking"] = "changed"
        assert transport_tips("naklua")["parking"] != "changed"
