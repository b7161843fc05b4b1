"""Domain geo – coordinates, bounding-box approximation and named city areas.

Nearby lookups use a flat bounding box instead of great-circle distance: one
degree of latitude is taken as 111 km, and longitude degrees shrink with
``cos(latitude)``. That is accurate enough at city scale.
"""
from __future__ import annotations

import dataclasses
import math
from typing import Any

KM_PER_DEGREE = 111.0


@dataclasses.dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


DEFAULT_COORDINATES = Coordinates(latitude=12.9236, longitude=100.8825)
DEFAULT_AREA = "central-pattaya"


@dataclasses.dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned latitude/longitude box (edges inclusive)."""

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @classmethod
    def around(cls, center: Coordinates, radius_km: float) -> "BoundingBox":
        if radius_km < 0:
            raise ValueError("radius_km must be >= 0")
        lat_delta = radius_km / KM_PER_DEGREE
        lng_delta = radius_km / (KM_PER_DEGREE * math.cos(math.radians(center.latitude)))
        return cls(
            min_latitude=center.latitude - lat_delta,
            max_latitude=center.latitude + lat_delta,
            min_longitude=center.longitude - lng_delta,
            max_longitude=center.longitude + lng_delta,
        )

    def contains(self, point: Coordinates) -> bool:
        return (
            self.min_latitude <= point.latitude <= self.max_latitude
            and self.min_longitude <= point.longitude <= self.max_longitude
        )


@dataclasses.dataclass(frozen=True)
class Area:
    name: str
    center: Coordinates
    radius: float  # degrees


# Checked in order; the first match wins.
AREAS: tuple[Area, ...] = (
    Area("walking-street", Coordinates(12.9275, 100.8775), 0.01),
    Area("jomtien", Coordinates(12.8875, 100.8850), 0.02),
    Area("naklua", Coordinates(12.9650, 100.8750), 0.02),
    Area("pratumnak", Coordinates(12.9100, 100.8800), 0.015),
    Area("central-pattaya", Coordinates(12.9236, 100.8825), 0.02),
)


def area_for(coordinates: Coordinates) -> str:
    """Return the named area containing *coordinates*, or the city centre."""
    for area in AREAS:
        distance = math.hypot(
            coordinates.latitude - area.center.latitude,
            coordinates.longitude - area.center.longitude,
        )
        if distance < area.radius:
            return area.name
    return DEFAULT_AREA


_TRANSPORT: dict[str, dict[str, Any]] = {
    "walking-street": {
        "baht_bus": "Main route along Beach Road (10 THB)",
        "motorbike_taxi": "Available 24/7 (50-100 THB)",
        "parking": "Limited street parking, use nearby malls",
        "tips": ("Busy at night", "Walking is best option", "Taxis charge premium"),
    },
    "jomtien": {
        "baht_bus": "From Central Pattaya (20 THB)",
        "motorbike_taxi": "Beach stands available (60-120 THB)",
        "parking": "Beach Road parking (20 THB/hour)",
        "tips": ("Quieter than central", "Good beach access", "Family-friendly"),
    },
    "central-pattaya": {
        "baht_bus": "Hub for all routes (10 THB)",
        "motorbike_taxi": "Multiple stands (40-80 THB)",
        "parking": "Central Festival free with purchase",
        "tips": ("Best connectivity", "Shopping nearby", "Easy access everywhere"),
    },
    "naklua": {
        "baht_bus": "North Pattaya route (10 THB)",
        "motorbike_taxi": "Available near main road (50-100 THB)",
        "parking": "Street parking available",
        "tips": ("Local vibe", "Seafood restaurants", "Less touristy"),
    },
}


def transport_tips(area: str) -> dict[str, Any]:
    """Static getting-around info for *area*; unknown areas get the centre's."""
    return dict(_TRANSPORT.get(area) or _TRANSPORT[DEFAULT_AREA])


__all__ = [
    "AREAS",
    "DEFAULT_AREA",
    "DEFAULT_COORDINATES",
    "Area",
    "BoundingBox",
    "Coordinates",
    "area_for",
    "transport_tips",
]
