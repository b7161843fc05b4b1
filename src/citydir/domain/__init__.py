"""Domain – event records, taxonomy and geo primitives."""
from citydir.domain.events import EventDetail, EventSummary
from citydir.domain.geo import BoundingBox, Coordinates, area_for, transport_tips
from citydir.domain.taxonomy import LOCATIONS, EventType, PriceCategory, SortKey

__all__ = [
    "LOCATIONS",
    "BoundingBox",
    "Coordinates",
    "EventDetail",
    "EventSummary",
    "EventType",
    "PriceCategory",
    "SortKey",
    "area_for",
    "transport_tips",
]
