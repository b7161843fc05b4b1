"""Domain taxonomy – event categories, price bands, sort keys and areas."""
from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    CONCERT = "concert"
    FESTIVAL = "festival"
    NIGHTLIFE = "nightlife"
    SPORTS = "sports"
    MARKET = "market"
    CULTURAL = "cultural"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _EVENT_TYPE_LABELS[self]


_EVENT_TYPE_LABELS: dict[EventType, str] = {
    EventType.CONCERT: "Concerts",
    EventType.FESTIVAL: "Festivals",
    EventType.NIGHTLIFE: "Nightlife",
    EventType.SPORTS: "Sports",
    EventType.MARKET: "Markets",
    EventType.CULTURAL: "Cultural",
    EventType.OTHER: "Other",
}


class PriceCategory(str, Enum):
    FREE = "free"
    BUDGET = "budget"
    MODERATE = "moderate"
    PREMIUM = "premium"

    @property
    def label(self) -> str:
        return _PRICE_CATEGORY_LABELS[self]


_PRICE_CATEGORY_LABELS: dict[PriceCategory, str] = {
    PriceCategory.FREE: "Free",
    PriceCategory.BUDGET: "Budget (฿0-500)",
    PriceCategory.MODERATE: "Moderate (฿500-2000)",
    PriceCategory.PREMIUM: "Premium (฿2000+)",
}


class SortKey(str, Enum):
    """Listing order selected in the UI.

    The API speaks a different vocabulary for the price orders, see
    :attr:`wire_value`.
    """

    DEFAULT = "default"
    POPULAR = "popular"
    DATE = "date"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @property
    def wire_value(self) -> str | None:
        """Value of the ``sort`` query parameter, ``None`` for the server default."""
        return _SORT_WIRE_VALUES[self]

    @classmethod
    def from_wire(cls, value: str | None) -> "SortKey":
        """Parse either the UI spelling or the API spelling of a sort key."""
        if not value:
            return cls.DEFAULT
        for key, wire in _SORT_WIRE_VALUES.items():
            if value == wire:
                return key
        return cls(value)


_SORT_WIRE_VALUES: dict[SortKey, str | None] = {
    SortKey.DEFAULT: None,
    SortKey.POPULAR: "popular",
    SortKey.DATE: "date",
    SortKey.PRICE_ASC: "price-low",
    SortKey.PRICE_DESC: "price-high",
}


LOCATIONS: tuple[str, ...] = (
    "Walking Street",
    "Jomtien Beach",
    "Naklua",
    "Beach Road",
    "Central Pattaya",
    "North Pattaya",
    "South Pattaya",
    "Pratumnak Hill",
)


__all__ = ["LOCATIONS", "EventType", "PriceCategory", "SortKey"]
