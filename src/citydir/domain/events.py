"""Domain records – EventSummary and EventDetail as served by the directory API.

Records are parsed from the API's JSON shape with :meth:`EventSummary.from_dict`
and never mutated afterwards; the listing pipeline only filters and orders them.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Self

from citydir.domain.taxonomy import EventType, PriceCategory


def _parse_datetime(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw:
        value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    else:
        raise ValueError(f"invalid event date {raw!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def _parse_price(raw: Any) -> Decimal:
    if raw is None or raw == "":
        return Decimal("0")
    try:
        price = Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValueError(f"invalid price {raw!r}") from exc
    if price < 0:
        raise ValueError("price cannot be negative")
    return price


def _parse_event_type(raw: Any) -> EventType:
    try:
        return EventType(str(raw or "").lower())
    except ValueError:
        return EventType.OTHER


def _parse_price_category(raw: Any) -> PriceCategory | None:
    if not raw:
        return None
    try:
        return PriceCategory(raw)
    except ValueError:
        return None


def _image_ref(payload: Mapping[str, Any]) -> str | None:
    if payload.get("imageUrl"):
        return str(payload["imageUrl"])
    images = payload.get("images") or []
    if images:
        return str(images[0])
    return None


@dataclasses.dataclass(frozen=True)
class EventSummary:
    """One listing record as displayed in a card."""

    id: str
    title: str
    date: datetime
    location: str
    type: EventType
    price: Decimal
    image_ref: str | None = None
    view_count: int = 0
    featured: bool = False
    description: str = ""
    price_category: PriceCategory | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("event id must be non-empty")
        if self.price < 0:
            raise ValueError("price cannot be negative")
        if self.view_count < 0:
            raise ValueError("view count cannot be negative")

    @property
    def is_free(self) -> bool:
        return self.price == 0

    @classmethod
    def _fields_from_dict(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        event_id = payload.get("_id") or payload.get("id")
        if not event_id:
            raise ValueError("event record has no id")
        if "title" not in payload:
            raise ValueError(f"event {event_id!r} has no title")
        return {
            "id": str(event_id),
            "title": str(payload["title"]),
            "date": _parse_datetime(payload.get("date")),
            "location": str(payload.get("location") or ""),
            "type": _parse_event_type(payload.get("type")),
            "price": _parse_price(payload.get("price")),
            "image_ref": _image_ref(payload),
            "view_count": int(payload.get("views") or 0),
            "featured": bool(payload.get("featured", False)),
            "description": str(payload.get("description") or ""),
            "price_category": _parse_price_category(payload.get("priceCategory")),
            "tags": tuple(str(t) for t in payload.get("tags") or ()),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Self:
        """Build a record from the API's JSON object.

        Raises:
            ValueError: when a required field is missing or out of range.
        """
        return cls(**cls._fields_from_dict(payload))


def _optional_float(raw: Any) -> float | None:
    return None if raw is None or raw == "" else float(raw)


def _optional_int(raw: Any) -> int | None:
    return None if raw is None or raw == "" else int(raw)


@dataclasses.dataclass(frozen=True)
class EventDetail(EventSummary):
    """Full event record returned by ``GET /events/{id}``."""

    latitude: float | None = None
    longitude: float | None = None
    organizer: str | None = None
    ticket_url: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    website: str | None = None
    capacity: int | None = None
    attendees: int | None = None
    status: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def _fields_from_dict(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        fields = super()._fields_from_dict(payload)
        fields.update(
            latitude=_optional_float(payload.get("latitude")),
            longitude=_optional_float(payload.get("longitude")),
            organizer=payload.get("organizer"),
            ticket_url=payload.get("ticketUrl"),
            contact_email=payload.get("contactEmail"),
            contact_phone=payload.get("contactPhone"),
            website=payload.get("website"),
            capacity=_optional_int(payload.get("capacity")),
            attendees=_optional_int(payload.get("attendees")),
            status=payload.get("status"),
        )
        return fields


__all__ = ["EventDetail", "EventSummary"]
