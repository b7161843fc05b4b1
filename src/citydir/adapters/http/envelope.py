"""HTTP adapter – listing response envelopes.

``GET /events`` answers in one of two shapes:

* a bare JSON array of event records, or
* an object ``{"data": [...], "total": n, "page": p, "pages": k, ...}``.

The shape is decoded once, here, into :class:`BareList` or
:class:`PagedEnvelope`; :func:`to_listing_page` turns either into the single
:class:`ListingPage` the rest of the client works with.
"""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Mapping

from citydir.application.pagination import ListingPage
from citydir.domain.events import EventSummary
from citydir.kernel.errors import ParseError


@dataclasses.dataclass(frozen=True)
class BareList:
    records: tuple[Mapping[str, Any], ...]


@dataclasses.dataclass(frozen=True)
class PagedEnvelope:
    records: tuple[Mapping[str, Any], ...]
    total: int
    page: int
    pages: int | None
    limit: int | None = None


Envelope = BareList | PagedEnvelope


def _records(raw: Any) -> tuple[Mapping[str, Any], ...]:
    if not isinstance(raw, list) or not all(isinstance(r, Mapping) for r in raw):
        raise ParseError("Expected a list of event objects")
    return tuple(raw)


def _int_or_none(raw: Any) -> int | None:
    if raw is None or raw == "":
        return None
    return int(raw)


def decode_envelope(body: Any) -> Envelope:
    """Classify a decoded JSON body.

    Raises:
        ParseError: when the body matches neither shape.
    """
    if isinstance(body, list):
        return BareList(_records(body))
    if not isinstance(body, Mapping):
        raise ParseError(f"Unexpected listing payload of type {type(body).__name__}")
    if "data" not in body:
        raise ParseError("Listing payload has no data array")
    records = _records(body["data"] or [])
    if body.get("total") is None or (body.get("pages") is None and body.get("limit") is None):
        return BareList(records)
    try:
        limit = _int_or_none(body.get("limit"))
        page = _int_or_none(body.get("page"))
        if page is None:
            offset = _int_or_none(body.get("offset")) or 0
            page = offset // limit + 1 if limit else 1
        return PagedEnvelope(
            records=records,
            total=int(body["total"]),
            page=page,
            pages=_int_or_none(body.get("pages")),
            limit=limit,
        )
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Malformed pagination fields: {exc}", cause=exc) from exc


def _events(records: tuple[Mapping[str, Any], ...]) -> tuple[EventSummary, ...]:
    try:
        return tuple(EventSummary.from_dict(r) for r in records)
    except (KeyError, TypeError, ValueError) as exc:
        raise ParseError(f"Malformed event record: {exc}", cause=exc) from exc


def to_listing_page(envelope: Envelope, requested_limit: int | None = None) -> ListingPage[EventSummary]:
    """Normalise either envelope into a :class:`ListingPage`.

    A bare list is one unpaginated page. A paged envelope keeps the server's
    ``total``/``page``/``pages`` verbatim; its page size comes from the
    envelope's ``limit``, else *requested_limit*, else the number of records.
    """
    items = _events(envelope.records)
    match envelope:
        case BareList():
            return ListingPage(
                items=items,
                total_count=len(items),
                page_size=max(len(items), 1),
                page_number=1,
                page_count=1,
            )
        case PagedEnvelope(total=total, page=page, pages=pages, limit=limit):
            page_size = max(limit or requested_limit or len(items), 1)
            if pages is None:
                pages = math.ceil(total / page_size) if total > 0 else 0
            try:
                return ListingPage(
                    items=items,
                    total_count=total,
                    page_size=page_size,
                    page_number=page,
                    page_count=pages,
                )
            except ValueError as exc:
                raise ParseError(f"Inconsistent pagination fields: {exc}", cause=exc) from exc
    raise ParseError(f"Unknown envelope {envelope!r}")


def normalize_listing(body: Any, requested_limit: int | None = None) -> ListingPage[EventSummary]:
    return to_listing_page(decode_envelope(body), requested_limit)


__all__ = [
    "BareList",
    "Envelope",
    "PagedEnvelope",
    "decode_envelope",
    "normalize_listing",
    "to_listing_page",
]
