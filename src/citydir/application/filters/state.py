"""Application filters – FilterState and FilterStateStore.

``FilterState`` is the user's current browse intent. It is never persisted; its
only durable form is the URL query string, see :meth:`FilterState.from_query_params`
and :func:`citydir.application.filters.query.build_query`.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from citydir.domain.taxonomy import EventType, PriceCategory, SortKey
from citydir.observability.logging import get_logger

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FilterState:
    search_term: str = ""
    event_type: EventType | None = None
    location: str = ""
    price_category: PriceCategory | None = None
    sort_key: SortKey = SortKey.DEFAULT
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")

    @property
    def has_active_filters(self) -> bool:
        return bool(self.event_type or self.location or self.price_category or self.search_term)

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> "FilterState":
        """Hydrate from URL query-string state (API key names).

        Values that do not parse fall back to the field default.
        """
        return cls(
            search_term=params.get("search", "") or "",
            event_type=_enum_or_none(EventType, params.get("type"), "type"),
            location=params.get("location", "") or "",
            price_category=_enum_or_none(PriceCategory, params.get("priceCategory"), "priceCategory"),
            sort_key=_sort_or_default(params.get("sort")),
            page=_page_or_first(params.get("page")),
        )


def _enum_or_none(enum_cls: Any, raw: str | None, key: str) -> Any:
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        log.warning("filters.ignored_param", key=key, value=raw)
        return None


def _sort_or_default(raw: str | None) -> SortKey:
    try:
        return SortKey.from_wire(raw)
    except ValueError:
        log.warning("filters.ignored_param", key="sort", value=raw)
        return SortKey.DEFAULT


def _page_or_first(raw: str | None) -> int:
    try:
        page = int(raw) if raw else 1
    except ValueError:
        return 1
    return max(page, 1)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(FilterState))


class FilterStateStore:
    """Holds the current :class:`FilterState` for one listing screen.

    Any mutation touching a field other than ``page`` sends the user back to
    page 1, even when ``page`` is passed in the same call.
    """

    def __init__(self, initial: FilterState | None = None) -> None:
        self._state = initial or FilterState()

    def get(self) -> FilterState:
        return self._state

    def set(self, **partial: Any) -> FilterState:
        unknown = set(partial) - _FIELD_NAMES
        if unknown:
            raise TypeError(f"unknown filter field(s): {', '.join(sorted(unknown))}")
        if any(name != "page" for name in partial):
            partial["page"] = 1
        self._state = dataclasses.replace(self._state, **partial)
        return self._state

    def clear(self) -> FilterState:
        self._state = FilterState()
        return self._state


__all__ = ["FilterState", "FilterStateStore"]
