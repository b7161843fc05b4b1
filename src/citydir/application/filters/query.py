"""Application filters – QueryParameters and the query builder."""
from __future__ import annotations

from typing import Iterable, Iterator, Mapping
from urllib.parse import urlencode

from citydir.application.filters.state import FilterState

DEFAULT_STATE = FilterState()


class QueryParameters(Mapping[str, str]):
    """Immutable, ordered ``str -> str`` mapping sent as the listing query.

    Two instances are equal only if they hold the same pairs in the same order,
    so equality matches :meth:`to_query_string` equality.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        self._pairs: tuple[tuple[str, str], ...] = tuple((str(k), str(v)) for k, v in items)

    def __getitem__(self, key: str) -> str:
        for k, v in self._pairs:
            if k == key:
                return v
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (k for k, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParameters):
            return self._pairs == other._pairs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"QueryParameters({dict(self._pairs)!r})"

    def with_(self, **extra: str | int) -> "QueryParameters":
        """Copy with *extra* pairs replaced in place or appended at the end."""
        pairs = dict(self._pairs)
        for key, value in extra.items():
            pairs[key] = str(value)
        return QueryParameters(pairs)

    def to_query_string(self) -> str:
        return urlencode(self._pairs)


class QueryBuilder:
    """Convert a :class:`FilterState` into canonical :class:`QueryParameters`.

    Keys appear in the order ``type, location, priceCategory, search, sort,
    page`` and only when they differ from the field default. A configured
    *page_size* adds ``limit`` last.
    """

    def __init__(self, page_size: int | None = None) -> None:
        if page_size is not None and page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = page_size

    @property
    def page_size(self) -> int | None:
        return self._page_size

    def build(self, state: FilterState) -> QueryParameters:
        pairs: list[tuple[str, str]] = []
        if state.event_type is not None:
            pairs.append(("type", state.event_type.value))
        if state.location != DEFAULT_STATE.location:
            pairs.append(("location", state.location))
        if state.price_category is not None:
            pairs.append(("priceCategory", state.price_category.value))
        if state.search_term != DEFAULT_STATE.search_term:
            pairs.append(("search", state.search_term))
        wire_sort = state.sort_key.wire_value
        if wire_sort is not None:
            pairs.append(("sort", wire_sort))
        if state.page != DEFAULT_STATE.page:
            pairs.append(("page", str(state.page)))
        if self._page_size is not None:
            pairs.append(("limit", str(self._page_size)))
        return QueryParameters(pairs)


def build_query(state: FilterState) -> QueryParameters:
    """Shorthand for ``QueryBuilder().build(state)`` (no ``limit``)."""
    return QueryBuilder().build(state)


__all__ = ["QueryBuilder", "QueryParameters", "build_query"]
