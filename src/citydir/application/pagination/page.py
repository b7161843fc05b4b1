"""Application pagination – ListingPage."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class ListingPage(Generic[T]):
    """Normalised, paginated result set handed to the UI.

    Use :meth:`build` to derive ``page_count`` from the totals; the plain
    constructor keeps a server-reported ``page_count`` verbatim.
    """

    items: tuple[T, ...]
    total_count: int
    page_size: int
    page_number: int = 1
    page_count: int = 0

    def __post_init__(self) -> None:
        if self.total_count < 0:
            raise ValueError("total_count must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.page_count < 0:
            raise ValueError("page_count must be >= 0")
        clamped = min(max(self.page_number, 1), max(self.page_count, 1))
        if clamped != self.page_number:
            object.__setattr__(self, "page_number", clamped)

    @classmethod
    def build(
        cls,
        items: Iterable[T],
        total_count: int,
        page_size: int,
        page_number: int = 1,
    ) -> "ListingPage[T]":
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        return cls(
            items=tuple(items),
            total_count=total_count,
            page_size=page_size,
            page_number=page_number,
            page_count=math.ceil(total_count / page_size) if total_count > 0 else 0,
        )

    @classmethod
    def empty(cls, page_size: int = 1) -> "ListingPage[T]":
        return cls(items=(), total_count=0, page_size=page_size)

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.page_count

    def map(self, fn: Callable[[T], Any]) -> "ListingPage[Any]":
        """Return a new page with each item transformed by *fn*."""
        return dataclasses.replace(self, items=tuple(fn(item) for item in self.items))


__all__ = ["ListingPage"]
