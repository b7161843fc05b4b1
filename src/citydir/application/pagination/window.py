"""Application pagination – page-number window and prev/next navigation."""
from __future__ import annotations

from typing import Final, Literal

ELLIPSIS: Final = "..."

PageSlot = int | Literal["..."]

# collapsed windows always render seven slots
MIN_VISIBLE_PAGES: Final = 7


def page_window(page_number: int, page_count: int, max_visible: int = 7) -> list[PageSlot]:
    """Page numbers to render, with :data:`ELLIPSIS` standing for skipped runs.

    ``page_window(5, 10)`` -> ``[1, "...", 4, 5, 6, "...", 10]``.
    A ``page_count`` of 0 is treated as a single empty page.

    Raises:
        ValueError: when *max_visible* is below :data:`MIN_VISIBLE_PAGES`.
    """
    if max_visible < MIN_VISIBLE_PAGES:
        raise ValueError(f"max_visible must be >= {MIN_VISIBLE_PAGES}")
    page_count = max(page_count, 1)
    if page_count <= max_visible:
        return list(range(1, page_count + 1))
    if page_number <= 3:
        return [*range(1, 6), ELLIPSIS, page_count]
    if page_number >= page_count - 2:
        return [1, ELLIPSIS, *range(page_count - 4, page_count + 1)]
    return [1, ELLIPSIS, page_number - 1, page_number, page_number + 1, ELLIPSIS, page_count]


class PageNavigator:
    """Prev/next/jump logic for one rendered pagination control."""

    def __init__(self, page_number: int, page_count: int) -> None:
        self._page_count = max(page_count, 1)
        self._page_number = min(max(page_number, 1), self._page_count)

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def previous_disabled(self) -> bool:
        return self._page_number == 1

    @property
    def next_disabled(self) -> bool:
        return self._page_number == self._page_count

    def go_to_page(self, n: int) -> int | None:
        """Clamp *n* into range; ``None`` when that lands on the current page."""
        target = min(max(n, 1), self._page_count)
        if target == self._page_number:
            return None
        self._page_number = target
        return target

    def previous(self) -> int | None:
        return self.go_to_page(self._page_number - 1)

    def next(self) -> int | None:
        return self.go_to_page(self._page_number + 1)

    def window(self, max_visible: int = 7) -> list[PageSlot]:
        return page_window(self._page_number, self._page_count, max_visible)


__all__ = ["ELLIPSIS", "MIN_VISIBLE_PAGES", "PageNavigator", "PageSlot", "page_window"]
