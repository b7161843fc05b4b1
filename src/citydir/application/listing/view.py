"""Application listing – renderer state and event cards."""
from __future__ import annotations

import dataclasses
from decimal import Decimal

from citydir.application.pagination import ListingPage, PageNavigator, PageSlot
from citydir.config.context import AppContext, Locale
from citydir.domain.events import EventSummary
from citydir.kernel.errors import FetchError

GENERIC_ERROR_MESSAGE = "Failed to load events. Please try again later."

_THAI_MONTHS = (
    "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
    "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
)


def format_price(price: Decimal | int | float, locale: Locale = Locale.EN) -> str:
    if price == 0:
        return "ฟรี" if locale is Locale.TH else "FREE"
    amount = Decimal(str(price))
    if amount == amount.to_integral_value():
        return f"฿{int(amount):,}"
    return f"฿{amount:,.2f}"


def format_date(summary: EventSummary, locale: Locale = Locale.EN) -> str:
    when = summary.date
    if locale is Locale.TH:
        # Buddhist era
        return f"{when.day} {_THAI_MONTHS[when.month - 1]} {when.year + 543} · {when:%H:%M}"
    return f"{when:%b} {when.day}, {when.year} · {when:%H:%M}"


@dataclasses.dataclass(frozen=True)
class EventCard:
    """Display-ready projection of one :class:`EventSummary`."""

    id: str
    title: str
    date_label: str
    location: str
    type_label: str
    price_label: str
    image_ref: str | None
    featured: bool
    view_count: int

    @classmethod
    def from_summary(cls, summary: EventSummary, context: AppContext | None = None) -> "EventCard":
        locale = context.locale if context else Locale.EN
        return cls(
            id=summary.id,
            title=summary.title,
            date_label=format_date(summary, locale),
            location=summary.location,
            type_label=summary.type.label,
            price_label=format_price(summary.price, locale),
            image_ref=summary.image_ref,
            featured=summary.featured,
            view_count=summary.view_count,
        )


@dataclasses.dataclass(frozen=True)
class PaginationView:
    window: tuple[PageSlot, ...]
    current: int
    page_count: int
    previous_disabled: bool
    next_disabled: bool

    @property
    def visible(self) -> bool:
        return self.page_count > 1

    @classmethod
    def for_page(cls, page: ListingPage, max_visible: int = 7) -> "PaginationView":
        nav = PageNavigator(page.page_number, page.page_count)
        return cls(
            window=tuple(nav.window(max_visible)),
            current=nav.page_number,
            page_count=nav.page_count,
            previous_disabled=nav.previous_disabled,
            next_disabled=nav.next_disabled,
        )


@dataclasses.dataclass(frozen=True)
class ListingViewState:
    """Everything the list renderer needs; replaced wholesale on each transition."""

    items: tuple[EventSummary, ...] = ()
    page: ListingPage[EventSummary] | None = None
    is_loading: bool = False
    error: FetchError | None = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def is_empty(self) -> bool:
        return not self.items and not self.is_loading and not self.has_error

    @property
    def error_message(self) -> str | None:
        return GENERIC_ERROR_MESSAGE if self.error is not None else None

    @property
    def can_retry(self) -> bool:
        """Whether retrying the same query might succeed (offline, 5xx, throttled)."""
        return self.error is not None and self.error.retryable

    @property
    def total_count(self) -> int:
        return self.page.total_count if self.page else 0

    def cards(self, context: AppContext | None = None) -> list[EventCard]:
        return [EventCard.from_summary(item, context) for item in self.items]


__all__ = [
    "EventCard",
    "GENERIC_ERROR_MESSAGE",
    "ListingViewState",
    "PaginationView",
    "format_date",
    "format_price",
]
