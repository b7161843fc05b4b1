"""Application listing – controller, renderer state and new-event polling."""
from citydir.application.listing.controller import ListingController
from citydir.application.listing.view import (
    EventCard,
    ListingViewState,
    PaginationView,
    format_date,
    format_price,
)
from citydir.application.listing.watcher import LatestEventLookup, NewEventsWatcher

__all__ = [
    "EventCard",
    "LatestEventLookup",
    "ListingController",
    "ListingViewState",
    "NewEventsWatcher",
    "PaginationView",
    "format_date",
    "format_price",
]
