"""Application pagination – listing pages and page-number windows."""
from citydir.application.pagination.page import ListingPage
from citydir.application.pagination.window import ELLIPSIS, MIN_VISIBLE_PAGES, PageNavigator, PageSlot, page_window

__all__ = ["ELLIPSIS", "MIN_VISIBLE_PAGES", "ListingPage", "PageNavigator", "PageSlot", "page_window"]
