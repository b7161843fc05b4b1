"""
citydir – city directory client: event listings, filters and pagination.

Import path convention::

    from citydir.application.filters import FilterStateStore, build_query
    from citydir.application.pagination import ListingPage, page_window
    from citydir.adapters.http import EventsApi, HttpxHttpClient
    from citydir.kernel.errors import FetchError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
