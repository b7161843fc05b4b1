"""HTTP adapter – async httpx client and the events API."""
from citydir.adapters.http.client import HttpClient, HttpxHttpClient
from citydir.adapters.http.envelope import BareList, PagedEnvelope, decode_envelope, normalize_listing, to_listing_page
from citydir.adapters.http.events_api import EventsApi

__all__ = [
    "BareList",
    "EventsApi",
    "HttpClient",
    "HttpxHttpClient",
    "PagedEnvelope",
    "decode_envelope",
    "normalize_listing",
    "to_listing_page",
]
