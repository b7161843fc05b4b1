"""Application search – listing sources and local ordering."""
from citydir.application.search.service import EventSource, InMemoryEventCatalog
from citydir.application.search.sorting import sort_events

__all__ = ["EventSource", "InMemoryEventCatalog", "sort_events"]
