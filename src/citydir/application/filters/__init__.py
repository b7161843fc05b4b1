"""Application filters – filter state, query building and date filters."""
from citydir.application.filters.dates import DateFilter, date_range, filter_by_date
from citydir.application.filters.query import QueryBuilder, QueryParameters, build_query
from citydir.application.filters.state import FilterState, FilterStateStore

__all__ = [
    "DateFilter",
    "FilterState",
    "FilterStateStore",
    "QueryBuilder",
    "QueryParameters",
    "build_query",
    "date_range",
    "filter_by_date",
]
