"""Calendar event collection and its query algorithms.

Provides the Record model, a merge-based RangeIndex for positional range
queries in date order, binary and keyword search, stable priority sorting,
flat-file persistence, and a CalendarSession tying them together.
"""

from .config import StoreConfig
from .models import Record, format_date
from .range_index import RangeIndex, build_index
from .search import find_by_date, keyword_scan
from .session import CalendarSession
from .sorting import sort_by_date, sort_by_priority
from .store import EventFileStore

__all__ = [
    "CalendarSession",
    "EventFileStore",
    "RangeIndex",
    "Record",
    "StoreConfig",
    "build_index",
    "find_by_date",
    "format_date",
    "keyword_scan",
    "sort_by_date",
    "sort_by_priority",
]
