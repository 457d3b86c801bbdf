"""Calendar session — the live event collection plus its range index.

The session owns the collection and the current RangeIndex snapshot. The
index is never refreshed implicitly: after mutating the collection, call
``rebuild()`` if range queries should see the change. Until then, range
queries answer from the last snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from .models import Record
from .range_index import RangeIndex, build_index
from .search import find_by_date, keyword_scan
from .sorting import sort_by_date, sort_by_priority
from .store import EventFileStore


class CalendarSession:
    """Holds the event collection, an optional store, and the index snapshot."""

    def __init__(self, records: Iterable[Record] | None = None, store: EventFileStore | None = None):
        self.records: list[Record] = list(records or [])
        self.store = store
        self.index: RangeIndex = build_index(self.records)

    @classmethod
    def from_store(cls, store: EventFileStore) -> CalendarSession:
        """Load events from ``store`` and build the initial snapshot."""
        return cls(store.load(), store=store)

    def __len__(self) -> int:
        return len(self.records)

    def append(self, record: Record) -> None:
        """Add an event and persist the collection. Does not rebuild the index."""
        self.records.append(record)
        logger.info(f"Added event {record.name!r} on {record.display_date}")
        self.save()

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self.records)

    def rebuild(self) -> RangeIndex:
        """Replace the index with a fresh snapshot of the current collection."""
        self.index = build_index(self.records)
        return self.index

    def range_query(self, l: int, r: int) -> list[Record]:  # noqa: E741
        """Query positions ``l..r`` of the last snapshot, sorted by date."""
        return self.index.query(l, r)

    def find_by_date(self, date: int) -> Record | None:
        """Sort the collection by date in place, then binary search it.

        Reorders ``records``; the index snapshot is left as it was.
        """
        sort_by_date(self.records)
        return find_by_date(self.records, date)

    def search(self, keyword: str) -> list[Record]:
        return keyword_scan(self.records, keyword)

    def sort_by_priority(self) -> None:
        sort_by_priority(self.records)
