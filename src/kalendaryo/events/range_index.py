"""Merge-based range index over event positions.

A static segment tree whose nodes each hold the date-sorted records of their
positional interval. Querying a positional range ``[l, r]`` returns the
records at those positions in date order without sorting at query time.

The index is a snapshot. It copies its input on construction and never
changes afterwards; when the collection changes, build a new one::

    index = build_index(events)
    index.query(0, 4)      # events[0..4] sorted by date
    events.append(record)
    index = build_index(events)
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from .models import Record
from .sorting import by_date, merge_sorted


class RangeIndex:
    """Immutable merge tree over positions ``0 .. n-1`` of a record snapshot.

    Nodes use heap numbering: the root is node 0 and covers the whole
    interval, and node ``i`` has children ``2i + 1`` and ``2i + 2``. Each
    node stores the stable date-merge of its children's lists. An index
    built from no records has no nodes and answers every query with ``[]``.
    """

    def __init__(self, records: Sequence[Record]):
        self._records: tuple[Record, ...] = tuple(records)
        self._size = len(self._records)
        self._tree: list[tuple[Record, ...]] = [()] * (4 * self._size)
        if self._size:
            self._build(0, 0, self._size - 1)
        logger.debug(f"Built range index over {self._size} records")

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = (self._records[start],)
            return
        mid = (start + end) // 2
        left, right = 2 * node + 1, 2 * node + 2
        self._build(left, start, mid)
        self._build(right, mid + 1, end)
        self._tree[node] = tuple(merge_sorted(self._tree[left], self._tree[right], by_date))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"RangeIndex(size={self._size})"

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def records(self) -> tuple[Record, ...]:
        """The snapshot in its original positional order."""
        return self._records

    @property
    def root(self) -> tuple[Record, ...]:
        """All records of the snapshot, sorted by date."""
        return self._tree[0] if self._size else ()

    def node(self, node: int) -> tuple[Record, ...]:
        """Return the stored list of a node (empty for unused slots)."""
        return self._tree[node]

    def children(self, node: int) -> tuple[int, int] | None:
        """Return the child node ids of an internal node, or None for a leaf."""
        span = self._span(node)
        if span is None or span[0] == span[1]:
            return None
        return 2 * node + 1, 2 * node + 2

    def _span(self, node: int) -> tuple[int, int] | None:
        """Walk down from the root to find the interval covered by ``node``."""
        if not self._size or node < 0:
            return None
        path = []
        current = node
        while current > 0:
            path.append(current)
            current = (current - 1) // 2
        start, end = 0, self._size - 1
        for step in reversed(path):
            if start == end:
                return None
            mid = (start + end) // 2
            if step % 2 == 1:
                end = mid
            else:
                start = mid + 1
        return start, end

    def query(self, l: int, r: int) -> list[Record]:  # noqa: E741
        """Return the records at positions ``l..r`` (inclusive), sorted by date.

        Positions refer to the snapshot order, not to dates. Positions outside
        the snapshot match nothing, and ``l > r`` yields an empty list.
        """
        if not self._size or l > r:
            return []
        return self._query(0, 0, self._size - 1, l, r)

    def _query(self, node: int, start: int, end: int, l: int, r: int) -> list[Record]:  # noqa: E741
        if r < start or l > end:
            return []
        if l <= start and end <= r:
            return list(self._tree[node])
        mid = (start + end) // 2
        left = self._query(2 * node + 1, start, mid, l, r)
        right = self._query(2 * node + 2, mid + 1, end, l, r)
        return merge_sorted(left, right, by_date)


def build_index(records: Sequence[Record]) -> RangeIndex:
    """Build a fresh ``RangeIndex`` snapshot of ``records``."""
    return RangeIndex(records)
