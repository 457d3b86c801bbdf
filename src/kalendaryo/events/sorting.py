"""Stable merge sorting for event collections.

``merge_sorted`` is the two-pointer merge shared by the priority sort and the
range index. On equal keys the left operand wins, which is what makes both
stable with respect to input order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .models import Record


def by_date(record: Record) -> int:
    return record.date


def by_priority(record: Record) -> int:
    return record.priority


def merge_sorted(
    left: Sequence[Record],
    right: Sequence[Record],
    key: Callable[[Record], int] = by_date,
) -> list[Record]:
    """Merge two key-sorted sequences into a new key-sorted list.

    Args:
        left: Records sorted by ``key``; wins ties.
        right: Records sorted by ``key``.
        key: Sort key, date by default.

    Returns:
        A new list of ``len(left) + len(right)`` records.
    """
    merged: list[Record] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key(right[j]) < key(left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(records: list[Record], left: int, right: int, key: Callable[[Record], int]) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(records, left, mid, key)
    _merge_sort(records, mid + 1, right, key)
    records[left : right + 1] = merge_sorted(records[left : mid + 1], records[mid + 1 : right + 1], key)


def sort_by_priority(records: list[Record]) -> None:
    """Sort ``records`` in place by ascending priority.

    Top-down merge sort. Records with equal priority keep their relative
    order, so sorting an already sorted list leaves it unchanged.
    """
    _merge_sort(records, 0, len(records) - 1, by_priority)


def sort_by_date(records: list[Record]) -> None:
    """Sort ``records`` in place by ascending date (stable).

    Use this before ``find_by_date``, which requires date order.
    """
    records.sort(key=by_date)
