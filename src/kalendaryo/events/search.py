"""Exact-date and keyword search over event collections."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Record


def find_by_date(records: Sequence[Record], target: int) -> Record | None:
    """Binary search a date-sorted sequence for an event on ``target``.

    ``records`` must already be sorted by ascending date (see
    ``sort_by_date``). This is not checked; unsorted input gives
    unspecified results.

    When several events share the date, the one returned is whichever the
    search path reaches first, not necessarily the earliest in the sequence.

    Returns:
        The matching Record, or None if no event has that date.
    """
    low, high = 0, len(records) - 1
    while low <= high:
        mid = (low + high) // 2
        date = records[mid].date
        if date == target:
            return records[mid]
        if date < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def keyword_scan(records: Sequence[Record], keyword: str) -> list[Record]:
    """Return events whose name or description contains ``keyword``.

    Matching is case-sensitive. Results keep the input order, and an empty
    keyword matches every event.
    """
    return [record for record in records if keyword in record.name or keyword in record.description]
