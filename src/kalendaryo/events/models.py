"""Core data model for calendar events.

A Record is one dated, prioritized calendar entry. Ordering is not part of
the type: range queries order by date, the sorter orders by priority.
"""

from __future__ import annotations

from dataclasses import dataclass


def format_date(date: int) -> str:
    """Render a ``YYYYMMDD`` integer as ``YYYY/MM/DD``.

    No calendar validation is done; ``20241399`` renders as ``2024/13/99``.
    """
    year = date // 10000
    month = (date // 100) % 100
    day = date % 100
    return f"{year:04d}/{month:02d}/{day:02d}"


@dataclass(frozen=True)
class Record:
    """A calendar event.

    Attributes:
        name: Short event name.
        description: Free-text description.
        date: Event date encoded as a ``YYYYMMDD`` integer.
        priority: Integer priority; lower sorts first.
    """

    name: str
    description: str
    date: int
    priority: int

    def __post_init__(self):
        for field_name in ("date", "priority"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Record {field_name} must be an integer, got {value!r}")

    @property
    def display_date(self) -> str:
        return format_date(self.date)

    def __repr__(self) -> str:
        return f"Record(name='{self.name}', date={self.date}, priority={self.priority})"
