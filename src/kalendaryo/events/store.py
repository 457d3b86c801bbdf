"""Flat-file persistence for calendar events.

One event per line, fields joined by ``|`` in the order
``name|description|date|priority``, with the date as a bare integer::

    Science Fair|Gym, all grades|20240115|2

There is no escaping. A ``|`` or a newline inside a name or description is
written as-is and the line will not parse back; ``save`` logs a warning when
that happens. Lines are split on ``\n`` only, so other line-break characters
(``\r``, ``\x0c``, ``\u2028``, ...) inside fields are kept.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from kalendaryo.core.exceptions import FileIOError, RecordFormatError
from kalendaryo.core.utils.file_io import safe_write

from .config import StoreConfig
from .models import Record

DELIMITER = "|"
LINE_END = "\n"
_FIELD_COUNT = 4


def format_line(record: Record) -> str:
    """Serialize a record to a single line (without the newline)."""
    return DELIMITER.join([record.name, record.description, str(record.date), str(record.priority)])


def parse_line(line: str) -> Record:
    """Parse one stored line back into a Record.

    Raises:
        RecordFormatError: If the line does not have four fields or the
            date/priority fields are not integers.
    """
    fields = line.rstrip("\r\n").split(DELIMITER)
    if len(fields) != _FIELD_COUNT:
        raise RecordFormatError(f"Expected {_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    name, description, date, priority = fields
    try:
        return Record(name=name, description=description, date=int(date), priority=int(priority))
    except ValueError as e:
        raise RecordFormatError(f"Invalid date or priority in {line!r}") from e


class EventFileStore:
    """Reads and rewrites the whole events file.

    Example::

        store = EventFileStore("~/.kalendaryo-data/events.txt")
        events = store.load()
        events.append(Record("Math Fair", "Room 4", 20240301, 3))
        store.save(events)
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path).expanduser()
        self.encoding = encoding

    @classmethod
    def from_config(cls, config: StoreConfig) -> EventFileStore:
        return cls(config.events_file, encoding=config.encoding)

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[Record]:
        """Load all events. A missing file means no events."""
        if not self.exists:
            logger.debug(f"No events file at {self.path}")
            return []
        try:
            with open(self.path, encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Could not read events file {self.path}: {e}") from e

        records = []
        for lineno, line in enumerate(text.split(LINE_END), start=1):
            if not line.strip():
                continue
            try:
                records.append(parse_line(line))
            except RecordFormatError as e:
                raise RecordFormatError(f"{self.path}:{lineno}: {e}") from e
        logger.debug(f"Loaded {len(records)} events from {self.path}")
        return records

    def save(self, records: Iterable[Record]) -> None:
        """Rewrite the events file with ``records``, one per line."""
        lines = []
        for record in records:
            for marker in (DELIMITER, LINE_END):
                if marker in record.name or marker in record.description:
                    logger.warning(f"Event {record.name!r} contains {marker!r} and will not load back correctly")
            lines.append(format_line(record) + LINE_END)
        try:
            safe_write(str(self.path), "".join(lines), encoding=self.encoding, newline="")
        except OSError as e:
            raise FileIOError(f"Could not write events file {self.path}: {e}") from e
        logger.debug(f"Saved {len(lines)} events to {self.path}")
