"""Configuration dataclass for event persistence.

A pure data container with sensible defaults. Build it from the
hierarchical Config with ``StoreConfig.from_config``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kalendaryo.core.config import Config


@dataclass
class StoreConfig:
    """Settings for the flat-file event store.

    Attributes:
        events_file: Path of the pipe-delimited events file.
        encoding: Text encoding used to read and write it.
    """

    events_file: str = "events.txt"
    encoding: str = "utf-8"

    @classmethod
    def from_config(cls, config: Config) -> StoreConfig:
        defaults = cls()
        events_file = config.get("storage.events_file", defaults.events_file)
        return cls(
            events_file=os.path.expanduser(str(events_file)),
            encoding=config.get("storage.encoding", defaults.encoding),
        )
