"""File I/O helpers. All functions operate on explicit paths."""

from __future__ import annotations

import os


def safe_write(
    filepath: str,
    content: str,
    mode: str = "w",
    encoding: str = "utf-8",
    newline: str | None = None,
) -> None:
    """Write content to a file, creating parent directories as needed.

    ``newline`` is passed to ``open``; use ``""`` to write line endings untranslated.
    """
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding, newline=newline) as f:
        f.write(content)
