"""
Kalendaryo exception hierarchy.

All kalendaryo exceptions inherit from KalendaryoError, so the CLI can catch
library-level errors in one place while tests still distinguish failure modes.
"""


class KalendaryoError(Exception):
    """Base exception class for all kalendaryo errors."""


class ConfigurationError(KalendaryoError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataProcessingError(KalendaryoError):
    """Raised for data processing errors."""


class RecordFormatError(DataProcessingError):
    """Raised when a persisted event line cannot be parsed."""


class FileIOError(KalendaryoError):
    """Raised for file I/O errors."""
