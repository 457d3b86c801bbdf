"""Tests for kalendaryo.core.exceptions."""

from kalendaryo.core.exceptions import (
    ConfigurationError,
    DataProcessingError,
    FileIOError,
    KalendaryoError,
    RecordFormatError,
)


def test_hierarchy():
    """All exceptions should inherit from KalendaryoError."""
    for exc_cls in [ConfigurationError, DataProcessingError, RecordFormatError, FileIOError]:
        assert issubclass(exc_cls, KalendaryoError)


def test_record_format_error_is_data_processing_error():
    assert issubclass(RecordFormatError, DataProcessingError)


def test_catch_base():
    try:
        raise RecordFormatError("bad line")
    except KalendaryoError as e:
        assert "bad line" in str(e)
