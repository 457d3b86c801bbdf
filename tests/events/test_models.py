"""Tests for kalendaryo.events.models."""

import dataclasses

import pytest

from kalendaryo.events.models import Record, format_date


class TestFormatDate:
    def test_basic(self):
        assert format_date(20240115) == "2024/01/15"

    def test_zero_padding(self):
        assert format_date(990101) == "0099/01/01"

    def test_no_calendar_validation(self):
        assert format_date(20241399) == "2024/13/99"


class TestRecord:
    def test_create(self):
        record = Record(name="Science Fair", description="Gym", date=20240115, priority=2)
        assert record.name == "Science Fair"
        assert record.date == 20240115
        assert record.display_date == "2024/01/15"

    def test_immutable(self):
        record = Record("A", "B", 20240101, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.priority = 5

    def test_non_integer_date_raises(self):
        with pytest.raises(ValueError, match="date must be an integer"):
            Record("A", "B", "20240101", 1)

    def test_bool_priority_raises(self):
        with pytest.raises(ValueError, match="priority must be an integer"):
            Record("A", "B", 20240101, True)

    def test_equality_is_field_wise(self):
        assert Record("A", "B", 20240101, 1) == Record("A", "B", 20240101, 1)

    def test_repr(self):
        assert "Science Fair" in repr(Record("Science Fair", "Gym", 20240115, 2))
