"""Tests for kalendaryo.events.session."""

import os

import pytest

from kalendaryo.events.models import Record
from kalendaryo.events.session import CalendarSession
from kalendaryo.events.store import EventFileStore


@pytest.fixture
def store(tmp_dir):
    return EventFileStore(os.path.join(tmp_dir, "events.txt"))


class TestCalendarSession:
    def test_empty_session(self):
        session = CalendarSession()
        assert len(session) == 0
        assert session.index.is_empty
        assert session.range_query(0, 0) == []

    def test_initial_index_built(self, sample_events):
        session = CalendarSession(sample_events)
        assert len(session.index) == 5
        assert session.range_query(0, 4)[0].date == 20240110

    def test_owns_a_copy_of_records(self, sample_events):
        session = CalendarSession(sample_events)
        sample_events.clear()
        assert len(session) == 5

    def test_append_leaves_index_stale_until_rebuild(self, sample_events):
        session = CalendarSession(sample_events)
        early = Record("New Year", "", 20240101, 1)
        session.append(early)
        assert len(session) == 6
        assert early not in session.range_query(0, 5)

        index = session.rebuild()
        assert index is session.index
        assert session.range_query(0, 5)[0] == early

    def test_append_persists(self, store):
        session = CalendarSession(store=store)
        session.append(Record("A", "x", 20240101, 1))
        assert store.load() == [Record("A", "x", 20240101, 1)]

    def test_from_store(self, store, sample_events):
        store.save(sample_events)
        session = CalendarSession.from_store(store)
        assert session.records == sample_events
        assert len(session.index) == 5

    def test_find_by_date_sorts_collection(self, sample_events):
        session = CalendarSession(sample_events)
        found = session.find_by_date(20240201)
        assert found.name == "Math Fair"
        dates = [r.date for r in session.records]
        assert dates == sorted(dates)

    def test_find_by_date_missing(self, sample_events):
        assert CalendarSession(sample_events).find_by_date(20991231) is None

    def test_search(self, sample_events):
        results = CalendarSession(sample_events).search("Fair")
        assert [r.name for r in results] == ["Science Fair", "Math Fair"]

    def test_sort_by_priority(self, sample_events):
        session = CalendarSession(sample_events)
        session.sort_by_priority()
        assert [r.name for r in session.records] == [
            "Parent Meeting",
            "Recital",
            "Science Fair",
            "Sports Day",
            "Math Fair",
        ]

    def test_save_without_store_is_noop(self, sample_events):
        CalendarSession(sample_events).save()
