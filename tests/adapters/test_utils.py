"""Unit tests for the SQLite adapter helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from taskdeck.adapters.sqlite.utils import (
    build_update_clause,
    row_to_dict,
    to_db_value,
)
from taskdeck.models import Priority, TaskStatus


class TestToDbValue:
    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_db_value(value) == "2026-01-01T10:00:00+00:00"

    def test_naive_datetime_taken_as_local(self):
        value = datetime(2026, 1, 1, 12, 0)
        assert to_db_value(value) == value.astimezone(UTC).isoformat()

    def test_enums_and_bools(self):
        assert to_db_value(Priority.HIGH) == 3
        assert to_db_value(TaskStatus.IN_PROGRESS) == "in_progress"
        assert to_db_value(True) == 1
        assert to_db_value("text") == "text"


def test_row_to_dict_none():
    assert row_to_dict(None) == {}


def test_build_update_clause_keeps_none():
    clause, params = build_update_clause({"title": "x", "due_date": None})
    assert clause == "title = ?, due_date = ?"
    assert params == ["x", None]
