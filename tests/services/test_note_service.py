"""Tests for note search and filtering."""

from __future__ import annotations

from datetime import UTC, datetime

from taskdeck.models import Note
from taskdeck.services import NoteService

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def _note(note_id, title, content="", task_id=None):
    return Note(
        id=note_id, title=title, content=content, task_id=task_id, created_at=NOW, updated_at=NOW
    )


NOTES = [
    _note(1, "Groceries", "oat milk, eggs"),
    _note(2, "Standup", "Blocked on MILK API", task_id=7),
    _note(3, "Ideas", task_id=7),
]


def test_search_matches_title_or_content_case_insensitive():
    assert [n.id for n in NoteService.search_notes(NOTES, "milk")] == [1, 2]
    assert [n.id for n in NoteService.search_notes(NOTES, "IDEAS")] == [3]


def test_search_no_match():
    assert NoteService.search_notes(NOTES, "zebra") == []


def test_notes_by_task():
    assert [n.id for n in NoteService.notes_by_task(NOTES, 7)] == [2, 3]
    assert NoteService.notes_by_task(NOTES, 8) == []
