"""Note helpers: search and task association filters."""

from __future__ import annotations

from taskdeck.models import Note


class NoteService:
    """Pure queries over a list of notes."""

    @staticmethod
    def search_notes(notes: list[Note], query: str) -> list[Note]:
        """Return notes whose title or content contains ``query`` (case-insensitive)."""
        needle = query.lower()
        return [
            note
            for note in notes
            if needle in note.title.lower() or needle in note.content.lower()
        ]

    @staticmethod
    def notes_by_task(notes: list[Note], task_id: int) -> list[Note]:
        """Return the notes associated with ``task_id``."""
        return [note for note in notes if note.task_id == task_id]
