"""SQLite implementation of NoteRepository."""

from __future__ import annotations

import sqlite3

from taskdeck.adapters.sqlite.connection import get_connection
from taskdeck.adapters.sqlite.utils import build_update_clause, now_iso, row_to_dict
from taskdeck.exceptions import NotFoundError
from taskdeck.models import Note, NoteCreate, NoteUpdate
from taskdeck.repositories import NoteRepository


class SqliteNoteRepository(NoteRepository):
    """SQLite implementation of note repository."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def list_all(self) -> list[Note]:
        cursor = self.connection.execute("SELECT * FROM notes ORDER BY id ASC")
        return [Note(**row_to_dict(row)) for row in cursor.fetchall()]

    def get(self, note_id: int) -> Note:
        row = self.connection.execute(
            "SELECT * FROM notes WHERE id = ?", (note_id,)
        ).fetchone()
        if not row:
            raise NotFoundError(f"Note not found: {note_id}")
        return Note(**row_to_dict(row))

    def add(self, note_data: NoteCreate) -> Note:
        now = now_iso()
        with self.connection:
            cursor = self.connection.execute(
                """
                INSERT INTO notes (title, content, task_id, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (note_data.title, note_data.content, note_data.task_id, now, now),
            )
        return self.get(cursor.lastrowid)

    def update(self, note_id: int, updates: NoteUpdate) -> Note:
        self.get(note_id)
        fields = updates.model_dump(exclude_unset=True)
        for key in ("title", "content"):
            if key in fields and fields[key] is None:
                del fields[key]
        fields["updated_at"] = now_iso()

        set_clause, params = build_update_clause(fields)
        with self.connection:
            self.connection.execute(
                f"UPDATE notes SET {set_clause} WHERE id = ?", (*params, note_id)
            )
        return self.get(note_id)

    def delete(self, note_id: int) -> bool:
        with self.connection:
            cursor = self.connection.execute("DELETE FROM notes WHERE id = ?", (note_id,))
        return cursor.rowcount > 0
