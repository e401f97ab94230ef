"""SQLite implementation of SessionRepository (pomodoro history)."""

from __future__ import annotations

import sqlite3

from taskdeck.adapters.sqlite.connection import get_connection
from taskdeck.adapters.sqlite.utils import now_iso, row_to_dict, to_db_value
from taskdeck.models import PomodoroSession, PomodoroSessionCreate
from taskdeck.repositories import SessionRepository


class SqliteSessionRepository(SessionRepository):
    """SQLite implementation of the pomodoro session history."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def add(self, session_data: PomodoroSessionCreate) -> PomodoroSession:
        with self.connection:
            session_id = self._insert(session_data)
        return self._get(session_id)

    def record_work(self, session_data: PomodoroSessionCreate) -> PomodoroSession:
        with self.connection:
            task_id = session_data.task_id
            if task_id is not None:
                exists = self.connection.execute(
                    "SELECT 1 FROM tasks WHERE id = ?", (task_id,)
                ).fetchone()
                if exists is None:
                    session_data = session_data.model_copy(update={"task_id": None})
                elif session_data.completed:
                    self.connection.execute(
                        """
                        UPDATE tasks
                        SET pomodoro_count = pomodoro_count + 1, updated_at = ?
                        WHERE id = ?
                        """,
                        (now_iso(), task_id),
                    )
            session_id = self._insert(session_data)
        return self._get(session_id)

    def _insert(self, session_data: PomodoroSessionCreate) -> int:
        cursor = self.connection.execute(
            """
            INSERT INTO pomodoro_sessions (
                task_id, start_time, end_time, duration_minutes, completed
            ) VALUES (?, ?, ?, ?, ?)
            """,
            (
                session_data.task_id,
                to_db_value(session_data.start_time),
                to_db_value(session_data.end_time),
                session_data.duration_minutes,
                to_db_value(session_data.completed),
            ),
        )
        return cursor.lastrowid

    def _get(self, session_id: int) -> PomodoroSession:
        row = self.connection.execute(
            "SELECT * FROM pomodoro_sessions WHERE id = ?", (session_id,)
        ).fetchone()
        return PomodoroSession(**row_to_dict(row))

    def list_all(self, task_id: int | None = None) -> list[PomodoroSession]:
        if task_id is None:
            cursor = self.connection.execute(
                "SELECT * FROM pomodoro_sessions ORDER BY start_time DESC, id DESC"
            )
        else:
            cursor = self.connection.execute(
                """
                SELECT * FROM pomodoro_sessions
                WHERE task_id = ?
                ORDER BY start_time DESC, id DESC
                """,
                (task_id,),
            )
        return [PomodoroSession(**row_to_dict(row)) for row in cursor.fetchall()]
