"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3

from taskdeck.adapters.sqlite.connection import get_connection
from taskdeck.adapters.sqlite.utils import (
    build_update_clause,
    now_iso,
    row_to_dict,
    to_db_value,
)
from taskdeck.exceptions import NotFoundError
from taskdeck.models import Task, TaskCreate, TaskStatus, TaskUpdate
from taskdeck.repositories import TaskRepository


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(self, db_path: str | None = None):
        """Initialize SQLite task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def list_all(self) -> list[Task]:
        cursor = self.connection.execute("SELECT * FROM tasks ORDER BY id ASC")
        return [Task(**row_to_dict(row)) for row in cursor.fetchall()]

    def get(self, task_id: int) -> Task:
        row = self.connection.execute(
            "SELECT * FROM tasks WHERE id = ?", (task_id,)
        ).fetchone()
        if not row:
            raise NotFoundError(f"Task not found: {task_id}")
        return Task(**row_to_dict(row))

    def add(self, task_data: TaskCreate) -> Task:
        now = now_iso()
        completed_at = now if task_data.status is TaskStatus.DONE else None

        with self.connection:
            cursor = self.connection.execute(
                """
                INSERT INTO tasks (
                    title, description, priority, status, due_date,
                    reminder_time, created_at, updated_at, completed_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    task_data.title,
                    task_data.description,
                    to_db_value(task_data.priority),
                    to_db_value(task_data.status),
                    to_db_value(task_data.due_date),
                    to_db_value(task_data.reminder_time),
                    now,
                    now,
                    completed_at,
                ),
            )
        return self.get(cursor.lastrowid)

    def update(self, task_id: int, updates: TaskUpdate) -> Task:
        current = self.get(task_id)
        fields = updates.model_dump(exclude_unset=True)

        # Title, priority and status cannot be cleared, only replaced
        for key in ("title", "priority", "status"):
            if key in fields and fields[key] is None:
                del fields[key]

        now = now_iso()
        new_status = fields.get("status")
        if new_status is not None and new_status != current.status:
            fields["completed_at"] = now if new_status is TaskStatus.DONE else None

        fields["updated_at"] = now
        set_clause, params = build_update_clause(fields)
        with self.connection:
            self.connection.execute(
                f"UPDATE tasks SET {set_clause} WHERE id = ?", (*params, task_id)
            )
        return self.get(task_id)

    def delete(self, task_id: int) -> bool:
        with self.connection:
            cursor = self.connection.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        return cursor.rowcount > 0

    def increment_pomodoro_count(self, task_id: int) -> Task:
        with self.connection:
            cursor = self.connection.execute(
                """
                UPDATE tasks
                SET pomodoro_count = pomodoro_count + 1, updated_at = ?
                WHERE id = ?
                """,
                (now_iso(), task_id),
            )
        if cursor.rowcount == 0:
            raise NotFoundError(f"Task not found: {task_id}")
        return self.get(task_id)
