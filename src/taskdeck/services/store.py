"""Store facade over the SQLite repositories.

The session engine only ever sees this narrow interface. Every failure of
the underlying storage is re-raised as :class:`~taskdeck.exceptions.StoreError`
with the original exception chained, so callers have exactly one error
type to report.
"""

from __future__ import annotations

import functools
import sqlite3
from collections.abc import Callable
from pathlib import Path
from typing import ParamSpec, TypeVar

from pydantic import ValidationError

from taskdeck.adapters.sqlite import (
    DatabaseConnection,
    SqliteConfigRepository,
    SqliteNoteRepository,
    SqliteSessionRepository,
    SqliteTaskRepository,
)
from taskdeck.exceptions import StoreError
from taskdeck.models import (
    Note,
    NoteCreate,
    NoteUpdate,
    PomodoroSession,
    PomodoroSessionCreate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from taskdeck.repositories import (
    ConfigRepository,
    NoteRepository,
    SessionRepository,
    TaskRepository,
)
from taskdeck.utils.logger import get_logger

P = ParamSpec("P")
R = TypeVar("R")


def store_operation(func: Callable[P, R]) -> Callable[P, R]:
    """Translate storage exceptions into StoreError."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except StoreError:
            raise
        except (sqlite3.Error, ValidationError, OSError) as e:
            get_logger("store").error("%s failed: %s", func.__name__, e)
            raise StoreError(f"{func.__name__.replace('_', ' ')} failed: {e}") from e

    return wrapper


class Store:
    """Durable tasks, notes, session history and key/value config.

    Args:
        db_path: SQLite database file; None uses the default location.
        tasks, notes, sessions, config: Optional repository overrides.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        *,
        tasks: TaskRepository | None = None,
        notes: NoteRepository | None = None,
        sessions: SessionRepository | None = None,
        config: ConfigRepository | None = None,
    ):
        path = str(db_path) if db_path is not None else None
        self.tasks = tasks or SqliteTaskRepository(path)
        self.notes = notes or SqliteNoteRepository(path)
        self.sessions = sessions or SqliteSessionRepository(path)
        self.config = config or SqliteConfigRepository(path)

    # -------------------- tasks --------------------
    @store_operation
    def create_task(self, data: TaskCreate) -> Task:
        return self.tasks.add(data)

    @store_operation
    def get_task(self, task_id: int) -> Task:
        return self.tasks.get(task_id)

    @store_operation
    def update_task(self, task_id: int, updates: TaskUpdate) -> Task:
        return self.tasks.update(task_id, updates)

    @store_operation
    def delete_task(self, task_id: int) -> bool:
        return self.tasks.delete(task_id)

    @store_operation
    def list_tasks(self) -> list[Task]:
        return self.tasks.list_all()

    # -------------------- notes --------------------
    @store_operation
    def create_note(self, data: NoteCreate) -> Note:
        return self.notes.add(data)

    @store_operation
    def get_note(self, note_id: int) -> Note:
        return self.notes.get(note_id)

    @store_operation
    def update_note(self, note_id: int, updates: NoteUpdate) -> Note:
        return self.notes.update(note_id, updates)

    @store_operation
    def delete_note(self, note_id: int) -> bool:
        return self.notes.delete(note_id)

    @store_operation
    def list_notes(self) -> list[Note]:
        return self.notes.list_all()

    # -------------------- pomodoro history --------------------
    @store_operation
    def create_session(self, data: PomodoroSessionCreate) -> PomodoroSession:
        return self.sessions.add(data)

    @store_operation
    def record_work_session(self, data: PomodoroSessionCreate) -> PomodoroSession:
        return self.sessions.record_work(data)

    @store_operation
    def list_sessions(self, task_id: int | None = None) -> list[PomodoroSession]:
        return self.sessions.list_all(task_id)

    # -------------------- config --------------------
    @store_operation
    def get_config(self, key: str) -> str | None:
        return self.config.get(key)

    @store_operation
    def set_config(self, key: str, value: str) -> None:
        self.config.set(key, value)

    @store_operation
    def set_config_many(self, values: dict[str, str]) -> None:
        self.config.set_many(values)

    # -------------------- lifecycle --------------------
    def close(self) -> None:
        """Commit and close the shared database connection."""
        DatabaseConnection.close_connection()
