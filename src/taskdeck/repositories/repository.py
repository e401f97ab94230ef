"""Repository abstraction layer for taskdeck.

Abstract base classes (ports) for every record type the application
persists. Concrete adapters live under ``taskdeck.adapters``; the rest of
the application only talks to these interfaces, usually through the
``Store`` facade.

Repositories are synchronous: each call is a short, independently
committed transaction, so the interactive session never suspends on I/O.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

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


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def list_all(self) -> list[Task]:
        """List all tasks in creation order.

        Returns:
            List of Task objects, oldest first
        """

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Get a task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """

    @abstractmethod
    def add(self, task_data: TaskCreate) -> Task:
        """Create a task and return it with its assigned ID and timestamps."""

    @abstractmethod
    def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Apply the explicitly set fields of ``updates`` to a task.

        Status changes maintain ``completed_at``: it is stamped when the
        task becomes done and cleared when it leaves done.

        Raises:
            NotFoundError: If the task does not exist
        """

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Delete a task. Notes and sessions referencing it are detached.

        Returns:
            True if a task was deleted
        """

    @abstractmethod
    def increment_pomodoro_count(self, task_id: int) -> Task:
        """Add one completed work interval to a task.

        Raises:
            NotFoundError: If the task does not exist
        """


class NoteRepository(ABC):
    """Abstract base class for note persistence operations."""

    @abstractmethod
    def list_all(self) -> list[Note]:
        """List all notes in creation order."""

    @abstractmethod
    def get(self, note_id: int) -> Note:
        """Get a note by ID.

        Raises:
            NotFoundError: If the note does not exist
        """

    @abstractmethod
    def add(self, note_data: NoteCreate) -> Note:
        """Create a note."""

    @abstractmethod
    def update(self, note_id: int, updates: NoteUpdate) -> Note:
        """Update a note.

        Raises:
            NotFoundError: If the note does not exist
        """

    @abstractmethod
    def delete(self, note_id: int) -> bool:
        """Delete a note. Never touches the associated task."""


class SessionRepository(ABC):
    """Abstract base class for pomodoro session history."""

    @abstractmethod
    def add(self, session_data: PomodoroSessionCreate) -> PomodoroSession:
        """Record a work interval."""

    @abstractmethod
    def record_work(self, session_data: PomodoroSessionCreate) -> PomodoroSession:
        """Record a work interval and credit its task in one transaction.

        A completed interval increments the task's pomodoro count. When the
        task no longer exists the session is kept with ``task_id`` None.
        """

    @abstractmethod
    def list_all(self, task_id: int | None = None) -> list[PomodoroSession]:
        """List recorded sessions, newest first, optionally for one task."""


class ConfigRepository(ABC):
    """Abstract base class for the flat string-to-string config table."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is unset."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Insert or replace a value."""

    @abstractmethod
    def set_many(self, values: dict[str, str]) -> None:
        """Write several values in one transaction."""
