"""Task data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, Field, field_validator


class Priority(IntEnum):
    """Task priority. Stored as its integer value."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def cycle(self) -> Priority:
        """Return the next priority in the Low -> Medium -> High -> Low cycle."""
        return {
            Priority.LOW: Priority.MEDIUM,
            Priority.MEDIUM: Priority.HIGH,
            Priority.HIGH: Priority.LOW,
        }[self]

    @classmethod
    def parse(cls, value: str) -> Priority:
        """Parse a priority name (``low``/``medium``/``high``, or l/m/h)."""
        names = {
            "l": cls.LOW,
            "low": cls.LOW,
            "m": cls.MEDIUM,
            "med": cls.MEDIUM,
            "medium": cls.MEDIUM,
            "h": cls.HIGH,
            "high": cls.HIGH,
        }
        try:
            return names[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown priority: {value!r}") from None


class TaskStatus(str, Enum):
    """Task workflow status."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    def toggled(self) -> TaskStatus:
        """Completion toggle: open tasks become done, done tasks reopen."""
        if self is TaskStatus.DONE:
            return TaskStatus.TODO
        return TaskStatus.DONE

    def toggled_in_progress(self) -> TaskStatus:
        """Start/stop toggle between todo and in-progress."""
        if self is TaskStatus.IN_PROGRESS:
            return TaskStatus.TODO
        return TaskStatus.IN_PROGRESS


class Task(BaseModel):
    """Task model representing a stored task.

    Attributes:
        id: Store-assigned identifier
        title: Short non-empty title
        description: Optional longer description
        priority: Low, Medium or High
        status: Todo, InProgress or Done
        due_date: Optional due timestamp
        reminder_time: Optional reminder timestamp (used by the watcher)
        created_at: Creation timestamp
        updated_at: Last update timestamp
        completed_at: Set exactly while status is Done
        pomodoro_count: Number of completed work intervals for this task
    """

    id: int
    title: str = Field(min_length=1)
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    reminder_time: datetime | None = None
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None
    pomodoro_count: int = Field(default=0, ge=0)

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Return True if the task is past due and not done."""
        if self.due_date is None or self.status is TaskStatus.DONE:
            return False
        now = now or datetime.now(self.due_date.tzinfo)
        return self.due_date < now


class TaskCreate(BaseModel):
    """Model for creating a new task."""

    title: str
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    reminder_time: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Task title cannot be empty")
        return value


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only fields that were explicitly set are
    written. ``completed_at`` is derived from ``status`` by the store.
    """

    title: str | None = None
    description: str | None = None
    priority: Priority | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None
    reminder_time: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Task title cannot be empty")
        return value
