"""taskdeck domain models.

Pydantic models for the entities the store persists and the payloads used
to create and update them.
"""

from .config_models import AppConfig
from .note import Note, NoteCreate, NoteUpdate
from .session import PomodoroSession, PomodoroSessionCreate
from .task import Priority, Task, TaskCreate, TaskStatus, TaskUpdate

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Priority",
    "TaskStatus",
    # Note models
    "Note",
    "NoteCreate",
    "NoteUpdate",
    # Session history
    "PomodoroSession",
    "PomodoroSessionCreate",
    # Config models
    "AppConfig",
]
