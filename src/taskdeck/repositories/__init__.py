"""Repository interfaces."""

from .repository import (
    ConfigRepository,
    NoteRepository,
    SessionRepository,
    TaskRepository,
)

__all__ = [
    "TaskRepository",
    "NoteRepository",
    "SessionRepository",
    "ConfigRepository",
]
