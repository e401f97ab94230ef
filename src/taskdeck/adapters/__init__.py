"""Adapters module - Repository implementations for storage backends.

- sqlite: Local SQLite database storage (the only backend)
"""

from .sqlite import (
    SqliteConfigRepository,
    SqliteNoteRepository,
    SqliteSessionRepository,
    SqliteTaskRepository,
)

__all__ = [
    "SqliteTaskRepository",
    "SqliteNoteRepository",
    "SqliteSessionRepository",
    "SqliteConfigRepository",
]
