"""SQLite adapter module - Local database storage implementation."""

from taskdeck.adapters.sqlite.config_repository import SqliteConfigRepository
from taskdeck.adapters.sqlite.connection import DatabaseConnection, get_connection
from taskdeck.adapters.sqlite.note_repository import SqliteNoteRepository
from taskdeck.adapters.sqlite.session_repository import SqliteSessionRepository
from taskdeck.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "DatabaseConnection",
    "get_connection",
    "SqliteTaskRepository",
    "SqliteNoteRepository",
    "SqliteSessionRepository",
    "SqliteConfigRepository",
]
