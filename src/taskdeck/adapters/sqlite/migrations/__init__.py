"""Database migration system for the taskdeck SQLite database."""

from .runner import (
    Migration,
    MigrationRunner,
    get_current_version,
    run_migrations,
)

__all__ = [
    "Migration",
    "MigrationRunner",
    "get_current_version",
    "run_migrations",
]
