"""Database connection management for the taskdeck SQLite database.

A process-wide connection manager: one connection per process, WAL mode
so the reminder watcher can read while the session writes, and foreign
keys enforced so deleting a task detaches its notes and sessions.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from taskdeck.adapters.sqlite.migrations.m001_initial_schema import initial_migration
from taskdeck.adapters.sqlite.migrations.runner import MigrationRunner
from taskdeck.utils.logger import get_logger

DEFAULT_DB_NAME = "tasks.db"


def default_db_path() -> Path:
    """Return the default database location in the user data directory."""
    return Path(user_data_dir("taskdeck")) / DEFAULT_DB_NAME


class DatabaseConnection:
    """Singleton connection manager.

    Provides:
    - Single connection per process (reused across repositories)
    - WAL journal and foreign key enforcement
    - Schema migration on first open
    - Owner-only permissions on newly created database files
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None
    _atexit_registered: bool = False

    def __new__(cls) -> DatabaseConnection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create the database connection.

        Args:
            db_path: Path to database file. If None, uses the default location.

        Returns:
            Configured sqlite3.Connection
        """
        instance = cls()
        db_path = default_db_path() if db_path is None else Path(db_path)

        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        if instance._connection is not None:
            cls.close_connection()

        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        connection = sqlite3.connect(
            str(db_path),
            check_same_thread=False,
            timeout=30.0,
        )
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(db_path, 0o600)
            get_logger().info("created database at %s", db_path)

        MigrationRunner(connection).run_migrations([initial_migration])

        instance._connection = connection
        instance._db_path = db_path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close the connection, committing anything pending."""
        instance = cls()
        if instance._connection is None:
            return
        try:
            instance._connection.commit()
            instance._connection.close()
        except sqlite3.Error as e:
            get_logger().warning("error while closing database: %s", e)
        finally:
            instance._connection = None
            instance._db_path = None

    @classmethod
    def get_db_path(cls) -> Path | None:
        """Get current database path."""
        return cls()._db_path


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get the database connection."""
    return DatabaseConnection.get_connection(db_path)
