"""Forward-only, version-numbered schema migrations.

Applied versions are tracked in a ``schema_version`` table; every pending
migration runs in order inside its own transaction when a connection is
opened.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod

from taskdeck.adapters.sqlite.utils import now_iso
from taskdeck.utils.logger import get_logger


class Migration(ABC):
    """Base class for database migrations."""

    @property
    @abstractmethod
    def version(self) -> int:
        """Sequential version number."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable summary."""

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the migration."""


class MigrationRunner:
    """Applies pending migrations to a connection."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        self.connection.execute("""
            CREATE TABLE IF NOT EXISTS schema_version (
                version INTEGER PRIMARY KEY,
                description TEXT NOT NULL,
                applied_at TEXT NOT NULL
            )
        """)
        self.connection.commit()

    def get_current_version(self) -> int:
        """Return the highest applied version, 0 for a fresh database."""
        row = self.connection.execute("SELECT MAX(version) FROM schema_version").fetchone()
        return row[0] or 0

    def run_migration(self, migration: Migration) -> None:
        """Apply one migration and record it.

        Raises:
            ValueError: If the migration is not newer than the database
            RuntimeError: If the migration itself fails (rolled back)
        """
        current = self.get_current_version()
        if migration.version <= current:
            raise ValueError(
                f"Migration {migration.version} is not newer than schema version {current}"
            )

        try:
            migration.up(self.connection)
            self.connection.execute(
                "INSERT INTO schema_version (version, description, applied_at) VALUES (?, ?, ?)",
                (migration.version, migration.description, now_iso()),
            )
            self.connection.commit()
        except Exception as e:
            self.connection.rollback()
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        get_logger().info(
            "applied migration %d: %s", migration.version, migration.description
        )

    def run_migrations(self, migrations: list[Migration]) -> int:
        """Apply every migration newer than the current version.

        Returns:
            Number of migrations applied
        """
        current = self.get_current_version()
        pending = sorted(
            (m for m in migrations if m.version > current), key=lambda m: m.version
        )
        for migration in pending:
            self.run_migration(migration)
        return len(pending)


def get_current_version(connection: sqlite3.Connection) -> int:
    """Helper returning the schema version of ``connection``."""
    return MigrationRunner(connection).get_current_version()


def run_migrations(connection: sqlite3.Connection, migrations: list[Migration]) -> int:
    """Helper applying ``migrations`` to ``connection``."""
    return MigrationRunner(connection).run_migrations(migrations)
