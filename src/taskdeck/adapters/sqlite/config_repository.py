"""SQLite implementation of the key/value ConfigRepository."""

from __future__ import annotations

import sqlite3

from taskdeck.adapters.sqlite.connection import get_connection
from taskdeck.repositories import ConfigRepository

_UPSERT = """
INSERT INTO config (key, value) VALUES (?, ?)
ON CONFLICT(key) DO UPDATE SET value = excluded.value
"""


class SqliteConfigRepository(ConfigRepository):
    """Flat string-to-string settings stored in the ``config`` table."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def get(self, key: str) -> str | None:
        row = self.connection.execute(
            "SELECT value FROM config WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with self.connection:
            self.connection.execute(_UPSERT, (key, value))

    def set_many(self, values: dict[str, str]) -> None:
        with self.connection:
            self.connection.executemany(_UPSERT, list(values.items()))
