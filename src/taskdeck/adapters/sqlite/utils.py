"""Utility functions for SQLite adapter."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any


def now_iso() -> str:
    """Get current timestamp in ISO format (UTC)."""
    return datetime.now(UTC).isoformat()


def to_db_value(value: Any) -> Any:
    """Convert a model field value into something sqlite3 can bind.

    Datetimes become UTC ISO strings (naive values are taken as local
    time), enums become their value, booleans become 0/1.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.astimezone()
        return value.astimezone(UTC).isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary."""
    if row is None:
        return {}
    return dict(row)


def build_update_clause(updates: dict[str, Any]) -> tuple[str, list[Any]]:
    """Build SQL UPDATE SET clause from an updates dictionary.

    Unlike a filter clause, ``None`` values are kept: an explicitly set
    ``None`` clears the column.

    Returns:
        Tuple of (SET clause string, parameters list)
    """
    set_parts = []
    params = []

    for key, value in updates.items():
        set_parts.append(f"{key} = ?")
        params.append(to_db_value(value))

    return ", ".join(set_parts), params
