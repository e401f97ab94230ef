"""Application settings model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Settings stored in config.json.

    Runtime values that the session changes while running (timer durations)
    live in the store's key/value table instead.
    """

    db_path: str | None = Field(
        default=None, description="SQLite database path (default: user data dir)"
    )
    notifications: bool = Field(default=True, description="Show completion toasts")
    reminder_poll_seconds: int = Field(default=60, gt=0)
    default_work_minutes: int = Field(default=25, gt=0)
    default_break_minutes: int = Field(default=5, gt=0)
