"""Pomodoro session history models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class PomodoroSession(BaseModel):
    """A recorded work interval.

    Attributes:
        id: Store-assigned identifier
        task_id: Task the interval was spent on, if any
        start_time: When the interval started
        end_time: When it ended (completed or cancelled)
        duration_minutes: Planned interval length
        completed: True only if the interval ran to natural completion
    """

    id: int
    task_id: int | None = None
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int = Field(gt=0)
    completed: bool = False


class PomodoroSessionCreate(BaseModel):
    """Model for recording a finished or cancelled interval."""

    task_id: int | None = None
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int = Field(gt=0)
    completed: bool = False

    @model_validator(mode="after")
    def end_not_before_start(self) -> PomodoroSessionCreate:
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("Session end_time must not precede start_time")
        return self
