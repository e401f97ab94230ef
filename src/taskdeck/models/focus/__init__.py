"""Focus mode - pomodoro timer state machine."""

from .timer import (
    BREAK_DURATION_KEY,
    WORK_DURATION_KEY,
    BreakCompleted,
    PomodoroTimer,
    TimerEvent,
    TimerState,
    WorkCancelled,
    WorkCompleted,
)

__all__ = [
    "PomodoroTimer",
    "TimerState",
    "TimerEvent",
    "WorkCompleted",
    "WorkCancelled",
    "BreakCompleted",
    "WORK_DURATION_KEY",
    "BREAK_DURATION_KEY",
]
