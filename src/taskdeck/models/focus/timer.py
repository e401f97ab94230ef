"""Pomodoro timer state machine.

The timer keeps no clock of its own: the session loop feeds it the number
of seconds that actually elapsed since the previous tick, and the timer
moves between phases when ``remaining`` reaches zero. Phase boundaries are
reported as events; the caller decides what to persist or announce.

    Idle --start--> Working --0--> OnBreak --0--> Idle
    Working/OnBreak --pause--> Paused --resume--> (same phase)
    any non-Idle --cancel--> Idle

Durations can only change while Idle and are written to the store's
key/value table as soon as they change.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from taskdeck.utils.logger import get_logger

if TYPE_CHECKING:
    from taskdeck.services.store import Store

WORK_DURATION_KEY = "pomodoro.work_duration"
BREAK_DURATION_KEY = "pomodoro.break_duration"

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

WORK_STEP = 5
WORK_BOUNDS = (5, 180)
BREAK_STEP = 1
BREAK_BOUNDS = (1, 60)


class TimerState(str, Enum):
    """Pomodoro timer states."""

    IDLE = "idle"
    WORKING = "working"
    ON_BREAK = "on_break"
    PAUSED = "paused"


@dataclass(frozen=True)
class WorkCompleted:
    """A work interval ran to zero."""

    task_id: int | None
    start_time: datetime
    end_time: datetime
    duration_minutes: int


@dataclass(frozen=True)
class WorkCancelled:
    """A work interval was cancelled before reaching zero."""

    task_id: int | None
    start_time: datetime
    end_time: datetime
    duration_minutes: int


@dataclass(frozen=True)
class BreakCompleted:
    """A break ran to zero; the timer is idle again."""

    duration_minutes: int


TimerEvent = WorkCompleted | WorkCancelled | BreakCompleted


class PomodoroTimer:
    """Work/break countdown with guarded transitions.

    Args:
        work_duration: Work interval length in minutes
        break_duration: Break interval length in minutes
        store: Where durations are persisted; None keeps them in memory
        clock: Returns the current time (for session timestamps)
    """

    def __init__(
        self,
        work_duration: int = DEFAULT_WORK_MINUTES,
        break_duration: int = DEFAULT_BREAK_MINUTES,
        store: Store | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        if work_duration <= 0 or break_duration <= 0:
            raise ValueError("Durations must be positive")
        self.work_duration = work_duration
        self.break_duration = break_duration
        self.store = store
        self.clock = clock or (lambda: datetime.now(UTC))

        self.state = TimerState.IDLE
        self.paused_from: TimerState | None = None
        self.remaining = 0
        self.task_id: int | None = None
        self.started_at: datetime | None = None
        self.logger = get_logger("timer")

    @classmethod
    def from_store(
        cls,
        store: Store,
        default_work: int = DEFAULT_WORK_MINUTES,
        default_break: int = DEFAULT_BREAK_MINUTES,
        clock: Callable[[], datetime] | None = None,
    ) -> PomodoroTimer:
        """Build a timer using the durations persisted in ``store``.

        Missing or malformed values fall back to the defaults.
        """
        work = _parse_minutes(store.get_config(WORK_DURATION_KEY), default_work)
        brk = _parse_minutes(store.get_config(BREAK_DURATION_KEY), default_break)
        return cls(work, brk, store=store, clock=clock)

    # -------------------- queries --------------------
    @property
    def is_idle(self) -> bool:
        return self.state is TimerState.IDLE

    @property
    def is_running(self) -> bool:
        return self.state in (TimerState.WORKING, TimerState.ON_BREAK)

    @property
    def phase(self) -> TimerState:
        """The phase being counted down, looking through a pause."""
        if self.state is TimerState.PAUSED and self.paused_from is not None:
            return self.paused_from
        return self.state

    def progress(self) -> float:
        """Percentage of the current phase already elapsed (0-100)."""
        if self.phase is TimerState.WORKING:
            total = self.work_duration * 60
        elif self.phase is TimerState.ON_BREAK:
            total = self.break_duration * 60
        else:
            return 0.0
        return max(0.0, min(100.0, (total - self.remaining) / total * 100))

    def format_remaining(self) -> str:
        """Remaining time as ``MM:SS``."""
        minutes, seconds = divmod(self.remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"

    # -------------------- transitions --------------------
    def start(self, task_id: int | None = None) -> bool:
        """Start a work interval. Only valid while idle."""
        if not self.is_idle:
            return False
        self.state = TimerState.WORKING
        self.remaining = self.work_duration * 60
        self.task_id = task_id
        self.started_at = self.clock()
        self.logger.debug("work started (task=%s, %d min)", task_id, self.work_duration)
        return True

    def pause(self) -> bool:
        """Freeze the countdown of a running phase."""
        if not self.is_running:
            return False
        self.paused_from = self.state
        self.state = TimerState.PAUSED
        self.logger.debug("paused %s at %s", self.paused_from.value, self.format_remaining())
        return True

    def resume(self) -> bool:
        """Continue the phase that was paused, with ``remaining`` untouched."""
        if self.state is not TimerState.PAUSED or self.paused_from is None:
            return False
        self.state = self.paused_from
        self.paused_from = None
        self.logger.debug("resumed %s at %s", self.state.value, self.format_remaining())
        return True

    def toggle(self, task_id: int | None = None) -> TimerState:
        """Start when idle, pause when running, resume when paused."""
        if self.is_idle:
            self.start(task_id)
        elif self.is_running:
            self.pause()
        else:
            self.resume()
        return self.state

    def cancel(self) -> list[TimerEvent]:
        """Abandon the current phase and go idle.

        Cancelling work (running or paused) reports a WorkCancelled event so
        the interval can be recorded as not completed. Cancelling a break
        reports nothing.
        """
        if self.is_idle:
            return []
        events: list[TimerEvent] = []
        if self.phase is TimerState.WORKING and self.started_at is not None:
            events.append(
                WorkCancelled(
                    task_id=self.task_id,
                    start_time=self.started_at,
                    end_time=max(self.clock(), self.started_at),
                    duration_minutes=self.work_duration,
                )
            )
        self.logger.debug("cancelled %s with %s left", self.phase.value, self.format_remaining())
        self._reset()
        return events

    def tick(self, elapsed_seconds: int = 1) -> list[TimerEvent]:
        """Consume ``elapsed_seconds`` of wall-clock time.

        Ticks are ignored while idle or paused. Time left over after a
        phase ends carries into the next phase, so an irregular tick
        source still lands on the right phase.
        """
        events: list[TimerEvent] = []
        if not self.is_running or elapsed_seconds <= 0:
            return events

        while elapsed_seconds > 0 and self.is_running:
            step = min(elapsed_seconds, self.remaining)
            self.remaining -= step
            elapsed_seconds -= step
            if self.remaining == 0:
                events.append(self._finish_phase())
        return events

    def _finish_phase(self) -> TimerEvent:
        now = self.clock()
        if self.state is TimerState.WORKING:
            event: TimerEvent = WorkCompleted(
                task_id=self.task_id,
                start_time=self.started_at or now,
                end_time=max(now, self.started_at or now),
                duration_minutes=self.work_duration,
            )
            self.state = TimerState.ON_BREAK
            self.remaining = self.break_duration * 60
            self.started_at = now
            self.logger.info("work interval completed (task=%s)", self.task_id)
            return event

        self.logger.info("break completed")
        event = BreakCompleted(duration_minutes=self.break_duration)
        self._reset()
        return event

    def _reset(self) -> None:
        self.state = TimerState.IDLE
        self.paused_from = None
        self.remaining = 0
        self.task_id = None
        self.started_at = None

    # -------------------- durations --------------------
    def adjust_work(self, delta: int) -> bool:
        """Change the work duration by ``delta`` steps of WORK_STEP minutes.

        Returns False (and changes nothing) unless idle and the result stays
        within WORK_BOUNDS.
        """
        new_work = self.work_duration + delta * WORK_STEP
        if not WORK_BOUNDS[0] <= new_work <= WORK_BOUNDS[1]:
            return False
        return self.configure(work=new_work)

    def adjust_break(self, delta: int) -> bool:
        """Change the break duration by ``delta`` steps of BREAK_STEP minutes."""
        new_break = self.break_duration + delta * BREAK_STEP
        if not BREAK_BOUNDS[0] <= new_break <= BREAK_BOUNDS[1]:
            return False
        return self.configure(break_duration=new_break)

    def configure(
        self, work: int | None = None, break_duration: int | None = None
    ) -> bool:
        """Set either or both durations and persist them.

        Returns:
            False if the timer is not idle (nothing changes)

        Raises:
            ValueError: If a duration is not positive
            StoreError: If persisting fails (in-memory durations unchanged)
        """
        if not self.is_idle:
            self.logger.debug("duration change rejected while %s", self.state.value)
            return False

        new_work = self.work_duration if work is None else work
        new_break = self.break_duration if break_duration is None else break_duration
        if new_work <= 0 or new_break <= 0:
            raise ValueError("Durations must be positive")

        if self.store is not None:
            self.store.set_config_many(
                {WORK_DURATION_KEY: str(new_work), BREAK_DURATION_KEY: str(new_break)}
            )
        self.work_duration = new_work
        self.break_duration = new_break
        self.logger.info("durations set to work=%d break=%d", new_work, new_break)
        return True


def _parse_minutes(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        minutes = int(value)
    except ValueError:
        minutes = 0
    if minutes <= 0:
        get_logger("timer").warning("ignoring invalid stored duration %r", value)
        return default
    return minutes
