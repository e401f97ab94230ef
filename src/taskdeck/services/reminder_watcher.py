"""Background reminder watcher.

Runs as its own process (``taskdeck watch``), polling the store on a fixed
cadence. The store is the only thing it shares with the interactive
session, and every read is its own short transaction.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from taskdeck.exceptions import StoreError
from taskdeck.models import Task, TaskStatus
from taskdeck.services.notification_service import (
    NotificationSink,
    deliver,
    task_reminder,
)
from taskdeck.services.store import Store
from taskdeck.utils.logger import get_logger


class ReminderWatcher:
    """Sends a reminder once for every open task whose reminder time passes."""

    def __init__(
        self,
        store: Store,
        sink: NotificationSink,
        poll_seconds: int = 60,
        clock: Callable[[], datetime] | None = None,
    ):
        self.store = store
        self.sink = sink
        self.poll_seconds = poll_seconds
        self.clock = clock or (lambda: datetime.now(UTC))
        self._last_check = self.clock() - timedelta(seconds=poll_seconds)
        self.logger = get_logger("watcher")

    def due_reminders(self, tasks: list[Task], now: datetime) -> list[Task]:
        """Open tasks whose reminder falls in ``(last check, now]``."""
        return [
            task
            for task in tasks
            if task.status is not TaskStatus.DONE
            and task.reminder_time is not None
            and self._last_check < task.reminder_time <= now
        ]

    def check_reminders(self) -> list[Task]:
        """Poll once and notify.

        Raises:
            StoreError: If the store cannot be read; the window is not
                advanced so the next poll retries it.
        """
        now = self.clock()
        tasks = self.store.list_tasks()
        due = self.due_reminders(tasks, now)
        for task in due:
            deliver(self.sink, task_reminder(task))
        self._last_check = now
        return due

    def run(
        self,
        iterations: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Poll forever (or ``iterations`` times), logging store failures."""
        self.logger.info("reminder watcher started (every %ss)", self.poll_seconds)
        count = 0
        while iterations is None or count < iterations:
            try:
                sent = self.check_reminders()
                if sent:
                    self.logger.info("sent %d reminder(s)", len(sent))
            except StoreError as e:
                self.logger.error("error checking reminders: %s", e)
            count += 1
            if iterations is None or count < iterations:
                sleep(self.poll_seconds)
