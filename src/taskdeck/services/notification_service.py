"""Notification sinks for interval-completion and reminder events.

Delivery is fire-and-forget: :func:`deliver` never lets a sink failure
reach the caller, so a broken notifier cannot stall the session loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from rich.console import Console

from taskdeck.models import Task
from taskdeck.utils.logger import get_logger
from taskdeck.utils.ui.formatters import format_due_date

Severity = Literal["information", "warning", "error"]


@dataclass(frozen=True)
class Notification:
    """A user-facing event."""

    title: str
    body: str
    severity: Severity = "information"


class NotificationSink(ABC):
    """Somewhere to send notifications."""

    @abstractmethod
    def send(self, notification: Notification) -> None:
        """Deliver a notification. May raise; callers use :func:`deliver`."""


class ConsoleNotificationSink(NotificationSink):
    """Prints notifications with rich and rings the terminal bell."""

    def __init__(self, console: Console | None = None, bell: bool = True):
        from taskdeck.utils.ui.console import get_console

        self.console = console or get_console()
        self.bell = bell

    def send(self, notification: Notification) -> None:
        color = {"information": "cyan", "warning": "yellow", "error": "red"}[
            notification.severity
        ]
        self.console.print(
            f"[bold {color}]{notification.title}[/bold {color}] {notification.body}"
        )
        if self.bell:
            self.console.bell()


class CallbackNotificationSink(NotificationSink):
    """Forwards notifications to a callable, e.g. a Textual ``App.notify``."""

    def __init__(self, callback: Callable[[Notification], None]):
        self.callback = callback

    def send(self, notification: Notification) -> None:
        self.callback(notification)


class NullNotificationSink(NotificationSink):
    """Discards notifications (notifications disabled)."""

    def send(self, notification: Notification) -> None:
        return None


def deliver(sink: NotificationSink, notification: Notification) -> bool:
    """Send ``notification`` through ``sink`` without ever raising.

    Returns:
        True if the sink accepted the notification
    """
    logger = get_logger("notify")
    try:
        sink.send(notification)
    except Exception:  # pylint: disable=broad-exception-caught
        logger.exception("notification sink failed for %r", notification.title)
        return False
    logger.info("notified: %s - %s", notification.title, notification.body)
    return True


def pomodoro_complete(is_break: bool) -> Notification:
    """Message for the end of a work or break interval."""
    if is_break:
        return Notification("🍅 Break over", "Ready for the next pomodoro?")
    return Notification("🍅 Pomodoro complete", "Nice work! Time for a break.")


def task_reminder(task: Task) -> Notification:
    """Message for a task whose reminder time has arrived."""
    due = format_due_date(task.due_date) if task.due_date else "none"
    return Notification(f"📅 {task.title}", f"Due: {due}", severity="warning")
