"""Tests for notification sinks and fire-and-forget delivery."""

from __future__ import annotations

from datetime import UTC, datetime

from rich.console import Console

from taskdeck.models import Task
from taskdeck.services.notification_service import (
    CallbackNotificationSink,
    ConsoleNotificationSink,
    Notification,
    NotificationSink,
    NullNotificationSink,
    deliver,
    pomodoro_complete,
    task_reminder,
)


class _Exploding(NotificationSink):
    def send(self, notification):
        raise OSError("no terminal")


def test_deliver_swallows_sink_failure():
    assert deliver(_Exploding(), Notification("t", "b")) is False


def test_callback_sink():
    received = []
    assert deliver(CallbackNotificationSink(received.append), Notification("t", "b"))
    assert received == [Notification("t", "b")]


def test_null_sink():
    assert deliver(NullNotificationSink(), Notification("t", "b"))


def test_console_sink_prints():
    console = Console(record=True, width=80)
    ConsoleNotificationSink(console=console, bell=False).send(Notification("Title", "body"))
    assert "Title body" in console.export_text()


def test_pomodoro_messages():
    assert "complete" in pomodoro_complete(is_break=False).title
    assert "Break over" in pomodoro_complete(is_break=True).title


def test_task_reminder_message():
    now = datetime(2026, 1, 1, tzinfo=UTC)
    task = Task(id=1, title="call mum", created_at=now, updated_at=now)
    notification = task_reminder(task)
    assert "call mum" in notification.title
    assert notification.body == "Due: none"
    assert notification.severity == "warning"
