"""Tests for the reminder watcher polling loop."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import MagicMock

from taskdeck.exceptions import StoreError
from taskdeck.models import TaskCreate, TaskStatus, TaskUpdate
from taskdeck.services.notification_service import Notification, NotificationSink
from taskdeck.services.reminder_watcher import ReminderWatcher


class RecordingSink(NotificationSink):
    def __init__(self):
        self.sent: list[Notification] = []

    def send(self, notification):
        self.sent.append(notification)


def test_reminder_in_window_is_sent_once(store, clock):
    sink = RecordingSink()
    store.create_task(TaskCreate(title="stretch", reminder_time=clock() - timedelta(seconds=10)))
    watcher = ReminderWatcher(store, sink, poll_seconds=60, clock=clock)

    assert [t.title for t in watcher.check_reminders()] == ["stretch"]
    clock.advance(60)
    assert watcher.check_reminders() == []
    assert len(sink.sent) == 1


def test_future_reminder_fires_when_reached(store, clock):
    sink = RecordingSink()
    store.create_task(TaskCreate(title="later", reminder_time=clock() + timedelta(seconds=90)))
    watcher = ReminderWatcher(store, sink, poll_seconds=60, clock=clock)

    assert watcher.check_reminders() == []
    clock.advance(60)
    assert watcher.check_reminders() == []
    clock.advance(60)
    assert [t.title for t in watcher.check_reminders()] == ["later"]


def test_done_tasks_and_old_reminders_are_skipped(store, clock):
    sink = RecordingSink()
    done = store.create_task(TaskCreate(title="done", reminder_time=clock()))
    store.update_task(done.id, TaskUpdate(status=TaskStatus.DONE))
    store.create_task(TaskCreate(title="old", reminder_time=clock() - timedelta(hours=2)))
    watcher = ReminderWatcher(store, sink, poll_seconds=60, clock=clock)

    assert watcher.check_reminders() == []
    assert sink.sent == []


def test_run_logs_store_errors_and_keeps_going(clock):
    store = MagicMock()
    store.list_tasks.side_effect = [StoreError("locked"), []]
    sleep = MagicMock()
    watcher = ReminderWatcher(store, RecordingSink(), poll_seconds=5, clock=clock)

    watcher.run(iterations=2, sleep=sleep)

    assert store.list_tasks.call_count == 2
    sleep.assert_called_once_with(5)
