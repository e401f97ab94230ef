"""Textual front end for the interactive session.

The app only translates: Textual key events become dispatcher keys, a
one-second interval becomes timer ticks, and the controller's state is
re-rendered after each of them.
"""

from __future__ import annotations

import time

from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Header, Static

from taskdeck.services.notification_service import (
    CallbackNotificationSink,
    Notification,
)
from taskdeck.session import SessionController
from taskdeck.ui.views import render_body, render_status, render_tabs
from taskdeck.utils.logger import get_logger


def key_name(event: events.Key) -> str:
    """Printable keys by character, everything else by Textual's key name."""
    if event.is_printable and event.character:
        return event.character
    return event.key


class BodyScroll(VerticalScroll, can_focus=False):
    """Scrolls the tab body without taking keyboard focus."""


class TaskDeckApp(App):
    """Tasks, notes and a pomodoro timer in one terminal."""

    TITLE = "taskdeck"
    CSS = """
    #tabs {
        height: 1;
        padding: 0 1;
    }

    #body-scroll {
        height: 1fr;
        padding: 1 1 0 1;
    }

    #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    def __init__(self, controller: SessionController, notifications: bool = True):
        super().__init__()
        self.controller = controller
        self.logger = get_logger("ui")
        if notifications:
            self.controller.notifier = CallbackNotificationSink(self._show_notification)
        self._last_tick = time.monotonic()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="tabs")
        with BodyScroll(id="body-scroll"):
            yield Static(id="body")
        yield Static(id="status")

    def on_mount(self) -> None:
        """Load data and start the tick source."""
        self.controller.load()
        self._last_tick = time.monotonic()
        self.set_interval(1.0, self._on_tick)
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        key = key_name(event)
        event.stop()
        event.prevent_default()

        self.controller.handle_key(key)
        if self.controller.state.should_quit:
            self.exit()
            return
        self.refresh_view()

    def _on_tick(self) -> None:
        now = time.monotonic()
        elapsed = int(now - self._last_tick)
        if elapsed <= 0:
            return
        self._last_tick += elapsed
        if self.controller.tick(elapsed) or not self.controller.timer.is_idle:
            self.refresh_view()

    def _show_notification(self, notification: Notification) -> None:
        self.notify(
            notification.body,
            title=notification.title,
            severity=notification.severity,
        )
        self.bell()

    def refresh_view(self) -> None:
        state = self.controller.state
        self.query_one("#tabs", Static).update(render_tabs(state))
        self.query_one("#body", Static).update(render_body(state))
        self.query_one("#status", Static).update(render_status(state))
