"""Smoke tests for the Textual front end."""

from __future__ import annotations

import pytest
from textual import events

from taskdeck.models import TaskCreate
from taskdeck.models.focus import PomodoroTimer, TimerState
from taskdeck.session import SessionController, Tab
from taskdeck.ui import TaskDeckApp, key_name
from taskdeck.ui.views import render_body, render_status


@pytest.fixture
def controller(store, clock):
    timer = PomodoroTimer(work_duration=1, break_duration=1, store=store, clock=clock)
    return SessionController(store, timer=timer)


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("j", "j", "j"),
        ("G", "G", "G"),
        ("colon", ":", ":"),
        ("space", " ", " "),
        ("escape", "\x1b", "escape"),
        ("enter", "\r", "enter"),
        ("shift+tab", None, "shift+tab"),
    ],
)
def test_key_name(key, character, expected):
    assert key_name(events.Key(key, character)) == expected


def test_views_render_every_tab(controller):
    controller.store.create_task(TaskCreate(title="render me"))
    controller.load()
    for tab in Tab:
        controller.state.tab = tab
        assert render_body(controller.state) is not None
    controller.state.show_help = True
    assert render_body(controller.state) is not None


def test_status_shows_command_line(controller):
    controller.handle_key(":")
    controller.handle_key("w")
    assert render_status(controller.state).plain == ":w▏"


@pytest.mark.asyncio
async def test_create_task_and_quit(controller):
    app = TaskDeckApp(controller, notifications=False)
    async with app.run_test() as pilot:
        await pilot.press("n", "h", "i", "enter")
        assert [t.title for t in controller.state.tasks] == ["hi"]
        await pilot.press("q")
    assert controller.state.should_quit


@pytest.mark.asyncio
async def test_ticks_drive_the_timer(controller):
    app = TaskDeckApp(controller, notifications=False)
    async with app.run_test() as pilot:
        await pilot.press("s")
        assert controller.timer.state is TimerState.WORKING
        app._last_tick -= 60
        app._on_tick()
        await pilot.pause()
        assert controller.timer.state is TimerState.ON_BREAK
