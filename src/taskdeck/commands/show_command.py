"""Command 'show' of taskdeck: the interactive view."""

import typer

from taskdeck.models.focus import PomodoroTimer
from taskdeck.services import get_config_service
from taskdeck.session import SessionController
from taskdeck.ui import TaskDeckApp

from .decorators import command_wrapper
from .utils import open_store


@command_wrapper
def show_command(ctx: typer.Context) -> None:
    """Open the interactive tasks, notes and pomodoro view."""
    settings = get_config_service().config
    store = open_store(ctx)
    timer = PomodoroTimer.from_store(
        store,
        default_work=settings.default_work_minutes,
        default_break=settings.default_break_minutes,
    )
    controller = SessionController(store, timer=timer)
    try:
        TaskDeckApp(controller, notifications=settings.notifications).run()
    finally:
        store.close()
