"""Command 'watch' of taskdeck: the reminder watcher."""

from typing import Annotated

import typer

from taskdeck.services import get_config_service
from taskdeck.services.notification_service import ConsoleNotificationSink
from taskdeck.services.reminder_watcher import ReminderWatcher
from taskdeck.utils.ui.console import get_console

from .decorators import command_wrapper
from .utils import open_store


@command_wrapper
def watch_command(
    ctx: typer.Context,
    once: Annotated[
        bool, typer.Option("--once", help="Check reminders once and exit")
    ] = False,
) -> None:
    """Watch for task reminders and announce them."""
    settings = get_config_service().config
    store = open_store(ctx)
    watcher = ReminderWatcher(
        store,
        ConsoleNotificationSink(bell=settings.notifications),
        poll_seconds=settings.reminder_poll_seconds,
    )
    if not once:
        get_console().print(
            f"[muted]Watching reminders every {settings.reminder_poll_seconds}s "
            "(Ctrl+C to stop)[/muted]"
        )
    try:
        watcher.run(iterations=1 if once else None)
    except KeyboardInterrupt:
        get_console().print("[muted]Stopped.[/muted]")
    finally:
        store.close()
