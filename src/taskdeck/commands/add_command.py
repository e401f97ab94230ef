"""Command 'add' of taskdeck"""

from datetime import datetime
from typing import Annotated

import typer

from taskdeck.models import Priority, TaskCreate
from taskdeck.utils.ui.formatters import format_due_date, format_success

from .decorators import AppError, command_wrapper
from .utils import open_store


def parse_datetime_option(name: str, value: str | None) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` or ISO datetime option value."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise AppError(
            f"--{name} must be YYYY-MM-DD or an ISO datetime, got {value!r}"
        ) from None


@command_wrapper
def add_command(
    ctx: typer.Context,
    title: Annotated[list[str], typer.Argument(help="Task title")],
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="low, medium or high")
    ] = "medium",
    due: Annotated[
        str | None, typer.Option("--due", "-d", help="Due date (YYYY-MM-DD or ISO datetime)")
    ] = None,
    remind: Annotated[
        str | None, typer.Option("--remind", "-r", help="Reminder time (ISO datetime)")
    ] = None,
) -> None:
    """Create a task."""
    try:
        level = Priority.parse(priority)
    except ValueError as e:
        raise AppError(str(e)) from e

    text = " ".join(title).strip()
    if not text:
        raise AppError("Task title cannot be empty")

    store = open_store(ctx)
    task = store.create_task(
        TaskCreate(
            title=text,
            priority=level,
            due_date=parse_datetime_option("due", due),
            reminder_time=parse_datetime_option("remind", remind),
        )
    )

    message = f"Created task #{task.id}: {task.title}"
    if task.due_date:
        message += f" (due {format_due_date(task.due_date)})"
    format_success(message)
