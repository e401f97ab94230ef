"""Command 'complete' of taskdeck"""

from typing import Annotated

import typer

from taskdeck.models import TaskStatus, TaskUpdate
from taskdeck.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import open_store


@command_wrapper
def complete_command(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(help="Task ID")],
) -> None:
    """Mark a task as done."""
    store = open_store(ctx)
    task = store.update_task(task_id, TaskUpdate(status=TaskStatus.DONE))
    format_success(f"Completed: {task.title}")
