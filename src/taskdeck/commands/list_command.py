"""Command 'list' of taskdeck"""

from typing import Annotated

import typer

from taskdeck.models import TaskStatus
from taskdeck.session.ordering import reorder
from taskdeck.utils.ui.formatters import format_tasks_table

from .decorators import command_wrapper
from .utils import open_store


@command_wrapper
def list_command(
    ctx: typer.Context,
    hide_done: Annotated[
        bool, typer.Option("--hide-done", help="Leave out completed tasks")
    ] = False,
) -> None:
    """List tasks in the same order as the interactive view."""
    store = open_store(ctx)
    tasks, _ = reorder(store.list_tasks(), None)
    if hide_done:
        tasks = [task for task in tasks if task.status is not TaskStatus.DONE]
    format_tasks_table(tasks)
