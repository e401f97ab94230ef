"""Commands 'notes' and 'note' of taskdeck"""

from typing import Annotated

import typer

from taskdeck.models import NoteCreate
from taskdeck.services import NoteService
from taskdeck.session.ordering import order_notes
from taskdeck.utils.ui.formatters import format_notes_table, format_success

from .decorators import command_wrapper
from .utils import open_store


@command_wrapper
def notes_command(
    ctx: typer.Context,
    task_id: Annotated[
        int | None, typer.Option("--task", "-t", help="Only notes attached to this task")
    ] = None,
    search: Annotated[
        str | None, typer.Option("--search", "-s", help="Match title or content")
    ] = None,
) -> None:
    """List notes, newest first."""
    store = open_store(ctx)
    notes, _ = order_notes(store.list_notes(), None)
    if task_id is not None:
        notes = NoteService.notes_by_task(notes, task_id)
    if search:
        notes = NoteService.search_notes(notes, search)
    format_notes_table(notes)


@command_wrapper
def note_command(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Note title")],
    content: Annotated[
        str, typer.Option("--content", "-c", help="Note body (markdown)")
    ] = "",
    task_id: Annotated[
        int | None, typer.Option("--task", "-t", help="Attach to this task")
    ] = None,
) -> None:
    """Create a note."""
    store = open_store(ctx)
    if task_id is not None:
        store.get_task(task_id)
    note = store.create_note(NoteCreate(title=title, content=content, task_id=task_id))
    format_success(f"Created note #{note.id}: {note.title}")
