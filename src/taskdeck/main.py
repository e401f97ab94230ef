"""Main entry point for the taskdeck CLI."""

from typing import Annotated

import typer

from taskdeck import __version__
from taskdeck.commands import (
    add_command,
    complete_command,
    config,
    list_command,
    notes_command,
    show_command,
    watch_command,
)
from taskdeck.utils.ui.console import get_console

app = typer.Typer(
    name="taskdeck",
    help="Tasks, notes and a pomodoro timer in your terminal",
    invoke_without_command=True,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]taskdeck[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    db_path: Annotated[
        str | None,
        typer.Option("--db-path", envvar="TASKDECK_DB", help="SQLite database file"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version"
        ),
    ] = False,
) -> None:
    """Tasks, notes and a pomodoro timer in your terminal.

    Run without a command to open the interactive view.
    """
    ctx.obj = {"db_path": db_path}
    if ctx.invoked_subcommand is None:
        show_command.show_command(ctx)


app.command("show")(show_command.show_command)
app.command("add")(add_command.add_command)
app.command("list")(list_command.list_command)
app.command("complete")(complete_command.complete_command)
app.command("notes")(notes_command.notes_command)
app.command("note")(notes_command.note_command)
app.command("watch")(watch_command.watch_command)
app.command("config")(config.config_command)


if __name__ == "__main__":
    app()
