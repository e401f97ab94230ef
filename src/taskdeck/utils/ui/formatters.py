"""Output formatters shared by the CLI and the TUI."""

from __future__ import annotations

from datetime import UTC, datetime

from rich.table import Table
from rich.text import Text

from taskdeck.models import Note, Priority, Task, TaskStatus
from taskdeck.utils.ui.console import get_console

STATUS_ICONS = {
    TaskStatus.TODO: "○",
    TaskStatus.IN_PROGRESS: "◐",
    TaskStatus.DONE: "✓",
}

PRIORITY_STYLES = {
    Priority.HIGH: ("!!!", "bold red"),
    Priority.MEDIUM: ("!! ", "yellow"),
    Priority.LOW: ("!  ", "green"),
}


def format_error(message: str) -> None:
    get_console().print(f"[error]Error:[/error] {message}")


def format_success(message: str) -> None:
    get_console().print(f"[success]✓[/success] {message}")


def format_due_date(date: datetime | None) -> str:
    """Format a due date compactly: ``HH:MM DD/MM Day`` (year added if not current)."""
    if date is None:
        return ""
    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    date = date.astimezone()

    day_str = date.strftime("%d/%m")
    if date.year != datetime.now().year:
        day_str = date.strftime("%d/%m/%Y")
    return f"{date.strftime('%H:%M')} {day_str} {date.strftime('%a')}"


def get_progress_bar(percentage: float, width: int = 20) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 100 * width)
    return "▓" * filled + "░" * (width - filled)


def task_line(task: Task) -> Text:
    """One-line rich rendering of a task for list views."""
    marker, style = PRIORITY_STYLES[task.priority]
    line = Text()
    icon_style = "dim" if task.status is TaskStatus.DONE else ""
    line.append(f"{STATUS_ICONS[task.status]} ", style=icon_style)
    line.append(marker, style=style)
    line.append(" ")
    line.append(task.title, style="strike dim" if task.status is TaskStatus.DONE else "")
    if task.due_date:
        due_style = "bold red" if task.is_overdue() else "cyan"
        line.append(f"  {format_due_date(task.due_date)}", style=due_style)
    if task.pomodoro_count:
        line.append(f"  🍅×{task.pomodoro_count}", style="magenta")
    return line


def format_tasks_table(tasks: list[Task]) -> None:
    """Print tasks as a rich table, in the order given."""
    console = get_console()
    if not tasks:
        console.print("[muted]No tasks found.[/muted]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Title")
    table.add_column("Due")
    table.add_column("🍅", justify="right")

    for task in tasks:
        marker, style = PRIORITY_STYLES[task.priority]
        table.add_row(
            str(task.id),
            STATUS_ICONS[task.status],
            Text(marker, style=style),
            task.title,
            format_due_date(task.due_date),
            str(task.pomodoro_count),
        )
    console.print(table)


def format_notes_table(notes: list[Note]) -> None:
    """Print notes as a rich table."""
    console = get_console()
    if not notes:
        console.print("[muted]No notes found.[/muted]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title")
    table.add_column("Task", justify="right")
    table.add_column("Content", overflow="fold")

    for note in notes:
        table.add_row(
            str(note.id),
            note.title,
            str(note.task_id) if note.task_id is not None else "",
            note.content,
        )
    console.print(table)
