"""Rich renderables for the three tabs, the status line and the help."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskdeck.models.focus import TimerState
from taskdeck.session import AppState, Mode, Tab
from taskdeck.session.dispatcher import KEY_HELP, AwaitingSecondPress
from taskdeck.utils.ui.formatters import get_progress_bar, task_line

TIMER_LABELS = {
    TimerState.IDLE: ("Ready", "dim"),
    TimerState.WORKING: ("Working", "bold red"),
    TimerState.ON_BREAK: ("Break", "bold green"),
    TimerState.PAUSED: ("Paused", "bold yellow"),
}


def render_tabs(state: AppState) -> Text:
    text = Text()
    for tab in Tab:
        style = "bold reverse" if tab is state.tab else "dim"
        text.append(f" {tab.value + 1}:{tab.title} ", style=style)
        text.append(" ")
    if not state.timer.is_idle:
        label, style = TIMER_LABELS[state.timer.state]
        text.append(f"  🍅 {label} {state.timer.format_remaining()}", style=style)
    return text


def render_tasks(state: AppState) -> RenderableType:
    if not state.tasks:
        return Text("No tasks yet. Press n to add one.", style="dim")

    selected = state.selected_task_index
    lines = []
    for index, task in enumerate(state.tasks):
        line = Text(f"{index + 1:>3} ", style="dim")
        line.append_text(task_line(task))
        if index == selected:
            line.stylize("reverse")
        lines.append(line)
    return Group(*lines)


def render_notes(state: AppState) -> RenderableType:
    if not state.notes:
        return Text("No notes yet. Press n to add one.", style="dim")

    selected = state.selected_note_index
    listing = Table.grid(padding=(0, 1))
    listing.add_column(justify="right", style="dim")
    listing.add_column()
    listing.add_column(style="cyan")
    for index, note in enumerate(state.notes):
        title = Text(note.title, style="reverse" if index == selected else "")
        task = f"#{note.task_id}" if note.task_id is not None else ""
        listing.add_row(str(index + 1), title, task)

    note = state.selected_note
    if note is None or not note.content:
        return listing
    return Group(listing, Panel(Markdown(note.content), title=note.title))


def render_pomodoro(state: AppState) -> RenderableType:
    timer = state.timer
    label, style = TIMER_LABELS[timer.state]

    body = Text(justify="center")
    body.append(f"{label}\n", style=style)
    if timer.is_idle:
        body.append(f"{timer.work_duration:02d}:00\n\n", style="bold")
    else:
        body.append(f"{timer.format_remaining()}\n", style="bold")
        body.append(f"{get_progress_bar(timer.progress(), width=30)}\n\n")

    task_id = timer.task_id if not timer.is_idle else state.selected_task_id
    task = next((t for t in state.tasks if t.id == task_id), None)
    if task is not None:
        body.append("Task: ", style="dim")
        body.append(f"{task.title} (🍅×{task.pomodoro_count})\n")

    body.append(
        f"Work {timer.work_duration} min  ·  Break {timer.break_duration} min\n", style="dim"
    )
    body.append("s start/pause  S cancel  +/- work  ]/[ break", style="dim")
    return Panel(body, title="Pomodoro", border_style=style)


def render_body(state: AppState) -> RenderableType:
    if state.show_help:
        return render_help()
    if state.tab is Tab.NOTES:
        return render_notes(state)
    if state.tab is Tab.POMODORO:
        return render_pomodoro(state)
    return render_tasks(state)


def render_status(state: AppState) -> Text:
    """Mode indicator plus the command line or the latest message."""
    pending = state.input
    if pending.mode is Mode.COMMAND_LINE:
        return Text(f":{pending.command_buffer}▏")

    text = Text(" NORMAL ", style="bold reverse")
    if pending.count_buffer:
        text.append(f" {pending.count_buffer}", style="yellow")
    if isinstance(pending.gesture, AwaitingSecondPress):
        text.append(f" {pending.gesture.key}", style="yellow")
    if state.status_message:
        text.append(f"  {state.status_message}")
    return text


def render_help() -> Table:
    table = Table(title="Keys", show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    for keys, description in KEY_HELP:
        table.add_row(keys, description)
    return table
