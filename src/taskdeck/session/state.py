"""The single explicit state object of an interactive session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from taskdeck.models import Note, Task
from taskdeck.models.focus import PomodoroTimer
from taskdeck.session.dispatcher import DispatcherState


class Tab(IntEnum):
    TASKS = 0
    NOTES = 1
    POMODORO = 2

    @property
    def title(self) -> str:
        return self.name.capitalize()


@dataclass
class AppState:
    """Everything the UI renders.

    ``tasks`` and ``notes`` are kept in display order. Selection is stored
    as a record id; indexes are derived when needed.
    """

    tasks: list[Task] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)
    selected_task_id: int | None = None
    selected_note_id: int | None = None
    tab: Tab = Tab.TASKS
    input: DispatcherState = field(default_factory=DispatcherState)
    timer: PomodoroTimer = field(default_factory=PomodoroTimer)
    status_message: str | None = None
    show_help: bool = False
    should_quit: bool = False

    @property
    def selected_task_index(self) -> int | None:
        return _index_of(self.tasks, self.selected_task_id)

    @property
    def selected_task(self) -> Task | None:
        index = self.selected_task_index
        return None if index is None else self.tasks[index]

    @property
    def selected_note_index(self) -> int | None:
        return _index_of(self.notes, self.selected_note_id)

    @property
    def selected_note(self) -> Note | None:
        index = self.selected_note_index
        return None if index is None else self.notes[index]


def _index_of(items: list[Task] | list[Note], item_id: int | None) -> int | None:
    if item_id is None:
        return None
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None
