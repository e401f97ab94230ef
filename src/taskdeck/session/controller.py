"""Session controller: applies actions to the app state.

Every mutation goes to the store first and the in-memory lists are then
reloaded and re-sorted, so a failed store call leaves the state exactly as
it was and only sets a status message.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from taskdeck.exceptions import StoreError
from taskdeck.models import (
    NoteCreate,
    PomodoroSessionCreate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from taskdeck.models.focus import (
    BreakCompleted,
    PomodoroTimer,
    TimerEvent,
    TimerState,
    WorkCancelled,
    WorkCompleted,
)
from taskdeck.services.notification_service import (
    NotificationSink,
    NullNotificationSink,
    deliver,
    pomodoro_complete,
)
from taskdeck.services.store import Store
from taskdeck.session import actions as a
from taskdeck.session.commands import parse_command
from taskdeck.session.dispatcher import InputDispatcher
from taskdeck.session.ordering import order_notes, reorder
from taskdeck.session.state import AppState, Tab
from taskdeck.utils.logger import get_logger

TAB_COUNT = len(Tab)


class SessionController:
    """Glue between the dispatcher, the store, the ordering and the timer.

    Args:
        store: Persistent store
        state: Initial state; a fresh one is built when omitted
        notifier: Where interval-completion notifications go
        timer: Pomodoro timer; loaded from the store when omitted
    """

    def __init__(
        self,
        store: Store,
        state: AppState | None = None,
        notifier: NotificationSink | None = None,
        timer: PomodoroTimer | None = None,
    ):
        self.store = store
        if state is None:
            state = AppState(timer=timer or PomodoroTimer.from_store(store))
        elif timer is not None:
            state.timer = timer
        self.state = state
        self.dispatcher = InputDispatcher(state.input)
        self.notifier = notifier or NullNotificationSink()
        self.logger = get_logger("session")

    @property
    def timer(self) -> PomodoroTimer:
        return self.state.timer

    # -------------------- entry points --------------------
    def load(self) -> None:
        """Read tasks and notes from the store."""
        try:
            self._reload_tasks()
            self._reload_notes()
        except StoreError as e:
            self._fail(e)

    def handle_key(self, key: str) -> a.Action | None:
        """Feed one key through the dispatcher and apply the resulting action."""
        action = self.dispatcher.handle_key(key)
        if action is not None:
            self.apply(action)
        return action

    def tick(self, elapsed_seconds: int) -> list[TimerEvent]:
        """Advance the timer and handle any phase changes."""
        events = self.timer.tick(elapsed_seconds)
        for event in events:
            self._handle_timer_event(event)
        return events

    def apply(self, action: a.Action) -> None:
        """Apply one action. Store failures become a status message."""
        self.logger.debug("apply %r", action)
        try:
            self._apply(action)
        except StoreError as e:
            self._fail(e)

    # -------------------- dispatch --------------------
    def _apply(self, action: a.Action) -> None:
        state = self.state

        match action:
            case a.Quit():
                state.should_quit = True
            case a.SaveAndQuit():
                self.store.close()
                state.should_quit = True
            case a.ShowHelp():
                state.show_help = not state.show_help
            case a.CancelGesture():
                state.show_help = False
                state.status_message = None
            case a.EnterCommandLine():
                state.status_message = None
            case a.SubmitCommand(text=text):
                command = parse_command(text)
                if command is not None:
                    self._apply(command)
            case a.CommandFailed(message=message):
                state.status_message = message

            case a.MoveDown(count=count):
                self._move_selection(count)
            case a.MoveUp(count=count):
                self._move_selection(-count)
            case a.MoveRight(count=count):
                self._switch_tab(state.tab + count)
            case a.MoveLeft(count=count):
                self._switch_tab(state.tab - count)
            case a.NextTab():
                self._switch_tab(state.tab + 1)
            case a.PreviousTab():
                self._switch_tab(state.tab - 1)
            case a.SwitchTab(tab=tab):
                self._switch_tab(tab)
            case a.JumpToFirst():
                self._select_index(0)
            case a.JumpToLast():
                self._select_index(len(self._current_items()) - 1)
            case a.JumpToLine(line=line):
                self._select_index(line - 1)

            case a.CreateNew(title=None):
                self.dispatcher.open_command_line("new ")
                if state.tab is Tab.NOTES:
                    state.status_message = "Enter a title, then content= and the note text"
                else:
                    state.status_message = "Enter a title"
            case a.CreateNew():
                self._create(action)
            case a.DeleteSelected():
                self._delete_selected()
            case a.ToggleStatus():
                self._update_selected_task(
                    lambda task: TaskUpdate(status=task.status.toggled())
                )
            case a.ToggleInProgress():
                self._update_selected_task(
                    lambda task: TaskUpdate(status=task.status.toggled_in_progress())
                )
            case a.CyclePriority():
                self._update_selected_task(
                    lambda task: TaskUpdate(priority=task.priority.cycle())
                )

            case a.TimerToggle():
                self._toggle_timer()
            case a.TimerCancel():
                if self.timer.is_idle:
                    state.status_message = "Timer is not running"
                    return
                for event in self.timer.cancel():
                    self._handle_timer_event(event)
                state.status_message = "Timer cancelled"
            case a.AdjustWork(delta=delta):
                self._adjust_durations(lambda: self.timer.adjust_work(delta))
            case a.AdjustBreak(delta=delta):
                self._adjust_durations(lambda: self.timer.adjust_break(delta))
            case a.ConfigureTimer(work=None, break_duration=None):
                state.status_message = self._durations_message()
            case a.ConfigureTimer(work=work, break_duration=break_duration):
                self._adjust_durations(
                    lambda: self.timer.configure(work=work, break_duration=break_duration)
                )

    # -------------------- lists --------------------
    def _reload_tasks(self, fallback_index: int | None = None) -> None:
        if fallback_index is None:
            fallback_index = self.state.selected_task_index
        ordered, index = reorder(
            self.store.list_tasks(), self.state.selected_task_id, fallback_index
        )
        self.state.tasks = ordered
        self.state.selected_task_id = None if index is None else ordered[index].id

    def _reload_notes(self, fallback_index: int | None = None) -> None:
        if fallback_index is None:
            fallback_index = self.state.selected_note_index
        ordered, index = order_notes(
            self.store.list_notes(), self.state.selected_note_id, fallback_index
        )
        self.state.notes = ordered
        self.state.selected_note_id = None if index is None else ordered[index].id

    def _current_items(self) -> list:
        if self.state.tab is Tab.NOTES:
            return self.state.notes
        if self.state.tab is Tab.TASKS:
            return self.state.tasks
        return []

    def _current_index(self) -> int | None:
        if self.state.tab is Tab.NOTES:
            return self.state.selected_note_index
        return self.state.selected_task_index

    def _select_index(self, index: int) -> None:
        items = self._current_items()
        if not items:
            return
        item = items[min(max(index, 0), len(items) - 1)]
        if self.state.tab is Tab.NOTES:
            self.state.selected_note_id = item.id
        else:
            self.state.selected_task_id = item.id

    def _move_selection(self, offset: int) -> None:
        current = self._current_index()
        self._select_index((current or 0) + offset)

    def _switch_tab(self, tab: int) -> None:
        self.state.tab = Tab(tab % TAB_COUNT)

    # -------------------- mutations --------------------
    def _create(self, action: a.CreateNew) -> None:
        state = self.state
        if state.tab is Tab.NOTES:
            note = self.store.create_note(
                NoteCreate(
                    title=action.title,
                    content=action.content or "",
                    task_id=action.task_id or state.selected_task_id,
                )
            )
            state.selected_note_id = note.id
            self._reload_notes()
            state.status_message = f"Created note: {note.title}"
            return

        fields: dict[str, Any] = {"title": action.title}
        if action.priority is not None:
            fields["priority"] = action.priority
        if action.due_date is not None:
            fields["due_date"] = action.due_date
        if action.content is not None:
            fields["description"] = action.content
        task = self.store.create_task(TaskCreate(**fields))
        state.selected_task_id = task.id
        self._reload_tasks()
        state.status_message = f"Created task: {task.title}"

    def _delete_selected(self) -> None:
        state = self.state
        if state.tab is Tab.NOTES:
            note = state.selected_note
            if note is None:
                return
            index = state.selected_note_index
            self.store.delete_note(note.id)
            self._reload_notes(fallback_index=index)
            state.status_message = f"Deleted note: {note.title}"
            return

        task = state.selected_task
        if task is None or state.tab is not Tab.TASKS:
            return
        index = state.selected_task_index
        self.store.delete_task(task.id)
        self._reload_tasks(fallback_index=index)
        # Notes of a deleted task lose their association.
        self._reload_notes()
        state.status_message = f"Deleted task: {task.title}"

    def _update_selected_task(self, make_update: Callable[[Task], TaskUpdate]) -> None:
        state = self.state
        task = state.selected_task
        if task is None or state.tab is not Tab.TASKS:
            return
        updated = self.store.update_task(task.id, make_update(task))
        self._reload_tasks()
        state.status_message = (
            f"{updated.title}: {updated.status.value}, {updated.priority.name.lower()}"
        )

    # -------------------- timer --------------------
    def _toggle_timer(self) -> None:
        timer = self.timer
        was_idle = timer.is_idle
        task_id = self.state.selected_task_id if self.state.tab is not Tab.NOTES else None
        new_state = timer.toggle(task_id=task_id)

        if was_idle:
            task = self.state.selected_task if task_id is not None else None
            suffix = f" on {task.title}" if task else ""
            self.state.status_message = f"Pomodoro started{suffix}"
        elif new_state is TimerState.PAUSED:
            self.state.status_message = "Timer paused"
        else:
            self.state.status_message = "Timer resumed"

    def _adjust_durations(self, change: Callable[[], bool]) -> None:
        if not self.timer.is_idle:
            self.state.status_message = "Stop the timer before changing durations"
            return
        try:
            accepted = change()
        except ValueError as e:
            self.state.status_message = str(e)
            return
        if not accepted:
            self.state.status_message = "Duration limit reached"
            return
        self.state.status_message = self._durations_message()

    def _durations_message(self) -> str:
        return f"Work {self.timer.work_duration} min, break {self.timer.break_duration} min"

    def _handle_timer_event(self, event: TimerEvent) -> None:
        match event:
            case WorkCompleted():
                recorded = self._record_work(event, completed=True)
                deliver(self.notifier, pomodoro_complete(is_break=False))
                if recorded:
                    self.state.status_message = "Pomodoro complete, take a break"
            case WorkCancelled():
                self._record_work(event, completed=False)
            case BreakCompleted():
                deliver(self.notifier, pomodoro_complete(is_break=True))
                self.state.status_message = "Break over"

    def _record_work(self, event: WorkCompleted | WorkCancelled, completed: bool) -> bool:
        try:
            session = self.store.record_work_session(
                PomodoroSessionCreate(
                    task_id=event.task_id,
                    start_time=event.start_time,
                    end_time=event.end_time,
                    duration_minutes=event.duration_minutes,
                    completed=completed,
                )
            )
            if completed and session.task_id is not None:
                self._reload_tasks()
        except StoreError as e:
            self._fail(e)
            return False
        return True

    def _fail(self, error: StoreError) -> None:
        self.logger.error("store error: %s", error)
        self.state.status_message = f"Error: {error}"
