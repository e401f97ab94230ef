"""Modal, vim-style key dispatcher.

Keys arrive as plain strings: the printed character for printable keys
(``"j"``, ``"G"``, ``":"``, ``" "``) and the key name otherwise
(``"escape"``, ``"enter"``, ``"shift+tab"``). Each key produces at most one
:class:`~taskdeck.session.actions.Action`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from taskdeck.session import actions as a
from taskdeck.utils.logger import get_logger


class Mode(str, Enum):
    NORMAL = "normal"
    COMMAND_LINE = "command_line"


@dataclass(frozen=True)
class GestureIdle:
    """No gesture key is pending."""


@dataclass(frozen=True)
class AwaitingSecondPress:
    """``key`` was pressed once; the same key again fires the gesture."""

    key: str


GestureState = GestureIdle | AwaitingSecondPress


@dataclass
class DispatcherState:
    mode: Mode = Mode.NORMAL
    gesture: GestureState = field(default_factory=GestureIdle)
    count_buffer: str = ""
    command_buffer: str = ""

    def reset(self) -> None:
        self.mode = Mode.NORMAL
        self.gesture = GestureIdle()
        self.count_buffer = ""
        self.command_buffer = ""


# Double-press gestures
GESTURES: dict[str, type[a.Action]] = {
    "g": a.JumpToFirst,
    "d": a.DeleteSelected,
}

# Keys that take a repeat count
MOTIONS: dict[str, type[a.Action]] = {
    "j": a.MoveDown,
    "down": a.MoveDown,
    "k": a.MoveUp,
    "up": a.MoveUp,
    "h": a.MoveLeft,
    "left": a.MoveLeft,
    "l": a.MoveRight,
    "right": a.MoveRight,
}

# Digits that switch tabs while no count is being typed
TAB_KEYS = {"1": 0, "2": 1, "3": 2}

KEY_ACTIONS: dict[str, a.Action] = {
    "q": a.Quit(),
    "Q": a.Quit(),
    "ctrl+c": a.Quit(),
    "tab": a.NextTab(),
    "shift+tab": a.PreviousTab(),
    "n": a.CreateNew(),
    "a": a.CreateNew(),
    " ": a.ToggleStatus(),
    "space": a.ToggleStatus(),
    "x": a.ToggleStatus(),
    "i": a.ToggleInProgress(),
    "p": a.CyclePriority(),
    "s": a.TimerToggle(),
    "S": a.TimerCancel(),
    "+": a.AdjustWork(1),
    "=": a.AdjustWork(1),
    "-": a.AdjustWork(-1),
    "]": a.AdjustBreak(1),
    "[": a.AdjustBreak(-1),
    "?": a.ShowHelp(),
}

KEY_HELP: list[tuple[str, str]] = [
    ("j / k", "move down / up (accepts a count, e.g. 5j)"),
    ("h / l, tab", "previous / next tab"),
    ("1 2 3", "tasks / notes / pomodoro tab"),
    ("gg / G", "first / last item (12G jumps to item 12)"),
    ("n", "new task or note"),
    ("dd", "delete selected item"),
    ("space, x", "toggle done"),
    ("i", "toggle in progress"),
    ("p", "cycle priority"),
    ("s / S", "start-pause / cancel timer"),
    ("+ - / ] [", "work / break duration"),
    (":", "command line (:q :wq :new :pomo :12 :help)"),
    ("esc", "cancel"),
    ("q", "quit"),
]


class InputDispatcher:
    """Turns raw keys into actions, keeping its state in ``DispatcherState``."""

    def __init__(self, state: DispatcherState | None = None):
        self.state = state if state is not None else DispatcherState()
        self.logger = get_logger("dispatcher")

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def open_command_line(self, prefill: str = "") -> None:
        """Enter command-line mode with ``prefill`` already typed."""
        self.state.gesture = GestureIdle()
        self.state.count_buffer = ""
        self.state.mode = Mode.COMMAND_LINE
        self.state.command_buffer = prefill

    def handle_key(self, key: str) -> a.Action | None:
        if self.state.mode is Mode.COMMAND_LINE:
            return self._handle_command_line(key)
        return self._handle_normal(key)

    def _handle_normal(self, key: str) -> a.Action | None:
        state = self.state

        if key == "escape":
            state.reset()
            return a.CancelGesture()

        if len(key) == 1 and key.isdigit():
            return self._handle_digit(key)

        count = int(state.count_buffer) if state.count_buffer else None
        state.count_buffer = ""
        pending = state.gesture
        state.gesture = GestureIdle()

        if key in GESTURES:
            if pending == AwaitingSecondPress(key):
                return GESTURES[key]()
            state.gesture = AwaitingSecondPress(key)
            return None

        if key in MOTIONS:
            return MOTIONS[key](count or 1)

        match key:
            case "G":
                return a.JumpToLine(count) if count else a.JumpToLast()
            case ":":
                self.open_command_line()
                return a.EnterCommandLine()

        action = KEY_ACTIONS.get(key)
        if action is None:
            self.logger.debug("unbound key %r", key)
        return action

    def _handle_digit(self, key: str) -> a.Action | None:
        state = self.state
        state.gesture = GestureIdle()

        if state.count_buffer:
            state.count_buffer += key
            return None

        if key == "0":
            return None

        # A tab shortcut also starts the count, so "10j" still moves ten.
        state.count_buffer = key
        if key in TAB_KEYS:
            return a.SwitchTab(TAB_KEYS[key])
        return None

    def _handle_command_line(self, key: str) -> a.Action | None:
        state = self.state

        match key:
            case "escape":
                state.reset()
                return a.CancelGesture()
            case "enter":
                text = state.command_buffer
                state.reset()
                return a.SubmitCommand(text)
            case "backspace":
                if not state.command_buffer:
                    state.reset()
                    return a.CancelGesture()
                state.command_buffer = state.command_buffer[:-1]
                return None
            case "delete":
                state.command_buffer = ""
                return None
            case "space":
                state.command_buffer += " "
                return None

        if len(key) == 1 and key.isprintable():
            state.command_buffer += key
        return None
