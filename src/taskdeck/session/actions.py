"""High-level actions produced by the input dispatcher and command parser.

Both key gestures and colon commands resolve to these immutable values;
the session controller is the only thing that interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from taskdeck.exceptions import CommandErrorKind
from taskdeck.models import Priority


class Action:
    """Base class for all actions."""


# -------------------- session --------------------
@dataclass(frozen=True)
class Quit(Action):
    pass


@dataclass(frozen=True)
class SaveAndQuit(Action):
    pass


@dataclass(frozen=True)
class ShowHelp(Action):
    pass


@dataclass(frozen=True)
class CancelGesture(Action):
    """Pending gesture, count and command line were discarded."""


# -------------------- motions --------------------
@dataclass(frozen=True)
class MoveDown(Action):
    count: int = 1


@dataclass(frozen=True)
class MoveUp(Action):
    count: int = 1


@dataclass(frozen=True)
class MoveLeft(Action):
    """Previous tab, ``count`` times."""

    count: int = 1


@dataclass(frozen=True)
class MoveRight(Action):
    """Next tab, ``count`` times."""

    count: int = 1


@dataclass(frozen=True)
class JumpToFirst(Action):
    pass


@dataclass(frozen=True)
class JumpToLast(Action):
    pass


@dataclass(frozen=True)
class JumpToLine(Action):
    """Select the 1-based ``line`` of the current list."""

    line: int


@dataclass(frozen=True)
class SwitchTab(Action):
    """Show tab ``tab`` (0-based)."""

    tab: int


@dataclass(frozen=True)
class NextTab(Action):
    pass


@dataclass(frozen=True)
class PreviousTab(Action):
    pass


# -------------------- items --------------------
@dataclass(frozen=True)
class CreateNew(Action):
    """Create a task or note. A missing title means: ask for one.

    ``content`` becomes the body of a note or the description of a task.
    """

    title: str | None = None
    priority: Priority | None = None
    due_date: datetime | None = None
    task_id: int | None = None
    content: str | None = None


@dataclass(frozen=True)
class DeleteSelected(Action):
    pass


@dataclass(frozen=True)
class ToggleStatus(Action):
    pass


@dataclass(frozen=True)
class ToggleInProgress(Action):
    pass


@dataclass(frozen=True)
class CyclePriority(Action):
    pass


# -------------------- timer --------------------
@dataclass(frozen=True)
class TimerToggle(Action):
    """Start, pause or resume the pomodoro timer."""


@dataclass(frozen=True)
class TimerCancel(Action):
    pass


@dataclass(frozen=True)
class AdjustWork(Action):
    """Change the work duration by ``delta`` steps."""

    delta: int


@dataclass(frozen=True)
class AdjustBreak(Action):
    """Change the break duration by ``delta`` steps."""

    delta: int


@dataclass(frozen=True)
class ConfigureTimer(Action):
    """Set durations in minutes; None leaves a duration unchanged."""

    work: int | None = None
    break_duration: int | None = None


# -------------------- command line --------------------
@dataclass(frozen=True)
class EnterCommandLine(Action):
    pass


@dataclass(frozen=True)
class SubmitCommand(Action):
    text: str


@dataclass(frozen=True)
class CommandFailed(Action):
    """A colon command was refused; ``text`` is what the user typed."""

    kind: CommandErrorKind
    message: str
    text: str = field(default="")
