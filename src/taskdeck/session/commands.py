"""Colon-command parser.

``parse_command`` maps the text typed after ``:`` to the same actions the
key dispatcher produces. Bad input never raises: it comes back as a
:class:`~taskdeck.session.actions.CommandFailed` action.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from taskdeck.exceptions import CommandError, CommandErrorKind
from taskdeck.models import Priority
from taskdeck.session import actions as a


def split_arguments(tokens: list[str]) -> tuple[list[str], dict[str, str]]:
    """Separate positional words from ``key=value`` pairs."""
    words: list[str] = []
    pairs: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if sep and key:
            pairs[key] = value
        else:
            words.append(token)
    return words, pairs


def _positive_int(name: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise CommandError(
            CommandErrorKind.INVALID_ARGUMENT, f"{name} must be a number, got {value!r}"
        ) from None
    if number <= 0:
        raise CommandError(CommandErrorKind.INVALID_ARGUMENT, f"{name} must be positive")
    return number


def _parse_due(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise CommandError(
            CommandErrorKind.INVALID_ARGUMENT, f"due must look like YYYY-MM-DD, got {value!r}"
        ) from None


BODY_KEYS = ("content=", "body=")


def _split_body(args: list[str]) -> tuple[list[str], str | None]:
    """Everything from ``content=`` (or ``body=``) onwards is free text."""
    for index, token in enumerate(args):
        if token.startswith(BODY_KEYS):
            first = token.partition("=")[2]
            return args[:index], " ".join([first, *args[index + 1 :]]).strip()
    return args, None


def _create_new(args: list[str]) -> a.Action:
    args, content = _split_body(args)
    words, pairs = split_arguments(args)
    priority = None
    due_date = None
    task_id = None

    if not words and (pairs or content is not None):
        raise CommandError(CommandErrorKind.INVALID_ARGUMENT, "new needs a title")
    if "priority" in pairs:
        try:
            priority = Priority.parse(pairs["priority"])
        except ValueError as e:
            raise CommandError(CommandErrorKind.INVALID_ARGUMENT, str(e)) from None
    if "due" in pairs:
        due_date = _parse_due(pairs["due"])
    if "task" in pairs:
        task_id = _positive_int("task", pairs["task"])

    return a.CreateNew(
        title=" ".join(words) or None,
        priority=priority,
        due_date=due_date,
        task_id=task_id,
        content=content or None,
    )


def _configure_timer(args: list[str]) -> a.Action:
    _, pairs = split_arguments(args)
    work = _positive_int("work", pairs["work"]) if "work" in pairs else None
    break_duration = _positive_int("break", pairs["break"]) if "break" in pairs else None
    return a.ConfigureTimer(work=work, break_duration=break_duration)


def _jump_to_line(name: str) -> a.Action:
    line = int(name)
    if line == 0:
        raise CommandError(CommandErrorKind.INVALID_ARGUMENT, "Line numbers start at 1")
    return a.JumpToLine(line)


COMMANDS: dict[str, Callable[[list[str]], a.Action]] = {
    "q": lambda args: a.Quit(),
    "quit": lambda args: a.Quit(),
    "wq": lambda args: a.SaveAndQuit(),
    "x": lambda args: a.SaveAndQuit(),
    "d": lambda args: a.DeleteSelected(),
    "delete": lambda args: a.DeleteSelected(),
    "n": _create_new,
    "new": _create_new,
    "pomo": _configure_timer,
    "timer": _configure_timer,
    "h": lambda args: a.ShowHelp(),
    "help": lambda args: a.ShowHelp(),
}


def parse_command(text: str) -> a.Action | None:
    """Parse one command line. Returns None for blank input."""
    tokens = text.split()
    if not tokens:
        return None

    name, args = tokens[0], tokens[1:]
    try:
        if name.isdigit():
            return _jump_to_line(name)
        handler = COMMANDS.get(name)
        if handler is None:
            raise CommandError(
                CommandErrorKind.UNRECOGNIZED_COMMAND, f"Not an editor command: {name}"
            )
        return handler(args)
    except CommandError as e:
        return a.CommandFailed(kind=e.kind, message=str(e), text=text.strip())
