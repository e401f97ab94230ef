"""Custom exceptions for taskdeck."""

from __future__ import annotations

from enum import Enum


class TaskDeckError(Exception):
    """Base exception for all taskdeck errors."""


class CommandErrorKind(str, Enum):
    """Reasons a colon command can be refused."""

    UNRECOGNIZED_COMMAND = "unrecognized_command"
    INVALID_ARGUMENT = "invalid_argument"


class CommandError(TaskDeckError):
    """Raised while interpreting a colon command.

    Attributes:
        kind: Why the command was refused
        text: The original command text, kept for user feedback
    """

    def __init__(self, kind: CommandErrorKind, message: str, text: str = ""):
        super().__init__(message)
        self.kind = kind
        self.text = text


class StoreError(TaskDeckError):
    """Raised when the persistent store fails.

    The underlying exception is always attached as ``__cause__``. Store
    failures are recoverable: the session reports them and carries on.
    """


class NotFoundError(StoreError):
    """Raised when a record does not exist."""
