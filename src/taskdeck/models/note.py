"""Note data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Note(BaseModel):
    """A free-form note, optionally associated with a task.

    The task reference is an association only: removing the task clears
    ``task_id`` but keeps the note.
    """

    id: int
    title: str
    content: str = ""
    task_id: int | None = None
    created_at: datetime
    updated_at: datetime


class NoteCreate(BaseModel):
    """Model for creating a new note."""

    title: str
    content: str = ""
    task_id: int | None = None


class NoteUpdate(BaseModel):
    """Model for updating a note. Only explicitly set fields are written."""

    title: str | None = None
    content: str | None = None
    task_id: int | None = None
