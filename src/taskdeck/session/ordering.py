"""Display ordering for tasks and notes.

Lists are re-sorted after every mutation. Selection is tracked by record id,
so the highlighted item follows a task wherever the sort moves it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from taskdeck.models import Note, Priority, Task, TaskStatus

STATUS_RANK = {
    TaskStatus.IN_PROGRESS: 0,
    TaskStatus.TODO: 1,
    TaskStatus.DONE: 2,
}

PRIORITY_RANK = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


class HasId(Protocol):
    id: int


T = TypeVar("T", bound=HasId)


def task_sort_key(task: Task) -> tuple[int, int, bool, float]:
    """Status, then priority, then due date (tasks without one last)."""
    due = task.due_date
    return (
        STATUS_RANK[task.status],
        PRIORITY_RANK[task.priority],
        due is None,
        due.timestamp() if due is not None else 0.0,
    )


def resolve_selection(
    items: Sequence[T],
    selected_id: int | None,
    fallback_index: int | None = None,
) -> int | None:
    """Find the index to highlight in ``items``.

    The previously selected id wins. If it is gone, ``fallback_index`` is
    clamped into range; without a fallback the first item is selected.
    """
    if not items:
        return None

    if selected_id is not None:
        for index, item in enumerate(items):
            if item.id == selected_id:
                return index

    index = fallback_index if fallback_index is not None else 0
    return min(max(index, 0), len(items) - 1)


def reorder(
    tasks: Sequence[Task],
    previously_selected_id: int | None,
    fallback_index: int | None = None,
) -> tuple[list[Task], int | None]:
    """Sort tasks for display and locate the selection in the new order.

    ``sorted`` is stable, so fully tied tasks keep their input order.
    """
    ordered = sorted(tasks, key=task_sort_key)
    return ordered, resolve_selection(ordered, previously_selected_id, fallback_index)


def order_notes(
    notes: Sequence[Note],
    previously_selected_id: int | None,
    fallback_index: int | None = None,
) -> tuple[list[Note], int | None]:
    """Newest-updated notes first."""
    ordered = sorted(notes, key=lambda note: note.updated_at.timestamp(), reverse=True)
    return ordered, resolve_selection(ordered, previously_selected_id, fallback_index)
