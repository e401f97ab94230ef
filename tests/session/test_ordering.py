"""Unit tests for the display ordering and selection tracking."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from taskdeck.models import Note, Priority, Task, TaskStatus
from taskdeck.session.ordering import order_notes, reorder, resolve_selection

BASE = datetime(2026, 1, 1, tzinfo=UTC)


def make_task(task_id: int, **kwargs) -> Task:
    data = {
        "id": task_id,
        "title": f"task {task_id}",
        "created_at": BASE,
        "updated_at": BASE,
    }
    data.update(kwargs)
    if data.get("status") is TaskStatus.DONE:
        data.setdefault("completed_at", BASE)
    return Task(**data)


def make_note(note_id: int, minutes: int) -> Note:
    stamp = BASE + timedelta(minutes=minutes)
    return Note(id=note_id, title=f"note {note_id}", created_at=BASE, updated_at=stamp)


def ids(items) -> list[int]:
    return [item.id for item in items]


# ---------------------------------------------------------------------------
# Sort order
# ---------------------------------------------------------------------------


class TestSortOrder:
    def test_status_then_priority(self):
        tasks = [
            make_task(1, status=TaskStatus.DONE, priority=Priority.HIGH),
            make_task(2, status=TaskStatus.TODO, priority=Priority.LOW),
            make_task(3, status=TaskStatus.IN_PROGRESS, priority=Priority.HIGH),
        ]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [3, 2, 1]

    def test_priority_within_status(self):
        tasks = [
            make_task(1, priority=Priority.LOW),
            make_task(2, priority=Priority.HIGH),
            make_task(3, priority=Priority.MEDIUM),
        ]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [2, 3, 1]

    def test_due_dates_earliest_first_and_missing_last(self):
        tasks = [
            make_task(1),
            make_task(2, due_date=BASE + timedelta(days=3)),
            make_task(3, due_date=BASE + timedelta(days=1)),
        ]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [3, 2, 1]

    def test_ties_keep_input_order(self):
        tasks = [make_task(5), make_task(2), make_task(9)]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [5, 2, 9]

    def test_mixed_naive_and_aware_due_dates(self):
        tasks = [
            make_task(1, due_date=datetime(2030, 1, 1)),
            make_task(2, due_date=datetime(2020, 1, 1, tzinfo=UTC)),
        ]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [2, 1]

    def test_does_not_mutate_input(self):
        tasks = [make_task(1, priority=Priority.LOW), make_task(2, priority=Priority.HIGH)]
        snapshot = [task.model_copy() for task in tasks]
        reorder(tasks, None)
        assert tasks == snapshot


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class TestSelection:
    def test_selection_follows_id(self):
        tasks = [make_task(1), make_task(2, priority=Priority.HIGH)]
        ordered, index = reorder(tasks, previously_selected_id=1)
        assert ordered[index].id == 1
        assert index == 1

    def test_delete_second_of_five_keeps_third_selected(self):
        tasks = [
            make_task(1, priority=Priority.LOW),
            make_task(2, status=TaskStatus.IN_PROGRESS),
            make_task(3, priority=Priority.HIGH),
            make_task(4, status=TaskStatus.DONE),
            make_task(5, due_date=BASE + timedelta(days=1)),
        ]
        ordered, _ = reorder(tasks, None)
        assert ids(ordered) == [2, 3, 5, 1, 4]
        second, third = ordered[1], ordered[2]

        remaining = [task for task in tasks if task.id != second.id]
        reordered, index = reorder(remaining, previously_selected_id=third.id)

        assert ids(reordered) == [2, 5, 1, 4]
        assert reordered[index].id == third.id
        assert index == 1

    def test_deleted_id_clamps_to_fallback(self):
        tasks = [make_task(1), make_task(2), make_task(3)]
        _, index = reorder(tasks, previously_selected_id=99, fallback_index=1)
        assert index == 1

    def test_deleted_last_item_selects_new_last(self):
        tasks = [make_task(1), make_task(2)]
        _, index = reorder(tasks, previously_selected_id=3, fallback_index=2)
        assert index == 1

    def test_empty_list_has_no_selection(self):
        assert reorder([], previously_selected_id=1, fallback_index=0) == ([], None)

    def test_no_previous_selection_picks_first(self):
        _, index = reorder([make_task(1), make_task(2)], None)
        assert index == 0

    def test_negative_fallback_clamps_to_zero(self):
        assert resolve_selection([make_task(1)], None, fallback_index=-3) == 0


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


class TestNotes:
    def test_newest_first(self):
        notes = [make_note(1, 0), make_note(2, 30), make_note(3, 10)]
        ordered, index = order_notes(notes, None)
        assert ids(ordered) == [2, 3, 1]
        assert index == 0

    def test_selection_by_id(self):
        notes = [make_note(1, 0), make_note(2, 30)]
        _, index = order_notes(notes, previously_selected_id=1)
        assert index == 1
