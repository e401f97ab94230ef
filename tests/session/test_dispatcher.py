"""Unit tests for the modal key dispatcher."""

from __future__ import annotations

import pytest

from taskdeck.session import actions as a
from taskdeck.session.dispatcher import (
    AwaitingSecondPress,
    GestureIdle,
    InputDispatcher,
    Mode,
)


@pytest.fixture
def dispatcher():
    return InputDispatcher()


def press(dispatcher: InputDispatcher, *keys: str) -> list[a.Action | None]:
    return [dispatcher.handle_key(key) for key in keys]


# ---------------------------------------------------------------------------
# Repeat counts
# ---------------------------------------------------------------------------


class TestCounts:
    def test_plain_motion_defaults_to_one(self, dispatcher):
        assert dispatcher.handle_key("j") == a.MoveDown(1)
        assert dispatcher.handle_key("k") == a.MoveUp(1)

    def test_digits_then_motion_carry_count(self, dispatcher):
        assert press(dispatcher, "5", "j") == [None, a.MoveDown(5)]

    def test_multi_digit_count(self, dispatcher):
        assert press(dispatcher, "4", "2", "k")[-1] == a.MoveUp(42)

    def test_count_starting_with_tab_digit(self, dispatcher):
        results = press(dispatcher, "1", "0", "j")
        assert results == [a.SwitchTab(0), None, a.MoveDown(10)]

    @pytest.mark.parametrize("digits", ["7", "19", "250", "3003", "99"])
    def test_count_equals_typed_number(self, dispatcher, digits):
        press(dispatcher, *digits)
        assert dispatcher.handle_key("down") == a.MoveDown(int(digits))

    def test_count_is_cleared_after_motion(self, dispatcher):
        press(dispatcher, "5", "j")
        assert dispatcher.state.count_buffer == ""
        assert dispatcher.handle_key("j") == a.MoveDown(1)

    def test_leading_zero_is_ignored(self, dispatcher):
        assert press(dispatcher, "0", "j") == [None, a.MoveDown(1)]

    def test_zero_extends_existing_count(self, dispatcher):
        press(dispatcher, "5", "0")
        assert dispatcher.state.count_buffer == "50"

    def test_non_motion_key_discards_count(self, dispatcher):
        press(dispatcher, "5", "p")
        assert dispatcher.state.count_buffer == ""
        assert dispatcher.handle_key("j") == a.MoveDown(1)

    def test_arrow_keys_and_tab_motions(self, dispatcher):
        assert dispatcher.handle_key("left") == a.MoveLeft(1)
        assert press(dispatcher, "4", "l")[-1] == a.MoveRight(4)


# ---------------------------------------------------------------------------
# Tab shortcuts
# ---------------------------------------------------------------------------


class TestTabShortcuts:
    @pytest.mark.parametrize(("key", "tab"), [("1", 0), ("2", 1), ("3", 2)])
    def test_tab_digit_with_empty_count(self, dispatcher, key, tab):
        assert dispatcher.handle_key(key) == a.SwitchTab(tab)

    def test_tab_digit_after_buffered_digit_is_a_count(self, dispatcher):
        assert press(dispatcher, "5", "2") == [None, None]
        assert dispatcher.state.count_buffer == "52"

    def test_other_digits_never_switch_tabs(self, dispatcher):
        assert dispatcher.handle_key("4") is None

    def test_tab_keys(self, dispatcher):
        assert dispatcher.handle_key("tab") == a.NextTab()
        assert dispatcher.handle_key("shift+tab") == a.PreviousTab()


# ---------------------------------------------------------------------------
# Double-press gestures
# ---------------------------------------------------------------------------


class TestGestures:
    def test_gg_jumps_to_first(self, dispatcher):
        assert press(dispatcher, "g", "g") == [None, a.JumpToFirst()]

    def test_dd_deletes(self, dispatcher):
        assert press(dispatcher, "d", "d") == [None, a.DeleteSelected()]

    def test_first_press_sets_pending_key(self, dispatcher):
        dispatcher.handle_key("d")
        assert dispatcher.state.gesture == AwaitingSecondPress("d")

    def test_gesture_clears_after_firing(self, dispatcher):
        press(dispatcher, "d", "d")
        assert dispatcher.state.gesture == GestureIdle()
        assert dispatcher.handle_key("d") is None

    def test_different_gesture_key_does_not_fire(self, dispatcher):
        assert press(dispatcher, "g", "d") == [None, None]
        assert dispatcher.state.gesture == AwaitingSecondPress("d")

    def test_intervening_key_resets_gesture(self, dispatcher):
        assert press(dispatcher, "d", "j", "d") == [None, a.MoveDown(1), None]

    def test_intervening_digit_resets_gesture(self, dispatcher):
        assert press(dispatcher, "d", "5", "d") == [None, None, None]

    def test_three_presses_fire_once(self, dispatcher):
        assert press(dispatcher, "d", "d", "d") == [None, a.DeleteSelected(), None]


# ---------------------------------------------------------------------------
# G and escape
# ---------------------------------------------------------------------------


class TestJumps:
    def test_G_jumps_to_last(self, dispatcher):
        assert dispatcher.handle_key("G") == a.JumpToLast()

    def test_count_G_jumps_to_line(self, dispatcher):
        assert press(dispatcher, "5", "7", "G")[-1] == a.JumpToLine(57)

    def test_escape_clears_everything(self, dispatcher):
        press(dispatcher, "5", "d")
        assert dispatcher.handle_key("escape") == a.CancelGesture()
        assert dispatcher.state.count_buffer == ""
        assert dispatcher.state.gesture == GestureIdle()
        assert dispatcher.mode is Mode.NORMAL

    def test_escape_with_nothing_pending(self, dispatcher):
        assert dispatcher.handle_key("escape") == a.CancelGesture()


# ---------------------------------------------------------------------------
# Single keys
# ---------------------------------------------------------------------------


class TestSingleKeys:
    @pytest.mark.parametrize(
        ("key", "action"),
        [
            ("q", a.Quit()),
            ("ctrl+c", a.Quit()),
            ("n", a.CreateNew()),
            (" ", a.ToggleStatus()),
            ("x", a.ToggleStatus()),
            ("i", a.ToggleInProgress()),
            ("p", a.CyclePriority()),
            ("s", a.TimerToggle()),
            ("S", a.TimerCancel()),
            ("+", a.AdjustWork(1)),
            ("-", a.AdjustWork(-1)),
            ("]", a.AdjustBreak(1)),
            ("[", a.AdjustBreak(-1)),
            ("?", a.ShowHelp()),
        ],
    )
    def test_binding(self, dispatcher, key, action):
        assert dispatcher.handle_key(key) == action

    def test_unbound_key_is_a_noop(self, dispatcher):
        press(dispatcher, "5", "d")
        assert dispatcher.handle_key("z") is None
        assert dispatcher.state.count_buffer == ""
        assert dispatcher.state.gesture == GestureIdle()


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------


class TestCommandLine:
    def test_colon_enters_command_line(self, dispatcher):
        assert dispatcher.handle_key(":") == a.EnterCommandLine()
        assert dispatcher.mode is Mode.COMMAND_LINE
        assert dispatcher.state.command_buffer == ""

    def test_typing_and_submit(self, dispatcher):
        results = press(dispatcher, ":", "w", "q", "enter")
        assert results[-1] == a.SubmitCommand("wq")
        assert dispatcher.mode is Mode.NORMAL
        assert dispatcher.state.command_buffer == ""

    def test_keys_are_text_in_command_line(self, dispatcher):
        assert press(dispatcher, ":", "d", "d", "q", "1") == [a.EnterCommandLine()] + [None] * 4
        assert dispatcher.state.command_buffer == "ddq1"

    def test_space_appends(self, dispatcher):
        press(dispatcher, ":", "n", " ", "a", "space", "b")
        assert dispatcher.state.command_buffer == "n a b"

    def test_backspace_deletes_last_character(self, dispatcher):
        press(dispatcher, ":", "a", "b", "backspace")
        assert dispatcher.state.command_buffer == "a"

    def test_backspace_on_empty_buffer_leaves(self, dispatcher):
        dispatcher.handle_key(":")
        assert dispatcher.handle_key("backspace") == a.CancelGesture()
        assert dispatcher.mode is Mode.NORMAL

    def test_delete_clears_buffer(self, dispatcher):
        press(dispatcher, ":", "a", "b", "delete")
        assert dispatcher.state.command_buffer == ""
        assert dispatcher.mode is Mode.COMMAND_LINE

    def test_escape_aborts_without_submitting(self, dispatcher):
        press(dispatcher, ":", "q")
        assert dispatcher.handle_key("escape") == a.CancelGesture()
        assert dispatcher.mode is Mode.NORMAL
        assert dispatcher.state.command_buffer == ""

    def test_non_printable_keys_are_ignored(self, dispatcher):
        press(dispatcher, ":", "a", "up", "tab")
        assert dispatcher.state.command_buffer == "a"

    def test_open_command_line_with_prefill(self, dispatcher):
        press(dispatcher, "5", "d")
        dispatcher.open_command_line("new ")
        assert dispatcher.mode is Mode.COMMAND_LINE
        assert dispatcher.state.count_buffer == ""
        assert dispatcher.state.gesture == GestureIdle()
        press(dispatcher, "x")
        assert dispatcher.handle_key("enter") == a.SubmitCommand("new x")
