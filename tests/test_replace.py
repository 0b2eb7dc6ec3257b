from __future__ import annotations

import pytest

from vim_textarea.commands import ReplaceChar
from vim_textarea.modes import Mode


def test_replace_char_keeps_cursor_and_mode(make_editor, press) -> None:
    editor = make_editor("hello", cursor=(0, 1))
    press(editor, "rx")
    assert editor.value == "hxllo"
    assert editor.cursor == (0, 1)
    assert editor.mode is Mode.NORMAL
    assert editor.pending_keys == ""


def test_replace_char_is_undoable(make_editor, press) -> None:
    editor = make_editor("hello", cursor=(0, 4))
    press(editor, "rO")
    assert editor.value == "hellO"
    press(editor, "u")
    assert editor.value == "hello"


def test_replace_char_with_space(make_editor, press) -> None:
    editor = make_editor("a-b", cursor=(0, 1))
    press(editor, "r<space>")
    assert editor.value == "a b"


@pytest.mark.parametrize("key", ["<escape>", "<enter>", "<ctrl+r>", "<left>"])
def test_replace_char_cancels_on_non_character(make_editor, press, key) -> None:
    editor = make_editor("hello", cursor=(0, 2))
    assert press(editor, "r" + key) is None
    assert editor.value == "hello"
    assert editor.pending_keys == ""
    assert editor.mode is Mode.NORMAL


def test_replace_char_on_empty_line_is_ignored(make_editor, press) -> None:
    editor = make_editor("")
    press(editor, "rx")
    assert editor.value == ""
    assert editor.can_undo() is False


def test_replace_char_table_entry_takes_an_argument() -> None:
    command = ReplaceChar().with_argument("z")
    assert command == ReplaceChar("z")
    assert command.id == "replace.char"
    assert command.changes_content() is True


def test_replace_mode_overwrites_and_advances(make_editor, press) -> None:
    editor = make_editor("hello")
    press(editor, "R")
    assert editor.mode is Mode.REPLACE
    assert editor.mode_indicator() == "[REPLACE]"

    press(editor, "ab")
    assert editor.value == "abllo"
    assert editor.cursor == (0, 2)


def test_replace_mode_appends_past_end_of_line(make_editor, press) -> None:
    editor = make_editor("hi", cursor=(0, 1))
    press(editor, "Rxyz")
    assert editor.value == "hxyz"
    assert editor.cursor == (0, 4)


def test_replace_mode_space_overwrites(make_editor, press) -> None:
    editor = make_editor("abc")
    press(editor, "R<space>")
    assert editor.value == " bc"
    assert editor.cursor == (0, 1)


def test_replace_mode_backspace_removes_previous_character(make_editor, press) -> None:
    editor = make_editor("hello")
    press(editor, "Rab<backspace>")
    assert editor.value == "allo"
    assert editor.cursor == (0, 1)


def test_replace_mode_backspace_at_line_start_is_ignored(make_editor, press) -> None:
    editor = make_editor("hello")
    press(editor, "R<backspace>")
    assert editor.value == "hello"
    assert editor.cursor == (0, 0)


def test_replace_mode_escape_steps_back(make_editor, press) -> None:
    editor = make_editor("hello")
    press(editor, "Rab<escape>")
    assert editor.mode is Mode.NORMAL
    assert editor.cursor == (0, 1)

    editor = make_editor("hello")
    press(editor, "R<escape>")
    assert editor.cursor == (0, 0)


def test_replace_mode_respects_char_limit(make_editor, press) -> None:
    editor = make_editor("hi", char_limit=3)
    press(editor, "Rabcd")
    assert editor.value == "abc"


def test_replace_mode_arrows_move_without_editing(make_editor, press) -> None:
    editor = make_editor("abc")
    press(editor, "R<right><right><right>x")
    assert editor.value == "abcx"


def test_replace_mode_ignores_normal_commands(make_editor, press) -> None:
    editor = make_editor("hello")
    press(editor, "Rdd")
    assert editor.value == "ddllo"
    assert editor.lines == ("ddllo",)


def test_replace_works_on_grapheme_clusters(make_editor, press) -> None:
    editor = make_editor("e\u0301tude")
    press(editor, "rx")
    assert editor.value == "xtude"

    editor = make_editor("abc")
    editor.handle_key("r")
    editor.handle_key("e\u0301")
    assert editor.value == "e\u0301bc"
    assert editor.cursor == (0, 0)
