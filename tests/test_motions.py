from __future__ import annotations

import pytest

from vim_textarea.commands import words
from vim_textarea.modes import Mode


def test_h_and_l_stay_on_the_line(make_editor, press) -> None:
    editor = make_editor("abc")
    press(editor, "h")
    assert editor.cursor == (0, 0)
    press(editor, "llll")
    assert editor.cursor == (0, 2)


def test_j_and_k_clamp_the_column(make_editor, press) -> None:
    editor = make_editor("hello\nhi", cursor=(0, 4))
    press(editor, "j")
    assert editor.cursor == (1, 1)
    press(editor, "k")
    assert editor.cursor == (0, 1)
    press(editor, "k")
    assert editor.cursor == (0, 1)


def test_w_moves_between_words_and_lines(make_editor, press) -> None:
    editor = make_editor("foo bar\n  baz")
    press(editor, "w")
    assert editor.cursor == (0, 4)
    press(editor, "w")
    assert editor.cursor == (1, 2)
    press(editor, "w")
    assert editor.cursor == (1, 4)


def test_b_moves_back_across_lines(make_editor, press) -> None:
    editor = make_editor("foo bar\nbaz", cursor=(1, 0))
    press(editor, "b")
    assert editor.cursor == (0, 4)
    press(editor, "b")
    assert editor.cursor == (0, 0)
    press(editor, "b")
    assert editor.cursor == (0, 0)


def test_e_moves_to_word_ends(make_editor, press) -> None:
    editor = make_editor("foo bar\nbaz")
    press(editor, "e")
    assert editor.cursor == (0, 2)
    press(editor, "e")
    assert editor.cursor == (0, 6)
    press(editor, "e")
    assert editor.cursor == (1, 2)


@pytest.mark.parametrize("keys,cursor", [("0", (0, 0)), ("$", (0, 4)), ("^", (0, 2))])
def test_line_motions(make_editor, press, keys, cursor) -> None:
    editor = make_editor("  abc", cursor=(0, 3))
    press(editor, keys)
    assert editor.cursor == cursor


def test_first_and_last_line(make_editor, press) -> None:
    editor = make_editor("  a\nb\n  c", cursor=(1, 0))
    press(editor, "G")
    assert editor.cursor == (2, 2)
    press(editor, "gg")
    assert editor.cursor == (0, 2)


def test_insert_mode_arrows_reach_end_of_line(make_editor, press) -> None:
    editor = make_editor("abc\nde", mode=Mode.INSERT, cursor=(0, 3))
    press(editor, "<left>")
    assert editor.cursor == (0, 2)
    press(editor, "<right><right>")
    assert editor.cursor == (0, 3)
    press(editor, "<down>")
    assert editor.cursor == (1, 2)
    press(editor, "<up>")
    assert editor.cursor == (0, 2)
    press(editor, "<ctrl+b>")
    assert editor.cursor == (0, 1)


def test_normal_mode_arrows_clamp_like_hjkl(make_editor, press) -> None:
    editor = make_editor("abc")
    press(editor, "<right><right><right>")
    assert editor.cursor == (0, 2)


def test_unbound_keys_are_ignored(make_editor, press) -> None:
    editor = make_editor("abc", cursor=(0, 1))
    assert press(editor, "Z") is None
    assert editor.cursor == (0, 1)
    assert editor.lines == ("abc",)


def test_word_helpers_treat_punctuation_as_word_characters() -> None:
    line = "foo.bar  baz"
    assert words.next_word_start(line, 0) == 9
    assert words.prev_word_start(line, 9) == 0
    assert words.word_end(line, 0) == 6
    assert words.last_word_start(line) == 9
    assert words.first_word_end("   ") == -1
    assert words.first_non_blank("   ") == 0
    assert words.word_end("abc", 3) == -1
