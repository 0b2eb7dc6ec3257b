from __future__ import annotations

from vim_textarea.modes import Mode


def test_linewise_paste_below_and_above(make_editor, press) -> None:
    editor = make_editor("one\ntwo")
    press(editor, "yyp")
    assert editor.lines == ("one", "one", "two")
    assert editor.cursor == (1, 0)

    editor = make_editor("one\ntwo", cursor=(1, 0))
    press(editor, "yyP")
    assert editor.lines == ("one", "two", "two")
    assert editor.cursor == (1, 0)


def test_linewise_paste_lands_on_first_non_blank(make_editor, press) -> None:
    editor = make_editor("  indented\nx", cursor=(0, 0))
    press(editor, "yyjp")
    assert editor.lines == ("  indented", "x", "  indented")
    assert editor.cursor == (2, 2)


def test_multi_line_register_pastes_every_line(make_editor, press) -> None:
    editor = make_editor("a\nb\nc")
    press(editor, "djp")
    assert editor.lines == ("c", "a", "b")
    assert editor.cursor == (1, 0)


def test_charwise_paste_after_cursor(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "yw$p")
    assert editor.lines == ("hello worldhello ",)
    assert editor.cursor == (0, 16)


def test_charwise_paste_before_cursor(make_editor, press) -> None:
    editor = make_editor("ab xy")
    press(editor, "yw$P")
    assert editor.lines == ("ab xab y",)
    assert editor.cursor == (0, 6)


def test_charwise_paste_on_empty_line(make_editor, press) -> None:
    editor = make_editor("word\n", cursor=(0, 0))
    press(editor, "ywjp")
    assert editor.lines == ("word", "word")
    assert editor.cursor == (1, 3)


def test_paste_with_empty_register_is_ignored(make_editor, press) -> None:
    editor = make_editor("abc")
    press(editor, "p")
    assert editor.lines == ("abc",)
    assert not editor.can_undo()


def test_paste_is_refused_when_it_would_exceed_char_limit(make_editor, press) -> None:
    editor = make_editor("abc", char_limit=5)
    press(editor, "yyp")
    assert editor.lines == ("abc",)
    assert editor.mode is Mode.NORMAL


def test_paste_then_undo_restores(make_editor, press) -> None:
    editor = make_editor("one")
    press(editor, "yyp")
    press(editor, "u")
    assert editor.lines == ("one",)
    assert editor.register.text == "one"


def test_register_is_overwritten_by_delete(make_editor, press) -> None:
    editor = make_editor("keep\ndrop")
    press(editor, "yyjdd")
    assert editor.register.text == "drop"
    press(editor, "P")
    assert editor.lines == ("drop", "keep")
