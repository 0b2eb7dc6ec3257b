from __future__ import annotations

import pytest

from vim_textarea.commands import YankLine, YankToEol, YankWord
from vim_textarea.commands.yank import word_span


def test_yank_line(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "yy")
    assert editor.register.text == "hello world"
    assert editor.register.linewise is True
    assert editor.cursor == (0, 0)


def test_yank_word_includes_trailing_separator(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "yw")
    assert editor.register.text == "hello "
    assert editor.register.linewise is False


def test_yank_last_word_runs_to_end_of_line(make_editor, press) -> None:
    editor = make_editor("hello world", cursor=(0, 6))
    press(editor, "yw")
    assert editor.register.text == "world"


@pytest.mark.parametrize("keys", ["y$", "Y"])
def test_yank_to_end_of_line(make_editor, press, keys: str) -> None:
    editor = make_editor("hello world", cursor=(0, 6))
    press(editor, keys)
    assert editor.register.text == "world"
    assert editor.register.linewise is False
    assert editor.cursor == (0, 6)


def test_yank_line_from_the_middle_of_the_buffer(make_editor, press) -> None:
    editor = make_editor("line1\nline2\nline3", cursor=(1, 0))
    press(editor, "yy")
    assert editor.register.text == "line2"
    assert editor.cursor == (1, 0)


def test_yank_line_on_empty_buffer(make_editor, press) -> None:
    editor = make_editor("")
    press(editor, "yy")
    assert editor.register.text == ""
    assert editor.register.linewise is True


@pytest.mark.parametrize("command", [YankWord(), YankToEol()])
def test_yank_past_end_of_line_is_empty(make_editor, command) -> None:
    editor = make_editor("hello world")
    ctx = editor.context
    ctx.buffer.set_cursor(0, 11)
    command.execute(ctx)
    assert ctx.register.text == ""
    assert ctx.register.linewise is False


@pytest.mark.parametrize("command", [YankLine(), YankWord(), YankToEol()])
@pytest.mark.parametrize(
    "text,cursor",
    [
        ("hello world", (0, 0)),
        ("hello world", (0, 5)),
        ("  indented  words ", (0, 1)),
        ("one\ntwo three\n", (1, 4)),
        ("", (0, 0)),
    ],
)
def test_yanks_leave_lines_and_cursor_untouched(
    make_editor, command, text, cursor
) -> None:
    editor = make_editor(text, cursor=cursor)
    ctx = editor.context
    lines_before, cursor_before = editor.lines, editor.cursor

    command.execute(ctx)
    first = ctx.register.value
    command.execute(ctx)

    assert editor.lines == lines_before
    assert editor.cursor == cursor_before
    assert ctx.register.value == first
    assert ctx.register.linewise is isinstance(command, YankLine)
    assert not editor.can_undo()


def test_word_span_edges() -> None:
    assert word_span("hello world", 0) == (0, 6)
    assert word_span("hello world", 2) == (2, 6)
    assert word_span("hello world", 6) == (6, 11)
    assert word_span("hello   ", 5) == (5, 8)
    assert word_span("abc", 3) == (3, 3)


def _yank_events(editor):
    events = []
    editor.bus.subscribe("yank", events.append)
    return events


def test_yank_line_publishes_the_whole_row(make_editor, press) -> None:
    editor = make_editor("one\nhello world", cursor=(1, 3))
    events = _yank_events(editor)
    press(editor, "yy")
    assert events == [{"start": (1, 0), "end": (1, 11), "linewise": True}]


@pytest.mark.parametrize(
    "keys,span",
    [
        ("yw", ((0, 0), (0, 6))),
        ("y$", ((0, 0), (0, 11))),
        ("yiw", ((0, 0), (0, 5))),
        ("vey", ((0, 0), (0, 5))),
    ],
)
def test_charwise_yanks_publish_their_span(make_editor, press, keys, span) -> None:
    editor = make_editor("hello world")
    events = _yank_events(editor)
    press(editor, keys)
    start, end = span
    assert events == [{"start": start, "end": end, "linewise": False}]


def test_visual_line_yank_publishes_linewise(make_editor, press) -> None:
    editor = make_editor("a\nbc\nd", cursor=(0, 0))
    events = _yank_events(editor)
    press(editor, "Vjy")
    assert events == [{"start": (0, 0), "end": (1, 2), "linewise": True}]


def test_empty_yank_publishes_nothing(make_editor, press) -> None:
    editor = make_editor("")
    events = _yank_events(editor)
    press(editor, "yw")
    assert events == []


def test_deletes_do_not_publish_yank_highlights(make_editor, press) -> None:
    editor = make_editor("hello world")
    events = _yank_events(editor)
    press(editor, "dwdd")
    assert events == []
