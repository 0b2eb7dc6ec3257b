from __future__ import annotations

from typing import List

import pytest

from vim_textarea.modes import (
    KeyInput,
    Mode,
    ModeBus,
    ModeManager,
    key_to_chord,
    printable_text,
)
from vim_textarea.textarea import ModeChangeMsg


def test_mode_parse_accepts_values_names_and_labels() -> None:
    assert Mode.parse("insert") is Mode.INSERT
    assert Mode.parse("VISUAL_LINE") is Mode.VISUAL_LINE
    assert Mode.parse("V-LINE") is Mode.VISUAL_LINE
    assert Mode.parse(Mode.NORMAL) is Mode.NORMAL
    with pytest.raises(ValueError):
        Mode.parse("replace")


def test_mode_manager_switch_emits_once() -> None:
    bus = ModeBus()
    seen: List[object] = []
    bus.subscribe("mode.switch", seen.append)
    manager = ModeManager(bus=bus)

    assert manager.switch(Mode.INSERT) is True
    assert manager.switch("insert") is False
    assert manager.active is Mode.INSERT
    assert manager.previous is Mode.NORMAL
    assert seen == [{"mode": "insert", "previous": "normal"}]


def test_mode_indicator() -> None:
    manager = ModeManager(Mode.VISUAL_LINE)
    assert manager.indicator() == "[V-LINE]"
    assert manager.indicator(vim_enabled=False) == ""
    assert manager.in_visual


@pytest.mark.parametrize(
    "event,chord",
    [
        ("x", "x"),
        ("$", "$"),
        (" ", "<space>"),
        ("hello", "<runes>"),
        ("<ctrl+r>", "<ctrl+r>"),
        (KeyInput("r", ("CTRL",)), "<ctrl+r>"),
        (KeyInput("R", ("ctrl", "shift")), "<ctrl+r>"),
        (KeyInput("A", ("shift",), "A"), "A"),
        (KeyInput("esc"), "<escape>"),
        (KeyInput("escape", text="\x1b"), "<escape>"),
        (KeyInput("return"), "<enter>"),
        (KeyInput("enter", ("alt",)), "<alt+enter>"),
        (KeyInput("ctrl+h"), "<backspace>"),
        (KeyInput("space", text=" "), "<space>"),
        (KeyInput("Left"), "<left>"),
    ],
)
def test_key_to_chord(event, chord: str) -> None:
    assert key_to_chord(event) == chord


@pytest.mark.parametrize(
    "event,text",
    [
        (KeyInput("a", text="a"), "a"),
        (KeyInput("a"), "a"),
        (KeyInput("a", ("alt",), "a"), None),
        (KeyInput("enter", text="\r"), None),
        (KeyInput("runes", text="[<0;3;4m"), None),
        (KeyInput("runes", text="tab\there"), "tab\there"),
    ],
)
def test_printable_text(event: KeyInput, text) -> None:
    assert printable_text(event) == text


def test_visual_yank_returns_to_normal_at_selection_start(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "ve")
    assert editor.mode is Mode.VISUAL
    assert editor.context.buffer.state.selection == ((0, 0), (0, 4))

    press(editor, "y")
    assert editor.register.text == "hello"
    assert editor.register.linewise is False
    assert editor.mode is Mode.NORMAL
    assert editor.cursor == (0, 0)
    assert editor.context.buffer.state.selection is None


def test_backwards_selection_delete(make_editor, press) -> None:
    editor = make_editor("hello world", cursor=(0, 4))
    press(editor, "v0d")
    assert editor.lines == (" world",)
    assert editor.register.text == "hello"
    assert editor.cursor == (0, 0)
    assert editor.mode is Mode.NORMAL


def test_charwise_selection_across_lines(make_editor, press) -> None:
    editor = make_editor("abc\ndef", cursor=(0, 1))
    press(editor, "vjy")
    assert editor.register.text == "bc\nde"

    press(editor, "vjx")
    assert editor.lines == ("af",)


def test_visual_line_delete(make_editor, press) -> None:
    editor = make_editor("a\nb\nc")
    press(editor, "Vjd")
    assert editor.lines == ("c",)
    assert editor.register.text == "a\nb"
    assert editor.register.linewise is True
    assert editor.cursor == (0, 0)


def test_visual_line_yank_then_paste(make_editor, press) -> None:
    editor = make_editor("a\nb")
    press(editor, "Vy")
    press(editor, "jp")
    assert editor.lines == ("a", "b", "a")


def test_visual_change_enters_insert(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "vec")
    assert editor.lines == (" world",)
    assert editor.mode is Mode.INSERT
    assert editor.cursor == (0, 0)

    editor = make_editor("a\nb")
    press(editor, "Vc")
    assert editor.lines == ("", "b")
    assert editor.mode is Mode.INSERT


def test_visual_toggles(make_editor, press) -> None:
    editor = make_editor("abc", cursor=(0, 1))
    press(editor, "vl")
    press(editor, "V")
    assert editor.mode is Mode.VISUAL_LINE
    assert editor.context.buffer.state.anchor == (0, 1)
    press(editor, "V")
    assert editor.mode is Mode.NORMAL
    assert editor.context.buffer.state.anchor is None

    press(editor, "v<escape>")
    assert editor.mode is Mode.NORMAL


def test_swap_anchor(make_editor, press) -> None:
    editor = make_editor("abcdef")
    press(editor, "vll")
    press(editor, "o")
    assert editor.cursor == (0, 0)
    assert editor.context.buffer.state.anchor == (0, 2)


def test_visual_line_gg_extends_to_top(make_editor, press) -> None:
    editor = make_editor("a\nb\nc", cursor=(2, 0))
    press(editor, "Vgg")
    assert editor.mode is Mode.VISUAL_LINE
    assert editor.cursor == (0, 0)
    press(editor, "y")
    assert editor.register.text == "a\nb\nc"


def test_visual_commands_emit_bus_events(make_editor, press) -> None:
    editor = make_editor("hello")
    events: List[tuple[str, object]] = []
    for name in ("visual.selection", "visual.yank"):
        editor.bus.subscribe(name, lambda payload, n=name: events.append((n, payload)))

    press(editor, "vly")
    assert [name for name, _ in events] == ["visual.selection", "visual.yank"]
    assert events[-1][1] == {"text": "he", "linewise": False}


def test_mode_change_message(make_editor) -> None:
    editor = make_editor("abc")
    action = editor.handle_key("i")
    assert action is not None
    assert action() == ModeChangeMsg(Mode.INSERT, Mode.NORMAL)


def test_visual_delete_is_undoable(make_editor, press) -> None:
    editor = make_editor("hello world")
    press(editor, "vex")
    assert editor.lines == (" world",)
    press(editor, "u")
    assert editor.lines == ("hello world",)
