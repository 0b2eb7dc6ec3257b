"""``r`` (replace one character) and Replace mode entered with ``R``.

Replace mode overwrites the character under the cursor and moves right;
at the end of a line it appends instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from vim_textarea.buffer import graphemes
from vim_textarea.modes import Mode
from vim_textarea.modes.keymap_helpers import CHAR_ARGUMENT

from .base import (
    EXECUTED,
    IGNORED,
    Command,
    DeleteCommand,
    EditorContext,
    ExecuteResult,
    InsertCommand,
    ModeEntryCommand,
)


def overwrite_at_cursor(ctx: EditorContext, text: str) -> ExecuteResult:
    """Overwrite from the cursor one column per typed grapheme."""

    text = text.replace("\n", "")
    if not text:
        return IGNORED
    buffer = ctx.buffer
    row, col = buffer.cursor
    line = buffer.line()
    typed = graphemes.length(text)
    updated = graphemes.splice(line, col, col + typed, text)
    remaining = ctx.remaining_chars()
    if remaining is not None and len(updated) - len(line) > remaining:
        return IGNORED
    buffer.set_line(row, updated)
    buffer.set_cursor(row, col + typed)
    return EXECUTED


@dataclass(frozen=True, slots=True)
class ReplaceChar(DeleteCommand):
    """``r<char>``: swap the character under the cursor, cursor stays put.

    Registered with an empty ``char``; the pending builder fills it in.
    """

    command_id = "replace.char"
    trigger_keys = ("r" + CHAR_ARGUMENT,)

    char: str = ""

    def with_argument(self, text: str) -> Command:
        return ReplaceChar(text, valid_in=self.valid_in)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        length = buffer.line_length()
        if not self.char or not length:
            return IGNORED
        row = buffer.row
        col = min(buffer.col, length - 1)
        buffer.set_line(row, graphemes.splice(buffer.line(), col, col + 1, self.char))
        buffer.set_cursor(row, col, normal=True)
        return EXECUTED


class EnterReplace(ModeEntryCommand):
    command_id = "mode.replace"
    trigger_keys = ("R",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ctx.switch_mode(Mode.REPLACE)
        return EXECUTED


@dataclass(frozen=True, slots=True)
class ReplaceText(InsertCommand):
    """Literal text typed in Replace mode; built per keypress, never registered."""

    command_id = "replace.mode_char"
    default_mode = Mode.REPLACE

    text: str = ""

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return overwrite_at_cursor(ctx, self.text)


class ReplaceSpace(InsertCommand):
    command_id = "replace.mode_space"
    trigger_keys = ("<space>",)
    default_mode = Mode.REPLACE

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return overwrite_at_cursor(ctx, " ")


class ReplaceBackspace(InsertCommand):
    """Delete the character before the cursor; stops at the start of the line."""

    command_id = "replace.mode_backspace"
    trigger_keys = ("<backspace>",)
    default_mode = Mode.REPLACE

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col == 0:
            return IGNORED
        buffer.remove_columns(row, col - 1, col)
        buffer.set_cursor(row, col - 1)
        return EXECUTED


class ReplaceEscape(ModeEntryCommand):
    command_id = "mode.replace_escape"
    trigger_keys = ("<escape>",)
    default_mode = Mode.REPLACE

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        ctx.switch_mode(Mode.NORMAL)
        ctx.buffer.set_cursor(row, col - 1 if col > 0 else 0, normal=True)
        return EXECUTED


__all__ = [
    "ReplaceChar",
    "EnterReplace",
    "ReplaceText",
    "ReplaceSpace",
    "ReplaceBackspace",
    "ReplaceEscape",
    "overwrite_at_cursor",
]
