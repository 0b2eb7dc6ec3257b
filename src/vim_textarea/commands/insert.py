"""Insert-mode editing keys, the literal-text fallback, and ``o`` / ``O``."""

from __future__ import annotations

from dataclasses import dataclass

from vim_textarea.modes import Mode

from .base import (
    EXECUTED,
    IGNORED,
    ChangeCommand,
    EditorContext,
    ExecuteResult,
    InsertCommand,
)


def insert_at_cursor(ctx: EditorContext, text: str) -> ExecuteResult:
    """Type ``text`` at the cursor, truncated to what ``char_limit`` still allows."""

    remaining = ctx.remaining_chars()
    if remaining is not None:
        if remaining == 0:
            return IGNORED
        text = text[:remaining]
    if not text:
        return IGNORED
    ctx.buffer.set_cursor(*ctx.buffer.insert_text(text))
    return EXECUTED


@dataclass(frozen=True, slots=True)
class InsertText(InsertCommand):
    """Literal text typed in Insert mode; built per keypress, never registered."""

    command_id = "insert.text"

    text: str = ""

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return insert_at_cursor(ctx, self.text)


class InsertSpace(InsertCommand):
    command_id = "insert.space"
    trigger_keys = ("<space>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return insert_at_cursor(ctx, " ")


class SplitLine(InsertCommand):
    command_id = "insert.split_line"
    trigger_keys = ("<alt+enter>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return insert_at_cursor(ctx, "\n")


class Backspace(InsertCommand):
    """Delete the character before the cursor, joining lines at column 0."""

    command_id = "delete.backspace"
    trigger_keys = ("<backspace>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col > 0:
            buffer.set_cursor(*buffer.replace_range((row, col - 1), (row, col), ""))
        elif row > 0:
            joined_at = buffer.line_length(row - 1)
            buffer.replace_range((row - 1, joined_at), (row, 0), "")
            buffer.set_cursor(row - 1, joined_at)
        else:
            return IGNORED
        return EXECUTED


class DeleteForward(InsertCommand):
    command_id = "delete.forward"
    trigger_keys = ("<delete>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col < buffer.line_length():
            buffer.replace_range((row, col), (row, col + 1), "")
        elif row < buffer.line_count - 1:
            buffer.replace_range((row, col), (row + 1, 0), "")
        else:
            return IGNORED
        buffer.set_cursor(row, col)
        return EXECUTED


class KillToLineStart(InsertCommand):
    command_id = "delete.kill_to_line_start"
    trigger_keys = ("<ctrl+u>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col == 0:
            return IGNORED
        buffer.set_line(row, buffer.line_slice(col))
        buffer.set_cursor(row, 0)
        return EXECUTED


class KillToLineEnd(InsertCommand):
    command_id = "delete.kill_to_line_end"
    trigger_keys = ("<ctrl+k>",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col >= buffer.line_length():
            return IGNORED
        buffer.set_line(row, buffer.line_slice(0, col))
        return EXECUTED


class _OpenLine(ChangeCommand):
    offset = 0

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        remaining = ctx.remaining_chars()
        if remaining is not None and remaining < 1:
            return IGNORED
        target = ctx.buffer.row + self.offset
        ctx.buffer.insert_lines(target, [""])
        ctx.switch_mode(Mode.INSERT)
        ctx.buffer.set_cursor(target, 0)
        return EXECUTED


class OpenLineBelow(_OpenLine):
    command_id = "insert.line_below"
    trigger_keys = ("o",)
    offset = 1


class OpenLineAbove(_OpenLine):
    command_id = "insert.line_above"
    trigger_keys = ("O",)


__all__ = [
    "InsertText",
    "InsertSpace",
    "SplitLine",
    "Backspace",
    "DeleteForward",
    "KillToLineStart",
    "KillToLineEnd",
    "OpenLineBelow",
    "OpenLineAbove",
    "insert_at_cursor",
]
