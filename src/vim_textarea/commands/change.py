"""Change commands: delete a range, then continue in Insert mode."""

from __future__ import annotations

from vim_textarea.modes import Mode

from .base import EXECUTED, ChangeCommand, EditorContext, ExecuteResult
from .words import change_word_end


def _enter_insert(ctx: EditorContext, row: int, col: int) -> ExecuteResult:
    ctx.switch_mode(Mode.INSERT)
    ctx.buffer.set_cursor(row, col)
    return EXECUTED


def change_columns(ctx: EditorContext, start: int, end: int) -> ExecuteResult:
    buffer = ctx.buffer
    if start < end:
        removed = buffer.remove_columns(buffer.row, start, end)
        ctx.register.yank(removed, linewise=False)
    return _enter_insert(ctx, buffer.row, start)


def change_rows(ctx: EditorContext, start: int, end: int) -> ExecuteResult:
    """Replace rows ``[start:end]`` with one empty line and type into it."""

    buffer = ctx.buffer
    end = min(end, buffer.line_count)
    ctx.register.yank("\n".join(buffer.lines[start:end]), linewise=True)
    buffer.document.replace_lines(start, end, [""])
    return _enter_insert(ctx, start, 0)


class ChangeLine(ChangeCommand):
    command_id = "change.line"
    trigger_keys = ("cc",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return change_rows(ctx, row, row + 1)


class ChangeWord(ChangeCommand):
    """``cw`` stops at the end of the word, leaving trailing blanks in place."""

    command_id = "change.word"
    trigger_keys = ("cw",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        col = ctx.buffer.col
        end = change_word_end(ctx.buffer.line(), col)
        return change_columns(ctx, min(col, ctx.buffer.line_length()), end)


class ChangeToEol(ChangeCommand):
    command_id = "change.to_eol"
    trigger_keys = ("c$", "C")

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        length = ctx.buffer.line_length()
        return change_columns(ctx, min(ctx.buffer.col, length), length)


class ChangeToLineStart(ChangeCommand):
    command_id = "change.to_line_start"
    trigger_keys = ("c0",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return change_columns(ctx, 0, ctx.buffer.col)


class ChangeLinesDown(ChangeCommand):
    command_id = "change.lines_down"
    trigger_keys = ("cj",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return change_rows(ctx, row, row + 2)


class ChangeLinesUp(ChangeCommand):
    command_id = "change.lines_up"
    trigger_keys = ("ck",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return change_rows(ctx, max(row - 1, 0), row + 1)


class ChangeToLastLine(ChangeCommand):
    command_id = "change.to_last_line"
    trigger_keys = ("cG",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return change_rows(ctx, ctx.buffer.row, ctx.buffer.line_count)


class ChangeToFirstLine(ChangeCommand):
    command_id = "change.to_first_line"
    trigger_keys = ("cgg",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return change_rows(ctx, 0, ctx.buffer.row + 1)


__all__ = [
    "ChangeLine",
    "ChangeWord",
    "ChangeToEol",
    "ChangeToLineStart",
    "ChangeLinesDown",
    "ChangeLinesUp",
    "ChangeToLastLine",
    "ChangeToFirstLine",
    "change_columns",
    "change_rows",
]
