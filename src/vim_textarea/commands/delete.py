"""Normal-mode deletions; each writes what it removed to the register."""

from __future__ import annotations

from .base import EXECUTED, IGNORED, DeleteCommand, EditorContext, ExecuteResult
from .yank import word_span


def delete_rows(ctx: EditorContext, start: int, end: int) -> ExecuteResult:
    """Remove rows ``[start:end]`` linewise and park the cursor on the row that follows."""

    buffer = ctx.buffer
    end = min(end, buffer.line_count)
    removed = buffer.delete_lines(start, end)
    ctx.register.yank("\n".join(removed), linewise=True)
    buffer.set_cursor(min(start, buffer.line_count - 1), buffer.col, normal=True)
    return EXECUTED


def delete_columns(ctx: EditorContext, start: int, end: int) -> ExecuteResult:
    """Remove ``[start:end)`` from the cursor line charwise."""

    buffer = ctx.buffer
    if start >= end:
        return IGNORED
    removed = buffer.remove_columns(buffer.row, start, end)
    ctx.register.yank(removed, linewise=False)
    buffer.set_cursor(buffer.row, start, normal=True)
    return EXECUTED


class DeleteChar(DeleteCommand):
    command_id = "delete.char"
    trigger_keys = ("x",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        length = ctx.buffer.line_length()
        if not length:
            return IGNORED
        col = min(ctx.buffer.col, length - 1)
        return delete_columns(ctx, col, col + 1)


class DeleteLine(DeleteCommand):
    command_id = "delete.line"
    trigger_keys = ("dd",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return delete_rows(ctx, row, row + 1)


class DeleteWord(DeleteCommand):
    command_id = "delete.word"
    trigger_keys = ("dw",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return delete_columns(ctx, *word_span(ctx.buffer.line(), ctx.buffer.col))


class DeleteToEol(DeleteCommand):
    command_id = "delete.to_eol"
    trigger_keys = ("d$", "D")

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return delete_columns(ctx, ctx.buffer.col, ctx.buffer.line_length())


class DeleteLinesDown(DeleteCommand):
    command_id = "delete.lines_down"
    trigger_keys = ("dj",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return delete_rows(ctx, row, row + 2)


class DeleteLinesUp(DeleteCommand):
    command_id = "delete.lines_up"
    trigger_keys = ("dk",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        return delete_rows(ctx, max(row - 1, 0), row + 1)


class DeleteToLastLine(DeleteCommand):
    command_id = "delete.to_last_line"
    trigger_keys = ("dG",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return delete_rows(ctx, ctx.buffer.row, ctx.buffer.line_count)


class DeleteToFirstLine(DeleteCommand):
    command_id = "delete.to_first_line"
    trigger_keys = ("dgg",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return delete_rows(ctx, 0, ctx.buffer.row + 1)


__all__ = [
    "DeleteChar",
    "DeleteLine",
    "DeleteWord",
    "DeleteToEol",
    "DeleteLinesDown",
    "DeleteLinesUp",
    "DeleteToLastLine",
    "DeleteToFirstLine",
    "delete_columns",
    "delete_rows",
]
