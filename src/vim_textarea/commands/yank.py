"""Yank commands: copy into the register without touching buffer or cursor."""

from __future__ import annotations

from vim_textarea.buffer import Cursor, graphemes

from .base import EXECUTED, BaseCommand, EditorContext, ExecuteResult
from .words import next_word_start

YANK_EVENT = "yank"


def word_span(line: str, col: int) -> tuple[int, int]:
    """``[col, end)`` covered by a ``w`` motion, clipped to the line.

    Empty when ``col`` sits at or past the end of the line.
    """

    length = graphemes.length(line)
    if col >= length:
        return col, col
    return col, min(next_word_start(line, col), length)


def announce_yank(
    ctx: EditorContext, start: Cursor, end: Cursor, *, linewise: bool
) -> None:
    """Publish the yanked span (``end`` exclusive) so a host can flash it."""

    if linewise or start < end:
        ctx.bus.emit(YANK_EVENT, {"start": start, "end": end, "linewise": linewise})


def yank_columns(ctx: EditorContext, start: int, end: int) -> ExecuteResult:
    """Copy columns ``[start:end)`` of the cursor line charwise."""

    row = ctx.buffer.row
    ctx.register.yank(ctx.buffer.line_slice(start, end), linewise=False)
    announce_yank(ctx, (row, start), (row, max(start, end)), linewise=False)
    return EXECUTED


class YankLine(BaseCommand):
    command_id = "yank.line"
    trigger_keys = ("yy",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row = ctx.buffer.row
        ctx.register.yank(ctx.buffer.line(), linewise=True)
        announce_yank(ctx, (row, 0), (row, ctx.buffer.line_length()), linewise=True)
        return EXECUTED


class YankWord(BaseCommand):
    command_id = "yank.word"
    trigger_keys = ("yw",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return yank_columns(ctx, *word_span(ctx.buffer.line(), ctx.buffer.col))


class YankToEol(BaseCommand):
    command_id = "yank.to_eol"
    trigger_keys = ("y$", "Y")

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        length = ctx.buffer.line_length()
        return yank_columns(ctx, min(ctx.buffer.col, length), length)


__all__ = [
    "YankLine",
    "YankWord",
    "YankToEol",
    "YANK_EVENT",
    "announce_yank",
    "word_span",
    "yank_columns",
]
