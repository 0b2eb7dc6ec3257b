"""Mode-entry commands (``i a A I``) and the Escape key in Normal/Insert."""

from __future__ import annotations

from vim_textarea.modes import Mode

from .base import EXECUTED, IGNORED, EditorContext, ExecuteResult, ModeEntryCommand
from .words import first_non_blank


def _insert_at(ctx: EditorContext, col: int) -> ExecuteResult:
    ctx.switch_mode(Mode.INSERT)
    ctx.buffer.set_cursor(ctx.buffer.row, col)
    return EXECUTED


class EnterInsert(ModeEntryCommand):
    command_id = "mode.insert"
    trigger_keys = ("i",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _insert_at(ctx, ctx.buffer.col)


class InsertAfter(ModeEntryCommand):
    command_id = "mode.insert_after"
    trigger_keys = ("a",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        col = ctx.buffer.col
        if col < ctx.buffer.line_length():
            col += 1
        return _insert_at(ctx, col)


class InsertAtEnd(ModeEntryCommand):
    command_id = "mode.insert_at_end"
    trigger_keys = ("A",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _insert_at(ctx, ctx.buffer.line_length())


class InsertAtStart(ModeEntryCommand):
    command_id = "mode.insert_at_start"
    trigger_keys = ("I",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _insert_at(ctx, first_non_blank(ctx.buffer.line()))


class EscapeInsert(ModeEntryCommand):
    """Leave Insert mode, stepping the cursor back onto the last typed character."""

    command_id = "mode.escape_insert"
    trigger_keys = ("<escape>",)
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        if not ctx.vim_enabled:
            # host keeps Escape (e.g. to close a dialog)
            return IGNORED
        row, col = ctx.buffer.cursor
        ctx.switch_mode(Mode.NORMAL)
        ctx.buffer.set_cursor(row, col - 1 if col > 0 else 0, normal=True)
        return EXECUTED


class EscapeNormal(ModeEntryCommand):
    """Escape in Normal mode only drops a pending sequence; the host sees the key."""

    command_id = "mode.escape_normal"
    trigger_keys = ("<escape>",)
    mode_change = False

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ctx.pending.clear()
        return IGNORED


__all__ = [
    "EnterInsert",
    "InsertAfter",
    "InsertAtEnd",
    "InsertAtStart",
    "EscapeInsert",
    "EscapeNormal",
]
