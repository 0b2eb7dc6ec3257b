"""Cursor motions for Normal/Visual mode and the arrow keys for Insert mode."""

from __future__ import annotations

from vim_textarea.modes import Mode

from .base import EXECUTED, EditorContext, ExecuteResult, MotionCommand
from .words import (
    first_non_blank,
    first_word_end,
    first_word_start,
    last_word_start,
    next_word_start,
    prev_word_start,
    word_end,
)


def _normal_clamped(ctx: EditorContext) -> bool:
    """Normal and Visual keep the cursor on a character.

    Insert and Replace may leave it one past the end of the line.
    """

    return not ctx.mode.is_text_entry


def _move(ctx: EditorContext, row: int, col: int) -> ExecuteResult:
    ctx.buffer.set_cursor(row, col, normal=_normal_clamped(ctx))
    return EXECUTED


class MoveLeft(MotionCommand):
    command_id = "move.left"
    trigger_keys = ("h",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row, col - 1)


class MoveRight(MotionCommand):
    command_id = "move.right"
    trigger_keys = ("l",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row, col + 1)


class MoveDown(MotionCommand):
    command_id = "move.down"
    trigger_keys = ("j",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row + 1, col)


class MoveUp(MotionCommand):
    command_id = "move.up"
    trigger_keys = ("k",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row - 1, col)


class MoveWordForward(MotionCommand):
    command_id = "move.word_forward"
    trigger_keys = ("w",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        line = buffer.line()
        length = buffer.line_length()
        if col < length:
            target = next_word_start(line, col)
            if col < target < length:
                return _move(ctx, row, target)
        if row < buffer.line_count - 1:
            return _move(ctx, row + 1, first_word_start(buffer.line(row + 1)))
        # last line, no further word: settle on the final character
        return _move(ctx, row, length - 1)


class MoveWordBackward(MotionCommand):
    command_id = "move.word_backward"
    trigger_keys = ("b",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        if col > 0:
            target = prev_word_start(buffer.line(), col)
            if target < col:
                return _move(ctx, row, target)
        if row > 0:
            return _move(ctx, row - 1, last_word_start(buffer.line(row - 1)))
        return EXECUTED


class MoveWordEnd(MotionCommand):
    command_id = "move.word_end"
    trigger_keys = ("e",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        buffer = ctx.buffer
        row, col = buffer.cursor
        target = word_end(buffer.line(), col)
        if target > col:
            return _move(ctx, row, target)
        for next_row in range(row + 1, buffer.line_count):
            line = buffer.line(next_row)
            end = first_word_end(line)
            if not line or end >= 0:
                return _move(ctx, next_row, max(end, 0))
        return EXECUTED


class MoveLineStart(MotionCommand):
    command_id = "move.line_start"
    trigger_keys = ("0",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, ctx.buffer.row, 0)


class MoveLineEnd(MotionCommand):
    command_id = "move.line_end"
    trigger_keys = ("$",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, ctx.buffer.row, ctx.buffer.line_length())


class MoveFirstNonBlank(MotionCommand):
    command_id = "move.first_non_blank"
    trigger_keys = ("^",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, ctx.buffer.row, first_non_blank(ctx.buffer.line()))


class MoveFirstLine(MotionCommand):
    """``gg``; reached through the ``g`` pending table."""

    command_id = "move.first_line"
    trigger_keys = ("gg",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, 0, first_non_blank(ctx.buffer.line(0)))


class MoveLastLine(MotionCommand):
    command_id = "move.last_line"
    trigger_keys = ("G",)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        last = ctx.buffer.line_count - 1
        return _move(ctx, last, first_non_blank(ctx.buffer.line(last)))


# -- Insert-mode cursor keys ---------------------------------------------------


class LineStartInsert(MotionCommand):
    command_id = "move.line_start_insert"
    trigger_keys = ("<ctrl+a>",)
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, ctx.buffer.row, 0)


class LineEndInsert(MotionCommand):
    command_id = "move.line_end_insert"
    trigger_keys = ("<ctrl+e>",)
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        return _move(ctx, ctx.buffer.row, ctx.buffer.line_length())


class ArrowLeft(MotionCommand):
    command_id = "arrow.left"
    trigger_keys = ("<left>", "<ctrl+b>")
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row, col - 1)


class ArrowRight(MotionCommand):
    command_id = "arrow.right"
    trigger_keys = ("<right>", "<ctrl+f>")
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row, col + 1)


class ArrowUp(MotionCommand):
    command_id = "arrow.up"
    trigger_keys = ("<up>",)
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row - 1, col)


class ArrowDown(MotionCommand):
    command_id = "arrow.down"
    trigger_keys = ("<down>",)
    default_mode = Mode.INSERT

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        row, col = ctx.buffer.cursor
        return _move(ctx, row + 1, col)


__all__ = [
    "MoveLeft",
    "MoveRight",
    "MoveDown",
    "MoveUp",
    "MoveWordForward",
    "MoveWordBackward",
    "MoveWordEnd",
    "MoveLineStart",
    "MoveLineEnd",
    "MoveFirstNonBlank",
    "MoveFirstLine",
    "MoveLastLine",
    "LineStartInsert",
    "LineEndInsert",
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
]
