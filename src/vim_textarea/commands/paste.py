"""``p`` / ``P``: put the register back into the buffer."""

from __future__ import annotations

from typing import ClassVar

from .base import EXECUTED, IGNORED, BaseCommand, EditorContext, ExecuteResult
from .words import first_non_blank


class _Paste(BaseCommand):
    undoable = True
    content = True
    after: ClassVar[bool] = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        value = ctx.register.value
        if not value.text:
            return IGNORED
        remaining = ctx.remaining_chars()
        # a linewise put also adds one line break
        cost = len(value.text) + (1 if value.linewise else 0)
        if remaining is not None and cost > remaining:
            return IGNORED

        buffer = ctx.buffer
        row, col = buffer.cursor
        if value.linewise:
            target = row + 1 if self.after else row
            buffer.insert_lines(target, value.text.split("\n"))
            buffer.set_cursor(target, first_non_blank(buffer.line(target)))
            return EXECUTED

        length = buffer.line_length()
        at = col + 1 if self.after and col < length else col
        at = min(at, length)
        end_row, end_col = buffer.insert_text(value.text, cursor=(row, at))
        buffer.set_cursor(end_row, end_col - 1, normal=True)
        return EXECUTED


class PasteAfter(_Paste):
    command_id = "paste.after"
    trigger_keys = ("p",)


class PasteBefore(_Paste):
    command_id = "paste.before"
    trigger_keys = ("P",)
    after = False


__all__ = ["PasteAfter", "PasteBefore"]
