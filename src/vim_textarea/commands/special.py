"""History, operator-pending starters, and submit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from vim_textarea.runtime import telemetry

from .base import EXECUTED, IGNORED, BaseCommand, EditorContext, ExecuteResult

SUBMIT_KEYS: Tuple[str, ...] = ("<enter>", "<ctrl+j>")


class Undo(BaseCommand):
    """Restore the buffer as it was before the latest recorded edit.

    Not itself recorded; it moves the entry to the redo stack instead.
    """

    command_id = "history.undo"
    trigger_keys = ("u",)
    content = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        entry = ctx.buffer.undo()
        if entry is None:
            return IGNORED
        ctx.buffer.clamp(normal=True)
        telemetry.record_event(
            "history.undo", level="debug", data={"label": entry.label}
        )
        return EXECUTED


class Redo(BaseCommand):
    command_id = "history.redo"
    trigger_keys = ("<ctrl+r>",)
    content = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        entry = ctx.buffer.redo()
        if entry is None:
            return IGNORED
        ctx.buffer.clamp(normal=True)
        telemetry.record_event(
            "history.redo", level="debug", data={"label": entry.label}
        )
        return EXECUTED


@dataclass(frozen=True, slots=True)
class StartPending(BaseCommand):
    """Operator key (``d``, ``c``, ``y``, ``g``) that waits for a motion."""

    operator: str = "d"

    @property
    def id(self) -> str:
        return f"pending.{self.operator}"

    def keys(self) -> Tuple[str, ...]:
        return (self.operator,)

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ctx.pending.start(self.operator, ctx.mode)
        return EXECUTED


@dataclass(frozen=True, slots=True)
class Submit(BaseCommand):
    """Hand the whole value to the host; the text area builds the message."""

    command_id = "submit"

    submit_keys: Tuple[str, ...] = SUBMIT_KEYS

    def keys(self) -> Tuple[str, ...]:
        return self.submit_keys

    def is_submit(self) -> bool:
        return True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ctx.pending.clear()
        return EXECUTED


__all__ = ["Undo", "Redo", "StartPending", "Submit", "SUBMIT_KEYS"]
