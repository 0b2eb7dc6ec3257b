"""Visual and Visual-Line selection commands."""

from __future__ import annotations

from typing import ClassVar, Tuple

from vim_textarea.buffer import Cursor
from vim_textarea.modes import Mode

from .base import (
    EXECUTED,
    IGNORED,
    BaseCommand,
    DeleteCommand,
    EditorContext,
    ExecuteResult,
    ModeEntryCommand,
)
from .yank import announce_yank


def selection_bounds(ctx: EditorContext) -> Tuple[Cursor, Cursor]:
    """Normalized ``(start, end)`` with ``end`` exclusive.

    Visual-Line mode widens the range to whole lines.
    """

    buffer = ctx.buffer
    cursor = buffer.cursor
    anchor = buffer.state.anchor or cursor
    start, end = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
    if ctx.mode is Mode.VISUAL_LINE:
        return (start[0], 0), (end[0], buffer.line_length(end[0]))
    return start, (end[0], min(end[1] + 1, buffer.line_length(end[0])))


def _selected_text(ctx: EditorContext) -> Tuple[str, bool]:
    start, end = selection_bounds(ctx)
    if ctx.mode is Mode.VISUAL_LINE:
        return "\n".join(ctx.buffer.lines[start[0] : end[0] + 1]), True
    return ctx.buffer.get_text_range(start, end), False


def _emit(ctx: EditorContext, event: str, **payload: object) -> None:
    ctx.bus.emit(event, payload)


class EnterVisual(ModeEntryCommand):
    command_id = "mode.visual"
    trigger_keys = ("v",)
    target: ClassVar[Mode] = Mode.VISUAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        cursor = ctx.buffer.clamp(normal=True)
        ctx.buffer.state.set_anchor(cursor)
        ctx.switch_mode(self.target)
        _emit(ctx, "visual.selection", anchor=cursor, cursor=cursor)
        return EXECUTED


class EnterVisualLine(EnterVisual):
    command_id = "mode.visual_line"
    trigger_keys = ("V",)
    target = Mode.VISUAL_LINE


class VisualEscape(ModeEntryCommand):
    command_id = "visual.escape"
    trigger_keys = ("<escape>",)
    default_mode = Mode.VISUAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ctx.switch_mode(Mode.NORMAL)
        ctx.buffer.clamp(normal=True)
        return EXECUTED


class VisualToggle(ModeEntryCommand):
    """``v``/``V`` inside a visual mode: same kind exits, the other kind switches."""

    command_id = "visual.toggle"
    trigger_keys = ("v",)
    default_mode = Mode.VISUAL
    target: ClassVar[Mode] = Mode.VISUAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        if ctx.mode is self.target:
            ctx.switch_mode(Mode.NORMAL)
            ctx.buffer.clamp(normal=True)
        else:
            ctx.switch_mode(self.target)
        return EXECUTED


class VisualToggleLine(VisualToggle):
    command_id = "visual.toggle_line"
    trigger_keys = ("V",)
    target = Mode.VISUAL_LINE


class VisualSwapAnchor(BaseCommand):
    command_id = "visual.swap_anchor"
    trigger_keys = ("o",)
    default_mode = Mode.VISUAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        state = ctx.buffer.state
        cursor = state.cursor
        anchor = state.anchor or cursor
        state.set_anchor(cursor)
        state.set_cursor(*anchor)
        _emit(ctx, "visual.selection", anchor=cursor, cursor=anchor, swap=True)
        return EXECUTED


class VisualYank(BaseCommand):
    command_id = "visual.yank"
    trigger_keys = ("y",)
    default_mode = Mode.VISUAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        start, end = selection_bounds(ctx)
        text, linewise = _selected_text(ctx)
        ctx.register.yank(text, linewise=linewise)
        announce_yank(ctx, start, end, linewise=linewise)
        ctx.switch_mode(Mode.NORMAL)
        ctx.buffer.set_cursor(*start, normal=True)
        _emit(ctx, "visual.yank", text=text, linewise=linewise)
        return EXECUTED


class VisualDelete(DeleteCommand):
    command_id = "visual.delete"
    trigger_keys = ("d", "x")
    default_mode = Mode.VISUAL
    mode_change = True
    then: ClassVar[Mode] = Mode.NORMAL

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        if ctx.buffer.state.anchor is None:
            return IGNORED
        start, end = selection_bounds(ctx)
        text, linewise = _selected_text(ctx)
        ctx.register.yank(text, linewise=linewise)
        buffer = ctx.buffer
        if linewise:
            replacement = [""] if self.then is Mode.INSERT else []
            buffer.document.replace_lines(start[0], end[0] + 1, replacement)
            start = (min(start[0], buffer.line_count - 1), 0)
        else:
            buffer.delete_range(start, end)
        ctx.switch_mode(self.then)
        buffer.set_cursor(*start, normal=self.then is Mode.NORMAL)
        _emit(ctx, "visual.delete", text=text, linewise=linewise)
        return EXECUTED


class VisualChange(VisualDelete):
    command_id = "visual.change"
    trigger_keys = ("c",)
    then = Mode.INSERT


__all__ = [
    "EnterVisual",
    "EnterVisualLine",
    "VisualEscape",
    "VisualToggle",
    "VisualToggleLine",
    "VisualSwapAnchor",
    "VisualYank",
    "VisualDelete",
    "VisualChange",
    "selection_bounds",
]
