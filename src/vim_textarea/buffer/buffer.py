"""High-level buffer façade combining document, cursor, register, and history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional, Sequence, Tuple

from vim_textarea.runtime import telemetry

from . import graphemes
from .document import BufferDocument, split_lines
from .registers import Register
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror
from .undo import UndoEntry, UndoHistory
from .validation import clamp_cursor, ensure_cursor


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    lines: Tuple[str, ...]
    cursor: Cursor
    selection: Optional[Selection]

    @property
    def text(self) -> str:
        return _flatten_lines(self.lines)


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        register: Optional[Register] = None,
        history: Optional[UndoHistory] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.register = register or Register()
        self.history = history or UndoHistory()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    # -- reading -------------------------------------------------------------

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self.document.snapshot())

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def row(self) -> int:
        return self.state.cursor[0]

    @property
    def col(self) -> int:
        return self.state.cursor[1]

    def line(self, row: Optional[int] = None) -> str:
        return self.document.get_line(self.row if row is None else row)

    def line_length(self, row: Optional[int] = None) -> int:
        """Columns (grapheme clusters) on ``row``."""

        return graphemes.length(self.line(row))

    def cells(self, row: Optional[int] = None) -> Tuple[str, ...]:
        return graphemes.split(self.line(row))

    def line_slice(
        self, start: int, end: Optional[int] = None, *, row: Optional[int] = None
    ) -> str:
        return graphemes.cut(self.line(row), start, end)

    @property
    def text(self) -> str:
        return self.document.text()

    def is_empty(self) -> bool:
        return self.document.line_count == 1 and not self.document.get_line(0)

    # -- cursor --------------------------------------------------------------

    def set_cursor(self, row: int, col: int, *, normal: bool = False) -> Cursor:
        """Move the cursor, clamping it into the document."""

        target = clamp_cursor(self.document, (row, col), normal=normal)
        self.state.set_cursor(*target)
        return target

    def clamp(self, *, normal: bool = False) -> Cursor:
        return self.set_cursor(*self.state.cursor, normal=normal)

    # -- line edits ----------------------------------------------------------

    def set_line(self, row: int, text: str) -> None:
        self.document.set_line(row, text)

    def insert_lines(self, at: int, lines: Iterable[str]) -> None:
        self.document.replace_lines(at, at, lines)

    def delete_lines(self, start: int, end: int) -> Tuple[str, ...]:
        """Remove rows ``[start:end]`` and return them."""

        removed = tuple(self.document.snapshot()[start:end])
        self.document.replace_lines(start, end, ())
        return removed

    def remove_columns(self, row: int, start: int, end: int) -> str:
        """Cut columns ``[start:end)`` out of ``row`` and return them."""

        line = self.line(row)
        removed = graphemes.cut(line, start, end)
        self.document.set_line(row, graphemes.splice(line, start, end))
        return removed

    def set_text(self, text: str) -> None:
        self.document.restore(split_lines(text))
        self.state.clear_selection()
        self.clamp()

    # -- character ranges ----------------------------------------------------

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        start_offset = _offset_for_cursor(self.document, start)
        end_offset = _offset_for_cursor(self.document, end)
        return self.text[start_offset:end_offset]

    def replace_range(self, start: Cursor, end: Cursor, text: str) -> Cursor:
        """Splice ``text`` over ``[start, end)`` and return the position just after it."""

        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        before = self.text
        start_offset = _offset_for_cursor(self.document, start)
        end_offset = _offset_for_cursor(self.document, end)
        self.document.restore(
            split_lines(before[:start_offset] + text + before[end_offset:])
        )
        return _cursor_from_offset(self.document, start_offset + len(text))

    def insert_text(self, text: str, *, cursor: Optional[Cursor] = None) -> Cursor:
        position = cursor or self.state.cursor
        return self.replace_range(position, position, text)

    def delete_range(self, start: Cursor, end: Cursor) -> str:
        removed = self.get_text_range(start, end)
        self.replace_range(start, end, "")
        return removed

    # -- snapshots -----------------------------------------------------------

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.lines,
            cursor=self.state.cursor,
            selection=self.state.selection,
        )

    def restore(self, lines: Sequence[str], cursor: Cursor) -> None:
        self.document.restore(lines)
        self.set_cursor(*cursor)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            attributes=dict(attributes or {}),
        )

    # -- history -------------------------------------------------------------

    def undo(self) -> Optional[UndoEntry]:
        entry = self.history.undo()
        if entry is not None:
            self.restore(entry.before_lines, entry.cursor_before)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.history.redo()
        if entry is not None:
            self.restore(entry.after_lines, entry.cursor_after)
        return entry


class Transaction(AbstractContextManager["Transaction"]):
    """Snapshot a buffer around one edit.

    ``commit()`` pushes an ``UndoEntry`` when the lines changed. Leaving the
    block with an exception puts the snapshot back.
    """

    def __init__(
        self, buffer: Buffer, label: str, *, span_name: Optional[str] = None
    ) -> None:
        self.buffer = buffer
        self.label = label
        self.span_name = span_name or f"buffer::{label}"
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._before: Optional[BufferView] = None

    def __enter__(self) -> "Transaction":
        self._before = self.buffer.snapshot()
        self._span_cm = telemetry.span(
            self.span_name,
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    @property
    def changed(self) -> bool:
        return self._before is not None and self._before.lines != self.buffer.lines

    def commit(self) -> Optional[UndoEntry]:
        if self._before is None or not self.changed:
            return None
        entry = UndoEntry(
            label=self.label,
            before_lines=self._before.lines,
            after_lines=self.buffer.lines,
            cursor_before=self._before.cursor,
            cursor_after=self.buffer.cursor,
        )
        self.buffer.history.push(entry)
        return entry

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None and self._before is not None:
            self.buffer.restore(self._before.lines, self._before.cursor)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _flatten_lines(lines: Sequence[str]) -> str:
    return "\n".join(lines)


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    before = sum(len(lines[i]) + 1 for i in range(row))
    return before + graphemes.offset(lines[row], col)


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    running = 0
    lines = document.snapshot()
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, graphemes.column(line, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, graphemes.length(lines[-1]))


__all__ = ["Buffer", "BufferView", "Transaction"]
