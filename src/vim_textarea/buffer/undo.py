"""Undo/redo stacks of whole-buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .state import Cursor


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before_lines: Tuple[str, ...]
    after_lines: Tuple[str, ...]
    cursor_before: Cursor
    cursor_after: Cursor


class UndoHistory:
    """Linear history: undoing moves an entry to the redo stack, a new push clears it."""

    def __init__(self) -> None:
        self._undo: List[UndoEntry] = []
        self._redo: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._undo)

    def push(self, entry: UndoEntry) -> None:
        self._undo.append(entry)
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> Optional[UndoEntry]:
        if not self._undo:
            return None
        entry = self._undo.pop()
        self._redo.append(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self._redo:
            return None
        entry = self._redo.pop()
        self._undo.append(entry)
        return entry

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()


__all__ = ["UndoEntry", "UndoHistory"]
