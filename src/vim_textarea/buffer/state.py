"""Cursor and visual-selection state for a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]


@dataclass(slots=True)
class BufferState:
    """Cursor position plus the anchor of an active visual selection."""

    cursor: Cursor = (0, 0)
    anchor: Optional[Cursor] = None

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    @property
    def selection(self) -> Optional[Selection]:
        if self.anchor is None:
            return None
        return (self.anchor, self.cursor)

    def set_anchor(self, anchor: Cursor) -> None:
        self.anchor = anchor

    def clear_selection(self) -> None:
        self.anchor = None


__all__ = ["BufferState", "Cursor", "Selection"]
