"""Cursor validation and clamping helpers shared across buffer services."""

from __future__ import annotations

from . import graphemes
from .document import BufferDocument
from .state import Cursor
from .sync import BufferValidationError


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > graphemes.length(document.get_line(row)):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def clamp_cursor(
    document: BufferDocument, cursor: Cursor, *, normal: bool = False
) -> Cursor:
    """Pull ``cursor`` back inside the document.

    With ``normal`` the column may not sit past the last character, which is
    where Normal mode keeps it; otherwise one past the end is allowed.
    """

    row, col = cursor
    row = max(0, min(row, document.line_count - 1))
    length = graphemes.length(document.get_line(row))
    limit = max(0, length - 1) if normal else length
    return (row, max(0, min(col, limit)))


__all__ = ["ensure_cursor", "clamp_cursor"]
