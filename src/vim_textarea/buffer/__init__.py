"""Line buffer, cursor, register, and undo/redo data structures."""

from . import graphemes
from .buffer import Buffer, BufferView, Transaction
from .document import BufferDocument, split_lines
from .registers import Register, RegisterValue
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror, BufferSync, BufferValidationError
from .undo import UndoEntry, UndoHistory
from .validation import clamp_cursor, ensure_cursor

__all__ = [
    "BufferDocument",
    "BufferState",
    "Cursor",
    "Selection",
    "Register",
    "RegisterValue",
    "UndoHistory",
    "UndoEntry",
    "Buffer",
    "BufferView",
    "Transaction",
    "BufferMirror",
    "BufferSync",
    "BufferValidationError",
    "clamp_cursor",
    "ensure_cursor",
    "split_lines",
    "graphemes",
]
