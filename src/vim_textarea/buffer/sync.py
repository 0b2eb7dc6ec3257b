"""Snapshots handed to host adapters, plus the buffer validation error."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from vim_textarea.errors import VimTextAreaError

from .state import Cursor, Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """What an adapter needs to render a buffer."""

    def pull_buffer(self) -> BufferMirror:
        ...


class BufferValidationError(VimTextAreaError):
    """Raised when a cursor or range falls outside the document."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = ["BufferMirror", "BufferSync", "BufferValidationError"]
