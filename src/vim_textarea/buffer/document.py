"""Line storage for a single editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


def split_lines(text: str) -> List[str]:
    """Split ``text`` on newlines; a trailing newline yields a trailing empty line."""

    return text.replace("\r\n", "\n").split("\n")


@dataclass(slots=True)
class BufferDocument:
    """Mutable list-of-lines document that never drops below one line."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=split_lines(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        self._touch()

    def replace_lines(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace ``[start:end]`` with ``new_lines``; an emptied document keeps ``[""]``."""

        self._lines[start:end] = list(new_lines)
        if not self._lines:
            self._lines.append("")
        self._touch()

    def restore(self, lines: Sequence[str]) -> None:
        self._lines = list(lines) or [""]
        self._touch()

    def text(self) -> str:
        return "\n".join(self._lines)

    def char_count(self) -> int:
        """Characters in the document, counting one per line break."""

        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["BufferDocument", "split_lines"]
