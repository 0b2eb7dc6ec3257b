"""Grapheme-cluster column arithmetic.

Buffer columns count user-perceived characters: ``"e\\u0301"`` and a
family emoji each occupy one column, however many code points they hold.
"""

from __future__ import annotations

from typing import Optional, Tuple

import grapheme


def split(line: str) -> Tuple[str, ...]:
    return tuple(grapheme.graphemes(line))


def length(line: str) -> int:
    return grapheme.length(line)


def cut(line: str, start: int, end: Optional[int] = None) -> str:
    """Columns ``[start:end)`` of ``line``."""

    return grapheme.slice(line, start, end)


def splice(line: str, start: int, end: int, text: str = "") -> str:
    """Replace columns ``[start:end)`` with ``text``."""

    return cut(line, 0, start) + text + cut(line, end)


def offset(line: str, col: int) -> int:
    """String index where column ``col`` begins."""

    if col <= 0:
        return 0
    return len(cut(line, 0, col))


def column(line: str, index: int) -> int:
    """Column holding string index ``index``."""

    return length(line[:index])


__all__ = ["split", "length", "cut", "splice", "offset", "column"]
