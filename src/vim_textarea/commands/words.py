"""Word-boundary scanning on a single line.

A word is a maximal run of non-whitespace characters; whitespace separates
words. Positions are columns, one per grapheme cluster.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from vim_textarea.buffer import graphemes

Cells = Sequence[str]


class CharClass(str, Enum):
    BLANK = "blank"
    WORD = "word"
    PUNCT = "punct"


def char_class(cell: str) -> CharClass:
    """Classify one grapheme by its base character."""

    base = cell[:1]
    if not base or base.isspace():
        return CharClass.BLANK
    if base.isalnum() or base == "_":
        return CharClass.WORD
    return CharClass.PUNCT


def is_blank(cell: str) -> bool:
    return char_class(cell) is CharClass.BLANK


def _skip_blank(cells: Cells, pos: int) -> int:
    while pos < len(cells) and is_blank(cells[pos]):
        pos += 1
    return pos


def _skip_word(cells: Cells, pos: int) -> int:
    while pos < len(cells) and not is_blank(cells[pos]):
        pos += 1
    return pos


def next_word_start(line: str, pos: int) -> int:
    """Start of the word after ``pos``, or the line length if there is none."""

    cells = graphemes.split(line)
    if pos >= len(cells):
        return pos
    return _skip_blank(cells, _skip_word(cells, pos))


def prev_word_start(line: str, pos: int) -> int:
    cells = graphemes.split(line)
    if pos <= 0 or not cells:
        return 0
    pos = min(pos - 1, len(cells) - 1)
    while pos > 0 and is_blank(cells[pos]):
        pos -= 1
    while pos > 0 and not is_blank(cells[pos - 1]):
        pos -= 1
    return pos


def first_word_start(line: str) -> int:
    return _skip_blank(graphemes.split(line), 0)


def last_word_start(line: str) -> int:
    return prev_word_start(line, graphemes.length(line))


def word_end(line: str, pos: int) -> int:
    """Last character of the current or next word; -1 when the line has none left.

    Already sitting on the last character of a word moves on to the next one.
    """

    cells = graphemes.split(line)
    n = len(cells)
    if pos >= n:
        return -1
    if not is_blank(cells[pos]) and (pos + 1 >= n or is_blank(cells[pos + 1])):
        pos += 1
    pos = _skip_blank(cells, pos)
    if pos >= n:
        return -1
    return _skip_word(cells, pos) - 1


def first_word_end(line: str) -> int:
    """End of the first word, or -1 for a blank line."""

    cells = graphemes.split(line)
    start = _skip_blank(cells, 0)
    if start >= len(cells):
        return -1
    return _skip_word(cells, start) - 1


def change_word_end(line: str, pos: int) -> int:
    """Exclusive end for ``cw``: leading blanks plus the word, no trailing blanks."""

    cells = graphemes.split(line)
    return _skip_word(cells, _skip_blank(cells, pos))


def first_non_blank(line: str) -> int:
    """Column of the first non-whitespace character (0 on a blank line)."""

    cells = graphemes.split(line)
    pos = _skip_blank(cells, 0)
    return 0 if pos >= len(cells) else pos


__all__ = [
    "CharClass",
    "char_class",
    "is_blank",
    "next_word_start",
    "prev_word_start",
    "first_word_start",
    "last_word_start",
    "word_end",
    "first_word_end",
    "change_word_end",
    "first_non_blank",
]
