"""Text objects: ``iw aw iW aW``, quotes, brackets and ``b``.

Each object finds a ``[start, end)`` column span on the cursor line. The
operator commands (``d c y`` plus ``i``/``a`` and an object key) and the
Visual ``i``/``a`` selections reuse the column helpers of the plain
operators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from vim_textarea.buffer import graphemes
from vim_textarea.modes import Mode

from .base import (
    EXECUTED,
    IGNORED,
    BaseCommand,
    ChangeCommand,
    DeleteCommand,
    EditorContext,
    ExecuteResult,
    ModeEntryCommand,
)
from .change import change_columns
from .delete import delete_columns
from .words import CharClass, char_class, is_blank
from .yank import yank_columns

Span = Tuple[int, int]

BRACKETS = (("(", ")"), ("[", "]"), ("{", "}"))


class TextObject:
    """Locates an object around ``col``; ``None`` when there is none."""

    def find(self, cells: Sequence[str], col: int, *, inner: bool) -> Optional[Span]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class WordObject(TextObject):
    """``w`` groups word or punctuation runs; ``W`` any run of non-blanks."""

    big: bool = False

    def _same(self, cell: str, kind: CharClass) -> bool:
        if self.big:
            return not is_blank(cell)
        return char_class(cell) is kind

    def find(self, cells: Sequence[str], col: int, *, inner: bool) -> Optional[Span]:
        if col >= len(cells) or is_blank(cells[col]):
            return None
        kind = char_class(cells[col])
        start, end = col, col + 1
        while start > 0 and self._same(cells[start - 1], kind):
            start -= 1
        while end < len(cells) and self._same(cells[end], kind):
            end += 1
        if inner:
            return start, end

        # trailing blanks, or leading ones when the word ends the line
        trailing = end
        while trailing < len(cells) and is_blank(cells[trailing]):
            trailing += 1
        if trailing > end:
            return start, trailing
        while start > 0 and is_blank(cells[start - 1]):
            start -= 1
        return start, end


def _escaped(cells: Sequence[str], pos: int) -> bool:
    """An odd run of backslashes right before ``pos`` escapes it."""

    count = 0
    while pos - count - 1 >= 0 and cells[pos - count - 1] == "\\":
        count += 1
    return count % 2 == 1


def _quote_pair(cells: Sequence[str], col: int, quote: str) -> Optional[Span]:
    positions = [
        i for i, cell in enumerate(cells) if cell == quote and not _escaped(cells, i)
    ]
    for open_, close in zip(positions[::2], positions[1::2]):
        if open_ <= col <= close:
            return open_, close
    # left-to-right pairing can misalign, e.g. 'some" "words"'
    left = [pos for pos in positions if pos < col]
    right = [pos for pos in positions if pos > col]
    if left and right:
        return left[-1], right[0]
    return None


def _bracket_pair(
    cells: Sequence[str], col: int, open_char: str, close_char: str
) -> Optional[Span]:
    """Innermost balanced pair whose delimiters enclose or sit on ``col``."""

    stack: list[int] = []
    best: Optional[Span] = None
    for i, cell in enumerate(cells):
        if cell == open_char and not _escaped(cells, i):
            stack.append(i)
        elif cell == close_char and not _escaped(cells, i) and stack:
            open_ = stack.pop()
            if open_ <= col <= i and (best is None or i - open_ < best[1] - best[0]):
                best = open_, i
    return best


def _delimited(pair: Optional[Span], inner: bool) -> Optional[Span]:
    if pair is None:
        return None
    open_, close = pair
    if inner:
        return open_ + 1, close
    return open_, close + 1


@dataclass(frozen=True, slots=True)
class PairObject(TextObject):
    """Delimited object; identical delimiters pair as quotes, others nest."""

    open_char: str
    close_char: str

    def find(self, cells: Sequence[str], col: int, *, inner: bool) -> Optional[Span]:
        if col >= len(cells):
            return None
        if self.open_char == self.close_char:
            pair = _quote_pair(cells, col, self.open_char)
        else:
            pair = _bracket_pair(cells, col, self.open_char, self.close_char)
        return _delimited(pair, inner)


class AnyBracketObject(TextObject):
    """``b``: the innermost of ``()``, ``[]`` and ``{}``."""

    def find(self, cells: Sequence[str], col: int, *, inner: bool) -> Optional[Span]:
        if col >= len(cells):
            return None
        pairs = [_bracket_pair(cells, col, *brackets) for brackets in BRACKETS]
        found = [pair for pair in pairs if pair is not None]
        if not found:
            return None
        return _delimited(min(found, key=lambda pair: pair[1] - pair[0]), inner)


TEXT_OBJECTS: Dict[str, TextObject] = {
    "w": WordObject(),
    "W": WordObject(big=True),
    '"': PairObject('"', '"'),
    "'": PairObject("'", "'"),
    **{key: PairObject(*brackets) for brackets in BRACKETS for key in brackets},
    "b": AnyBracketObject(),
}


def find_text_object(ctx: EditorContext, key: str, *, inner: bool) -> Optional[Span]:
    """Span of object ``key`` around the cursor, in columns of the cursor line."""

    finder = TEXT_OBJECTS.get(key)
    if finder is None:
        return None
    return finder.find(graphemes.split(ctx.buffer.line()), ctx.buffer.col, inner=inner)


class _ObjectKeys:
    """Id and key naming shared by the text-object commands."""

    __slots__ = ()

    prefix = ""
    operator_key = ""

    object: str
    inner: bool

    @property
    def id(self) -> str:
        scope = "inner" if self.inner else "around"
        return f"{self.prefix}.textobject.{scope}_{self.object}"

    def keys(self) -> Tuple[str, ...]:
        return (self.operator_key + ("i" if self.inner else "a") + self.object,)


@dataclass(frozen=True, slots=True)
class DeleteTextObject(_ObjectKeys, DeleteCommand):
    prefix = "delete"
    operator_key = "d"

    object: str = "w"
    inner: bool = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        span = find_text_object(ctx, self.object, inner=self.inner)
        if span is None:
            return IGNORED
        return delete_columns(ctx, *span)


@dataclass(frozen=True, slots=True)
class ChangeTextObject(_ObjectKeys, ChangeCommand):
    """An empty inner span, ``ci"`` on ``""``, still enters Insert."""

    prefix = "change"
    operator_key = "c"

    object: str = "w"
    inner: bool = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        span = find_text_object(ctx, self.object, inner=self.inner)
        if span is None:
            return IGNORED
        return change_columns(ctx, *span)


@dataclass(frozen=True, slots=True)
class YankTextObject(_ObjectKeys, BaseCommand):
    prefix = "yank"
    operator_key = "y"

    object: str = "w"
    inner: bool = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        span = find_text_object(ctx, self.object, inner=self.inner)
        if span is None:
            return IGNORED
        return yank_columns(ctx, *span)


@dataclass(frozen=True, slots=True)
class VisualSelectTextObject(_ObjectKeys, ModeEntryCommand):
    """``v`` then ``iw``: select the object charwise, cursor on its last character."""

    prefix = "visual"
    default_mode = Mode.VISUAL

    object: str = "w"
    inner: bool = True

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        span = find_text_object(ctx, self.object, inner=self.inner)
        if span is None:
            return IGNORED
        start, end = span
        row = ctx.buffer.row
        anchor, cursor = (row, start), (row, max(start, end - 1))
        ctx.switch_mode(Mode.VISUAL)
        ctx.buffer.state.set_anchor(anchor)
        ctx.buffer.set_cursor(*cursor, normal=True)
        ctx.bus.emit("visual.selection", {"anchor": anchor, "cursor": cursor})
        return EXECUTED


OBJECT_KEYS: Tuple[str, ...] = tuple(TEXT_OBJECTS)

TEXT_OBJECT_COMMANDS = tuple(
    command(key, inner)
    for command in (DeleteTextObject, ChangeTextObject, YankTextObject)
    for inner in (True, False)
    for key in OBJECT_KEYS
)


__all__ = [
    "TextObject",
    "WordObject",
    "PairObject",
    "AnyBracketObject",
    "TEXT_OBJECTS",
    "OBJECT_KEYS",
    "TEXT_OBJECT_COMMANDS",
    "find_text_object",
    "DeleteTextObject",
    "ChangeTextObject",
    "YankTextObject",
    "VisualSelectTextObject",
]
