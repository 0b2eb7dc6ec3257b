"""Plain-text rendering helpers: the visible window and the placeholder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True, slots=True)
class Viewport:
    """Rows ``[top, top + height)`` are on screen; ``height`` 0 means all."""

    top: int = 0
    height: int = 0

    def visible_height(self, max_height: int) -> int:
        limits = [value for value in (self.height, max_height) if value > 0]
        return min(limits) if limits else 0

    def follow(self, cursor_row: int, line_count: int, max_height: int) -> "Viewport":
        """Scroll just enough to keep ``cursor_row`` on screen."""

        rows = self.visible_height(max_height)
        if rows == 0 or line_count <= rows:
            return Viewport(0, self.height)
        top = min(self.top, cursor_row)
        if cursor_row >= top + rows:
            top = cursor_row - rows + 1
        top = max(0, min(top, line_count - rows))
        return Viewport(top, self.height)

    def window(self, lines: Sequence[str], max_height: int) -> Tuple[str, ...]:
        rows = self.visible_height(max_height)
        if rows == 0:
            return tuple(lines)
        return tuple(lines[self.top : self.top + rows])


def render(
    lines: Sequence[str],
    viewport: Viewport,
    *,
    max_height: int = 0,
    placeholder: str = "",
) -> str:
    if placeholder and len(lines) == 1 and not lines[0]:
        return placeholder
    return "\n".join(viewport.window(lines, max_height))


__all__ = ["Viewport", "render"]
