from __future__ import annotations

import os
import re
from typing import Any, Callable, Optional, Tuple

import pytest

os.environ.setdefault("VIM_TEXTAREA_DISABLE_CONSOLE", "1")

from vim_textarea import Mode, TextAreaConfig, VimTextArea  # noqa: E402

_CHORD = re.compile(r"<[^>]+>|.", re.S)


def _press(editor: VimTextArea, keys: str) -> Any:
    """Feed ``keys`` one chord at a time; ``<escape>`` style tokens count as one."""

    action = None
    for token in _CHORD.findall(keys):
        action = editor.handle_key(token)
    return action


@pytest.fixture
def press() -> Callable[[VimTextArea, str], Any]:
    return _press


@pytest.fixture
def make_editor() -> Callable[..., VimTextArea]:
    def factory(
        text: str = "",
        cursor: Tuple[int, int] = (0, 0),
        mode: Optional[Mode] = None,
        **config: Any,
    ) -> VimTextArea:
        editor = VimTextArea(TextAreaConfig(**config))
        editor.focus()
        editor.set_value(text)
        if mode is not None:
            editor.set_mode(mode)
        editor.context.buffer.set_cursor(
            *cursor, normal=not editor.mode.is_text_entry
        )
        return editor

    return factory
