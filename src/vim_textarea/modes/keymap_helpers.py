"""Normalize host key events into the chord strings the registries use."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .base_mode import KeyInput

CANCEL_CHORD = "<escape>"
RUNES_CHORD = "<runes>"
# Pending-table motion meaning "the next typed character", as in ``r<char>``.
CHAR_ARGUMENT = "<char>"

_MODIFIER_ORDER = ("ctrl", "alt", "shift")
_MODIFIER_ALIASES = {
    "control": "ctrl",
    "ctl": "ctrl",
    "meta": "alt",
    "option": "alt",
}
_KEY_ALIASES = {
    "esc": "escape",
    "return": "enter",
    "bs": "backspace",
    "ctrl+h": "backspace",
    "del": "delete",
    " ": "space",
    "arrowleft": "left",
    "arrowright": "right",
    "arrowup": "up",
    "arrowdown": "down",
}
# Mouse reports that leak through as typed text, e.g. "[<64;10;5M".
_MOUSE_ESCAPE = re.compile(r"^\[?<\d+;\d+;\d+[Mm]$")


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    cleaned = (m.strip().lower() for m in modifiers)
    values = {_MODIFIER_ALIASES.get(m, m) for m in cleaned}
    values.discard("")
    ordered = [m for m in _MODIFIER_ORDER if m in values]
    ordered.extend(sorted(values.difference(_MODIFIER_ORDER)))
    return tuple(ordered)


def _split_key(key: str) -> tuple[str, tuple[str, ...]]:
    """Split ``"ctrl+r"`` style names into a bare key and modifiers."""

    if len(key) > 1 and "+" in key.strip("+"):
        *mods, bare = key.split("+")
        return bare, tuple(mods)
    return key, ()


def coerce_key(event: KeyInput | str) -> KeyInput:
    """Accept a ``KeyInput``, a chord (``"<ctrl+r>"``), or literal typed text."""

    if isinstance(event, KeyInput):
        return event
    if len(event) > 2 and event.startswith("<") and event.endswith(">"):
        return KeyInput(key=event[1:-1])
    if len(event) == 1:
        return KeyInput(key=event, text=event)
    return KeyInput(key="runes", text=event)


def key_to_chord(event: KeyInput | str) -> str:
    key = coerce_key(event)
    bare, embedded = _split_key(key.key)
    modifiers = _normalize_modifiers(key.modifiers + embedded)

    typed = not any(m in ("ctrl", "alt") for m in modifiers)
    if typed and key.text is not None:
        if len(key.text) > 1:
            return RUNES_CHORD
        if key.text.isprintable() and key.text != " ":
            return key.text

    if len(bare) == 1 and bare != " ":
        modifiers = tuple(m for m in modifiers if m != "shift")
        if not modifiers:
            return bare
        bare = bare.lower()
    else:
        bare = bare.lower()
        bare = _KEY_ALIASES.get(bare, bare)

    name = "+".join(modifiers + (bare,))
    name = _KEY_ALIASES.get(name, name)
    return f"<{name}>"


def printable_text(event: KeyInput) -> Optional[str]:
    """Literal text an Insert-mode keypress should type, if any."""

    bare, embedded = _split_key(event.key)
    modifiers = _normalize_modifiers(event.modifiers + embedded)
    if any(m in ("ctrl", "alt") for m in modifiers):
        return None
    text = event.text
    if text is None and len(bare) == 1:
        text = bare
    if not text or _MOUSE_ESCAPE.match(text):
        return None
    if not all(ch.isprintable() or ch in "\t\n" for ch in text):
        return None
    return text


__all__ = [
    "CANCEL_CHORD",
    "RUNES_CHORD",
    "CHAR_ARGUMENT",
    "coerce_key",
    "key_to_chord",
    "printable_text",
]
