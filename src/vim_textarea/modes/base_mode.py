"""Mode enumeration, display metadata, key input, and the mode event bus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple


class Mode(str, Enum):
    """Editor modes; exactly one is active per editor."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    VISUAL_LINE = "v_line"
    REPLACE = "replace"

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        """Accept a ``Mode``, its value, its name, or its display label."""

        if isinstance(value, Mode):
            return value
        needle = str(value).strip().lower()
        for mode in cls:
            if needle in (mode.value, mode.name.lower(), mode.label.lower()):
                return mode
        raise ValueError(f"Unknown mode '{value}'")

    @property
    def label(self) -> str:
        return MODE_CONFIGS[self].label

    @property
    def is_visual(self) -> bool:
        return self in (Mode.VISUAL, Mode.VISUAL_LINE)

    @property
    def is_text_entry(self) -> bool:
        """Typed characters edit the buffer and the cursor may rest past the end."""

        return self in (Mode.INSERT, Mode.REPLACE)


@dataclass(frozen=True, slots=True)
class ModeConfig:
    """Display metadata for a mode."""

    label: str
    colour: str


MODE_CONFIGS: Dict[Mode, ModeConfig] = {
    Mode.NORMAL: ModeConfig("NORMAL", "#98C379"),
    Mode.INSERT: ModeConfig("INSERT", "#E8B86D"),
    Mode.VISUAL: ModeConfig("VISUAL", "#6EACDA"),
    Mode.VISUAL_LINE: ModeConfig("V-LINE", "#6EACDA"),
    Mode.REPLACE: ModeConfig("REPLACE", "#E06C75"),
}


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Host key event before it is normalized into a chord."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


class ModeBus:
    """Minimal event bus letting components exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


__all__ = ["Mode", "ModeConfig", "MODE_CONFIGS", "KeyInput", "ModeBus"]
