"""Active-mode bookkeeping for one editor instance."""

from __future__ import annotations

from typing import Optional

from vim_textarea.runtime import telemetry

from .base_mode import MODE_CONFIGS, Mode, ModeBus


class ModeManager:
    """Owns the active mode and announces transitions."""

    def __init__(
        self,
        initial: Mode = Mode.NORMAL,
        *,
        bus: Optional[ModeBus] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self._active = Mode.parse(initial)
        self._previous: Optional[Mode] = None
        self.bus = bus or ModeBus()
        self._logger_name = logger_name

    @property
    def active(self) -> Mode:
        return self._active

    @property
    def previous(self) -> Optional[Mode]:
        return self._previous

    @property
    def in_visual(self) -> bool:
        return self._active.is_visual

    def switch(self, mode: Mode | str) -> bool:
        """Activate ``mode``; returns False when it was already active."""

        target = Mode.parse(mode)
        if target is self._active:
            return False
        self._previous, self._active = self._active, target
        payload = {"mode": target.value, "previous": self._previous.value}
        telemetry.record_event(
            "mode.switch", data=payload, logger_name=self._logger_name
        )
        self.bus.emit("mode.switch", payload)
        return True

    def indicator(self, *, vim_enabled: bool = True) -> str:
        if not vim_enabled:
            return ""
        return f"[{MODE_CONFIGS[self._active].label}]"


__all__ = ["ModeManager"]
