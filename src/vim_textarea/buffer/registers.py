"""The default (unnamed) register every yank, delete and change writes to."""

from __future__ import annotations

from dataclasses import dataclass

from vim_textarea.runtime import telemetry


@dataclass(frozen=True, slots=True)
class RegisterValue:
    text: str = ""
    linewise: bool = False


class Register:
    """Single-slot register; every write replaces the previous value."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._value = RegisterValue()
        self._logger_name = logger_name

    @property
    def value(self) -> RegisterValue:
        return self._value

    @property
    def text(self) -> str:
        return self._value.text

    @property
    def linewise(self) -> bool:
        return self._value.linewise

    def is_empty(self) -> bool:
        return not self._value.text

    def yank(self, text: str, *, linewise: bool = False) -> RegisterValue:
        self._value = RegisterValue(text=text, linewise=linewise)
        telemetry.record_event(
            "register.write",
            level="debug",
            data={"chars": len(text), "linewise": linewise},
            logger_name=self._logger_name,
        )
        return self._value

    def clear(self) -> None:
        self._value = RegisterValue()


__all__ = ["Register", "RegisterValue"]
