"""Operator-pending state: ``d c y g`` waiting for a motion, ``r`` for a character."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from vim_textarea.buffer import graphemes
from vim_textarea.runtime import telemetry

from .base_mode import Mode
from .keymap_helpers import CANCEL_CHORD, CHAR_ARGUMENT

if TYPE_CHECKING:  # pragma: no cover
    from vim_textarea.commands.base import ArgumentCommand, Command
    from vim_textarea.keymaps.registry import PendingRegistry


class PendingStatus(str, Enum):
    AWAITING = "awaiting"
    RESOLVED = "resolved"
    CANCELED = "canceled"


@dataclass(frozen=True, slots=True)
class PendingResult:
    status: PendingStatus
    command: Optional["Command"] = None


class PendingBuilder:
    """Accumulates motion keys after an operator until the table resolves them.

    At most one sequence is in flight. A key that neither completes nor
    extends the sequence cancels it, unless that key is itself an operator,
    in which case the sequence restarts with the new operator.
    """

    def __init__(
        self, registry: "PendingRegistry", *, logger_name: Optional[str] = None
    ) -> None:
        self.registry = registry
        self._operator: Optional[str] = None
        self._keys = ""
        self._mode = Mode.NORMAL
        self._logger_name = logger_name

    @property
    def operator(self) -> Optional[str]:
        return self._operator

    @property
    def key_buffer(self) -> str:
        return self._keys

    @property
    def sequence(self) -> str:
        """Operator plus buffered keys, e.g. ``"dg"``."""

        return f"{self._operator or ''}{self._keys}"

    def is_empty(self) -> bool:
        return self._operator is None

    def start(self, operator: str, mode: Mode = Mode.NORMAL) -> None:
        self._operator = operator
        self._keys = ""
        self._mode = mode

    def clear(self) -> None:
        self._operator = None
        self._keys = ""

    def feed(self, key: str, text: Optional[str] = None) -> PendingResult:
        """Advance the sequence with chord ``key``.

        ``text`` is what the keypress would type; operators bound to
        ``CHAR_ARGUMENT`` (``r``) take it as their argument.
        """

        if self._operator is None:
            return PendingResult(PendingStatus.CANCELED)
        if key == CANCEL_CHORD:
            return self._cancel(key, reason="escape")

        argument = self.registry.get(self._operator, CHAR_ARGUMENT, mode=self._mode)
        if argument is not None:
            return self._resolve_argument(argument, key, text)

        candidate = self._keys + key
        command = self.registry.get(self._operator, candidate, mode=self._mode)
        if command is not None:
            self.clear()
            return PendingResult(PendingStatus.RESOLVED, command)

        if self.registry.has_prefix(self._operator, candidate, mode=self._mode):
            self._keys = candidate
            return PendingResult(PendingStatus.AWAITING)

        if self.registry.is_operator(key, mode=self._mode):
            self._record_cancel(key, reason="restart")
            self.start(key, self._mode)
            return PendingResult(PendingStatus.AWAITING)

        return self._cancel(key, reason="unknown_motion")

    def _resolve_argument(
        self, command: "ArgumentCommand", key: str, text: Optional[str]
    ) -> PendingResult:
        char = " " if key == "<space>" else text
        if char is None or "\n" in char or graphemes.length(char) != 1:
            return self._cancel(key, reason="not_a_character")
        self.clear()
        return PendingResult(PendingStatus.RESOLVED, command.with_argument(char))

    def _cancel(self, key: str, *, reason: str) -> PendingResult:
        self._record_cancel(key, reason=reason)
        self.clear()
        return PendingResult(PendingStatus.CANCELED)

    def _record_cancel(self, key: str, *, reason: str) -> None:
        telemetry.record_event(
            "pending.cancel",
            level="debug",
            data={"sequence": self.sequence, "key": key, "reason": reason},
            logger_name=self._logger_name,
        )


__all__ = ["PendingBuilder", "PendingResult", "PendingStatus"]
