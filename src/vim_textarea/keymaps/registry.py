"""Command tables: (mode, chord) lookups and the operator-pending table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from vim_textarea.commands.base import Command
from vim_textarea.errors import VimTextAreaError
from vim_textarea.modes import Mode
from vim_textarea.runtime.telemetry import span


@dataclass(frozen=True, slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    binding_count: int
    modes: Tuple[str, ...]
    frozen: bool


class CommandConflictError(VimTextAreaError):
    """Raised when a different command already owns a binding."""

    def __init__(self, mode: Mode, keys: str, existing: Command, incoming: Command):
        super().__init__(
            f"'{keys}' in {mode.value} is bound to '{existing.id}'; "
            f"refusing to rebind it to '{incoming.id}'"
        )
        self.mode = mode
        self.keys = keys
        self.existing = existing
        self.incoming = incoming


class RegistryFrozenError(VimTextAreaError):
    """Raised when registering into a frozen registry."""


class _Table:
    """Shared bookkeeping: a frozen flag and a logger name."""

    kind = "registry"

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _span(self, command: Command, mode: Mode, keys: str):
        return span(
            f"{self.kind}::register",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"command_id": command.id, "mode": mode.value, "keys": keys},
        )

    def _store(
        self,
        bucket: Dict[str, Command],
        keys: str,
        command: Command,
        mode: Mode,
        replace: bool,
    ) -> bool:
        """Bind ``keys`` in ``bucket``; returns False for an idempotent re-bind."""

        with self._span(command, mode, keys) as handle:
            if self._frozen:
                handle.add_metadata("frozen", True)
                raise RegistryFrozenError(
                    f"Cannot register '{command.id}': {self.kind} is frozen"
                )
            existing = bucket.get(keys)
            if existing is not None and not replace:
                if existing == command:
                    return False
                handle.add_metadata("conflict", existing.id)
                raise CommandConflictError(mode, keys, existing, command)
            bucket[keys] = command
            return True


class CommandRegistry(_Table):
    """Primary table mapping ``(mode, chord)`` to a command."""

    kind = "registry"

    def __init__(self, *, logger_name: str | None = None) -> None:
        super().__init__(logger_name=logger_name)
        self._by_mode: Dict[Mode, Dict[str, Command]] = {}

    def register(
        self,
        command: Command,
        *,
        keys: Optional[Iterable[str]] = None,
        replace: bool = False,
    ) -> Command:
        """Bind ``command`` under each of its keys (or ``keys``) in its mode."""

        mode = command.mode()
        bucket = self._by_mode.setdefault(mode, {})
        for chord in tuple(keys) if keys is not None else command.keys():
            self._store(bucket, chord, command, mode, replace)
        return command

    def get(self, mode: Mode, chord: str) -> Optional[Command]:
        return self._by_mode.get(mode, {}).get(chord)

    def iter_commands(self, mode: Optional[Mode] = None) -> Iterator[Command]:
        """Distinct commands, in registration order."""

        seen: set[int] = set()
        modes = [mode] if mode is not None else list(self._by_mode)
        for current in modes:
            for command in self._by_mode.get(current, {}).values():
                if id(command) not in seen:
                    seen.add(id(command))
                    yield command

    def bindings(self, mode: Mode) -> Dict[str, Command]:
        return dict(self._by_mode.get(mode, {}))

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=sum(1 for _ in self.iter_commands()),
            binding_count=sum(len(bucket) for bucket in self._by_mode.values()),
            modes=tuple(sorted(mode.value for mode in self._by_mode)),
            frozen=self._frozen,
        )


class PendingRegistry(_Table):
    """Secondary table mapping ``(mode, operator, motion keys)`` to a command."""

    kind = "pending"

    def __init__(self, *, logger_name: str | None = None) -> None:
        super().__init__(logger_name=logger_name)
        self._by_mode: Dict[Mode, Dict[str, Dict[str, Command]]] = {}

    def register(
        self,
        operator: str,
        keys: str,
        command: Command,
        *,
        mode: Optional[Mode] = None,
        replace: bool = False,
    ) -> Command:
        if not operator or not keys:
            raise ValueError("operator and keys must be non-empty")
        target = mode or command.mode()
        bucket = self._by_mode.setdefault(target, {}).setdefault(operator, {})
        self._store(bucket, keys, command, target, replace)
        return command

    def get(
        self, operator: str, keys: str, *, mode: Mode = Mode.NORMAL
    ) -> Optional[Command]:
        return self._by_mode.get(mode, {}).get(operator, {}).get(keys)

    def has_prefix(
        self, operator: str, prefix: str, *, mode: Mode = Mode.NORMAL
    ) -> bool:
        """True when some longer motion for ``operator`` starts with ``prefix``."""

        motions = self._by_mode.get(mode, {}).get(operator, {})
        return any(
            len(keys) > len(prefix) and keys.startswith(prefix) for keys in motions
        )

    def is_operator(self, key: str, *, mode: Mode = Mode.NORMAL) -> bool:
        return key in self._by_mode.get(mode, {})

    def operators(self, mode: Mode = Mode.NORMAL) -> Tuple[str, ...]:
        return tuple(self._by_mode.get(mode, {}))

    def iter_commands(self, mode: Optional[Mode] = None) -> Iterator[Command]:
        """Distinct commands across every operator, in registration order."""

        seen: set[int] = set()
        modes = [mode] if mode is not None else list(self._by_mode)
        for current in modes:
            for motions in self._by_mode.get(current, {}).values():
                for command in motions.values():
                    if id(command) not in seen:
                        seen.add(id(command))
                        yield command

    def stats(self) -> RegistryStats:
        commands = {
            id(command)
            for operators in self._by_mode.values()
            for motions in operators.values()
            for command in motions.values()
        }
        bindings = sum(
            len(motions)
            for operators in self._by_mode.values()
            for motions in operators.values()
        )
        return RegistryStats(
            command_count=len(commands),
            binding_count=bindings,
            modes=tuple(sorted(mode.value for mode in self._by_mode)),
            frozen=self._frozen,
        )


__all__ = [
    "CommandRegistry",
    "PendingRegistry",
    "CommandConflictError",
    "RegistryFrozenError",
    "RegistryStats",
]
