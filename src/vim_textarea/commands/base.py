"""Command protocol, execution context, and the shared command base classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Protocol, Tuple, runtime_checkable

from vim_textarea.buffer import Buffer, Register
from vim_textarea.modes import Mode, ModeBus, ModeManager, PendingBuilder


class ExecuteResult(str, Enum):
    EXECUTED = "executed"
    IGNORED = "ignored"


EXECUTED = ExecuteResult.EXECUTED
IGNORED = ExecuteResult.IGNORED


@dataclass(slots=True)
class EditorContext:
    """Everything a command may read or mutate while it runs."""

    buffer: Buffer
    modes: ModeManager
    pending: PendingBuilder
    bus: ModeBus
    char_limit: int = 0
    vim_enabled: bool = True

    @property
    def register(self) -> Register:
        return self.buffer.register

    @property
    def mode(self) -> Mode:
        return self.modes.active

    def switch_mode(self, mode: Mode) -> bool:
        """Activate ``mode``, dropping any pending sequence and stale selection."""

        self.pending.clear()
        if not mode.is_visual:
            self.buffer.state.clear_selection()
        return self.modes.switch(mode)

    def remaining_chars(self) -> Optional[int]:
        """Characters that may still be added, or None when unlimited."""

        if self.char_limit <= 0:
            return None
        return max(0, self.char_limit - self.buffer.document.char_count())


@runtime_checkable
class Command(Protocol):
    """Capability set every dispatchable command exposes."""

    @property
    def id(self) -> str:
        ...

    def keys(self) -> Tuple[str, ...]:
        ...

    def mode(self) -> Mode:
        ...

    def is_undoable(self) -> bool:
        ...

    def changes_content(self) -> bool:
        ...

    def is_mode_change(self) -> bool:
        ...

    def is_submit(self) -> bool:
        ...

    def execute(self, ctx: EditorContext) -> ExecuteResult:
        ...


class ArgumentCommand(Command, Protocol):
    """Pending-table entry that needs the typed character, e.g. ``r<char>``."""

    def with_argument(self, text: str) -> Command:
        ...


@dataclass(frozen=True, slots=True)
class BaseCommand:
    """Stateless command; behaviour flags are class attributes.

    ``valid_in`` overrides the class's ``default_mode`` so one command class
    can be registered for several modes.
    """

    command_id: ClassVar[str] = ""
    trigger_keys: ClassVar[Tuple[str, ...]] = ()
    default_mode: ClassVar[Mode] = Mode.NORMAL
    undoable: ClassVar[bool] = False
    content: ClassVar[bool] = False
    mode_change: ClassVar[bool] = False

    valid_in: Optional[Mode] = field(default=None, kw_only=True)

    @property
    def id(self) -> str:
        return self.command_id

    def keys(self) -> Tuple[str, ...]:
        return self.trigger_keys

    def mode(self) -> Mode:
        return self.valid_in or self.default_mode

    def is_undoable(self) -> bool:
        return self.undoable

    def changes_content(self) -> bool:
        return self.content

    def is_mode_change(self) -> bool:
        return self.mode_change

    def is_submit(self) -> bool:
        return False

    def execute(self, ctx: EditorContext) -> ExecuteResult:  # pragma: no cover - abstract
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} [{self.mode().value}]>"


class MotionCommand(BaseCommand):
    """Moves the cursor only."""


class DeleteCommand(BaseCommand):
    undoable = True
    content = True


class ChangeCommand(BaseCommand):
    """Deletes text then enters Insert mode."""

    undoable = True
    content = True
    mode_change = True


class ModeEntryCommand(BaseCommand):
    mode_change = True


class InsertCommand(BaseCommand):
    default_mode = Mode.INSERT
    undoable = True
    content = True


__all__ = [
    "Command",
    "ArgumentCommand",
    "BaseCommand",
    "EditorContext",
    "ExecuteResult",
    "EXECUTED",
    "IGNORED",
    "MotionCommand",
    "DeleteCommand",
    "ChangeCommand",
    "ModeEntryCommand",
    "InsertCommand",
]
