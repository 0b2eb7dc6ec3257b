"""Built-in command tables that seed every mode with vim-style defaults."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence, Tuple

from vim_textarea import commands as c
from vim_textarea.commands.textobject import OBJECT_KEYS
from vim_textarea.commands.base import Command
from vim_textarea.modes import Mode

from .registry import CommandRegistry, PendingRegistry

VISUAL_MODES = (Mode.VISUAL, Mode.VISUAL_LINE)

_MOTIONS = (
    c.MoveLeft,
    c.MoveRight,
    c.MoveDown,
    c.MoveUp,
    c.MoveWordForward,
    c.MoveWordBackward,
    c.MoveWordEnd,
    c.MoveLineStart,
    c.MoveLineEnd,
    c.MoveFirstNonBlank,
    c.MoveFirstLine,
    c.MoveLastLine,
)
_ARROWS = (c.ArrowLeft, c.ArrowRight, c.ArrowUp, c.ArrowDown)
_VISUAL_ONLY = (
    c.VisualEscape,
    c.VisualToggle,
    c.VisualToggleLine,
    c.VisualSwapAnchor,
    c.VisualYank,
    c.VisualDelete,
    c.VisualChange,
)

DEFAULT_COMMANDS: Tuple[Command, ...] = (
    # Normal
    *(motion() for motion in _MOTIONS),
    *(arrow(valid_in=Mode.NORMAL) for arrow in _ARROWS),
    c.DeleteChar(),
    c.DeleteLine(),
    c.DeleteWord(),
    c.DeleteToEol(),
    c.DeleteLinesDown(),
    c.DeleteLinesUp(),
    c.DeleteToLastLine(),
    c.DeleteToFirstLine(),
    c.ChangeLine(),
    c.ChangeWord(),
    c.ChangeToEol(),
    c.ChangeToLineStart(),
    c.ChangeLinesDown(),
    c.ChangeLinesUp(),
    c.ChangeToLastLine(),
    c.ChangeToFirstLine(),
    c.YankLine(),
    c.YankWord(),
    c.YankToEol(),
    c.PasteAfter(),
    c.PasteBefore(),
    c.EnterInsert(),
    c.InsertAfter(),
    c.InsertAtEnd(),
    c.InsertAtStart(),
    c.OpenLineBelow(),
    c.OpenLineAbove(),
    c.EnterVisual(),
    c.EnterVisualLine(),
    c.EscapeNormal(),
    c.Undo(),
    c.Redo(),
    *c.TEXT_OBJECT_COMMANDS,
    c.ReplaceChar(),
    c.EnterReplace(),
    *(c.StartPending(operator) for operator in ("d", "c", "y", "g", "r")),
    c.Submit(valid_in=Mode.NORMAL),
    # Insert
    c.EscapeInsert(),
    c.Backspace(),
    c.DeleteForward(),
    c.SplitLine(),
    c.InsertSpace(),
    c.KillToLineStart(),
    c.KillToLineEnd(),
    c.LineStartInsert(),
    c.LineEndInsert(),
    *(arrow() for arrow in _ARROWS),
    c.Submit(valid_in=Mode.INSERT),
    # Replace
    c.ReplaceEscape(),
    c.ReplaceBackspace(),
    c.ReplaceSpace(),
    *(arrow(valid_in=Mode.REPLACE) for arrow in _ARROWS),
    # Visual and Visual-Line
    *(
        command(valid_in=mode)
        for mode in VISUAL_MODES
        for command in _MOTIONS + _VISUAL_ONLY
    ),
    *(
        c.StartPending(operator, valid_in=mode)
        for mode in VISUAL_MODES
        for operator in ("g", "i", "a")
    ),
    *(
        c.VisualSelectTextObject(key, inner, valid_in=mode)
        for mode in VISUAL_MODES
        for inner in (True, False)
        for key in OBJECT_KEYS
    ),
)


def split_keys(
    command: Command,
) -> Tuple[Tuple[str, ...], Tuple[Tuple[str, str], ...]]:
    """Separate single chords from operator sequences.

    ``("d$", "D")`` becomes ``(("D",), (("d", "$"),))``: ``D`` goes to the
    primary table, ``d`` + ``$`` to the pending table.
    """

    direct: list[str] = []
    pending: list[Tuple[str, str]] = []
    for keys in command.keys():
        if len(keys) == 1 or keys.startswith("<"):
            direct.append(keys)
        else:
            pending.append((keys[0], keys[1:]))
    return tuple(direct), tuple(pending)


def load_default_commands(
    registry: CommandRegistry,
    pending: PendingRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    submit_keys: Sequence[str] | None = None,
    extra_commands: Iterable[Command] | None = None,
) -> None:
    """Register the built-in commands, optionally filtered by command id."""

    allowed = _build_filters(include, exclude)
    for command in DEFAULT_COMMANDS:
        if not _selected(command.id, allowed):
            continue
        if submit_keys is not None and isinstance(command, c.Submit):
            command = c.Submit(tuple(submit_keys), valid_in=command.mode())
        register_command(registry, pending, command, replace=replace)

    for command in extra_commands or ():
        register_command(registry, pending, command, replace=replace)


def register_command(
    registry: CommandRegistry,
    pending: PendingRegistry,
    command: Command,
    *,
    replace: bool = False,
) -> None:
    direct, sequences = split_keys(command)
    if direct:
        registry.register(command, keys=direct, replace=replace)
    for operator, motion in sequences:
        pending.register(operator, motion, command, replace=replace)


@lru_cache(maxsize=1)
def default_registries() -> Tuple[CommandRegistry, PendingRegistry]:
    """Shared, frozen default tables; built on first use."""

    registry = CommandRegistry(logger_name="vim_textarea.keymaps")
    pending = PendingRegistry(logger_name="vim_textarea.keymaps")
    load_default_commands(registry, pending)
    registry.freeze()
    pending.freeze()
    return registry, pending


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    return include_set, set(exclude or ())


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    return item_id not in exclude


__all__ = [
    "DEFAULT_COMMANDS",
    "default_registries",
    "load_default_commands",
    "register_command",
    "split_keys",
]
