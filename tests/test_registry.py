from __future__ import annotations

import pytest

from vim_textarea.commands import (
    DeleteLine,
    MoveFirstLine,
    MoveLeft,
    MoveRight,
    StartPending,
    Submit,
    Undo,
    YankLine,
    YankToEol,
    YankWord,
)
from vim_textarea.keymaps import (
    DEFAULT_COMMANDS,
    CommandConflictError,
    CommandRegistry,
    PendingRegistry,
    RegistryFrozenError,
    default_registries,
    load_default_commands,
    split_keys,
)
from vim_textarea.modes import Mode


def test_register_and_lookup_by_mode_and_chord() -> None:
    registry = CommandRegistry()
    command = registry.register(MoveLeft())

    assert registry.get(Mode.NORMAL, "h") is command
    assert registry.get(Mode.INSERT, "h") is None
    assert registry.get(Mode.NORMAL, "l") is None


def test_registering_an_equal_command_is_idempotent() -> None:
    registry = CommandRegistry()
    registry.register(MoveLeft())
    registry.register(MoveLeft())

    stats = registry.stats()
    assert stats.command_count == 1
    assert stats.binding_count == 1


def test_conflicting_binding_raises_unless_replaced() -> None:
    registry = CommandRegistry()
    registry.register(MoveLeft())

    with pytest.raises(CommandConflictError) as excinfo:
        registry.register(MoveRight(), keys=["h"])
    assert excinfo.value.existing == MoveLeft()
    assert excinfo.value.keys == "h"

    registry.register(MoveRight(), keys=["h"], replace=True)
    assert registry.get(Mode.NORMAL, "h") == MoveRight()


def test_same_class_in_another_mode_does_not_conflict() -> None:
    registry = CommandRegistry()
    registry.register(MoveLeft())
    registry.register(MoveLeft(valid_in=Mode.VISUAL))

    assert registry.get(Mode.VISUAL, "h").mode() is Mode.VISUAL
    assert registry.stats().modes == ("normal", "visual")


def test_frozen_registry_rejects_registration() -> None:
    registry = CommandRegistry()
    registry.freeze()
    with pytest.raises(RegistryFrozenError):
        registry.register(Undo())
    assert registry.stats().frozen is True


def test_iter_commands_and_bindings() -> None:
    registry = CommandRegistry()
    registry.register(YankToEol(), keys=["Y"])
    registry.register(Undo())

    assert [command.id for command in registry.iter_commands()] == [
        "yank.to_eol",
        "history.undo",
    ]
    assert set(registry.bindings(Mode.NORMAL)) == {"Y", "u"}


def test_pending_registry_lookup_and_prefixes() -> None:
    pending = PendingRegistry()
    pending.register("y", "w", YankWord())
    pending.register("d", "gg", MoveFirstLine())

    assert pending.get("y", "w") == YankWord()
    assert pending.get("y", "q") is None
    assert pending.has_prefix("d", "g")
    assert not pending.has_prefix("d", "gg")
    assert pending.is_operator("d")
    assert not pending.is_operator("w")
    assert pending.operators() == ("y", "d")


def test_pending_registry_rejects_empty_keys() -> None:
    pending = PendingRegistry()
    with pytest.raises(ValueError):
        pending.register("", "w", YankWord())
    with pytest.raises(ValueError):
        pending.register("y", "", YankWord())


def test_split_keys_routes_single_chords_and_sequences() -> None:
    assert split_keys(YankToEol()) == (("Y",), (("y", "$"),))
    assert split_keys(MoveFirstLine()) == ((), (("g", "g"),))
    assert split_keys(Undo()) == (("u",), ())
    assert split_keys(Submit()) == (("<enter>", "<ctrl+j>"), ())


def test_default_registries_are_shared_and_frozen() -> None:
    registry, pending = default_registries()
    again, pending_again = default_registries()

    assert registry is again
    assert pending is pending_again
    assert registry.frozen and pending.frozen


def test_default_bindings_resolve_expected_commands() -> None:
    registry, pending = default_registries()

    assert registry.get(Mode.NORMAL, "Y") == YankToEol()
    assert registry.get(Mode.NORMAL, "y") == StartPending("y")
    assert pending.get("y", "y") == YankLine()
    assert pending.get("y", "w").id == "yank.word"
    assert pending.get("y", "$").id == "yank.to_eol"
    assert pending.get("d", "gg").id == "delete.to_first_line"
    assert pending.get("g", "g").id == "move.first_line"
    assert registry.get(Mode.VISUAL, "y").id == "visual.yank"
    assert registry.get(Mode.VISUAL_LINE, "d").id == "visual.delete"
    assert registry.get(Mode.INSERT, "<escape>").id == "mode.escape_insert"
    assert registry.get(Mode.NORMAL, "<escape>").id == "mode.escape_normal"


def test_every_default_binding_lives_in_its_commands_mode() -> None:
    registry, pending = default_registries()
    for mode in Mode:
        for command in registry.bindings(mode).values():
            assert command.mode() is mode
        for operator in pending.operators(mode):
            command = pending.get(operator, "g", mode=mode)
            if command is not None:
                assert command.mode() is mode


def test_yank_commands_never_change_content() -> None:
    for command in (YankLine(), YankWord(), YankToEol()):
        assert command.is_undoable() is False
        assert command.changes_content() is False
    assert DeleteLine().is_undoable() is True
    assert DeleteLine().changes_content() is True


def test_load_default_commands_filters_by_id() -> None:
    registry, pending = CommandRegistry(), PendingRegistry()
    load_default_commands(registry, pending, include=["yank.line", "pending.y"])

    assert registry.get(Mode.NORMAL, "y") == StartPending("y")
    assert pending.get("y", "y") == YankLine()
    assert pending.get("y", "w") is None
    assert registry.get(Mode.NORMAL, "x") is None

    registry, pending = CommandRegistry(), PendingRegistry()
    load_default_commands(registry, pending, exclude=["delete.char"])
    assert registry.get(Mode.NORMAL, "x") is None
    assert registry.get(Mode.NORMAL, "p") is not None


def test_load_default_commands_with_custom_submit_keys() -> None:
    registry, pending = CommandRegistry(), PendingRegistry()
    load_default_commands(registry, pending, submit_keys=["<ctrl+s>"])

    assert registry.get(Mode.INSERT, "<ctrl+s>").is_submit()
    assert registry.get(Mode.NORMAL, "<ctrl+s>").is_submit()
    assert registry.get(Mode.INSERT, "<enter>") is None


def test_default_command_ids_are_unique_per_mode() -> None:
    seen = set()
    for command in DEFAULT_COMMANDS:
        key = (command.mode(), command.id)
        assert key not in seen
        seen.add(key)


def _non_editing_defaults():
    registry, pending = default_registries()
    seen = {}
    for command in (*registry.iter_commands(), *pending.iter_commands()):
        if not command.changes_content():
            seen.setdefault((command.mode(), command.id), command)
    return [
        pytest.param(command, id=f"{mode.value}:{command_id}")
        for (mode, command_id), command in seen.items()
    ]


@pytest.mark.parametrize("command", _non_editing_defaults())
@pytest.mark.parametrize(
    "text,cursor",
    [
        ("hello world", (0, 0)),
        ("hello world", (0, 10)),
        ('  call(x, "y z")', (0, 9)),
        ("one\n\ttwo three\n", (1, 3)),
        ("", (0, 0)),
    ],
)
def test_commands_without_content_flag_leave_lines_alone(
    make_editor, command, text, cursor
) -> None:
    editor = make_editor(text, cursor=cursor, mode=command.mode())
    lines_before = editor.lines

    command.execute(editor.context)

    assert editor.lines == lines_before
