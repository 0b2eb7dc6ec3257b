"""``VimTextArea``: the per-field editor host widgets embed."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from vim_textarea.buffer import Buffer, Cursor, RegisterValue, Transaction
from vim_textarea.commands import EXECUTED, IGNORED, InsertText, ReplaceText
from vim_textarea.commands.base import Command, EditorContext, ExecuteResult
from vim_textarea.config import TextAreaConfig
from vim_textarea.errors import VimTextAreaError
from vim_textarea.keymaps import CommandRegistry, PendingRegistry, default_registries
from vim_textarea.modes import (
    KeyInput,
    Mode,
    ModeBus,
    ModeManager,
    PendingBuilder,
    PendingStatus,
    coerce_key,
    key_to_chord,
    printable_text,
)
from vim_textarea.render import Viewport, render
from vim_textarea.runtime import telemetry

Action = Callable[[], Any]

LOGGER_NAME = "vim_textarea.textarea"


@dataclass(frozen=True, slots=True)
class SubmitMsg:
    content: str


@dataclass(frozen=True, slots=True)
class ChangeMsg:
    value: str


@dataclass(frozen=True, slots=True)
class ModeChangeMsg:
    mode: Mode
    previous: Mode


@dataclass(frozen=True, slots=True)
class BatchMsg:
    messages: Tuple[Any, ...]


def batch(*actions: Optional[Action]) -> Optional[Action]:
    """Combine actions; the result yields one ``BatchMsg`` when more than one remains."""

    live = [action for action in actions if action is not None]
    if not live:
        return None
    if len(live) == 1:
        return live[0]
    return lambda: BatchMsg(tuple(action() for action in live))


def _deliver(message: Any) -> Optional[Action]:
    if message is None:
        return None
    return lambda: message


def _typed(mode: Mode, key: KeyInput) -> Optional[Command]:
    """Literal text for an unbound key in Insert or Replace mode."""

    text = printable_text(key)
    if text is None:
        return None
    if mode is Mode.INSERT:
        return InsertText(text)
    if mode is Mode.REPLACE:
        return ReplaceText(text)
    return None


class VimTextArea:
    """Modal text input: keys in, buffer edits and host messages out."""

    def __init__(
        self,
        config: Optional[TextAreaConfig] = None,
        *,
        registry: Optional[CommandRegistry] = None,
        pending_registry: Optional[PendingRegistry] = None,
        name: str = "textarea",
    ) -> None:
        self._config = config or TextAreaConfig()
        if registry is None or pending_registry is None:
            default_primary, default_pending = default_registries()
            registry = registry or default_primary
            pending_registry = pending_registry or default_pending
        self.registry = registry
        self.name = name

        bus = ModeBus()
        self._ctx = EditorContext(
            buffer=Buffer(name=name),
            modes=ModeManager(
                self._config.initial_mode, bus=bus, logger_name=LOGGER_NAME
            ),
            pending=PendingBuilder(pending_registry, logger_name=LOGGER_NAME),
            bus=bus,
            char_limit=self._config.char_limit,
            vim_enabled=self._config.vim_enabled,
        )
        self._focused = False
        self._width = 0
        self._viewport = Viewport()

    # -- state ---------------------------------------------------------------

    @property
    def config(self) -> TextAreaConfig:
        return self._config

    @property
    def context(self) -> EditorContext:
        return self._ctx

    @property
    def bus(self) -> ModeBus:
        return self._ctx.bus

    @property
    def value(self) -> str:
        return self._ctx.buffer.text

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._ctx.buffer.lines

    @property
    def cursor(self) -> Cursor:
        return self._ctx.buffer.cursor

    @property
    def mode(self) -> Mode:
        return self._ctx.modes.active

    @property
    def register(self) -> RegisterValue:
        return self._ctx.register.value

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def pending_keys(self) -> str:
        return self._ctx.pending.sequence

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._viewport.height

    def mode_indicator(self) -> str:
        return self._ctx.modes.indicator(vim_enabled=self._config.vim_enabled)

    def can_undo(self) -> bool:
        return self._ctx.buffer.history.can_undo()

    def can_redo(self) -> bool:
        return self._ctx.buffer.history.can_redo()

    # -- host API ------------------------------------------------------------

    def set_size(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._viewport = Viewport(self._viewport.top, max(0, height))
        self._follow_cursor()

    def focus(self) -> None:
        self._focused = True

    def blur(self) -> None:
        self._focused = False
        self._ctx.pending.clear()

    def clear_pending(self) -> None:
        self._ctx.pending.clear()

    def set_value(self, text: str) -> None:
        """Replace the whole buffer; leaves any visual mode and keeps history."""

        if self.mode.is_visual:
            self._ctx.switch_mode(Mode.NORMAL)
        self._ctx.pending.clear()
        self._ctx.buffer.set_text(text)
        self._ctx.buffer.clamp(normal=self._normal_clamp())
        self._follow_cursor()

    def reset(self) -> None:
        """Empty buffer, fresh history, initial mode."""

        self._ctx.switch_mode(self._config.initial_mode)
        self._ctx.buffer.set_text("")
        self._ctx.buffer.history.clear()
        self._viewport = Viewport(0, self._viewport.height)

    def set_mode(self, mode: Mode | str) -> None:
        """Switch modes; with vim off the editor stays in Insert."""

        target = Mode.parse(mode)
        if not self._config.vim_enabled:
            target = Mode.INSERT
        if target.is_visual:
            self._ctx.buffer.state.set_anchor(self._ctx.buffer.clamp(normal=True))
        self._ctx.switch_mode(target)
        self._ctx.buffer.clamp(normal=self._normal_clamp())

    def set_vim_enabled(self, enabled: bool) -> None:
        self._config = replace(self._config, vim_enabled=enabled)
        self._ctx.vim_enabled = enabled
        self._ctx.switch_mode(self._config.initial_mode)

    # -- update loop ---------------------------------------------------------

    def update(self, event: Any) -> Tuple["VimTextArea", Optional[Action]]:
        """Consume one event; non-key events are ignored."""

        if not isinstance(event, (KeyInput, str)):
            return self, None
        return self, self.handle_key(event)

    def handle_key(self, event: KeyInput | str) -> Optional[Action]:
        if not self._focused:
            return None
        key = coerce_key(event)
        chord = key_to_chord(key)
        mode_before = self.mode
        value_before = self.value

        try:
            with telemetry.span(
                "textarea::key",
                logger_name=LOGGER_NAME,
                component="textarea",
                metadata={"chord": chord, "mode": mode_before.value},
            ) as handle:
                result, command = self._dispatch(key, chord)
                handle.add_metadata("result", result.value)
                if command is not None:
                    handle.add_metadata("command", command.id)
        except VimTextAreaError:
            # the failed command's transaction already restored the buffer
            self._ctx.pending.clear()
            if self.mode is not mode_before:
                self._ctx.modes.switch(mode_before)
            return None

        self._follow_cursor()
        actions: List[Optional[Action]] = []
        if command is not None and command.is_submit() and result is EXECUTED:
            actions.append(self._submit())
        if self.mode is not mode_before:
            actions.append(self._mode_changed(mode_before))
        if self._config.on_change is not None and self.value != value_before:
            actions.append(self._changed(self._config.on_change))
        return batch(*actions)

    def _dispatch(
        self, key: KeyInput, chord: str
    ) -> Tuple[ExecuteResult, Optional[Command]]:
        ctx = self._ctx
        mode = self.mode if self._config.vim_enabled else Mode.INSERT
        if not ctx.pending.is_empty():
            outcome = ctx.pending.feed(chord, printable_text(key))
            if outcome.status is PendingStatus.AWAITING:
                return EXECUTED, None
            if outcome.command is None:
                return IGNORED, None
            command: Optional[Command] = outcome.command
        else:
            command = self.registry.get(mode, chord)
            if command is None:
                command = _typed(mode, key)

        if command is None or command.mode() is not mode:
            return IGNORED, command
        return self._execute(command), command

    def _execute(self, command: Command) -> ExecuteResult:
        span_name = f"command::{command.id}"
        with Transaction(self._ctx.buffer, command.id, span_name=span_name) as tx:
            result = command.execute(self._ctx)
            if result is EXECUTED and command.is_undoable():
                tx.commit()
        return result

    def _submit(self) -> Optional[Action]:
        content = self.value
        telemetry.record_event(
            "submit",
            data={"textarea": self.name, "chars": len(content)},
            logger_name=LOGGER_NAME,
        )
        if self._config.on_submit is not None:
            return _deliver(self._config.on_submit(content))
        return _deliver(SubmitMsg(content))

    def _changed(self, callback: Callable[[str], Any]) -> Optional[Action]:
        """Run ``on_change``; a None return still yields a ``ChangeMsg``."""

        message = callback(self.value)
        return _deliver(ChangeMsg(self.value) if message is None else message)

    def _mode_changed(self, previous: Mode) -> Optional[Action]:
        if self._config.on_mode_change is not None:
            return _deliver(self._config.on_mode_change(self.mode, previous))
        return _deliver(ModeChangeMsg(self.mode, previous))

    # -- rendering -----------------------------------------------------------

    def view(self) -> str:
        return render(
            self.lines,
            self._viewport,
            max_height=self._config.max_height,
            placeholder=self._config.placeholder,
        )

    def visible_rows(self) -> range:
        rows = self._viewport.visible_height(self._config.max_height)
        top = self._viewport.top
        return range(top, top + rows if rows else self._ctx.buffer.line_count)

    def _follow_cursor(self) -> None:
        self._viewport = self._viewport.follow(
            self.cursor[0], self._ctx.buffer.line_count, self._config.max_height
        )

    def _normal_clamp(self) -> bool:
        return not self.mode.is_text_entry


__all__ = [
    "VimTextArea",
    "SubmitMsg",
    "ChangeMsg",
    "ModeChangeMsg",
    "BatchMsg",
    "batch",
    "Action",
]
