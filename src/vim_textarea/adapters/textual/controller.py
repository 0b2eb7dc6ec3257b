"""Textual-facing adapter that feeds keys to a ``VimTextArea`` and surfaces the result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from vim_textarea.buffer import BufferMirror
from vim_textarea.modes import KeyInput
from vim_textarea.textarea import BatchMsg, VimTextArea


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_message: Callable[[Any], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualTextAreaAdapter:
    """Bridges one ``VimTextArea`` and its bus events to Textual widgets."""

    EVENTS = (
        "mode.switch",
        "visual.selection",
        "visual.yank",
        "visual.delete",
        "yank",
    )

    def __init__(self, textarea: VimTextArea, hooks: TextualUIHooks) -> None:
        self.textarea = textarea
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Any:
        """Dispatch one key and return the message the text area produced, if any."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        _, action = self.textarea.update(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        message = action() if action is not None else None
        self.refresh()
        for item in _flatten(message):
            self.hooks.show_message(item)
        self._log_state("result <-", message=message)
        return message

    def refresh(self) -> None:
        self._refresh_buffer()
        self.hooks.update_status(self.status_text())

    def status_text(self) -> str:
        indicator = self.textarea.mode_indicator()
        pending = self.textarea.pending_keys
        return f"{indicator} {pending}".strip()

    def _subscribe_events(self) -> None:
        for event in self.EVENTS:
            self.textarea.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "mode.switch":
            self.hooks.update_status(self.status_text())

    def pull_buffer(self) -> BufferMirror:
        return self.textarea.context.buffer.mirror(
            attributes={
                "mode": self.textarea.mode.value,
                "pending": self.textarea.pending_keys,
            }
        )

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.textarea.context.buffer
        return {
            "textarea": self.textarea.name,
            "mode": self.textarea.mode.value,
            "cursor": buffer.state.cursor,
            "selection": buffer.state.selection,
            "pending": self.textarea.pending_keys,
            "buffer_version": buffer.document.version,
        }


def _flatten(message: Any) -> list[Any]:
    if message is None:
        return []
    if isinstance(message, BatchMsg):
        return list(message.messages)
    return [message]


__all__ = ["TextualTextAreaAdapter", "TextualUIHooks"]
