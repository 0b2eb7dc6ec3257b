"""Executable Textual demo: a work-item form and a chat box, each a ``VimTextArea``."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vim_textarea.adapters.textual.app"
    ) from exc

from vim_textarea.buffer import BufferMirror, Cursor, graphemes
from vim_textarea.config import TextAreaConfig
from vim_textarea.modes import MODE_CONFIGS, Mode
from vim_textarea.runtime import telemetry
from vim_textarea.textarea import SubmitMsg, VimTextArea

from .controller import TextualTextAreaAdapter, TextualUIHooks

FIELDS = ("title", "description", "chat")


YANK_FLASH_SECONDS = 0.2
YANK_FLASH_STYLE = "black on #E5C07B"


def render_mirror(
    mirror: BufferMirror,
    *,
    mode: Mode,
    focused: bool,
    placeholder: str = "",
    rows: Optional[range] = None,
    flash: Optional[Dict[str, Any]] = None,
) -> Text:
    """Rich text for one field: cursor cell reversed, selection tinted.

    ``flash`` is a ``yank`` event payload; its cells are tinted until the
    host drops it.
    """

    if placeholder and not mirror.text:
        return Text(placeholder, style="dim italic")

    colour = MODE_CONFIGS[mode].colour
    lines = mirror.text.split("\n")
    selected = _selected_cells(mirror, mode)
    flashed = yank_cells(lines, flash) if flash else set()
    cursor_row, cursor_col = mirror.cursor
    out = Text()
    visible = [row for row in (rows or range(len(lines))) if row < len(lines)]
    for index, row in enumerate(visible):
        if index:
            out.append("\n")
        for col, cell in enumerate(graphemes.split(lines[row]) + (" ",)):
            style = ""
            if (row, col) in flashed:
                style = YANK_FLASH_STYLE
            if (row, col) in selected:
                style = f"on {colour}"
            if focused and (row, col) == (cursor_row, cursor_col):
                style = "reverse"
            out.append(cell, style=style)
    return out


def _span_cells(
    lines: Sequence[str], start: Cursor, end: Cursor, *, linewise: bool
) -> set[Tuple[int, int]]:
    """Cells from ``start`` up to ``end`` (exclusive); whole rows when linewise."""

    cells: set[Tuple[int, int]] = set()
    for row in range(start[0], min(end[0], len(lines) - 1) + 1):
        length = graphemes.length(lines[row])
        first = 0 if linewise or row > start[0] else start[1]
        last = length if linewise or row < end[0] else end[1]
        cells.update((row, col) for col in range(first, max(first, last)))
    return cells


def yank_cells(lines: Sequence[str], payload: Dict[str, Any]) -> set[Tuple[int, int]]:
    return _span_cells(
        lines, payload["start"], payload["end"], linewise=payload["linewise"]
    )


def _selected_cells(mirror: BufferMirror, mode: Mode) -> set[Tuple[int, int]]:
    if mirror.selection is None or not mode.is_visual:
        return set()
    anchor, cursor = mirror.selection
    start, end = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
    return _span_cells(
        mirror.text.split("\n"),
        start,
        (end[0], end[1] + 1),
        linewise=mode is Mode.VISUAL_LINE,
    )


@dataclass
class FieldState:
    textarea: VimTextArea
    adapter: Optional[TextualTextAreaAdapter] = None
    mirror: Optional[BufferMirror] = None
    status: str = ""
    flash: Optional[Dict[str, Any]] = None


@dataclass
class UIState:
    focused: str = "title"
    saved: List[Dict[str, str]] = field(default_factory=list)
    chat: List[str] = field(default_factory=list)
    notice: str = ""


class VimTextAreaApp(App[None]):
    """Demo host showing several independent text areas on one screen."""

    CSS = """
	Screen {
		layout: vertical;
	}

	.field {
		border: round $panel;
		padding: 0 1;
		height: auto;
	}

	.field.focused {
		border: round $accent;
	}

	#chat-log {
		height: 1fr;
		border: round $panel;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: Optional[TextAreaConfig] = None) -> None:
        super().__init__()
        base = config or TextAreaConfig()
        self._state = UIState()
        self._fields: Dict[str, FieldState] = {
            "title": FieldState(
                VimTextArea(
                    base.with_overrides(
                        char_limit=base.char_limit or 80,
                        max_height=1,
                        placeholder="Title",
                    ),
                    name="title",
                )
            ),
            "description": FieldState(
                VimTextArea(
                    base.with_overrides(max_height=6, placeholder="Description"),
                    name="description",
                )
            ),
            "chat": FieldState(
                VimTextArea(
                    base.with_overrides(max_height=3, placeholder="Message"),
                    name="chat",
                )
            ),
        }
        self._widgets: Dict[str, Static] = {}
        self._log_widget: Static | None = None
        self._status_widget: Static | None = None
        self._log = telemetry.get_logger("vim_textarea.demo")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="form"):
            for name in FIELDS:
                widget = Static("", id=f"field-{name}", classes="field")
                widget.border_title = name.capitalize()
                self._widgets[name] = widget
                yield widget
        self._log_widget = Static("", id="chat-log")
        self._status_widget = Static("", id="status-line")
        yield self._log_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        for name, state in self._fields.items():
            hooks = TextualUIHooks(
                update_buffer=lambda mirror, n=name: self._update_buffer(n, mirror),
                update_status=lambda status, n=name: self._update_status(n, status),
                show_message=lambda message, n=name: self._handle_message(n, message),
                handle_event=lambda event, payload, n=name: self._handle_event(
                    n, event, payload
                ),
                log=self._log_line,
            )
            state.adapter = TextualTextAreaAdapter(state.textarea, hooks)
        self._focus_field(self._state.focused)

    def on_key(self, event: events.Key) -> None:
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text = normalized
        if key in {"tab", "shift+tab"}:
            self._cycle_focus(1 if key == "tab" else -1)
            event.stop()
            return
        adapter = self._fields[self._state.focused].adapter
        if adapter is None:
            return
        adapter.handle_textual_key(key, text=text)
        event.stop()

    # -- focus ---------------------------------------------------------------

    def _cycle_focus(self, step: int) -> None:
        index = FIELDS.index(self._state.focused)
        self._focus_field(FIELDS[(index + step) % len(FIELDS)])

    def _focus_field(self, name: str) -> None:
        self._state.focused = name
        for field_name, state in self._fields.items():
            if field_name == name:
                state.textarea.focus()
            else:
                state.textarea.blur()
            widget = self._widgets.get(field_name)
            if widget is not None:
                widget.set_class(field_name == name, "focused")
            self._redraw(field_name)
        self._refresh_status()

    # -- hooks ---------------------------------------------------------------

    def _update_buffer(self, name: str, mirror: BufferMirror) -> None:
        self._fields[name].mirror = mirror
        self._redraw(name)

    def _update_status(self, name: str, status: str) -> None:
        self._fields[name].status = status
        if name == self._state.focused:
            self._refresh_status()

    def _handle_message(self, name: str, message: Any) -> None:
        if not isinstance(message, SubmitMsg):
            return
        if name == "title":
            self._focus_field("description")
        elif name == "description":
            self._save_work_item()
        elif name == "chat" and message.content.strip():
            self._state.chat.append(message.content)
            self._reset_field("chat")
            self._refresh_chat()

    def _handle_event(self, name: str, event: str, payload: object | None) -> None:
        if event != "yank" or not isinstance(payload, dict):
            return
        state = self._fields[name]
        state.flash = payload
        self._redraw(name)
        self.set_timer(YANK_FLASH_SECONDS, lambda: self._clear_flash(name, payload))

    def _clear_flash(self, name: str, payload: Dict[str, Any]) -> None:
        state = self._fields[name]
        if state.flash is payload:
            state.flash = None
            self._redraw(name)

    def _log_line(self, line: str) -> None:
        self._log.debug(line)

    def _reset_field(self, name: str) -> None:
        state = self._fields[name]
        state.textarea.reset()
        if state.adapter is not None:
            state.adapter.refresh()

    # -- work item -----------------------------------------------------------

    def _save_work_item(self) -> None:
        title = self._fields["title"].textarea
        description = self._fields["description"].textarea
        if not title.value.strip():
            self._state.notice = "title is required"
            self._focus_field("title")
            return
        item = {"title": title.value, "description": description.value}
        self._state.saved.append(item)
        self._state.notice = f"saved #{len(self._state.saved)}: {title.value}"
        telemetry.record_event(
            "demo.save",
            data={"title": title.value, "chars": len(description.value)},
            logger_name="vim_textarea.demo",
        )
        self._reset_field("title")
        self._reset_field("description")
        self._focus_field("title")

    # -- drawing -------------------------------------------------------------

    def _redraw(self, name: str) -> None:
        widget = self._widgets.get(name)
        state = self._fields[name]
        if widget is None or state.mirror is None:
            return
        textarea = state.textarea
        widget.update(
            render_mirror(
                state.mirror,
                mode=textarea.mode,
                focused=textarea.focused,
                placeholder=textarea.config.placeholder,
                rows=textarea.visible_rows(),
                flash=state.flash,
            )
        )

    def _refresh_chat(self) -> None:
        if self._log_widget:
            self._log_widget.update("\n".join(f"> {m}" for m in self._state.chat))

    def _refresh_status(self) -> None:
        if not self._status_widget:
            return
        state = self._fields[self._state.focused]
        mode = state.textarea.mode
        line = Text()
        if state.status:
            line.append(state.status, style=f"bold {MODE_CONFIGS[mode].colour}")
        if self._state.notice:
            line.append(f"  {self._state.notice}")
        self._status_widget.update(line)

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[Tuple[str, Optional[str]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        text = event.character if event.is_printable else None
        return key, text


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vim text area demo.")
    parser.add_argument(
        "--vim",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable vim keybindings (default: on, or VIM_TEXTAREA_VIM)",
    )
    parser.add_argument(
        "--default-mode",
        choices=("normal", "insert"),
        default=None,
        help="Mode each field starts in",
    )
    parser.add_argument(
        "--char-limit",
        type=int,
        default=None,
        help="Maximum characters per field (0 for unlimited)",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=None,
        help="telelog preset to use instead of the VIM_TEXTAREA_LOG_* variables",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    overrides: Dict[str, Any] = {}
    if args.vim is not None:
        overrides["vim_enabled"] = args.vim
    if args.default_mode is not None:
        overrides["default_mode"] = args.default_mode
    if args.char_limit is not None:
        overrides["char_limit"] = args.char_limit
    app = VimTextAreaApp(TextAreaConfig.from_env(**overrides))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
