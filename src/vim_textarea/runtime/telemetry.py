"""Structured logging and profiling for vim_textarea, backed by telelog.

Public surface:

``configure(...)`` -- adopt an explicit config or a named preset
``get_logger(name)`` -- cached ``telelog.Logger`` for a component
``record_event(name, ...)`` -- one structured event line
``span(name, ...)`` -- profile a block, optionally tracked as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIM_TEXTAREA_"
ROOT_LOGGER = "vim_textarea"
_TRUTHY = {"1", "true", "yes", "on"}

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(payload: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _as_text(value)) for key, value in payload.items()]


def _log_path(fallback: str) -> str:
    return _env("LOG_FILE") or fallback


def _with_profiling(config: Any) -> Any:
    config.with_profiling(True)
    return config


def _development() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    config.with_json_format(False)
    return config


def _production() -> Any:
    config = tl.Config()
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(_log_path("vim_textarea.log"))
    config.with_buffering(True)
    return config


def _performance() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_buffering(True)
    config.with_file_output(_log_path("vim_textarea-performance.log"))
    return config


PRESETS: Dict[str, Callable[[], Any]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def build_env_config() -> Any:
    """Translate ``VIM_TEXTAREA_*`` variables into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))

    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))

    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active configuration and drop every cached logger.

    ``config`` is an explicit ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. Passing both is an error. With neither, the environment
    decides.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        try:
            config = PRESETS[preset.lower()]()
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
    elif config is None:
        config = build_env_config()

    _config = _with_profiling(config)
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached logger for ``name`` (the package logger by default)."""

    global _config
    if _config is None:
        _config = _with_profiling(build_env_config())
    key = name or ROOT_LOGGER
    log = _loggers.get(key)
    if log is None:
        log = tl.Logger.with_config(key, _config)
        _loggers[key] = log
    return log


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Write ``event::<name>`` with ``data`` as key/value pairs."""

    payload = {"event": name}
    payload.update(data or {})
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so the block can attach metadata or flag failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _as_text(value)

    def _payload(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name}
        payload.update(self.metadata)
        if self.component_name:
            payload["component"] = self.component_name
        for key, value in (extra or {}).items():
            payload[key] = _as_text(value)
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def cancel(self, reason: Optional[str] = None) -> None:
        extra = {"reason": reason} if reason else None
        _emit(self.logger, "warning", "span::cancel", self._payload(extra))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component=True`` tracks the block as a component of the same name; a
    string picks another component name. ``metadata`` is pushed as logger
    context for the duration of the block and copied onto the handle.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _as_text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "SpanHandle",
    "build_env_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
