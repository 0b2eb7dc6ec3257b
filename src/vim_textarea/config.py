"""Per-instance configuration for ``VimTextArea``."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional

from vim_textarea.errors import ConfigError
from vim_textarea.modes.base_mode import Mode

ENV_PREFIX = "VIM_TEXTAREA_"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class TextAreaConfig:
    """Behaviour switches and host callbacks for one text area.

    ``char_limit`` and ``max_height`` of 0 mean unlimited. Callbacks return an
    optional host message that the text area hands back from ``update``.
    """

    vim_enabled: bool = True
    default_mode: Mode = Mode.NORMAL
    char_limit: int = 0
    max_height: int = 0
    placeholder: str = ""
    on_submit: Optional[Callable[[str], Any]] = None
    on_change: Optional[Callable[[str], Any]] = None
    on_mode_change: Optional[Callable[[Mode, Mode], Any]] = None

    def __post_init__(self) -> None:
        try:
            mode = Mode.parse(self.default_mode)
        except ValueError as exc:
            raise ConfigError(str(exc), field="default_mode") from exc
        if mode not in (Mode.NORMAL, Mode.INSERT):
            raise ConfigError(
                "default_mode must be NORMAL or INSERT", field="default_mode"
            )
        object.__setattr__(self, "default_mode", mode)
        for name in ("char_limit", "max_height"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer", field=name)

    @property
    def initial_mode(self) -> Mode:
        """Mode a fresh editor starts in; Insert whenever vim is off."""

        return self.default_mode if self.vim_enabled else Mode.INSERT

    def with_overrides(self, **changes: Any) -> "TextAreaConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        *,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "TextAreaConfig":
        """Build a config from ``<prefix>VIM``, ``DEFAULT_MODE``, ``CHAR_LIMIT``, ``MAX_HEIGHT``.

        Keyword overrides win over the environment.
        """

        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        raw = env.get(f"{prefix}VIM")
        if raw is not None:
            values["vim_enabled"] = _parse_flag(raw, f"{prefix}VIM")
        raw = env.get(f"{prefix}DEFAULT_MODE")
        if raw:
            values["default_mode"] = raw
        for name in ("char_limit", "max_height"):
            raw = env.get(f"{prefix}{name.upper()}")
            if raw:
                values[name] = _parse_int(raw, f"{prefix}{name.upper()}")

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config fields: {sorted(unknown)}")
        values.update(overrides)
        return cls(**values)


def _parse_flag(raw: str, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}", field=name)


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        message = f"{name} must be an integer, got {raw!r}"
        raise ConfigError(message, field=name) from None


__all__ = ["TextAreaConfig", "ENV_PREFIX"]
