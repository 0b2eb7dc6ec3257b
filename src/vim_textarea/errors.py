"""Exception hierarchy shared by every vim_textarea component."""

from __future__ import annotations


class VimTextAreaError(RuntimeError):
    """Base class for errors raised by the editor core."""


class ConfigError(VimTextAreaError, ValueError):
    """Raised when a ``TextAreaConfig`` field or environment value is invalid."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


__all__ = ["VimTextAreaError", "ConfigError"]
