"""Embeddable vim-style modal text area for terminal UIs."""

from .config import TextAreaConfig
from .modes import Mode
from .textarea import VimTextArea

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "keymaps",
    "modes",
    "runtime",
    "Mode",
    "TextAreaConfig",
    "VimTextArea",
]

__version__ = "0.1.0"
