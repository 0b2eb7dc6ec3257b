"""Textual bridge; the demo app lives in ``app`` and is imported on demand."""

from .controller import TextualTextAreaAdapter, TextualUIHooks

__all__ = ["TextualTextAreaAdapter", "TextualUIHooks"]
