"""Mode state machine, key normalization, and operator-pending state."""

from .base_mode import MODE_CONFIGS, KeyInput, Mode, ModeBus, ModeConfig
from .keymap_helpers import coerce_key, key_to_chord, printable_text
from .mode_manager import ModeManager
from .pending import PendingBuilder, PendingResult, PendingStatus

__all__ = [
    "Mode",
    "ModeConfig",
    "MODE_CONFIGS",
    "KeyInput",
    "ModeBus",
    "ModeManager",
    "PendingBuilder",
    "PendingResult",
    "PendingStatus",
    "coerce_key",
    "key_to_chord",
    "printable_text",
]
