"""Command registries and the built-in default bindings."""

from .defaults import (
    DEFAULT_COMMANDS,
    default_registries,
    load_default_commands,
    register_command,
    split_keys,
)
from .registry import (
    CommandConflictError,
    CommandRegistry,
    PendingRegistry,
    RegistryFrozenError,
    RegistryStats,
)

__all__ = [
    "CommandRegistry",
    "PendingRegistry",
    "CommandConflictError",
    "RegistryFrozenError",
    "RegistryStats",
    "DEFAULT_COMMANDS",
    "default_registries",
    "load_default_commands",
    "register_command",
    "split_keys",
]
