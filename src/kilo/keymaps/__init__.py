"""Declarative key bindings and the default keymap."""

from .models import ActionRef, Binding
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    FALLBACK_ACTION,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "FALLBACK_ACTION",
    "load_default_keymaps",
]
