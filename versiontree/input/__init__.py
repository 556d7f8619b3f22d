"""Input-layer public API for key decoding and routing."""

from .key_registry import KeyComboBinding, KeyComboRegistry, merge_key_bindings
from .keys import DEFAULT_KEY_BINDINGS, KeyboardRouter, KeyPress

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "merge_key_bindings",
    "DEFAULT_KEY_BINDINGS",
    "KeyboardRouter",
    "KeyPress",
]
