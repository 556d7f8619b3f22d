"""Keyboard routing from key presses to session navigation intents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ..navigation import RelativePathPosition
from ..session import ReviewSession
from .key_registry import KeyComboBinding, KeyComboRegistry, merge_key_bindings

PREVIOUS_FILE = "previous_file"
NEXT_FILE = "next_file"
EXPAND_ALL = "expand_all"
COLLAPSE_ALL = "collapse_all"
NEXT_CHANGE = "next_change"
PREVIOUS_CHANGE = "previous_change"
NEXT_MESSAGE = "next_message"
PREVIOUS_MESSAGE = "previous_message"

# 'e' is kept next to 'o' for reviewers used to older review tools.
DEFAULT_KEY_BINDINGS: dict[str, tuple[str, ...]] = {
    PREVIOUS_FILE: ("k",),
    NEXT_FILE: ("j",),
    EXPAND_ALL: ("o", "e"),
    COLLAPSE_ALL: ("c",),
    NEXT_CHANGE: ("n",),
    PREVIOUS_CHANGE: ("p",),
    NEXT_MESSAGE: ("z",),
    PREVIOUS_MESSAGE: ("a",),
}


@dataclass(frozen=True)
class KeyPress:
    """One key press with modifier state."""

    key: str
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    shift: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.ctrl or self.alt or self.meta or self.shift

    @classmethod
    def from_token(cls, token: str) -> KeyPress:
        """Decode terminal key tokens such as ``j``, ``J``, ``CTRL_J``, ``ALT_J``."""
        if token.startswith("CTRL_") and len(token) > 5:
            return cls(key=token[5:].lower(), ctrl=True)
        if token.startswith("ALT_") and len(token) > 4:
            return cls(key=token[4:].lower(), alt=True)
        if len(token) == 1 and token.isalpha() and token.isupper():
            return cls(key=token, shift=True)
        return cls(key=token)


class KeyboardRouter:
    """Dispatch unmodified key presses to a ``ReviewSession``."""

    def __init__(
        self,
        session: ReviewSession,
        key_bindings: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self.session = session
        bindings = merge_key_bindings(DEFAULT_KEY_BINDINGS, key_bindings)
        handlers = {
            PREVIOUS_FILE: lambda: session.go_to_relative_file(RelativePathPosition.PREVIOUS),
            NEXT_FILE: lambda: session.go_to_relative_file(RelativePathPosition.NEXT),
            EXPAND_ALL: session.expand_all,
            COLLAPSE_ALL: session.collapse_all,
            NEXT_CHANGE: lambda: session.go_to_relative_diff(RelativePathPosition.NEXT),
            PREVIOUS_CHANGE: lambda: session.go_to_relative_diff(RelativePathPosition.PREVIOUS),
            NEXT_MESSAGE: lambda: session.go_to_relative_message(RelativePathPosition.NEXT),
            PREVIOUS_MESSAGE: lambda: session.go_to_relative_message(RelativePathPosition.PREVIOUS),
        }
        self.registry = KeyComboRegistry().register_bindings(
            *(KeyComboBinding(action, bindings[action], handler) for action, handler in handlers.items())
        )

    def handle(self, key_press: KeyPress) -> bool:
        """Handle one key press; returns ``True`` when a binding consumed it.

        Presses with any modifier held are never handled.
        """
        if key_press.has_modifier:
            return False
        handled, _result = self.registry.dispatch(key_press.key)
        return handled

    def handle_token(self, token: str) -> bool:
        return self.handle(KeyPress.from_token(token))

    def toggle_directory(self, directory_id: str) -> None:
        """Directory-row toggle action from the tree pane."""
        self.session.toggle_directory(directory_id)
