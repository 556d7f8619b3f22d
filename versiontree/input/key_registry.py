"""Action-named key-combo registry."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a named action."""

    action: str
    combos: tuple[str, ...]
    handler: Callable[[], object]


class KeyComboRegistry:
    """Exact-match key dispatch table; later bindings win for a shared key."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], object]] = {}
        self._actions: dict[str, str] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def action_for(self, key: str) -> str | None:
        return self._actions.get(key)

    def keys_by_action(self) -> dict[str, tuple[str, ...]]:
        grouped: dict[str, list[str]] = {}
        for key, action in self._actions.items():
            grouped.setdefault(action, []).append(key)
        return {action: tuple(keys) for action, keys in grouped.items()}

    def dispatch(self, key: str) -> tuple[bool, object]:
        """Invoke the handler bound to ``key``; returns ``(handled, result)``."""
        handler = self._handlers.get(key)
        if handler is None:
            return False, None
        return True, handler()


def merge_key_bindings(
    defaults: Mapping[str, Iterable[str]],
    overrides: Mapping[str, Iterable[str]] | None,
) -> dict[str, tuple[str, ...]]:
    """Overlay configured keys onto defaults for known actions only."""
    merged = {action: tuple(keys) for action, keys in defaults.items()}
    if not overrides:
        return merged
    for action, keys in overrides.items():
        if action in merged:
            merged[action] = tuple(keys)
    return merged
