"""Key-dispatch table shared by the navigation and editing handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .outcome import KeyOutcome


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action callback."""

    keys: tuple[str, ...]
    handler: Callable[[], KeyOutcome]


class KeyRegistry:
    """Exact-match key table with a fallback for unbound tokens."""

    def __init__(self, fallback: Callable[[str], KeyOutcome] | None = None) -> None:
        self._fallback = fallback
        self._handlers: dict[str, Callable[[], KeyOutcome]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        """Register one binding, overwriting existing handlers for the same keys."""
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> KeyOutcome:
        """Invoke the handler bound to ``key``; unbound keys go to the fallback."""
        handler = self._handlers.get(key)
        if handler is not None:
            return handler()
        if self._fallback is not None:
            return self._fallback(key)
        return KeyOutcome.IGNORED
