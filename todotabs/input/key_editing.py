"""Input-mode keyboard handling for the draft overlay.

While editing, only backspace, printable characters, Esc, and Enter mean
anything. Command keys such as ``q`` or space are typed as text.
"""

from __future__ import annotations

from ..state import AppState
from .key_registry import KeyBinding, KeyRegistry
from .outcome import KeyOutcome, changed_if


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def handle_editing_key(key: str, state: AppState) -> KeyOutcome:
    """Apply one key to the draft buffer in ``state``."""

    def backspace_action() -> KeyOutcome:
        return changed_if(state.pop_draft())

    def cancel_action() -> KeyOutcome:
        state.cancel_input()
        return KeyOutcome.CHANGED

    def confirm_action() -> KeyOutcome:
        state.commit_input()
        return KeyOutcome.CHANGED

    def type_character(typed: str) -> KeyOutcome:
        if not is_printable_key(typed):
            return KeyOutcome.IGNORED
        state.append_draft(typed)
        return KeyOutcome.CHANGED

    registry = KeyRegistry(fallback=type_character).register_bindings(
        KeyBinding(("BACKSPACE",), backspace_action),
        KeyBinding(("ESC",), cancel_action),
        KeyBinding(("ENTER",), confirm_action),
    )
    return registry.dispatch(key)
