"""Navigation-mode keyboard handling."""

from __future__ import annotations

from ..state import AppState
from .key_registry import KeyBinding, KeyRegistry
from .outcome import KeyOutcome, changed_if

QUIT_KEYS = ("q", "EOF")


def handle_normal_key(key: str, state: AppState) -> KeyOutcome:
    """Apply one navigation/command key to ``state``.

    Keys without a binding (arrows, Ctrl-C, paging keys) leave the state untouched.
    """

    def quit_action() -> KeyOutcome:
        return KeyOutcome.QUIT

    def next_tab_action() -> KeyOutcome:
        state.switch_tab(1)
        return KeyOutcome.CHANGED

    def prev_tab_action() -> KeyOutcome:
        state.switch_tab(-1)
        return KeyOutcome.CHANGED

    def select_next_action() -> KeyOutcome:
        return changed_if(state.move_selection(1))

    def select_prev_action() -> KeyOutcome:
        return changed_if(state.move_selection(-1))

    def move_item_action() -> KeyOutcome:
        return changed_if(state.move_selected_item())

    def delete_item_action() -> KeyOutcome:
        return changed_if(state.delete_selected_item())

    def clear_screen_action() -> KeyOutcome:
        return KeyOutcome.CLEAR

    def enter_input_action() -> KeyOutcome:
        state.begin_input()
        return KeyOutcome.CHANGED

    registry = KeyRegistry().register_bindings(
        KeyBinding(QUIT_KEYS, quit_action),
        KeyBinding(("TAB",), next_tab_action),
        KeyBinding(("SHIFT_TAB",), prev_tab_action),
        KeyBinding(("e",), select_next_action),
        KeyBinding(("u",), select_prev_action),
        KeyBinding((" ",), move_item_action),
        KeyBinding(("BACKSPACE",), delete_item_action),
        KeyBinding(("c",), clear_screen_action),
        KeyBinding(("a",), enter_input_action),
    )
    return registry.dispatch(key)
