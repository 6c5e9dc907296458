"""Mode-aware key dispatch used by the runtime loop."""

from __future__ import annotations

from ..state import AppState
from .key_editing import handle_editing_key
from .key_normal import handle_normal_key
from .outcome import KeyOutcome
from .reader import EOF_KEY


def handle_key(key: str, state: AppState) -> KeyOutcome:
    """Route ``key`` to the editing or navigation handler.

    End of input ends the session in either mode.
    """
    if key == EOF_KEY:
        return KeyOutcome.QUIT
    if state.input_mode:
        return handle_editing_key(key, state)
    return handle_normal_key(key, state)
