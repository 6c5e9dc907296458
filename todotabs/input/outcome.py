"""Result of feeding one key to the input handler."""

from __future__ import annotations

from enum import Enum


class KeyOutcome(Enum):
    IGNORED = "ignored"
    CHANGED = "changed"
    # Full repaint requested; state is untouched.
    CLEAR = "clear"
    QUIT = "quit"


def changed_if(applied: bool) -> KeyOutcome:
    return KeyOutcome.CHANGED if applied else KeyOutcome.IGNORED
