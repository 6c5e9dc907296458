"""Input-layer public API for key decoding and mode handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
state-machine handlers used by the runtime loop.
"""

from .key_editing import handle_editing_key, is_printable_key
from .key_normal import QUIT_KEYS, handle_normal_key
from .key_registry import KeyBinding, KeyRegistry
from .keys import handle_key
from .outcome import KeyOutcome
from .reader import EOF_KEY, ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "EOF_KEY",
    "UNKNOWN_KEY",
    "KeyBinding",
    "KeyRegistry",
    "KeyOutcome",
    "QUIT_KEYS",
    "handle_key",
    "handle_normal_key",
    "handle_editing_key",
    "is_printable_key",
]
