"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, CSI/SS3 sequences, and SGR mouse reports.
Sequences without a name decode to ``UNKNOWN``, which no mode binds.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
EOF_KEY = "EOF"
UNKNOWN_KEY = "UNKNOWN"
CSI_MAX_LENGTH = 32
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
    b"Z": "SHIFT_TAB",
}
_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"2": "INSERT",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}
_SS3_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
    b"P": "F1",
    b"Q": "F2",
    b"R": "F3",
    b"S": "F4",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token.

    Returns ``""`` when ``timeout_ms`` elapses with nothing to read and
    ``EOF`` when the descriptor reaches end of file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return EOF_KEY

    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"
    if ch == b"\x03":
        return "CTRL_C"

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_tail(fd, ch)
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        return _read_ss3(fd)
    _PENDING_BYTES.append(seq)
    return "ESC"


def _read_csi(fd: int) -> str:
    """Decode ``ESC [ params intermediates final`` into one key token.

    The whole sequence is consumed, so unknown keys never leak bytes into the
    draft text and never read as a bare Esc.
    """
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            if not params:
                _PENDING_BYTES.append(b"[")
                return "ESC"
            return UNKNOWN_KEY
        code = part[0]
        if 0x40 <= code <= 0x7E:
            final = part
            break
        if not 0x20 <= code <= 0x3F:
            # Not part of a CSI sequence; hand the byte back to the next read.
            _PENDING_BYTES.append(part)
            return UNKNOWN_KEY
        params += part
        if len(params) > CSI_MAX_LENGTH:
            return UNKNOWN_KEY

    if params.startswith(b"<") and final in {b"M", b"m"}:
        return "MOUSE"
    if final == b"~":
        return _TILDE_KEYS.get(params, UNKNOWN_KEY)
    if params:
        return UNKNOWN_KEY
    return _CSI_FINAL_KEYS.get(final, UNKNOWN_KEY)


def _read_ss3(fd: int) -> str:
    """Decode ``ESC O final`` (application-mode arrows, Home/End, F1-F4)."""
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        _PENDING_BYTES.append(b"O")
        return "ESC"
    return _SS3_FINAL_KEYS.get(final, UNKNOWN_KEY)
