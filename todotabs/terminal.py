"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, mouse capture, and full
screen clears. Failures here are fatal and propagate to the caller.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"
LEAVE_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"
CLEAR_SCREEN_SEQUENCE = b"\x1b[H\x1b[2J"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse capture enabled."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Mouse reports are captured so clicks never echo into the draft text.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer, cursor, and saved tty attributes."""
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def clear_screen(self) -> None:
        os.write(self.stdout_fd, CLEAR_SCREEN_SEQUENCE)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
