"""Tests for terminal mode control sequences.

Verifies raw-mode lifecycle safety and the escape payloads sent on enter,
exit, and full-screen clear.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from todotabs.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("todotabs.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "todotabs.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("todotabs.terminal.os.write") as write_mock, mock.patch(
            "todotabs.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("todotabs.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(OSError):
                with controller.raw_mode():
                    raise OSError("draw failed")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_clear_screen_homes_and_erases(self) -> None:
        with mock.patch("todotabs.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "todotabs.terminal.os.write"
        ) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.clear_screen()

        write_mock.assert_called_once_with(1, b"\x1b[H\x1b[2J")

    def test_setup_failure_propagates(self) -> None:
        with mock.patch("todotabs.terminal.termios.tcgetattr", side_effect=termios.error(25, "not a tty")):
            with self.assertRaises(termios.error):
                TerminalController(stdin_fd=0, stdout_fd=1)


if __name__ == "__main__":
    unittest.main()
