"""Tests for runtime bootstrap wiring in ``todotabs.runtime.app``."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from todotabs.runtime import app as app_runtime
from todotabs.state import AppState
from todotabs.view import build_view_model


class RunAppTests(unittest.TestCase):
    def _run_piped(self, keys: bytes) -> tuple[int, str]:
        stdin_read, stdin_write = os.pipe()
        out_read, out_write = os.pipe()
        try:
            os.write(stdin_write, keys)
            os.close(stdin_write)
            with mock.patch("todotabs.runtime.app.terminal_size", return_value=(40, 12)):
                code = app_runtime.run_app(no_color=True, stdin_fd=stdin_read, stdout_fd=out_write)
            output = os.read(out_read, 65536).decode("utf-8")
        finally:
            for fd in (stdin_read, out_read, out_write):
                os.close(fd)
        return code, output

    def test_non_tty_stdin_prints_one_frame(self) -> None:
        code, output = self._run_piped(b"")

        self.assertEqual(code, 0)
        self.assertIn("Todo | Done", output)
        self.assertIn("make a cup of tea", output)
        self.assertNotIn("\033[", output)

    def test_piped_keys_are_applied_before_printing(self) -> None:
        code, output = self._run_piped(b" q")

        self.assertEqual(code, 0)
        self.assertNotIn("make a todo tui app", output)
        self.assertIn("make a cup of tea", output)

    def test_piped_keys_stop_at_quit(self) -> None:
        _code, output = self._run_piped(b"q ")
        self.assertIn("make a todo tui app", output)

    def test_piped_draft_is_committed_on_enter(self) -> None:
        _code, output = self._run_piped(b"atea\r\n")
        self.assertIn("tea", output.split("make a cup of tea")[-1])

    def test_replay_keys_counts_dispatched_keys_until_end_of_input(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"e\r\nx")
            os.close(write_fd)
            state = AppState.seeded()
            count = app_runtime.replay_keys(state, read_fd)
        finally:
            os.close(read_fd)

        self.assertEqual(count, 4)
        self.assertEqual(state.selection, 1)

    def test_tty_session_runs_loop_and_stops_listener(self) -> None:
        with mock.patch("todotabs.runtime.app.os.isatty", return_value=True), mock.patch(
            "todotabs.runtime.app.TerminalController"
        ) as terminal_cls, mock.patch("todotabs.runtime.app.KeyEventListener") as listener_cls, mock.patch(
            "todotabs.runtime.app.run_main_loop"
        ) as loop_mock:
            code = app_runtime.run_app(theme_name="ocean", poll_interval_ms=40, stdin_fd=0, stdout_fd=1)

        self.assertEqual(code, 0)
        terminal_cls.assert_called_once_with(0, 1)
        listener_cls.assert_called_once_with(0, poll_interval_ms=40)
        listener = listener_cls.return_value
        listener.start.assert_called_once()
        listener.stop.assert_called_once()
        state, terminal, callbacks, poll_ms = loop_mock.call_args.args
        self.assertIs(terminal, terminal_cls.return_value)
        self.assertEqual(poll_ms, 40)
        self.assertEqual(state.collections[0][0], "make a todo tui app")
        self.assertIs(callbacks.next_key, listener.next_key)
        self.assertIs(callbacks.clear_screen, terminal_cls.return_value.clear_screen)

    def test_listener_is_stopped_when_loop_fails(self) -> None:
        with mock.patch("todotabs.runtime.app.os.isatty", return_value=True), mock.patch(
            "todotabs.runtime.app.TerminalController"
        ), mock.patch("todotabs.runtime.app.KeyEventListener") as listener_cls, mock.patch(
            "todotabs.runtime.app.run_main_loop", side_effect=OSError("display gone")
        ):
            with self.assertRaises(OSError):
                app_runtime.run_app(stdin_fd=0, stdout_fd=1)

        listener_cls.return_value.stop.assert_called_once()

    def test_draw_callback_paints_rendered_frame(self) -> None:
        with mock.patch("todotabs.runtime.app.os.isatty", return_value=True), mock.patch(
            "todotabs.runtime.app.TerminalController"
        ), mock.patch("todotabs.runtime.app.KeyEventListener"), mock.patch(
            "todotabs.runtime.app.run_main_loop"
        ) as loop_mock, mock.patch("todotabs.runtime.app.paint_frame") as paint_mock:
            app_runtime.run_app(no_color=True, stdin_fd=0, stdout_fd=7)
            state, _terminal, callbacks, _poll = loop_mock.call_args.args
            callbacks.draw(build_view_model(state), (30, 10))

        fd, frame = paint_mock.call_args.args
        self.assertEqual(fd, 7)
        self.assertIn("make a todo tui app", frame)


if __name__ == "__main__":
    unittest.main()
