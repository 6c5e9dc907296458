"""Runtime bootstrap: build state, wire terminal I/O, and run the loop."""

from __future__ import annotations

import logging
import os
import shutil
import sys

from ..input import KeyOutcome, handle_key, read_key
from ..render import paint_frame, render_frame, render_rows
from ..state import AppState
from ..terminal import TerminalController
from ..ui_theme import UITheme, resolve_theme
from ..view import ViewModel, build_view_model
from .events import KeyEventListener
from .loop import RuntimeLoopCallbacks, normalize_enter, run_main_loop

logger = logging.getLogger(__name__)


def terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def render_static(state: AppState, columns: int, rows: int, theme: UITheme) -> str:
    """Render one frame as newline-separated rows for non-interactive output."""
    lines = render_rows(build_view_model(state), columns, rows, theme)
    if not theme.reset:
        lines = [line.rstrip() for line in lines]
    return "\n".join(lines) + "\n"


def replay_keys(state: AppState, stdin_fd: int) -> int:
    """Apply piped key tokens to ``state`` until end of input or quit.

    Returns the number of keys dispatched.
    """
    skip_next_lf = False
    dispatched = 0
    while True:
        key, skip_next_lf = normalize_enter(read_key(stdin_fd), skip_next_lf)
        if key is None:
            continue
        dispatched += 1
        if handle_key(key, state) is KeyOutcome.QUIT:
            logger.debug("piped input stopped at %r after %d keys", key, dispatched)
            return dispatched


def run_app(
    theme_name: str | None = None,
    no_color: bool = False,
    poll_interval_ms: int = 250,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> int:
    """Run the interactive todo UI and return the process exit code.

    When stdin is not a terminal its keys are applied without a screen and
    the resulting view is printed once.
    """
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    state = AppState.seeded()

    if not os.isatty(stdin_fd):
        replay_keys(state, stdin_fd)
        color = not no_color and os.isatty(stdout_fd)
        columns, rows = terminal_size()
        theme = resolve_theme(theme_name, no_color=not color)
        os.write(stdout_fd, render_static(state, columns, rows, theme).encode("utf-8", errors="replace"))
        return 0

    theme = resolve_theme(theme_name, no_color=no_color)
    terminal = TerminalController(stdin_fd, stdout_fd)
    listener = KeyEventListener(stdin_fd, poll_interval_ms=poll_interval_ms)

    def draw(view: ViewModel, size: tuple[int, int]) -> None:
        columns, rows = size
        paint_frame(stdout_fd, render_frame(view, columns, rows, theme))

    callbacks = RuntimeLoopCallbacks(
        next_key=listener.next_key,
        draw=draw,
        clear_screen=terminal.clear_screen,
        screen_size=terminal_size,
    )

    logger.info("starting session with theme %s", theme.name)
    listener.start()
    try:
        run_main_loop(state, terminal, callbacks, poll_interval_ms)
    finally:
        listener.stop()
    logger.info("session ended")
    return 0
