"""Main interactive event loop for the terminal UI.

Pulls one key at a time, feeds it to the input handler, and repaints when
the state or terminal size changed. The loop is the only writer of
``AppState``; rendering reads a fresh view model between events.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyOutcome, handle_key
from ..state import AppState
from ..terminal import TerminalController
from ..view import ViewModel, build_view_model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    Keeping terminal access behind callbacks lets tests drive the loop with
    scripted keys and a recording draw sink.
    """

    next_key: Callable[[int], str]
    draw: Callable[[ViewModel, tuple[int, int]], None]
    clear_screen: Callable[[], None]
    screen_size: Callable[[], tuple[int, int]]


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Fold CR, LF, and CR+LF into one ``ENTER``.

    Returns the key to dispatch (``None`` to drop it) and the new
    skip-next-LF flag.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    callbacks: RuntimeLoopCallbacks,
    poll_interval_ms: int,
) -> None:
    """Run the interactive loop until quit, end of input, or an interrupt."""
    dirty = True
    skip_next_lf = False
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            size = callbacks.screen_size()
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                callbacks.draw(build_view_model(state), size)
                dirty = False

            try:
                raw_key = callbacks.next_key(poll_interval_ms)
            except KeyboardInterrupt:
                logger.info("interrupted, leaving main loop")
                break
            if raw_key == "":
                continue

            key, skip_next_lf = normalize_enter(raw_key, skip_next_lf)
            if key is None:
                continue

            outcome = handle_key(key, state)
            if outcome is KeyOutcome.QUIT:
                logger.info("quit requested by %r", key)
                break
            if outcome is KeyOutcome.CLEAR:
                callbacks.clear_screen()
                dirty = True
            elif outcome is KeyOutcome.CHANGED:
                dirty = True
