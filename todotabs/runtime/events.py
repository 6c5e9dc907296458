"""Background key listener feeding the runtime loop.

A single daemon thread polls stdin with a bounded timeout and pushes key
tokens into a queue. The runtime loop is the only consumer, so application
state is never touched from this thread.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from queue import Empty, Queue

from ..input import EOF_KEY, read_key

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 250


class KeyEventListener:
    """Single-producer key queue backed by one reader thread."""

    def __init__(
        self,
        stdin_fd: int,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        reader: Callable[..., str] = read_key,
    ) -> None:
        self._stdin_fd = stdin_fd
        self._poll_interval_ms = poll_interval_ms
        self._reader = reader
        self._queue: Queue[str] = Queue()
        self._stop_event = threading.Event()
        self._worker: threading.Thread | None = None

    @property
    def poll_interval_ms(self) -> int:
        return self._poll_interval_ms

    def _run(self) -> None:
        """Read keys until stopped; end of input or a read error ends the stream."""
        while not self._stop_event.is_set():
            try:
                key = self._reader(self._stdin_fd, timeout_ms=self._poll_interval_ms)
            except (OSError, ValueError) as exc:
                logger.warning("key reader failed, ending input: %s", exc)
                self._queue.put(EOF_KEY)
                return
            if key == "":
                continue
            self._queue.put(key)
            if key == EOF_KEY:
                logger.info("input source closed")
                return

    def start(self) -> None:
        if self._worker is not None:
            return
        self._worker = threading.Thread(
            target=self._run,
            name="todotabs-keys",
            daemon=True,
        )
        self._worker.start()

    def next_key(self, timeout_ms: int | None = None) -> str:
        """Return the next queued key, or ``""`` when ``timeout_ms`` passes first."""
        wait = self._poll_interval_ms if timeout_ms is None else timeout_ms
        try:
            return self._queue.get(timeout=max(0.0, wait / 1000.0))
        except Empty:
            return ""

    def stop(self) -> None:
        self._stop_event.set()
        worker = self._worker
        if worker is not None and worker is not threading.current_thread():
            worker.join(timeout=max(1.0, 2 * self._poll_interval_ms / 1000.0))
