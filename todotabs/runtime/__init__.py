"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_app`) and the
lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .events import KeyEventListener
    from .loop import RuntimeLoopCallbacks


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint to avoid terminal imports on package import."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    if name == "KeyEventListener":
        from . import events as _events

        return getattr(_events, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_app",
    "run_main_loop",
    "RuntimeLoopCallbacks",
    "KeyEventListener",
]
