"""Renderable projection of ``AppState``.

``build_view_model`` is a pure function: it reads the state and returns
frozen value objects, so two calls on the same state compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import DONE_TAB, TAB_LABELS, AppState

CURSOR_MARKER = "|"


@dataclass(frozen=True)
class TabStrip:
    labels: tuple[str, ...]
    active: int

    @property
    def active_label(self) -> str:
        return self.labels[self.active]


@dataclass(frozen=True)
class ItemRow:
    text: str
    done: bool
    selected: bool


@dataclass(frozen=True)
class InputOverlay:
    text: str


@dataclass(frozen=True)
class ViewModel:
    tabs: TabStrip
    items: tuple[ItemRow, ...]
    overlay: InputOverlay | None


def build_view_model(state: AppState) -> ViewModel:
    """Project ``state`` into tab strip, item rows, and optional overlay."""
    done = state.active_tab == DONE_TAB
    rows = tuple(
        ItemRow(text=text, done=done, selected=idx == state.selection)
        for idx, text in enumerate(state.active_collection())
    )
    overlay = InputOverlay(text=state.draft_text + CURSOR_MARKER) if state.input_mode else None
    return ViewModel(
        tabs=TabStrip(labels=TAB_LABELS, active=state.active_tab),
        items=rows,
        overlay=overlay,
    )
