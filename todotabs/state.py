"""Application state for the two-tab todo list.

Holds both item collections, the active tab, selection cursor, and the
input-mode draft buffer. Every mutation keeps the selection clamped into the
active collection; operations on an empty collection are no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

TODO_TAB = 0
DONE_TAB = 1
TAB_LABELS: tuple[str, str] = ("Todo", "Done")

SAMPLE_TODOS: tuple[str, ...] = (
    "make a todo tui app",
    "learning rust",
    "make a cup of tea",
)
SAMPLE_DONES: tuple[str, ...] = (
    "read a rust manual",
    "read arch linux wiki",
)


def other_tab(index: int) -> int:
    """Return the opposite tab index.

    Only valid for the fixed two-tab layout. Supporting more tabs means
    redefining "other" as every remaining tab and revisiting where
    ``move_selected_item`` sends items.
    """
    return 1 - index


def _empty_collections() -> list[list[str]]:
    return [[], []]


@dataclass
class AppState:
    collections: list[list[str]] = field(default_factory=_empty_collections)
    active_tab: int = TODO_TAB
    selection: int = 0
    input_mode: bool = False
    draft_text: str = ""

    @classmethod
    def seeded(cls) -> AppState:
        """Build the startup state with the sample items."""
        return cls(collections=[list(SAMPLE_TODOS), list(SAMPLE_DONES)])

    def active_collection(self) -> list[str]:
        return self.collections[self.active_tab]

    def selected_item(self) -> str | None:
        """Return the highlighted item, or ``None`` when the active tab is empty."""
        items = self.active_collection()
        if not items:
            return None
        return items[self.selection]

    def is_input_mode(self) -> bool:
        return self.input_mode

    def clamp_selection(self) -> None:
        """Pull ``selection`` back into the active collection bounds."""
        count = len(self.active_collection())
        self.selection = max(0, min(self.selection, count - 1))

    def switch_tab(self, step: int) -> None:
        """Cycle the active tab by ``step`` and re-clamp the selection."""
        tab_count = len(TAB_LABELS)
        self.active_tab = (self.active_tab + step % tab_count) % tab_count
        self.clamp_selection()

    def move_selection(self, step: int) -> bool:
        """Move the cursor with wraparound; return ``False`` on an empty tab."""
        count = len(self.active_collection())
        if count == 0:
            return False
        self.selection = (self.selection + step % count) % count
        return True

    def move_selected_item(self) -> bool:
        """Transfer the selected item to the end of the other collection."""
        items = self.active_collection()
        if not items:
            return False
        item = items.pop(self.selection)
        target = other_tab(self.active_tab)
        self.collections[target].append(item)
        self.clamp_selection()
        logger.debug("moved %r from %s to %s", item, TAB_LABELS[self.active_tab], TAB_LABELS[target])
        return True

    def delete_selected_item(self) -> bool:
        """Permanently remove the selected item from the active collection."""
        items = self.active_collection()
        if not items:
            return False
        item = items.pop(self.selection)
        self.clamp_selection()
        logger.debug("deleted %r from %s", item, TAB_LABELS[self.active_tab])
        return True

    def begin_input(self) -> None:
        self.input_mode = True
        self.draft_text = ""

    def cancel_input(self) -> None:
        self.input_mode = False
        self.draft_text = ""

    def commit_input(self) -> None:
        """Append the draft to the Todo collection whatever tab is shown."""
        self.collections[TODO_TAB].append(self.draft_text)
        logger.debug("added %r to %s", self.draft_text, TAB_LABELS[TODO_TAB])
        self.cancel_input()

    def append_draft(self, ch: str) -> None:
        self.draft_text += ch

    def pop_draft(self) -> bool:
        if not self.draft_text:
            return False
        self.draft_text = self.draft_text[:-1]
        return True
