"""Screen geometry for the tab block, item list block, and input popup."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_MARGIN = 1
TABS_HEIGHT_PERCENT = 10
POPUP_WIDTH_PERCENT = 60
POPUP_HEIGHT_PERCENT = 10
# Smallest box that still shows a border plus one content row.
MIN_BOX_SIZE = 3


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    def inner(self, margin: int = 1) -> Rect:
        """Shrink by ``margin`` cells on every side, never below zero size."""
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class ScreenLayout:
    tabs: Rect
    items: Rect


def split_screen(width: int, height: int) -> ScreenLayout:
    """Split the screen into a tab block on top and the list block below."""
    area = Rect(0, 0, width, height).inner(SCREEN_MARGIN)
    tabs_height = min(area.height, max(MIN_BOX_SIZE, area.height * TABS_HEIGHT_PERCENT // 100))
    tabs = Rect(area.x, area.y, area.width, tabs_height)
    items = Rect(area.x, area.y + tabs_height, area.width, area.height - tabs_height)
    return ScreenLayout(tabs=tabs, items=items)


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rect of the given percentages of ``area``, centered inside it."""
    width = min(area.width, max(MIN_BOX_SIZE, area.width * percent_x // 100))
    height = min(area.height, max(MIN_BOX_SIZE, area.height * percent_y // 100))
    return Rect(
        x=area.x + (area.width - width) // 2,
        y=area.y + (area.height - height) // 2,
        width=width,
        height=height,
    )


def popup_rect(width: int, height: int) -> Rect:
    return centered_rect(POPUP_WIDTH_PERCENT, POPUP_HEIGHT_PERCENT, Rect(0, 0, width, height))
