"""Frame rendering for the tabbed todo view.

Turns a ``ViewModel`` into one full-screen ANSI frame. Rendering is
presentation-only; the only side effect lives in ``paint_frame``.
"""

from __future__ import annotations

import os

from ..ui_theme import DEFAULT_THEME, UITheme
from ..view import InputOverlay, ItemRow, TabStrip, ViewModel
from .cells import Canvas, tail_to_width
from .layout import Rect, popup_rect, split_screen

TABS_TITLE = "Tabs"
INPUT_TITLE = "Input"
TAB_DIVIDER = "|"


def draw_box(canvas: Canvas, rect: Rect, title: str, theme: UITheme, *, overlay: bool = False) -> None:
    """Draw a single-line bordered box with ``title`` on the top edge."""
    if rect.width < 2 or rect.height < 2:
        return
    border = theme.overlay_border if overlay else theme.border
    title_style = theme.overlay_title if overlay else theme.title
    right = rect.x + rect.width - 1
    bottom = rect.y + rect.height - 1
    horizontal = "─" * (rect.width - 2)
    canvas.put_text(rect.x, rect.y, "┌" + horizontal + "┐", border)
    for row in range(rect.y + 1, bottom):
        canvas.put_text(rect.x, row, "│", border)
        canvas.put_text(right, row, "│", border)
    canvas.put_text(rect.x, bottom, "└" + horizontal + "┘", border)
    if title:
        canvas.put_text(rect.x + 1, rect.y, title, title_style, max_cols=rect.width - 2)


def draw_tabs(canvas: Canvas, rect: Rect, tabs: TabStrip, theme: UITheme) -> None:
    draw_box(canvas, rect, TABS_TITLE, theme)
    inner = rect.inner()
    if inner.width <= 0 or inner.height <= 0:
        return
    x = inner.x
    limit = inner.x + inner.width
    for idx, label in enumerate(tabs.labels):
        if idx > 0:
            x += canvas.put_text(x, inner.y, TAB_DIVIDER, theme.tab_divider, max_cols=limit - x)
        style = theme.tab_active if idx == tabs.active else theme.tab_label
        x += canvas.put_text(x, inner.y, f" {label} ", style, max_cols=limit - x)


def item_style(row: ItemRow, theme: UITheme) -> str:
    """Combine done decoration with the selection highlight."""
    style = theme.item_done if row.done else ""
    if row.selected:
        style += theme.item_selected
    return style or theme.item


def first_visible_row(items: tuple[ItemRow, ...], visible_rows: int) -> int:
    """Scroll offset that keeps the selected row on screen."""
    selected = next((idx for idx, row in enumerate(items) if row.selected), 0)
    if visible_rows <= 0:
        return 0
    return max(0, selected - visible_rows + 1)


def draw_items(canvas: Canvas, rect: Rect, title: str, items: tuple[ItemRow, ...], theme: UITheme) -> None:
    draw_box(canvas, rect, title, theme)
    inner = rect.inner()
    start = first_visible_row(items, inner.height)
    for offset, row in enumerate(items[start : start + inner.height]):
        canvas.put_text(inner.x, inner.y + offset, row.text, item_style(row, theme), max_cols=inner.width)


def draw_overlay(canvas: Canvas, overlay: InputOverlay, theme: UITheme) -> None:
    rect = popup_rect(canvas.width, canvas.height)
    canvas.fill(rect.x, rect.y, rect.width, rect.height)
    draw_box(canvas, rect, INPUT_TITLE, theme, overlay=True)
    inner = rect.inner()
    if inner.height <= 0:
        return
    # Keep the cursor marker visible once the draft outgrows the box.
    text = tail_to_width(overlay.text, inner.width)
    canvas.put_text(inner.x, inner.y, text, theme.overlay_text, max_cols=inner.width)


def render_rows(view: ViewModel, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render ``view`` into ``height`` styled rows of ``width`` columns."""
    canvas = Canvas(width, height)
    layout = split_screen(width, height)
    draw_tabs(canvas, layout.tabs, view.tabs, theme)
    draw_items(canvas, layout.items, view.tabs.active_label, view.items, theme)
    if view.overlay is not None:
        draw_overlay(canvas, view.overlay, theme)
    return canvas.render_rows(theme.reset)


def render_frame(view: ViewModel, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Return a full-screen frame with absolute cursor positioning per row."""
    out: list[str] = ["\033[H"]
    for idx, row in enumerate(render_rows(view, width, height, theme)):
        out.append(f"\033[{idx + 1};1H")
        out.append(row)
    return "".join(out)


def paint_frame(fd: int, frame: str) -> None:
    """Write ``frame`` to ``fd``; write errors propagate to the caller."""
    os.write(fd, frame.encode("utf-8", errors="replace"))


__all__ = [
    "draw_box",
    "draw_items",
    "draw_overlay",
    "draw_tabs",
    "first_visible_row",
    "item_style",
    "paint_frame",
    "render_frame",
    "render_rows",
]
