"""Display-width measurement and a styled cell canvas.

Wide (East Asian) characters take two columns; the second column holds an
empty placeholder cell so row lengths always equal the terminal width.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def tail_to_width(text: str, max_cols: int) -> str:
    """Return the longest suffix of ``text`` that fits in ``max_cols`` columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(reversed(out))


Cell = tuple[str, str]


class Canvas:
    """Fixed-size grid of ``(char, style)`` cells serialized to ANSI rows."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.cells: list[list[Cell]] = [[(" ", "")] * self.width for _ in range(self.height)]

    def put_text(self, x: int, y: int, text: str, style: str = "", max_cols: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)``; return columns consumed.

        Output is clipped to ``max_cols`` and to the canvas edge. A wide
        character that would straddle the limit is dropped.
        """
        if not 0 <= y < self.height or x < 0:
            return 0
        limit = self.width - x if max_cols is None else min(max_cols, self.width - x)
        row = self.cells[y]
        col = 0
        for ch in text:
            w = char_display_width(ch)
            if w == 0:
                continue
            if col + w > limit:
                break
            row[x + col] = (ch, style)
            if w == 2:
                row[x + col + 1] = ("", style)
            col += w
        return col

    def fill(self, x: int, y: int, width: int, height: int, style: str = "") -> None:
        for row_idx in range(max(0, y), min(self.height, y + height)):
            for col_idx in range(max(0, x), min(self.width, x + width)):
                self.cells[row_idx][col_idx] = (" ", style)

    def render_rows(self, reset: str) -> list[str]:
        """Serialize every row, emitting a style sequence only where it changes."""
        out: list[str] = []
        for row in self.cells:
            parts: list[str] = []
            current = ""
            for ch, style in row:
                if style != current:
                    if current and reset:
                        parts.append(reset)
                    if style:
                        parts.append(style)
                    current = style
                parts.append(ch)
            if current and reset:
                parts.append(reset)
            out.append("".join(parts))
        return out
