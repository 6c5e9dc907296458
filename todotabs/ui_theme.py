"""UI theme definitions and selection helpers.

Themes are ANSI SGR palettes for the tab strip, item list, and input overlay.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    tab_label: str
    tab_active: str
    tab_divider: str
    item: str
    item_selected: str
    item_done: str
    overlay_border: str
    overlay_title: str
    overlay_text: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[37m",
    title="\033[1;37m",
    tab_label="\033[37m",
    tab_active="\033[33m",
    tab_divider="\033[2m",
    item="\033[37m",
    item_selected="\033[33m",
    item_done="\033[3;9m",
    overlay_border="\033[37m",
    overlay_title="\033[1;37m",
    overlay_text="\033[37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    tab_label="\033[38;5;153m",
    tab_active="\033[1;38;5;45m",
    tab_divider="\033[2;38;5;31m",
    item="\033[38;5;252m",
    item_selected="\033[38;5;45m",
    item_done="\033[3;9;38;5;110m",
    overlay_border="\033[38;5;39m",
    overlay_title="\033[1;38;5;39m",
    overlay_text="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    tab_label="",
    tab_active="",
    tab_divider="",
    item="",
    item_selected="",
    item_done="",
    overlay_border="",
    overlay_title="",
    overlay_text="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
