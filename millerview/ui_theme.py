"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane rows, the divider, and the status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reset: str
    pane_dir: str
    pane_file: str
    selected_active: str
    selected_inactive: str
    empty_hint: str
    status_path: str
    status_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reset="\033[0m",
    pane_dir="\033[1;94m",
    pane_file="\033[38;5;252m",
    selected_active="\033[48;2;32;32;32m",
    selected_inactive="\033[48;2;24;24;24m",
    empty_hint="\033[2;38;5;250m",
    status_path="\033[1;38;5;81m",
    status_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reset="\033[0m",
    pane_dir="\033[1;38;5;45m",
    pane_file="\033[38;5;153m",
    selected_active="\033[48;5;24m",
    selected_inactive="\033[48;5;235m",
    empty_hint="\033[2;38;5;110m",
    status_path="\033[1;38;5;45m",
    status_hint="\033[2;38;5;110m",
)

# No-color mode still needs a visible cursor, so selection falls back to reverse video.
PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reset="\033[0m",
    pane_dir="",
    pane_file="",
    selected_active="\033[7m",
    selected_inactive="",
    empty_hint="",
    status_path="",
    status_hint="",
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
