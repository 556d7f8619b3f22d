"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows, the shortcut help panel, and the
status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    tree_marker: str
    tree_root: str
    tree_dir: str
    tree_file_default: str
    tree_empty_hint: str
    help_heading: str
    help_key: str
    help_dim: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_root="\033[1;38;5;81m",
    tree_dir="\033[1;34m",
    tree_file_default="\033[38;5;252m",
    tree_empty_hint="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    status="\033[38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_file_default="\033[38;5;252m",
    tree_empty_hint="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    status="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    tree_marker="",
    tree_root="",
    tree_dir="",
    tree_file_default="",
    tree_empty_hint="",
    help_heading="",
    help_key="",
    help_dim="",
    status="",
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
