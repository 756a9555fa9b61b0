"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows and error output. Syntax highlighting
style for opened secrets remains a separate setting.
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
    tree_dir: str
    tree_file_default: str
    tree_secret: str
    error_title: str
    error_text: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file_default="\033[38;5;252m",
    tree_secret="\033[38;5;214m",
    error_title="\033[1;38;5;203m",
    error_text="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file_default="\033[38;5;252m",
    tree_secret="\033[38;5;117m",
    error_title="\033[1;38;5;209m",
    error_text="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_file_default="",
    tree_secret="",
    error_title="",
    error_text="",
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
