"""Formatting helpers for tree rows."""

from __future__ import annotations

from pathlib import Path

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import Node

SECRET_BADGE = " [locked]"


def format_node(
    node: Node,
    root: Path,
    expanded: set[Path],
    selected: set[Path],
    theme: UITheme | None = None,
) -> str:
    """Render one tree row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * node.depth
    if node.path == root:
        name = f"{root.name or str(root)}/"
    else:
        name = node.path.name + ("/" if node.is_dir else "")

    if node.is_dir:
        marker = "▾ " if node.path in expanded else "▸ "
        row = f"{indent}{active_theme.tree_marker}{marker}{reset}{active_theme.tree_dir}{name}{reset}"
    elif node.is_secret:
        row = f"{indent}  {active_theme.tree_secret}{name}{SECRET_BADGE}{reset}"
    else:
        row = f"{indent}  {active_theme.tree_file_default}{name}{reset}"

    if node.path in selected:
        # Plain theme has no reverse video; mark selection textually instead.
        if active_theme.reverse:
            return f"{active_theme.reverse}{row}{reset}"
        return f"{row} *"
    return row


def format_tree(
    nodes: list[Node],
    root: Path,
    expanded: set[Path],
    selected: set[Path],
    theme: UITheme | None = None,
) -> list[str]:
    """Render every visible node into display rows."""
    return [format_node(node, root, expanded, selected, theme) for node in nodes]
