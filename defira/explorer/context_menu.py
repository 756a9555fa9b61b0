"""Context menu anchored to a tree node at the last known cursor position.

The menu never tracks the pointer itself: ``ExplorerState.cursor_position``
is updated by every pointer-move event and read when a menu opens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import ExplorerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


ORIGIN = Point()


@dataclass(frozen=True)
class ContextMenuState:
    target: Path
    anchor: Point


@dataclass(frozen=True)
class EditItem:
    """Menu action: open ``path`` in the editor."""

    path: Path


@dataclass(frozen=True)
class DeleteItem:
    """Menu action: delete ``path`` from disk and from tree state."""

    path: Path


MenuAction = EditItem | DeleteItem


@dataclass(frozen=True)
class MenuItem:
    label: str
    action: MenuAction


def record_cursor(state: ExplorerState, position: Point) -> None:
    """Remember the most recent pointer position."""
    state.cursor_position = position


def open_context_menu(state: ExplorerState, target: Path) -> ContextMenuState:
    """Anchor a new menu for ``target``, replacing any open menu."""
    anchor = state.cursor_position
    logger.debug("Context menu opened for '%s' at position (%s, %s)", target, anchor.x, anchor.y)
    menu = ContextMenuState(target=target, anchor=anchor)
    state.context_menu = menu
    return menu


def close_context_menu(state: ExplorerState) -> None:
    if state.context_menu is not None:
        logger.debug("Context menu closed")
    state.context_menu = None


def menu_items(menu: ContextMenuState) -> list[MenuItem]:
    """Return the actions offered for the menu's target."""
    return [
        MenuItem("Edit", EditItem(menu.target)),
        MenuItem("Delete", DeleteItem(menu.target)),
    ]
