"""Tree-state and secret-access engine for the secrets explorer.

``ExplorerController`` owns the event loop core; the submodules hold the
individual state records and their transitions.
"""

from __future__ import annotations

from .actions import (
    CancelPassword,
    CloseContextMenu,
    CloseEditor,
    CursorMoved,
    DismissError,
    EditorInput,
    ExplorerAction,
    OpenContextMenu,
    PasswordChanged,
    Select,
    SubmitPassword,
    ToggleExpand,
    TogglePasswordVisibility,
)
from .context_menu import ContextMenuState, DeleteItem, EditItem, MenuItem, Point, menu_items
from .controller import ExplorerController
from .error_popup import ErrorState
from .password_prompt import PasswordPromptState
from .selection import TreeState
from .state import ExplorerState

__all__ = [
    "ExplorerController",
    "ExplorerState",
    "TreeState",
    "ContextMenuState",
    "PasswordPromptState",
    "ErrorState",
    "Point",
    "MenuItem",
    "menu_items",
    "ExplorerAction",
    "Select",
    "ToggleExpand",
    "OpenContextMenu",
    "CloseContextMenu",
    "CursorMoved",
    "EditItem",
    "DeleteItem",
    "CloseEditor",
    "EditorInput",
    "PasswordChanged",
    "TogglePasswordVisibility",
    "SubmitPassword",
    "CancelPassword",
    "DismissError",
]
