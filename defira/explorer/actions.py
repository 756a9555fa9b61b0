"""User events accepted by the explorer controller."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..editor import EditorAction
from .context_menu import DeleteItem, EditItem


@dataclass(frozen=True)
class Select:
    path: Path


@dataclass(frozen=True)
class ToggleExpand:
    path: Path


@dataclass(frozen=True)
class OpenContextMenu:
    path: Path


@dataclass(frozen=True)
class CloseContextMenu:
    pass


@dataclass(frozen=True)
class CursorMoved:
    x: float
    y: float


@dataclass(frozen=True)
class CloseEditor:
    pass


@dataclass(frozen=True)
class EditorInput:
    action: EditorAction


@dataclass(frozen=True)
class PasswordChanged:
    password: str

    def __repr__(self) -> str:
        return "PasswordChanged(password=<hidden>)"


@dataclass(frozen=True)
class TogglePasswordVisibility:
    pass


@dataclass(frozen=True)
class SubmitPassword:
    pass


@dataclass(frozen=True)
class CancelPassword:
    pass


@dataclass(frozen=True)
class DismissError:
    pass


ExplorerAction = (
    Select
    | ToggleExpand
    | OpenContextMenu
    | CloseContextMenu
    | CursorMoved
    | EditItem
    | DeleteItem
    | CloseEditor
    | EditorInput
    | PasswordChanged
    | TogglePasswordVisibility
    | SubmitPassword
    | CancelPassword
    | DismissError
)

__all__ = [
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
    "ExplorerAction",
]
