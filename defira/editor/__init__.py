"""Editor session and buffer primitives."""

from __future__ import annotations

from .buffer import MOVE_DIRECTIONS, Backspace, DeleteForward, EditorAction, Insert, Move, TextBuffer
from .session import EditorSession

__all__ = [
    "EditorSession",
    "TextBuffer",
    "EditorAction",
    "Insert",
    "Backspace",
    "DeleteForward",
    "Move",
    "MOVE_DIRECTIONS",
]
