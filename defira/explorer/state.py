"""Top-level explorer state shared by every handler.

Each component owns disjoint fields: the tree store owns ``tree``, the
context menu controller owns ``context_menu`` and ``cursor_position``, the
secret access flow owns ``editor`` and ``password_prompt``, and failures go
to ``error``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..editor import EditorSession
from ..tree_model import DEFAULT_SECRET_EXTENSION
from .context_menu import ORIGIN, ContextMenuState, Point
from .error_popup import ErrorState
from .password_prompt import PasswordPromptState
from .selection import TreeState


@dataclass
class ExplorerState:
    root: Path
    secret_extension: str = DEFAULT_SECRET_EXTENSION
    tree: TreeState = field(default_factory=TreeState)
    context_menu: ContextMenuState | None = None
    cursor_position: Point = ORIGIN
    editor: EditorSession | None = None
    password_prompt: PasswordPromptState | None = None
    error: ErrorState | None = None
