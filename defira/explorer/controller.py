"""Single-threaded event loop core for the secrets explorer.

``ExplorerController.update`` applies one action at a time to the shared
``ExplorerState``. Filesystem and decryption calls run inline, so an action
is fully applied before the next one is looked at.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..crypto import decrypt as gpg_decrypt
from ..tree_model import Node, classify_path, list_visible_nodes
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
from .context_menu import DeleteItem, EditItem, MenuAction, Point, close_context_menu, open_context_menu, record_cursor
from .error_popup import dismiss_error, report_error
from .fs_ops import remove_path as default_remove_path
from .secret_access import (
    Decryptor,
    cancel_password,
    change_password,
    close_editor,
    open_path,
    perform_editor_action,
    submit_password,
    toggle_password_visibility,
)
from .state import ExplorerState

logger = logging.getLogger(__name__)


def _is_within(path: Path, ancestor: Path) -> bool:
    return path == ancestor or ancestor in path.parents


class ExplorerController:
    """Apply explorer actions to an owned ``ExplorerState``."""

    def __init__(
        self,
        state: ExplorerState,
        *,
        decrypt: Decryptor = gpg_decrypt,
        remove_path: Callable[[Path], None] = default_remove_path,
        expand_root: bool = True,
    ) -> None:
        """Create a controller bound to ``state``.

        Args:
            state: Mutable explorer state updated in place.
            decrypt: Decryption service called with ``(ciphertext, password)``.
            remove_path: Filesystem delete hook used by the Delete menu action.
            expand_root: Expand the root so its children are listed at start.
        """
        self.state = state
        self._decrypt = decrypt
        self._remove_path = remove_path
        if expand_root and state.root not in state.tree.expanded:
            state.tree.toggle_expand(state.root)

    def visible_nodes(self) -> list[Node]:
        """Re-derive the visible tree from the current expansion state."""
        return list_visible_nodes(self.state.root, self.state.tree.expanded, self.state.secret_extension)

    def update(self, action: ExplorerAction) -> None:
        state = self.state
        if isinstance(action, Select):
            self.select(action.path)
        elif isinstance(action, ToggleExpand):
            state.tree.toggle_expand(action.path)
        elif isinstance(action, OpenContextMenu):
            open_context_menu(state, action.path)
        elif isinstance(action, CloseContextMenu):
            close_context_menu(state)
        elif isinstance(action, CursorMoved):
            record_cursor(state, Point(action.x, action.y))
        elif isinstance(action, (EditItem, DeleteItem)):
            self.dispatch_menu_action(action)
        elif isinstance(action, CloseEditor):
            close_editor(state)
        elif isinstance(action, EditorInput):
            perform_editor_action(state, action.action)
        elif isinstance(action, PasswordChanged):
            change_password(state, action.password)
        elif isinstance(action, TogglePasswordVisibility):
            toggle_password_visibility(state)
        elif isinstance(action, SubmitPassword):
            submit_password(state, self._decrypt)
        elif isinstance(action, CancelPassword):
            cancel_password(state)
        elif isinstance(action, DismissError):
            dismiss_error(state)
        else:
            raise TypeError(f"unsupported explorer action: {action!r}")

    def select(self, path: Path) -> None:
        """Select ``path`` exclusively; directories toggle, files open."""
        state = self.state
        is_dir = state.tree.select(path)
        close_context_menu(state)
        if not is_dir:
            open_path(state, path)

    def dispatch_menu_action(self, action: MenuAction) -> None:
        """Run a context-menu action, then close the menu."""
        if isinstance(action, EditItem):
            logger.debug("Edit secret: %s", action.path)
            open_path(self.state, action.path)
        else:
            self.delete(action.path)
        close_context_menu(self.state)

    def delete(self, path: Path) -> None:
        """Remove ``path`` from tree state and from disk.

        State cleanup always happens; a failed delete is reported through
        the error channel.
        """
        state = self.state
        state.tree.forget(path)
        if state.editor is not None and _is_within(state.editor.path, path):
            close_editor(state)
        logger.debug("Deleting %s: %s", classify_path(path, state.secret_extension), path)
        try:
            self._remove_path(path)
        except OSError as exc:
            logger.error("Failed to delete '%s': %s", path, exc)
            report_error(state, f"Failed to delete '{path.name}': {exc}")
