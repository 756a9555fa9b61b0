"""Open flow for plaintext files and password-protected secrets.

``Closed -> Open | AwaitingPassword | Closed + Error``: plaintext files open
straight into an editor session; secrets raise a password prompt whose
submission runs the decryptor exactly once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from ..crypto import DecryptError
from ..editor import EditorAction, EditorSession
from ..tree_model import KIND_SECRET, classify_path
from .error_popup import report_error
from .password_prompt import PasswordPromptState

if TYPE_CHECKING:
    from .state import ExplorerState

logger = logging.getLogger(__name__)

Decryptor = Callable[[bytes, bytearray], str]


def _read_failure_message(exc: Exception) -> str:
    return f"Failed to read file: {exc}"


def open_path(state: ExplorerState, path: Path) -> None:
    """Open ``path`` as plaintext or raise a password prompt for secrets."""
    logger.debug("Opening file in editor: %s", path)
    if classify_path(path, state.secret_extension) == KIND_SECRET:
        begin_password_prompt(state, path)
        return

    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read file '%s': %s", path, exc)
        state.editor = None
        report_error(state, _read_failure_message(exc))
        return
    state.editor = EditorSession.seeded(path, content)


def begin_password_prompt(state: ExplorerState, path: Path) -> PasswordPromptState:
    """Start a fresh prompt for ``path``; any open editor session is kept."""
    logger.debug("File is encrypted, opening password prompt")
    if state.password_prompt is not None:
        state.password_prompt.wipe()
    prompt = PasswordPromptState(path)
    state.password_prompt = prompt
    return prompt


def change_password(state: ExplorerState, text: str) -> None:
    if state.password_prompt is not None:
        state.password_prompt.set_password(text)


def toggle_password_visibility(state: ExplorerState) -> None:
    if state.password_prompt is not None:
        state.password_prompt.toggle_reveal()


def cancel_password(state: ExplorerState) -> None:
    prompt = state.password_prompt
    if prompt is None:
        return
    logger.debug("Password prompt cancelled")
    state.password_prompt = None
    prompt.wipe()


def submit_password(state: ExplorerState, decrypt: Decryptor) -> None:
    """Consume the prompt and try to decrypt its target.

    The prompt is destroyed whatever the outcome. Failures land in the error
    channel; success replaces the editor session with the plaintext.
    """
    prompt = state.password_prompt
    if prompt is None:
        return
    state.password_prompt = None
    path = prompt.target
    logger.debug("Password submitted for file '%s'", path)
    try:
        try:
            ciphertext = path.read_bytes()
        except OSError as exc:
            logger.error("Failed to read file '%s': %s", path, exc)
            report_error(state, _read_failure_message(exc))
            return

        try:
            plaintext = decrypt(ciphertext, prompt.password)
        except DecryptError as exc:
            logger.error("Failed to decrypt '%s': %s", path, exc)
            report_error(state, exc.user_message, title=exc.title)
            return
    finally:
        prompt.wipe()

    state.editor = EditorSession.seeded(path, plaintext)


def close_editor(state: ExplorerState) -> None:
    if state.editor is not None:
        logger.debug("Closing editor")
    state.editor = None


def perform_editor_action(state: ExplorerState, action: EditorAction) -> None:
    """Forward an editing action to the open session, if any."""
    if state.editor is not None:
        state.editor.buffer.perform(action)
