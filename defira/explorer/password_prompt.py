"""Password prompt state for a secret awaiting decryption.

The typed password lives in a ``bytearray`` so it can be zeroed in place
when the input changes or the prompt is destroyed.
"""

from __future__ import annotations

from pathlib import Path


class PasswordPromptState:
    """Target path, typed password and reveal flag of an open prompt.

    Only the prompt-owned ``password`` buffer is zeroed. The ``str`` handed to
    ``set_password`` and the temporary bytes made while encoding it are
    immutable and are left for the garbage collector.
    """

    def __init__(self, target: Path) -> None:
        self.target = target
        self.password = bytearray()
        self.reveal = False

    def set_password(self, text: str) -> None:
        """Replace the in-progress password, wiping the previous bytes."""
        self.wipe()
        self.password = bytearray(text.encode("utf-8"))

    def toggle_reveal(self) -> None:
        self.reveal = not self.reveal

    def wipe(self) -> None:
        """Zero the password buffer and leave it empty."""
        for idx in range(len(self.password)):
            self.password[idx] = 0
        self.password = bytearray()

    def __repr__(self) -> str:
        return f"PasswordPromptState(target={self.target!r}, reveal={self.reveal!r})"
