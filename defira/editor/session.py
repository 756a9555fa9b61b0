"""In-memory editing session for the one currently open file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .buffer import TextBuffer


@dataclass
class EditorSession:
    path: Path
    buffer: TextBuffer

    @classmethod
    def seeded(cls, path: Path, text: str) -> EditorSession:
        """Create a session whose buffer starts with ``text``."""
        return cls(path=path, buffer=TextBuffer(text))

    @property
    def text(self) -> str:
        return self.buffer.text
