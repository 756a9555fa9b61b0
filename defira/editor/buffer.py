"""Line-based text buffer that receives editor actions.

The buffer keeps a cursor (line, column) and applies a small set of editing
actions verbatim; it never interprets the content it holds.
"""

from __future__ import annotations

from dataclasses import dataclass

MOVE_DIRECTIONS = frozenset({"left", "right", "up", "down", "home", "end"})


@dataclass(frozen=True)
class Insert:
    """Insert text at the cursor; newlines split the current line."""

    text: str


@dataclass(frozen=True)
class Backspace:
    """Delete the character before the cursor, joining lines at column 0."""


@dataclass(frozen=True)
class DeleteForward:
    """Delete the character under the cursor, joining lines at line end."""


@dataclass(frozen=True)
class Move:
    """Move the cursor one step in ``direction``."""

    direction: str


EditorAction = Insert | Backspace | DeleteForward | Move


class TextBuffer:
    """Mutable text content with a single cursor."""

    def __init__(self, text: str = "") -> None:
        self.lines: list[str] = text.split("\n")
        self.cursor_line = 0
        self.cursor_col = 0
        self.modified = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def cursor(self) -> tuple[int, int]:
        return self.cursor_line, self.cursor_col

    def perform(self, action: EditorAction) -> None:
        """Apply one editing action to the buffer."""
        if isinstance(action, Insert):
            self._insert(action.text)
        elif isinstance(action, Backspace):
            self._backspace()
        elif isinstance(action, DeleteForward):
            self._delete_forward()
        elif isinstance(action, Move):
            self._move(action.direction)
        else:
            raise TypeError(f"unsupported editor action: {action!r}")

    def _insert(self, text: str) -> None:
        if not text:
            return
        line = self.lines[self.cursor_line]
        before = line[: self.cursor_col]
        after = line[self.cursor_col :]
        pieces = text.split("\n")
        if len(pieces) == 1:
            self.lines[self.cursor_line] = before + text + after
            self.cursor_col += len(text)
        else:
            new_lines = [before + pieces[0], *pieces[1:-1], pieces[-1] + after]
            self.lines[self.cursor_line : self.cursor_line + 1] = new_lines
            self.cursor_line += len(pieces) - 1
            self.cursor_col = len(pieces[-1])
        self.modified = True

    def _backspace(self) -> None:
        if self.cursor_col > 0:
            line = self.lines[self.cursor_line]
            self.lines[self.cursor_line] = line[: self.cursor_col - 1] + line[self.cursor_col :]
            self.cursor_col -= 1
            self.modified = True
            return
        if self.cursor_line == 0:
            return
        previous = self.lines[self.cursor_line - 1]
        self.lines[self.cursor_line - 1] = previous + self.lines[self.cursor_line]
        del self.lines[self.cursor_line]
        self.cursor_line -= 1
        self.cursor_col = len(previous)
        self.modified = True

    def _delete_forward(self) -> None:
        line = self.lines[self.cursor_line]
        if self.cursor_col < len(line):
            self.lines[self.cursor_line] = line[: self.cursor_col] + line[self.cursor_col + 1 :]
            self.modified = True
            return
        if self.cursor_line + 1 >= len(self.lines):
            return
        self.lines[self.cursor_line] = line + self.lines[self.cursor_line + 1]
        del self.lines[self.cursor_line + 1]
        self.modified = True

    def _move(self, direction: str) -> None:
        if direction not in MOVE_DIRECTIONS:
            raise ValueError(f"unknown move direction: {direction!r}")
        line_len = len(self.lines[self.cursor_line])
        if direction == "left":
            if self.cursor_col > 0:
                self.cursor_col -= 1
            elif self.cursor_line > 0:
                self.cursor_line -= 1
                self.cursor_col = len(self.lines[self.cursor_line])
        elif direction == "right":
            if self.cursor_col < line_len:
                self.cursor_col += 1
            elif self.cursor_line + 1 < len(self.lines):
                self.cursor_line += 1
                self.cursor_col = 0
        elif direction == "up":
            if self.cursor_line > 0:
                self.cursor_line -= 1
                self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_line]))
        elif direction == "down":
            if self.cursor_line + 1 < len(self.lines):
                self.cursor_line += 1
                self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_line]))
        elif direction == "home":
            self.cursor_col = 0
        else:
            self.cursor_col = line_len
