"""Expansion and exclusive-selection store for tree paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


@dataclass
class TreeState:
    """Expanded directories plus at most one selected path."""

    expanded: set[Path] = field(default_factory=set)
    selected: set[Path] = field(default_factory=set)

    @property
    def selected_path(self) -> Path | None:
        return next(iter(self.selected), None)

    def is_expanded(self, path: Path) -> bool:
        return path in self.expanded

    def toggle_expand(self, path: Path) -> bool:
        """Flip expansion of a directory; no-op for files and missing paths.

        Returns whether ``path`` was a directory.
        """
        if not _is_directory(path):
            return False
        if path in self.expanded:
            logger.debug("Directory '%s' is collapsed", path)
            self.expanded.discard(path)
        else:
            logger.debug("Directory '%s' is expanded", path)
            self.expanded.add(path)
        return True

    def select(self, path: Path) -> bool:
        """Select ``path`` exclusively, toggling it first when it is a directory.

        Returns whether ``path`` was a directory.
        """
        is_dir = self.toggle_expand(path)
        if path not in self.selected:
            logger.debug("Path '%s' is selected", path)
        self.selected.clear()
        self.selected.add(path)
        return is_dir

    def forget(self, path: Path) -> None:
        """Drop ``path`` from both expansion and selection (idempotent)."""
        self.selected.discard(path)
        self.expanded.discard(path)
