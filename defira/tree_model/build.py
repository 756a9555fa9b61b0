"""Filesystem scanning and visible-node construction for the secrets tree."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .types import DEFAULT_SECRET_EXTENSION, Node, kind_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child in filesystem enumeration order."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List non-hidden children of ``directory`` without sorting.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned; children are empty in that case.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc
    return children, None


def list_visible_nodes(
    root: Path,
    expanded: set[Path],
    secret_extension: str = DEFAULT_SECRET_EXTENSION,
) -> list[Node]:
    """Return the pre-order list of nodes visible under ``root``.

    The root is emitted at depth 0. A directory's children follow it only
    when the directory is in ``expanded``; collapsed directories are not
    scanned at all. Unreadable directories are logged and contribute no
    children.
    """
    try:
        root_is_dir = root.is_dir()
    except OSError:
        root_is_dir = False

    nodes: list[Node] = []
    stack: list[tuple[Path, int, bool]] = [(root, 0, root_is_dir)]
    while stack:
        path, depth, is_dir = stack.pop()
        nodes.append(Node(path=path, kind=kind_for(path, is_dir, secret_extension), depth=depth))
        if not is_dir or path not in expanded:
            continue

        children, scan_error = list_directory_children(path)
        if scan_error is not None:
            logger.error("Failed to read directory '%s': %s", path, scan_error)
            continue
        for child in reversed(children):
            stack.append((child.path, depth + 1, child.is_dir))
    return nodes


__all__ = [
    "DirectoryChild",
    "list_directory_children",
    "list_visible_nodes",
]
