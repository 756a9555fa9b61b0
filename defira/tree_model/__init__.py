"""Tree-model creation and row formatting for the secrets explorer.

Defines ``Node`` plus the kind classification used across the explorer.
Listing is lazy: only expanded directories are scanned.
"""

from __future__ import annotations

from .build import DirectoryChild, list_directory_children, list_visible_nodes
from .rendering import format_node, format_tree
from .types import (
    DEFAULT_SECRET_EXTENSION,
    KIND_DIRECTORY,
    KIND_PLAINTEXT,
    KIND_SECRET,
    Node,
    classify_path,
    kind_for,
)

__all__ = [
    "Node",
    "KIND_DIRECTORY",
    "KIND_PLAINTEXT",
    "KIND_SECRET",
    "DEFAULT_SECRET_EXTENSION",
    "classify_path",
    "kind_for",
    "DirectoryChild",
    "list_directory_children",
    "list_visible_nodes",
    "format_node",
    "format_tree",
]
