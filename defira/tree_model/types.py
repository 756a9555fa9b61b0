"""Node datatypes and kind classification for the secrets tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

KIND_DIRECTORY = "directory"
KIND_PLAINTEXT = "plaintext"
KIND_SECRET = "secret"

DEFAULT_SECRET_EXTENSION = ".gpg"


@dataclass(frozen=True)
class Node:
    """One visible tree row, recomputed on every listing."""

    path: Path
    kind: str
    depth: int

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIRECTORY

    @property
    def is_secret(self) -> bool:
        return self.kind == KIND_SECRET


def kind_for(path: Path, is_dir: bool, secret_extension: str = DEFAULT_SECRET_EXTENSION) -> str:
    """Return node kind from directory metadata and the reserved suffix."""
    if is_dir:
        return KIND_DIRECTORY
    if secret_extension and path.name.endswith(secret_extension):
        return KIND_SECRET
    return KIND_PLAINTEXT


def classify_path(path: Path, secret_extension: str = DEFAULT_SECRET_EXTENSION) -> str:
    """Classify ``path`` by querying the filesystem for directory-ness."""
    try:
        is_dir = path.is_dir()
    except OSError:
        is_dir = False
    return kind_for(path, is_dir, secret_extension)


__all__ = [
    "KIND_DIRECTORY",
    "KIND_PLAINTEXT",
    "KIND_SECRET",
    "DEFAULT_SECRET_EXTENSION",
    "Node",
    "kind_for",
    "classify_path",
]
