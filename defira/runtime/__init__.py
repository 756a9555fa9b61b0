"""Process-level runtime helpers: persisted config and logging setup."""

from __future__ import annotations

from .log import configure_logging

__all__ = ["configure_logging"]
