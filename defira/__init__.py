"""Public package surface for defira.

Exports ``main`` for programmatic CLI invocation.
The tree-state and secret-access engine lives in ``defira.explorer``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
