"""Terminal sanitization and syntax highlighting for opened content.

Secrets are highlighted by the name they carry once the reserved extension
is stripped (``notes.md.gpg`` highlights as Markdown).
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .tree_model import DEFAULT_SECRET_EXTENSION

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def lexer_filename(path: Path, secret_extension: str = DEFAULT_SECRET_EXTENSION) -> str:
    """Return the filename used for lexer lookup, minus the secret suffix."""
    name = path.name
    if secret_extension and name.endswith(secret_extension) and len(name) > len(secret_extension):
        return name[: -len(secret_extension)]
    return name


def _normalize_style(style: str) -> str:
    """Validate/canonicalize requested style name with cache-backed checks."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_text(
    text: str,
    path: Path,
    style: str = DEFAULT_STYLE,
    secret_extension: str = DEFAULT_SECRET_EXTENSION,
) -> str:
    """Sanitize and highlight ``text`` with a lexer guessed from ``path``."""
    source = sanitize_terminal_text(text)
    try:
        lexer = get_lexer_for_filename(lexer_filename(path, secret_extension), source)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = _formatter_for_style(_normalize_style(style))
    return pygments_highlight(source, lexer, formatter)
