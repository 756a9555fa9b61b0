"""Command-line front door for defira.

Parses CLI options, loads persisted config, and drives the explorer engine:
prints the visible tree, or opens one file (prompting for a password when it
is a secret) and prints its content.
"""

from __future__ import annotations

import argparse
import functools
import getpass
import sys
from collections.abc import Callable
from pathlib import Path

from .crypto import decrypt as gpg_decrypt
from .explorer import (
    ErrorState,
    ExplorerController,
    ExplorerState,
    PasswordChanged,
    Select,
    SubmitPassword,
    ToggleExpand,
)
from .highlight import colorize_text, sanitize_terminal_text
from .runtime import config
from .runtime.log import configure_logging, default_log_path
from .tree_model import format_tree
from .ui_theme import UITheme, available_theme_names, resolve_theme


def resolve_under_root(root: Path, raw: str) -> Path:
    """Resolve a CLI path argument; relative paths are taken from ``root``."""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def expand_to(controller: ExplorerController, target: Path, include_target: bool) -> None:
    """Expand every directory from the root down to ``target``."""
    root = controller.state.root
    if target != root and root not in target.parents:
        raise SystemExit(f"Path is outside the secrets root: {target}")
    chain = [parent for parent in reversed(target.parents) if parent == root or root in parent.parents]
    if include_target:
        chain.append(target)
    for directory in chain:
        if directory not in controller.state.tree.expanded:
            controller.update(ToggleExpand(directory))


def render_tree(controller: ExplorerController, theme: UITheme) -> str:
    state = controller.state
    rows = format_tree(
        controller.visible_nodes(),
        state.root,
        state.tree.expanded,
        state.tree.selected,
        theme,
    )
    return "".join(f"{row}\n" for row in rows)


def render_error(error: ErrorState, theme: UITheme) -> str:
    return f"{theme.error_title}{error.title}{theme.reset}: {theme.error_text}{error.message}{theme.reset}\n"


def open_and_render(
    controller: ExplorerController,
    target: Path,
    style: str,
    theme: UITheme,
    no_color: bool,
    read_password: Callable[[str], str] | None = None,
) -> str:
    """Run the select/open flow for ``target`` and return printable content.

    Raises ``SystemExit(1)`` after printing the error when opening fails.
    """
    state = controller.state
    controller.update(Select(target))
    if state.password_prompt is not None:
        ask = read_password or getpass.getpass
        password = ask(f"Password for {target.name}: ")
        controller.update(PasswordChanged(password))
        controller.update(SubmitPassword())

    if state.error is not None:
        sys.stderr.write(render_error(state.error, theme))
        raise SystemExit(1)
    if state.editor is None:
        raise SystemExit(f"Nothing to open at {target}")

    text = state.editor.text
    if no_color:
        rendered = sanitize_terminal_text(text)
    else:
        rendered = colorize_text(text, target, style, state.secret_extension)
    return rendered if rendered.endswith("\n") else rendered + "\n"


def main(default_root: Path | None = None) -> None:
    """Parse CLI arguments and list or open secrets under the root.

    ``default_root`` is primarily for tests; when omitted the configured root
    (``~/ntech/mystiko`` unless overridden) is used.
    """
    parser = argparse.ArgumentParser(description="Browse and decrypt password-protected secrets.")
    parser.add_argument("root", nargs="?", default=None, help="Secrets root directory.")
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="DIR",
        help="Expand DIR (relative to the root) before listing. Repeatable.",
    )
    parser.add_argument("--open", metavar="FILE", help="Open FILE and print its content.")
    parser.add_argument("--style", default=None, help="Pygments style name for opened content.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--gpg", default=None, metavar="PATH", help="gpg executable to decrypt with.")
    parser.add_argument("--gpg-homedir", default=None, metavar="DIR", help="GnuPG home directory.")
    parser.add_argument("--log-level", default=None, choices=config.LOG_LEVELS, help="Logging level.")
    parser.add_argument(
        "--log-file",
        nargs="?",
        const=str(default_log_path()),
        default=None,
        help="Write logs to a rotating file (default location when no value is given).",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given root, style, and theme as defaults.",
    )
    args = parser.parse_args()

    configure_logging(
        args.log_level or config.load_log_level(),
        Path(args.log_file).expanduser() if args.log_file else None,
    )

    raw_root = args.root or default_root or config.load_root()
    root = Path(raw_root).expanduser().resolve()
    if not root.exists():
        raise SystemExit(f"Path not found: {root}")
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    style = args.style or config.load_style()
    theme_name = args.theme or config.load_theme_name()
    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(theme_name, no_color=no_color)
    gpg_homedir = Path(args.gpg_homedir).expanduser() if args.gpg_homedir else config.load_gpg_homedir()

    if args.save_defaults:
        config.save_settings({"root": root, "style": args.style, "theme": args.theme})

    state = ExplorerState(root=root, secret_extension=config.load_secret_extension())
    decrypt = functools.partial(
        gpg_decrypt,
        gpg_binary=args.gpg or config.load_gpg_binary(),
        homedir=gpg_homedir,
    )
    controller = ExplorerController(state, decrypt=decrypt)

    for raw_dir in args.expand:
        expand_to(controller, resolve_under_root(root, raw_dir), include_target=True)

    if args.open is not None:
        target = resolve_under_root(root, args.open)
        expand_to(controller, target, include_target=False)
        sys.stdout.write(open_and_render(controller, target, style, theme, no_color))
        return

    sys.stdout.write(render_tree(controller, theme))


if __name__ == "__main__":
    main()
