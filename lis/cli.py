"""Command-line front door for lis.

Parses CLI options over config defaults, resolves the root and highlight
target, runs the browser, and prints the chosen path on stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import (
    BOOL_KEYS,
    config_bool,
    config_int,
    config_path_value,
    configure_debug_log,
    load_config,
)
from .errors import InvalidPathError, KeyReadError, TerminalUnavailableError
from .runtime import run_browser
from .state import TreeState

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_PATH = 2


def _depth(value: str) -> int:
    """argparse type for ``-1`` (unlimited) or a non-negative depth."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < -1:
        raise argparse.ArgumentTypeError("value must be >= -1")
    return parsed


def _color_code(value: str) -> int:
    """argparse type for a 256-color palette index, or ``-1`` for none."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < -1 or parsed > 255:
        raise argparse.ArgumentTypeError("value must be in 0-255 (or -1)")
    return parsed


def build_parser(config: dict[str, object]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lis",
        description="Browse a directory tree in the terminal; print the chosen file's path on exit.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to open (file or directory, or file to highlight if --cwd is set).",
    )
    parser.add_argument("--cwd", default=None, help="Root directory for the tree.")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Show hidden files.")
    parser.add_argument("-A", "--alt-screen", dest="alt_screen", action="store_true", help="Use the alternate screen.")
    parser.add_argument("-c", "--compact", dest="compact", action="store_true", help="Hide header and help.")
    parser.add_argument(
        "-g", "--generic-icons", dest="generic_icons", action="store_true", help="Use generic file and folder icons."
    )
    parser.add_argument("-G", "--git", dest="show_git", action="store_true", help="Show git status markers.")
    parser.add_argument("-s", "--size", dest="show_size", action="store_true", help="Show the file size column.")
    parser.add_argument("--time", dest="show_time", action="store_true", help="Show the modification time column.")
    parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "-d",
        "--depth",
        dest="max_depth",
        type=_depth,
        default=config_int(config, "max_depth", -1, minimum=-1),
        help="Max indent depth (-1 = unlimited).",
    )
    parser.add_argument(
        "--background",
        dest="bg_color",
        type=_color_code,
        default=config_int(config, "background", -1, minimum=-1, maximum=255),
        help="Terminal background (0-255, needs -A).",
    )
    parser.add_argument(
        "--selection-background",
        dest="sel_bg_color",
        type=_color_code,
        default=config_int(config, "selection_background", -1, minimum=-1, maximum=255),
        help="Cursor line background (0-255, needs -A).",
    )
    parser.add_argument("--debug-log", dest="debug_log", metavar="PATH", default=None, help="Write debug logs to PATH.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(**{key: config_bool(config, key) for key in BOOL_KEYS if key != "show_mark"})
    return parser


def resolve_targets(path_arg: str | None, cwd_arg: str | None) -> tuple[Path, Path | None]:
    """Return ``(root, highlight_target)`` for the CLI path arguments.

    Raises ``InvalidPathError`` for missing paths or a non-directory ``--cwd``.
    """
    if cwd_arg:
        root = Path(cwd_arg).absolute()
        if not root.exists():
            raise InvalidPathError(f"cwd path does not exist: {root}")
        if not root.is_dir():
            raise InvalidPathError(f"cwd must be a directory: {root}")
        if not path_arg:
            return root, None
        target = Path(path_arg).absolute()
        if not target.exists():
            raise InvalidPathError(f"file path does not exist: {target}")
        return root, target

    input_path = Path(path_arg).absolute() if path_arg else Path.cwd()
    if not input_path.exists():
        raise InvalidPathError(f"path does not exist: {input_path}")
    if input_path.is_dir():
        return input_path, None
    return input_path.parent, input_path


def build_state(args: argparse.Namespace, config: dict[str, object], root: Path, highlight: Path | None) -> TreeState:
    return TreeState(
        root=root,
        show_hidden=args.show_hidden,
        show_git=args.show_git,
        show_size=args.show_size,
        show_time=args.show_time,
        show_mark=config_bool(config, "show_mark", True),
        show_header=not args.compact,
        use_ansi=not args.no_color,
        alt_screen=args.alt_screen,
        generic_icons=args.generic_icons,
        max_depth=args.max_depth,
        bg_color=args.bg_color,
        sel_bg_color=args.sel_bg_color,
        highlight_target=highlight,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the browser, and return the process exit code.

    Exit code 0 on a normal quit or a chosen file (printed on stdout), 2 for
    invalid input paths, 1 when the terminal cannot be used.
    """
    config = load_config()
    args = build_parser(config).parse_args(argv)

    debug_log = Path(args.debug_log) if args.debug_log else config_path_value(config, "debug_log")
    if debug_log is not None:
        try:
            configure_debug_log(debug_log)
        except OSError as exc:
            print(f"error: cannot open debug log: {exc}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

    try:
        root, highlight = resolve_targets(args.path, args.cwd)
    except InvalidPathError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_PATH

    state = build_state(args, config, root, highlight)
    try:
        chosen = run_browser(state)
    except (KeyReadError, TerminalUnavailableError) as exc:
        logger.error("session aborted: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if chosen is not None:
        sys.stdout.write(f"{chosen}\n")
        sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
