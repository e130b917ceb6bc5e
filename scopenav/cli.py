"""Command-line front door for scopenav.

Resolves the buffer-centric search context for a path, snapshots the
directory browser's listing, and manages the persisted grep filters.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .context.buffer import resolve_buffer_context, resolve_search_root
from .context.paths import relative_display
from .host import StaticEditor
from .picker.sources import list_directories
from .runtime import config
from .runtime.bootstrap import persisted_filter_store


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _editor_for(raw_path: str | None) -> StaticEditor:
    path = Path(raw_path) if raw_path else Path.cwd()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    return StaticEditor.for_path(path)


def _cmd_root(args: argparse.Namespace) -> None:
    print(resolve_search_root(_editor_for(args.path)))


def _cmd_context(args: argparse.Namespace) -> None:
    context = resolve_buffer_context(_editor_for(args.path))
    payload = {
        "path": str(context.path),
        "dir": str(context.dir),
        "git_root": str(context.git_root) if context.git_root is not None else None,
        "is_real_file": context.is_real_file,
    }
    print(json.dumps(payload, indent=2))


def _cmd_dirs(args: argparse.Namespace) -> None:
    context = resolve_buffer_context(_editor_for(args.path))
    scope = context.git_root or context.dir
    max_depth = args.max_depth if args.max_depth is not None else config.load_dir_max_depth()
    for directory in list_directories(scope, max_depth=max_depth, excluded=config.load_dir_excludes()):
        print(relative_display(directory, scope))


def _cmd_filters(args: argparse.Namespace) -> None:
    store = persisted_filter_store()
    if args.action == "set":
        if not store.set_filters(" ".join(args.raw)):
            print("No filters given; keeping current filters.", file=sys.stderr)
    elif args.action == "clear":
        store.clear_filters()
    filters = store.current()
    print(" ".join(filters.glob_args()) if not filters.is_empty else "(no filters)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scopenav",
        description="Resolve buffer-centric search scopes and manage picker filters.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    root = sub.add_parser("root", help="Print the smart search root (git root or directory).")
    root.add_argument("path", nargs="?", default=None, help="File or directory. Defaults to cwd.")
    root.set_defaults(handler=_cmd_root)

    context = sub.add_parser("context", help="Print the resolved buffer context as JSON.")
    context.add_argument("path", nargs="?", default=None, help="File or directory. Defaults to cwd.")
    context.set_defaults(handler=_cmd_context)

    dirs = sub.add_parser("dirs", help="List directories the directory browser would offer.")
    dirs.add_argument("path", nargs="?", default=None, help="File or directory. Defaults to cwd.")
    dirs.add_argument("--max-depth", type=_positive_int, default=None, help="Depth limit (default: config or 3).")
    dirs.set_defaults(handler=_cmd_dirs)

    filters = sub.add_parser("filters", help="Show, set, or clear persisted grep filters.")
    filters.add_argument("action", choices=("show", "set", "clear"))
    filters.add_argument("raw", nargs="*", help="Filter tokens for 'set', e.g. +*.py; put -- before tokens starting with -.")
    filters.set_defaults(handler=_cmd_filters)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the selected subcommand."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    args.handler(args)


if __name__ == "__main__":
    main()
