"""Small path helpers shared by context resolution and scope navigation."""

from __future__ import annotations

from pathlib import Path


def is_strictly_under(path: Path, ancestor: Path) -> bool:
    """Return whether ``path`` is a proper descendant of ``ancestor``."""
    return path != ancestor and path.is_relative_to(ancestor)


def child_toward(ancestor: Path, descendant: Path) -> Path:
    """Return the direct child of ``ancestor`` on the way to ``descendant``.

    ``descendant`` must be strictly under ``ancestor``.
    """
    relative = descendant.relative_to(ancestor)
    return ancestor / relative.parts[0]


def abbreviate_home(path: Path, home: Path | None = None) -> str:
    """Render ``path`` with the home directory shown as ``~``."""
    home = Path.home() if home is None else home
    if path == home:
        return "~"
    if path.is_relative_to(home):
        return "~/" + path.relative_to(home).as_posix()
    return str(path)


def relative_display(path: Path, scope: Path) -> str:
    """Display ``path`` as ``./rel`` under ``scope``; paths outside stay absolute."""
    if path == scope:
        return "."
    if path.is_relative_to(scope):
        return "./" + path.relative_to(scope).as_posix()
    return str(path)


def resolve_path(path: Path, base: Path | None = None) -> Path:
    """Absolute, symlink-free form of ``path``; relative paths join ``base`` first.

    Symlink loops and unreadable components fall back to the absolute path.
    """
    if not path.is_absolute() and base is not None:
        path = base / path
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()
