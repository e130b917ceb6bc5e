"""Entry sources for the file and directory pickers.

``fd`` is preferred when installed; the directory walk falls back to
``os.scandir`` with the same depth limit and excluded names.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..context.paths import relative_display
from ..host import PickerEntry
from ..process import RunCommand, run_lines
from ..runtime.config import DEFAULT_DIR_EXCLUDES, DEFAULT_DIR_MAX_DEPTH

logger = logging.getLogger(__name__)

FILE_FIND_EXCLUDES: tuple[str, ...] = (".git", "build")


def fd_available() -> bool:
    return shutil.which("fd") is not None


def file_find_command() -> tuple[str, ...] | None:
    """``fd`` file listing command, or ``None`` to let the host use its default."""
    if not fd_available():
        return None
    cmd = ["fd", "--type", "f", "--hidden", "--no-ignore-vcs"]
    for name in FILE_FIND_EXCLUDES:
        cmd.extend(["--exclude", name])
    return tuple(cmd)


def _fd_directories(
    scope: Path,
    max_depth: int,
    excluded: Iterable[str],
    run_command: RunCommand,
) -> list[Path] | None:
    cmd = ["fd", "--type", "d", "--max-depth", str(max_depth), "--hidden", "--no-ignore"]
    for name in excluded:
        cmd.extend(["--exclude", name])
    cmd.extend([".", str(scope)])
    lines = run_command(cmd)
    if lines is None:
        return None
    out: list[Path] = []
    for line in lines:
        text = line.strip().rstrip("/")
        if not text:
            continue
        candidate = Path(text)
        out.append(candidate if candidate.is_absolute() else scope / candidate)
    return out


def _walk_directories(scope: Path, max_depth: int, excluded: Iterable[str]) -> list[Path]:
    excluded_names = set(excluded)
    out: list[Path] = []
    frontier = [scope]
    for _depth in range(max_depth):
        next_frontier: list[Path] = []
        for directory in frontier:
            try:
                with os.scandir(directory) as entries:
                    for child in entries:
                        if child.name in excluded_names:
                            continue
                        try:
                            is_dir = child.is_dir(follow_symlinks=False)
                        except OSError:
                            continue
                        if is_dir:
                            child_path = Path(child.path)
                            out.append(child_path)
                            next_frontier.append(child_path)
            except OSError as exc:
                logger.debug("skipping unreadable directory %s: %s", directory, exc)
        frontier = next_frontier
    return out


def list_directories(
    scope: Path,
    max_depth: int = DEFAULT_DIR_MAX_DEPTH,
    excluded: Iterable[str] = DEFAULT_DIR_EXCLUDES,
    run_command: RunCommand = run_lines,
    use_fd: bool | None = None,
) -> list[Path]:
    """Snapshot subdirectories of ``scope`` up to ``max_depth`` levels, sorted.

    Neither backend consults ``.gitignore``; only ``excluded`` names are skipped,
    so the snapshot is the same with or without ``fd`` installed.
    """
    excluded = tuple(excluded)
    if use_fd is None:
        use_fd = fd_available()
    found: list[Path] | None = None
    if use_fd:
        found = _fd_directories(scope, max_depth, excluded, run_command)
        if found is None:
            logger.debug("fd directory listing failed under %s; walking instead", scope)
    if found is None:
        found = _walk_directories(scope, max_depth, excluded)
    return sorted(set(found))


def directory_entries(scope: Path, directories: Iterable[Path]) -> tuple[PickerEntry, ...]:
    return tuple(PickerEntry(value=path, display=relative_display(path, scope)) for path in directories)


def directory_preview_command(entry: PickerEntry) -> tuple[str, ...]:
    """Long listing of the highlighted directory for the host's preview pane."""
    return ("ls", "-lah", "--color=always", str(entry.value))
