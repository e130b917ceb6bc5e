"""Buffer context resolution.

The context follows the buffer the user is looking at rather than the
editor's working directory: special surfaces (terminals, quickfix lists) fall
back to the first normal loaded buffer, and the git root is looked up from the
buffer's own directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .paths import resolve_path
from ..host import EditorState, Level, Notifier, Surface
from ..process import RunCommand, run_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferContext:
    """Derived view of the active buffer; recomputed on every query."""

    path: Path
    dir: Path
    git_root: Path | None
    is_real_file: bool


def _effective_surface(editor: EditorState) -> Surface:
    current = editor.current_surface()
    if not current.is_special:
        return current
    for surface in editor.list_surfaces():
        if surface.loaded and not surface.is_special:
            return surface
    return current


def find_git_root(directory: Path, run_command: RunCommand | None = None) -> Path | None:
    """Return the repository top level containing ``directory``, if any."""
    if run_command is None:
        run_command = run_lines
    lines = run_command(["git", "-C", str(directory), "rev-parse", "--show-toplevel"])
    if not lines:
        return None
    root = resolve_path(Path(lines[0].strip()))
    if not directory.is_relative_to(root):
        logger.debug("git root %s does not contain %s; ignoring", root, directory)
        return None
    return root


def resolve_buffer_context(editor: EditorState, run_command: RunCommand | None = None) -> BufferContext:
    """Compute the :class:`BufferContext` for the editor's active buffer."""
    surface = _effective_surface(editor)
    backing = surface.backing_path
    cwd = resolve_path(editor.cwd())

    if backing is not None:
        path = resolve_path(backing, cwd)
        directory = path.parent
        if not directory.is_dir():
            # Unsaved buffer in a directory that does not exist yet.
            logger.debug("buffer directory %s missing; using cwd", directory)
            directory = cwd
    else:
        path = cwd
        directory = cwd

    return BufferContext(
        path=path,
        dir=directory,
        git_root=find_git_root(directory, run_command),
        is_real_file=backing is not None,
    )


def resolve_search_root(editor: EditorState, run_command: RunCommand | None = None) -> Path:
    """Git root when the buffer is in a repository, else the buffer directory."""
    context = resolve_buffer_context(editor, run_command)
    return context.git_root or context.dir


def require_git_root(
    editor: EditorState,
    notifier: Notifier,
    run_command: RunCommand | None = None,
) -> Path | None:
    """Return the buffer's git root, warning the user when there is none."""
    git_root = resolve_buffer_context(editor, run_command).git_root
    if git_root is None:
        notifier.notify("Not in a git repository", Level.WARN)
    return git_root


def enter_git_root(editor: EditorState, run_command: RunCommand | None = None) -> Path:
    """Change the editor's working directory to the git root when one exists.

    Returns the working directory in effect afterwards.
    """
    git_root = resolve_buffer_context(editor, run_command).git_root
    if git_root is not None:
        editor.set_cwd(git_root)
    return editor.cwd()
