"""Scope navigation transitions over the directory tree.

Both moves are pure: they compute the next scope (or a user-facing warning)
and leave closing/reopening the live session to the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..context.paths import child_toward, is_strictly_under

AT_FILESYSTEM_ROOT = "Already at filesystem root"
AT_BUFFER_DIRECTORY = "Already at buffer directory"
BUFFER_OUTSIDE_SCOPE = "Buffer is not under current scope"


@dataclass(frozen=True)
class NavOutcome:
    """Exactly one of ``target`` and ``warning`` is set."""

    target: Path | None = None
    warning: str | None = None

    @property
    def moved(self) -> bool:
        return self.target is not None


def ascend(scope: Path) -> NavOutcome:
    parent = scope.parent
    if parent == scope:
        return NavOutcome(warning=AT_FILESYSTEM_ROOT)
    return NavOutcome(target=parent)


def descend_to_buffer(scope: Path, buffer_dir: Path) -> NavOutcome:
    """Step one level from ``scope`` toward ``buffer_dir``."""
    if buffer_dir == scope:
        return NavOutcome(warning=AT_BUFFER_DIRECTORY)
    if not is_strictly_under(buffer_dir, scope):
        return NavOutcome(warning=BUFFER_OUTSIDE_SCOPE)
    return NavOutcome(target=child_toward(scope, buffer_dir))
