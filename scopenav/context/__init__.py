"""Buffer-centric context resolution: directory, git root, smart search root."""

from .buffer import (
    BufferContext,
    enter_git_root,
    require_git_root,
    resolve_buffer_context,
    resolve_search_root,
)

__all__ = [
    "BufferContext",
    "enter_git_root",
    "require_git_root",
    "resolve_buffer_context",
    "resolve_search_root",
]
