"""Navigable picker sessions: scope moves, grep filters, directory browser."""

from .commands import NavCommand, PickerKind
from .controller import PickerController, ScopeSession
from .filters import FilterSet, FilterStore, parse_filter_line
from .navigator import NavOutcome, ascend, descend_to_buffer

__all__ = [
    "FilterSet",
    "FilterStore",
    "NavCommand",
    "NavOutcome",
    "PickerController",
    "PickerKind",
    "ScopeSession",
    "ascend",
    "descend_to_buffer",
    "parse_filter_line",
]
