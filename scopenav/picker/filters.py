"""Grep include/exclude glob filters.

A :class:`FilterSet` is parsed from one free-text line such as
``"+*.go -vendor"``. :class:`FilterStore` owns the process-wide current set
that every grep session reads when it opens.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

FILTER_PROMPT = "Filter (+include -exclude): "


@dataclass(frozen=True)
class FilterSet:
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.include and not self.exclude

    def glob_args(self) -> list[str]:
        """ripgrep ``--glob`` arguments, includes first, excludes negated."""
        args: list[str] = []
        for pattern in self.include:
            args.extend(["--glob", pattern])
        for pattern in self.exclude:
            args.extend(["--glob", "!" + pattern])
        return args

    def display_suffix(self) -> str:
        """Title suffix like ``" [+*.go -vendor]"``; empty when no filters are set."""
        parts: list[str] = []
        if self.include:
            parts.append("+" + " +".join(self.include))
        if self.exclude:
            parts.append("-" + " -".join(self.exclude))
        return f" [{' '.join(parts)}]" if parts else ""


def parse_filter_line(raw: str) -> FilterSet | None:
    """Parse ``raw`` into a filter set; blank input yields ``None``.

    Tokens are accepted verbatim apart from the one-character ``+``/``-``
    prefix. Unprefixed tokens are includes.
    """
    tokens = raw.split()
    if not tokens:
        return None
    include: list[str] = []
    exclude: list[str] = []
    for token in tokens:
        if token.startswith("+"):
            include.append(token[1:])
        elif token.startswith("-"):
            exclude.append(token[1:])
        else:
            include.append(token)
    return FilterSet(include=tuple(include), exclude=tuple(exclude))


class FilterStore:
    """Holder for the current :class:`FilterSet`.

    ``on_change`` runs after every replacement, e.g. to persist the set.
    """

    def __init__(
        self,
        initial: FilterSet | None = None,
        on_change: Callable[[FilterSet], None] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._current = initial if initial is not None else FilterSet()
        self._on_change = on_change

    def current(self) -> FilterSet:
        with self._lock:
            return self._current

    def _replace(self, filters: FilterSet) -> None:
        with self._lock:
            self._current = filters
        if self._on_change is not None:
            self._on_change(filters)

    def set_filters(self, raw: str) -> bool:
        """Replace the set from ``raw``; returns ``False`` (no change) for blank input."""
        parsed = parse_filter_line(raw)
        if parsed is None:
            return False
        self._replace(parsed)
        return True

    def clear_filters(self) -> None:
        self._replace(FilterSet())
