"""Boundary contracts for the editor, picker host, notifier, and scheduler.

Nothing here implements an editor primitive. The protocols describe the narrow
query/command surface the scope logic calls into, and ``StaticEditor`` is a
plain value-backed implementation for the CLI and tests.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol


@dataclass(frozen=True)
class Surface:
    """One loaded editor surface (buffer) as seen from the outside."""

    handle: int
    name: str = ""
    buftype: str = ""
    loaded: bool = True

    @property
    def is_special(self) -> bool:
        """Terminals, quickfix and list views carry a non-empty ``buftype``."""
        return self.buftype != ""

    @property
    def backing_path(self) -> Path | None:
        return Path(self.name) if self.name else None


class EditorState(Protocol):
    def current_surface(self) -> Surface: ...

    def list_surfaces(self) -> list[Surface]: ...

    def cwd(self) -> Path: ...

    def set_cwd(self, path: Path) -> None: ...


@dataclass
class StaticEditor:
    """Editor state backed by plain values."""

    surfaces: list[Surface]
    current_handle: int
    working_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def for_path(cls, path: Path) -> StaticEditor:
        """Build a one-surface editor viewing ``path`` (file or directory)."""
        resolved = path.resolve()
        if resolved.is_dir():
            return cls(surfaces=[Surface(handle=1)], current_handle=1, working_dir=resolved)
        return cls(surfaces=[Surface(handle=1, name=str(resolved))], current_handle=1)

    def current_surface(self) -> Surface:
        for surface in self.surfaces:
            if surface.handle == self.current_handle:
                return surface
        raise LookupError(f"no surface with handle {self.current_handle}")

    def list_surfaces(self) -> list[Surface]:
        return list(self.surfaces)

    def cwd(self) -> Path:
        return self.working_dir

    def set_cwd(self, path: Path) -> None:
        self.working_dir = path


class Level(enum.Enum):
    INFO = "info"
    WARN = "warn"


class Notifier(Protocol):
    def notify(self, message: str, level: Level = Level.INFO) -> None: ...


@dataclass(frozen=True)
class PickerEntry:
    """One selectable row for list-backed pickers."""

    value: Path
    display: str

    @property
    def ordinal(self) -> str:
        return self.display


@dataclass(frozen=True)
class PickerConfig:
    """Everything a picker host needs to render one interactive session.

    ``key_bindings`` maps host key tokens (``"<C-u>"``) to zero-argument
    callbacks returning whether the key was handled. ``entries`` is set for
    list-backed pickers; file and grep pickers leave listing to the host,
    optionally via ``find_command``. ``preview_command`` builds the command
    whose output previews the highlighted entry. ``on_close`` must be called
    by the host when the user dismisses the session on their own.
    """

    root_dir: Path
    seed_query: str
    title_text: str
    extra_search_args: tuple[str, ...] = ()
    key_bindings: Mapping[str, Callable[[], bool]] = field(default_factory=dict)
    find_command: tuple[str, ...] | None = None
    entries: tuple[PickerEntry, ...] | None = None
    preview_command: Callable[[PickerEntry], tuple[str, ...]] | None = None
    on_close: Callable[[], None] | None = None


class PickerHost(Protocol):
    def open(self, config: PickerConfig) -> Any: ...

    def close(self, handle: Any) -> None: ...

    def prompt_text(self, handle: Any) -> str: ...

    def selected_entry(self, handle: Any) -> PickerEntry | None: ...

    def input(self, prompt: str) -> str: ...


class Scheduler(Protocol):
    def schedule(self, callback: Callable[[], None]) -> None: ...
