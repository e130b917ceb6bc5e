"""Navigation commands and picker kinds understood by the session controller."""

from __future__ import annotations

import enum


class PickerKind(enum.Enum):
    FILES = "files"
    GREP = "grep"
    DIRECTORIES = "directories"


class NavCommand(enum.Enum):
    ASCEND = "ascend"
    DESCEND_TO_BUFFER = "descend"
    ADD_FILTER = "add_filter"
    CLEAR_FILTER = "clear_filter"
    SELECT_ENTRY = "select"


SCOPE_COMMANDS = frozenset({NavCommand.ASCEND, NavCommand.DESCEND_TO_BUFFER})

KIND_COMMANDS: dict[PickerKind, frozenset[NavCommand]] = {
    PickerKind.FILES: SCOPE_COMMANDS,
    PickerKind.GREP: SCOPE_COMMANDS | {NavCommand.ADD_FILTER, NavCommand.CLEAR_FILTER},
    PickerKind.DIRECTORIES: SCOPE_COMMANDS | {NavCommand.SELECT_ENTRY},
}


def parse_command(name: str) -> NavCommand | None:
    """Map a config-file command name (``"ascend"``) to its enum member."""
    try:
        return NavCommand(name.strip().lower())
    except ValueError:
        return None
