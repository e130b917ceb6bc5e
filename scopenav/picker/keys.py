"""Key-token to navigation-command table for picker prompts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .commands import KIND_COMMANDS, NavCommand, PickerKind, parse_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyCommandBinding:
    """Mapping from one or more key tokens to a single navigation command."""

    combos: tuple[str, ...]
    command: NavCommand


DEFAULT_BINDINGS: tuple[KeyCommandBinding, ...] = (
    KeyCommandBinding(("<C-u>",), NavCommand.ASCEND),
    KeyCommandBinding(("<C-d>",), NavCommand.DESCEND_TO_BUFFER),
    KeyCommandBinding(("<C-f>",), NavCommand.ADD_FILTER),
    KeyCommandBinding(("<C-x>",), NavCommand.CLEAR_FILTER),
    KeyCommandBinding(("<CR>",), NavCommand.SELECT_ENTRY),
)


class KeyCommandTable:
    """Key lookup table; later registrations overwrite earlier ones."""

    def __init__(self) -> None:
        self._commands: dict[str, NavCommand] = {}

    def register_binding(self, binding: KeyCommandBinding) -> KeyCommandTable:
        for combo in binding.combos:
            self._commands[combo] = binding.command
        return self

    def register_bindings(self, *bindings: KeyCommandBinding) -> KeyCommandTable:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def command_for(self, key: str) -> NavCommand | None:
        return self._commands.get(key)

    def keys_for_kind(self, kind: PickerKind) -> dict[str, NavCommand]:
        """Keys whose command applies to pickers of ``kind``."""
        allowed = KIND_COMMANDS[kind]
        return {key: command for key, command in self._commands.items() if command in allowed}


def build_key_table(overrides: Mapping[str, str] | None = None) -> KeyCommandTable:
    """Default bindings with ``{key: command name}`` overrides applied on top.

    Overriding a command moves it: the default key for that command is dropped.
    """
    parsed: list[KeyCommandBinding] = []
    for key, name in (overrides or {}).items():
        command = parse_command(name)
        if command is None:
            logger.debug("ignoring unknown picker command %r for key %r", name, key)
            continue
        parsed.append(KeyCommandBinding((key,), command))

    moved = {binding.command for binding in parsed}
    table = KeyCommandTable()
    table.register_bindings(*(binding for binding in DEFAULT_BINDINGS if binding.command not in moved))
    table.register_bindings(*parsed)
    return table
