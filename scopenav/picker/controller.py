"""Picker session controller.

Owns at most one live session per :class:`PickerKind`. Key presses arrive as
:class:`NavCommand` values and are routed through a single dispatch table.
Moving a session to a new scope never mutates it in place: the controller
captures the typed query, closes the host session, and opens a replacement
on the next scheduler tick so the two never coexist.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..context.buffer import BufferContext, resolve_buffer_context
from ..context.paths import abbreviate_home, resolve_path
from ..host import EditorState, Level, Notifier, PickerConfig, PickerHost, Scheduler
from ..process import RunCommand, run_lines
from ..runtime.config import DEFAULT_DIR_EXCLUDES, DEFAULT_DIR_MAX_DEPTH
from . import navigator
from .commands import KIND_COMMANDS, NavCommand, PickerKind
from .filters import FILTER_PROMPT, FilterStore
from .keys import KeyCommandTable, build_key_table
from .sources import directory_entries, directory_preview_command, file_find_command, list_directories

logger = logging.getLogger(__name__)

TITLE_PREFIXES = {
    PickerKind.FILES: "Files",
    PickerKind.GREP: "Grep",
    PickerKind.DIRECTORIES: "Dirs",
}


@dataclass
class ScopeSession:
    """One live picker bound to ``scope``.

    ``buffer_dir`` is captured when the session opens and is the target that
    descend walks toward for the session's whole lifetime.
    """

    kind: PickerKind
    scope: Path
    buffer_dir: Path
    config: PickerConfig | None = None
    handle: Any = None


class PickerController:
    """Opens, navigates, and replaces picker sessions."""

    def __init__(
        self,
        *,
        editor: EditorState,
        host: PickerHost,
        notifier: Notifier,
        scheduler: Scheduler,
        filters: FilterStore | None = None,
        key_table: KeyCommandTable | None = None,
        run_command: RunCommand = run_lines,
        dir_max_depth: int = DEFAULT_DIR_MAX_DEPTH,
        dir_excludes: Iterable[str] = DEFAULT_DIR_EXCLUDES,
        list_dirs: Callable[..., list[Path]] = list_directories,
    ) -> None:
        self.editor = editor
        self.host = host
        self.notifier = notifier
        self.scheduler = scheduler
        self.filters = filters if filters is not None else FilterStore()
        self.key_table = key_table if key_table is not None else build_key_table()
        self.run_command = run_command
        self.dir_max_depth = dir_max_depth
        self.dir_excludes = tuple(dir_excludes)
        self.list_dirs = list_dirs
        self._sessions: dict[PickerKind, ScopeSession] = {}
        self._handlers: dict[NavCommand, Callable[[ScopeSession], bool]] = {
            NavCommand.ASCEND: self._ascend,
            NavCommand.DESCEND_TO_BUFFER: self._descend_to_buffer,
            NavCommand.ADD_FILTER: self._add_filter,
            NavCommand.CLEAR_FILTER: self._clear_filter,
            NavCommand.SELECT_ENTRY: self._select_entry,
        }
        self._openers: dict[PickerKind, Callable[[Path | None, str], ScopeSession]] = {
            PickerKind.FILES: self.find_files,
            PickerKind.GREP: self.live_grep,
            PickerKind.DIRECTORIES: self.browse_directories,
        }

    # context
    def buffer_context(self) -> BufferContext:
        return resolve_buffer_context(self.editor, self.run_command)

    def search_root(self) -> Path:
        context = self.buffer_context()
        return context.git_root or context.dir

    def session(self, kind: PickerKind) -> ScopeSession | None:
        return self._sessions.get(kind)

    # opening
    def find_files(self, scope: Path | None = None, query: str = "") -> ScopeSession:
        return self._open(PickerKind.FILES, scope, query)

    def live_grep(self, scope: Path | None = None, query: str = "") -> ScopeSession:
        return self._open(PickerKind.GREP, scope, query)

    def browse_directories(self, scope: Path | None = None, query: str = "") -> ScopeSession:
        """First stage of the directory-then-file workflow."""
        return self._open(PickerKind.DIRECTORIES, scope, query)

    def _open(self, kind: PickerKind, scope: Path | None, query: str) -> ScopeSession:
        existing = self._sessions.get(kind)
        if existing is not None:
            self._close(existing)

        context = self.buffer_context()
        if scope is None:
            scope = context.git_root or context.dir
        else:
            scope = resolve_path(scope, resolve_path(self.editor.cwd()))
        session = ScopeSession(kind=kind, scope=scope, buffer_dir=context.dir)
        session.config = self._build_config(session, query)
        session.handle = self.host.open(session.config)
        self._sessions[kind] = session
        logger.debug("opened %s picker at %s", kind.value, scope)
        return session

    def _build_config(self, session: ScopeSession, query: str) -> PickerConfig:
        title = f"{TITLE_PREFIXES[session.kind]}: {abbreviate_home(session.scope)}"
        key_bindings = {
            key: self._binding_callback(session, command)
            for key, command in self.key_table.keys_for_kind(session.kind).items()
        }

        def on_close() -> None:
            self._forget(session)

        if session.kind is PickerKind.GREP:
            filters = self.filters.current()
            return PickerConfig(
                root_dir=session.scope,
                seed_query=query,
                title_text=title + filters.display_suffix(),
                extra_search_args=tuple(filters.glob_args()),
                key_bindings=key_bindings,
                on_close=on_close,
            )
        if session.kind is PickerKind.DIRECTORIES:
            directories = self.list_dirs(
                session.scope,
                max_depth=self.dir_max_depth,
                excluded=self.dir_excludes,
                run_command=self.run_command,
            )
            return PickerConfig(
                root_dir=session.scope,
                seed_query=query,
                title_text=title,
                key_bindings=key_bindings,
                entries=directory_entries(session.scope, directories),
                preview_command=directory_preview_command,
                on_close=on_close,
            )
        return PickerConfig(
            root_dir=session.scope,
            seed_query=query,
            title_text=title,
            key_bindings=key_bindings,
            find_command=file_find_command(),
            on_close=on_close,
        )

    def _binding_callback(self, session: ScopeSession, command: NavCommand) -> Callable[[], bool]:
        def callback() -> bool:
            if self._sessions.get(session.kind) is not session:
                logger.debug("ignoring %s from a replaced %s session", command.value, session.kind.value)
                return False
            return self._handlers[command](session)

        return callback

    # closing
    def _forget(self, session: ScopeSession) -> None:
        if self._sessions.get(session.kind) is session:
            del self._sessions[session.kind]

    def _close(self, session: ScopeSession) -> None:
        self._forget(session)
        self.host.close(session.handle)

    def close(self, kind: PickerKind) -> bool:
        session = self._sessions.get(kind)
        if session is None:
            return False
        self._close(session)
        return True

    # dispatch
    def dispatch(self, kind: PickerKind, command: NavCommand) -> bool:
        """Run ``command`` against the live session of ``kind``.

        Returns ``False`` when there is no live session or the command does
        not apply to that kind of picker.
        """
        session = self._sessions.get(kind)
        if session is None:
            logger.debug("no live %s session for %s", kind.value, command.value)
            return False
        if command not in KIND_COMMANDS[kind]:
            return False
        return self._handlers[command](session)

    def handle_key(self, kind: PickerKind, key: str) -> bool:
        command = self.key_table.command_for(key)
        if command is None:
            return False
        return self.dispatch(kind, command)

    def _reopen(self, session: ScopeSession, scope: Path) -> bool:
        query = self.host.prompt_text(session.handle)
        opener = self._openers[session.kind]
        self._close(session)
        self.scheduler.schedule(lambda: opener(scope, query))
        return True

    def _apply(self, session: ScopeSession, outcome: navigator.NavOutcome) -> bool:
        if outcome.warning is not None:
            self.notifier.notify(outcome.warning, Level.WARN)
            return True
        assert outcome.target is not None
        return self._reopen(session, outcome.target)

    # handlers
    def _ascend(self, session: ScopeSession) -> bool:
        return self._apply(session, navigator.ascend(session.scope))

    def _descend_to_buffer(self, session: ScopeSession) -> bool:
        return self._apply(session, navigator.descend_to_buffer(session.scope, session.buffer_dir))

    def _add_filter(self, session: ScopeSession) -> bool:
        raw = self.host.input(FILTER_PROMPT)
        if not self.filters.set_filters(raw):
            return True
        return self._reopen(session, session.scope)

    def _clear_filter(self, session: ScopeSession) -> bool:
        self.filters.clear_filters()
        return self._reopen(session, session.scope)

    def _select_entry(self, session: ScopeSession) -> bool:
        entry = self.host.selected_entry(session.handle)
        if entry is None:
            return False
        target = entry.value
        self._close(session)
        self.scheduler.schedule(lambda: self.find_files(target))
        return True
