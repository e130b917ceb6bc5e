"""Controller bootstrap from persisted config."""

from __future__ import annotations

from ..host import EditorState, Notifier, PickerHost, Scheduler
from ..picker.controller import PickerController
from ..picker.filters import FilterSet, FilterStore
from ..picker.keys import build_key_table
from . import config


def persisted_filter_store() -> FilterStore:
    """Filter store seeded from config that writes every change back."""
    include, exclude = config.load_grep_filters()

    def persist(filters: FilterSet) -> None:
        config.save_grep_filters(list(filters.include), list(filters.exclude))

    return FilterStore(
        initial=FilterSet(include=tuple(include), exclude=tuple(exclude)),
        on_change=persist,
    )


def build_controller(
    editor: EditorState,
    host: PickerHost,
    notifier: Notifier,
    scheduler: Scheduler,
    *,
    persist_filters: bool = True,
) -> PickerController:
    """Wire a :class:`PickerController` with config-driven keys and limits."""
    return PickerController(
        editor=editor,
        host=host,
        notifier=notifier,
        scheduler=scheduler,
        filters=persisted_filter_store() if persist_filters else FilterStore(),
        key_table=build_key_table(config.load_key_overrides()),
        dir_max_depth=config.load_dir_max_depth(),
        dir_excludes=config.load_dir_excludes(),
    )
