"""Scrollable list of stash entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widgets import OptionList

from stashboard.keybindings import STASH_LIST_BINDINGS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stashboard.adapters.git import StashEntry


def entry_label(index: int, entry: StashEntry) -> Text:
    """Label shown for a stash: its stack index and message."""
    return Text(f"{index}: {entry.message}", no_wrap=True, overflow="ellipsis")


class StashList(OptionList):
    """Stash list with vi-style navigation on top of OptionList's arrows and mouse."""

    BINDINGS = STASH_LIST_BINDINGS

    def __init__(self, entries: Sequence[StashEntry] = (), **kwargs) -> None:
        super().__init__(*(entry_label(i, e) for i, e in enumerate(entries)), **kwargs)
        self._stash_entries: tuple[StashEntry, ...] = tuple(entries)

    @property
    def entries(self) -> tuple[StashEntry, ...]:
        return self._stash_entries

    def set_entries(self, entries: Sequence[StashEntry], selected: int | None) -> None:
        """Replace the displayed entries and move the highlight without posting events."""
        entries = tuple(entries)
        with self.prevent(OptionList.OptionHighlighted):
            if entries != self._stash_entries:
                self._stash_entries = entries
                self.clear_options()
                self.add_options([entry_label(i, e) for i, e in enumerate(entries)])
            if selected is not None and entries:
                self.highlighted = selected
