"""Selection and preview state machine for the stash browser.

The controller owns the in-memory stash list, the selected index and the
clean/dirty state of the selected stash. It knows nothing about Textual: the
UI implements :class:`StashView` and feeds user commands back in through
:meth:`SelectionController.handle` (or the individual coroutines).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from stashboard.adapters.git.types import OutcomeKind
from stashboard.constants import (
    APPLY_LABEL_CLEAN,
    APPLY_LABEL_DIRTY,
    EMPTY_STASH_PLACEHOLDER,
    POP_FAILED_MESSAGE,
    POP_LABEL_CLEAN,
    POP_LABEL_DIRTY,
)
from stashboard.errors import PatchValidationError, StashError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stashboard.adapters.git import PatchChecker, StashAdapter, StashEntry, StashOutcome

log = logging.getLogger(__name__)


class Cleanliness(StrEnum):
    """Whether the selected stash applies cleanly to the working tree."""

    CLEAN = "clean"
    DIRTY = "dirty"
    PENDING = "pending"


class Command(StrEnum):
    """User commands the controller understands."""

    SELECT = "select"
    DROP = "drop"
    APPLY = "apply"
    POP = "pop"


def command_labels(cleanliness: Cleanliness) -> tuple[str, str]:
    """Return the (apply, pop) command-bar labels for a state."""
    if cleanliness is Cleanliness.CLEAN:
        return APPLY_LABEL_CLEAN, POP_LABEL_CLEAN
    return APPLY_LABEL_DIRTY, POP_LABEL_DIRTY


def next_selection(index: int, length: int) -> int | None:
    """Index to select after removing `index` from a list now `length` long."""
    if length <= 0:
        return None
    return min(index, length - 1)


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything the view needs to draw."""

    entries: tuple[StashEntry, ...]
    selected_index: int | None
    preview_text: str
    cleanliness: Cleanliness

    @property
    def is_clean(self) -> bool:
        return self.cleanliness is Cleanliness.CLEAN

    @property
    def apply_label(self) -> str:
        return command_labels(self.cleanliness)[0]

    @property
    def pop_label(self) -> str:
        return command_labels(self.cleanliness)[1]


class StashView(Protocol):
    """What the controller needs from a presentation layer."""

    def render_state(self, state: ViewState) -> None:
        """Redraw list, preview and command bar from state."""

    def show_error(self, message: str) -> None:
        """Show a dismissible error dialog."""

    def exit_app(self, code: int, message: str | None = None) -> None:
        """Terminate the program with the given status."""


class SelectionController:
    """Drives selection, preview validation and stash mutations."""

    def __init__(
        self,
        stashes: StashAdapter,
        validator: PatchChecker,
        view: StashView,
        entries: Iterable[StashEntry],
    ) -> None:
        self._stashes = stashes
        self._validator = validator
        self._view = view
        self._entries: list[StashEntry] = list(entries)
        self._selected_index = 0
        self._cleanliness = Cleanliness.PENDING
        self._preview_text = ""
        self._request_id = 0
        self._mutation_lock = asyncio.Lock()

    @property
    def entries(self) -> tuple[StashEntry, ...]:
        return tuple(self._entries)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def is_clean(self) -> bool:
        return self._cleanliness is Cleanliness.CLEAN

    @property
    def cleanliness(self) -> Cleanliness:
        return self._cleanliness

    @property
    def preview_text(self) -> str:
        return self._preview_text

    @property
    def state(self) -> ViewState:
        return ViewState(
            entries=self.entries,
            selected_index=self._selected_index if self._entries else None,
            preview_text=self._preview_text,
            cleanliness=self._cleanliness,
        )

    async def handle(self, command: Command, index: int | None = None) -> None:
        """Dispatch a user command."""
        match command:
            case Command.SELECT:
                await self.select(self._selected_index if index is None else index)
            case Command.DROP:
                await self.drop()
            case Command.APPLY:
                await self.apply()
            case Command.POP:
                await self.pop()

    async def select(self, index: int) -> None:
        """Select a stash and recompute its preview and clean state.

        Results that arrive after a newer selection was issued are dropped.
        """
        if not self._entries:
            return
        if not 0 <= index < len(self._entries):
            log.warning("Ignoring selection of out-of-range index %d", index)
            return

        self._selected_index = index
        self._request_id += 1
        request_id = self._request_id
        entry = self._entries[index]

        try:
            patch = await self._stashes.get_diff_patch(entry.identifier)
        except StashError as exc:
            if self._is_stale(request_id):
                return
            log.error("Failed to load diff for %s: %s", entry.short_id, exc)
            self._set_preview(f"Could not load stash diff:\n{exc}", Cleanliness.DIRTY)
            self._view.show_error(str(exc))
            return

        if self._is_stale(request_id):
            return

        if patch == "":
            self._set_preview(EMPTY_STASH_PLACEHOLDER, Cleanliness.CLEAN)
            return

        self._set_preview(patch, Cleanliness.PENDING)
        try:
            await self._validator.check(patch)
        except PatchValidationError as exc:
            cleanliness = Cleanliness.DIRTY
            log.debug("Stash %s does not apply cleanly: %s", entry.short_id, exc)
        else:
            cleanliness = Cleanliness.CLEAN

        if self._is_stale(request_id):
            log.debug("Discarding stale validation for stash %s", entry.short_id)
            return
        self._set_preview(patch, cleanliness)

    async def drop(self) -> None:
        """Drop the selected stash; errors are reported without changing selection."""
        if not self._entries:
            return
        async with self._mutation_lock:
            # An earlier mutation may have spliced the list while we waited
            if not self._entries:
                return
            index = self._selected_index
            outcome = await self._stashes.drop(index)
            if outcome.ok:
                await self._remove_and_reselect(index)
                return
            self._view.show_error(_drop_error_message(outcome))

    async def apply(self) -> None:
        """Apply the selected stash; exits afterwards if it was not known to be clean."""
        if not self._entries:
            return
        async with self._mutation_lock:
            if not self._entries:
                return
            index = self._selected_index
            was_clean = self.is_clean
            outcome = await self._stashes.apply(index)
            if not was_clean:
                log.info("Applied stash %d with conflicts, exiting", index)
                self._view.exit_app(0)
                return
            if not outcome.ok:
                self._view.show_error(_apply_error_message(outcome))
            await self.select(index)

    async def pop(self) -> None:
        """Pop the selected stash; only allowed while it applies cleanly."""
        if not self._can_pop():
            return
        async with self._mutation_lock:
            # The selection may have moved to an unvalidated stash while we waited
            if not self._can_pop():
                return
            index = self._selected_index
            outcome = await self._stashes.pop(index)
            if not outcome.ok:
                log.error("Pop of stash %d failed: %s", index, outcome.message or outcome.kind)
                self._view.exit_app(1, POP_FAILED_MESSAGE)
                return
            await self._remove_and_reselect(index)

    def _can_pop(self) -> bool:
        if self._entries and self.is_clean:
            return True
        log.debug("Pop ignored: selected stash is not clean")
        return False

    def _is_stale(self, request_id: int) -> bool:
        return request_id != self._request_id

    def _set_preview(self, text: str, cleanliness: Cleanliness) -> None:
        self._preview_text = text
        self._cleanliness = cleanliness
        self._view.render_state(self.state)

    async def _remove_and_reselect(self, index: int) -> None:
        del self._entries[index]
        # Anything still in flight refers to the old list
        self._request_id += 1
        new_index = next_selection(index, len(self._entries))
        self._selected_index = new_index if new_index is not None else 0
        self._preview_text = ""
        self._cleanliness = Cleanliness.PENDING
        self._view.render_state(self.state)
        if new_index is not None:
            await self.select(new_index)


def _drop_error_message(outcome: StashOutcome) -> str:
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return "Problem dropping stash (not found)"
    if outcome.code is None and outcome.message:
        return outcome.message
    return f"Unknown problem dropping stash (error: {outcome.code})"


def _apply_error_message(outcome: StashOutcome) -> str:
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return "Problem applying stash (not found)"
    if outcome.code is None and outcome.message:
        return outcome.message
    return f"Unknown problem applying stash (error: {outcome.code})"
