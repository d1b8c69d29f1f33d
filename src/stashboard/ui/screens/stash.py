"""Main stash browser screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual import on
from textual.css.query import NoMatches
from textual.widgets import OptionList
from textual.worker import Worker, WorkerState

from stashboard.core.selection import Command, SelectionController
from stashboard.debug_log import log
from stashboard.keybindings import STASH_BINDINGS
from stashboard.ui.modals import ErrorModal
from stashboard.ui.screens.base import StashboardScreen
from stashboard.ui.widgets import CommandBar, PatchPreview, StashList

if TYPE_CHECKING:
    from collections.abc import Coroutine, Sequence

    from textual.app import ComposeResult

    from stashboard.adapters.git import StashEntry
    from stashboard.core.selection import ViewState

PREVIEW_GROUP = "stash-preview"
MUTATION_GROUP = "stash-mutation"


class StashScreen(StashboardScreen):
    """Stash list, patch preview and command bar.

    Implements the controller's view protocol: the controller decides, this
    screen only draws and forwards keys.
    """

    BINDINGS = STASH_BINDINGS

    def __init__(self, entries: Sequence[StashEntry], **kwargs) -> None:
        super().__init__(**kwargs)
        self._initial_entries = tuple(entries)
        self._controller: SelectionController | None = None

    @property
    def controller(self) -> SelectionController:
        assert self._controller is not None
        return self._controller

    def compose(self) -> ComposeResult:
        ui = self.ctx.config.ui
        stash_list = StashList(self._initial_entries, id="stash-list")
        stash_list.styles.height = ui.list_height
        yield stash_list
        yield PatchPreview(colorize=ui.color_diff, id="stash-preview")
        command_bar = CommandBar(id="command-bar")
        command_bar.display = ui.show_help
        yield command_bar

    def on_mount(self) -> None:
        self._controller = SelectionController(
            self.ctx.stashes,
            self.ctx.validator,
            self,
            self._initial_entries,
        )
        stash_list = self.query_one(StashList)
        self.render_state(self.controller.state)
        stash_list.focus()
        self._run_preview(self.controller.select(0))

    # StashView protocol

    def render_state(self, state: ViewState) -> None:
        try:
            stash_list = self.query_one(StashList)
            preview = self.query_one(PatchPreview)
            command_bar = self.query_one(CommandBar)
        except NoMatches:
            # Screen already torn down (app exiting)
            return
        stash_list.set_entries(state.entries, state.selected_index)
        preview.show(state.preview_text, state.cleanliness)
        command_bar.update_labels(state.apply_label, state.pop_label)

    def show_error(self, message: str) -> None:
        log.error("Stash operation failed", message=message)
        self.app.push_screen(ErrorModal(message), callback=self._on_error_dismissed)

    def exit_app(self, code: int, message: str | None = None) -> None:
        self.stashboard_app.request_exit(code, message)

    def _on_error_dismissed(self, _result: None) -> None:
        self.query_one(StashList).focus()

    # Input

    @on(OptionList.OptionHighlighted, "#stash-list")
    def on_stash_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        if self._controller is None:
            return
        self._run_preview(self.controller.handle(Command.SELECT, event.option_index))

    def action_drop(self) -> None:
        self._run_mutation(self.controller.handle(Command.DROP))

    def action_apply(self) -> None:
        self._run_mutation(self.controller.handle(Command.APPLY))

    def action_pop(self) -> None:
        self._run_mutation(self.controller.handle(Command.POP))

    def action_toggle_help(self) -> None:
        visible = self.query_one(CommandBar).toggle()
        log.debug("Command bar toggled", visible=visible)

    def action_scroll_preview(self, direction: int) -> None:
        step = self.ctx.config.ui.scroll_step
        self.query_one(PatchPreview).scroll_lines(direction * step)

    def action_quit(self) -> None:
        self.stashboard_app.request_exit(0)

    # Workers

    def _run_preview(self, coro: Coroutine[Any, Any, None]) -> None:
        self.run_worker(coro, group=PREVIEW_GROUP, exit_on_error=False)

    def _run_mutation(self, coro: Coroutine[Any, Any, None]) -> None:
        self.run_worker(coro, group=MUTATION_GROUP, exit_on_error=False)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.state is WorkerState.ERROR:
            error = event.worker.error
            log.error("Background worker failed", group=event.worker.group, error=repr(error))
            self.show_error(f"Unexpected error: {error}")
