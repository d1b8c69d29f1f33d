"""Main Stashboard TUI application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App

from stashboard.debug_log import log, setup_debug_logging
from stashboard.keybindings import APP_BINDINGS
from stashboard.ui.modals import DebugLogModal
from stashboard.ui.screens import StashScreen

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stashboard.adapters.git import StashEntry
    from stashboard.bootstrap import AppContext


class StashboardApp(App[None]):
    """Stashboard TUI Application - browse and apply git stashes."""

    TITLE = "stashboard"
    CSS_PATH = "styles/stashboard.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(self, ctx: AppContext, entries: Sequence[StashEntry]) -> None:
        super().__init__()
        self._ctx = ctx
        self._stash_entries = tuple(entries)
        self.exit_message: str | None = None

    @property
    def ctx(self) -> AppContext:
        return self._ctx

    async def on_mount(self) -> None:
        setup_debug_logging()
        log("Stashboard started", repo=str(self.ctx.repo_root), stashes=len(self._stash_entries))
        await self.push_screen(StashScreen(self._stash_entries))

    def request_exit(self, code: int, message: str | None = None) -> None:
        """Exit the app with a status code; message is printed after the terminal is restored."""
        log("Exit requested", code=code)
        self.exit_message = message
        self.exit(return_code=code)

    async def action_quit(self) -> None:
        self.request_exit(0)

    def action_show_debug_log(self) -> None:
        if isinstance(self.screen, DebugLogModal):
            return
        self.push_screen(DebugLogModal())
