"""Modal showing the in-memory debug log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Label, RichLog

from stashboard.debug_log import clear_log_buffer, log_buffer
from stashboard.ui.modals.base import StashboardModalScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult


class DebugLogModal(StashboardModalScreen[None]):
    """Scrollable view of the captured log ring buffer."""

    BINDINGS = [
        *StashboardModalScreen.BINDINGS,
        Binding("f12", "close", "Close", show=False),
        Binding("c", "clear", "Clear"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Log", classes="modal-title")
            yield RichLog(id="debug-log", highlight=False, markup=False, wrap=False)
            yield Label("[c] Clear  [Esc] Close", classes="modal-hint", markup=False)

    def on_mount(self) -> None:
        output = self.query_one("#debug-log", RichLog)
        for entry in list(log_buffer):
            output.write(entry.format())

    def action_clear(self) -> None:
        clear_log_buffer()
        self.query_one("#debug-log", RichLog).clear()
