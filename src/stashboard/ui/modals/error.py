"""Modal dialog for stash operation errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.widgets import Button, Label, Static

from stashboard.ui.modals.base import StashboardModalScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ErrorModal(StashboardModalScreen[None]):
    """Centered error message that stays until acknowledged."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="error-container"):
            yield Label("Error", classes="modal-title")
            yield Static(self.message, id="error-message", markup=False)
            yield Button("OK", variant="error", id="ok-btn")

    def on_mount(self) -> None:
        self.query_one("#ok-btn", Button).focus()

    @on(Button.Pressed, "#ok-btn")
    def on_ok(self) -> None:
        self.action_close()
