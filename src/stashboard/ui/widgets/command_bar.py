"""Two-row command hint bar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Grid
from textual.widgets import Static

from stashboard.constants import (
    APPLY_LABEL_CLEAN,
    DROP_LABEL,
    HELP_LABEL,
    MOVE_LABEL,
    POP_LABEL_CLEAN,
    QUIT_LABEL,
)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CommandBar(Grid):
    """Key hints; the apply and pop hints change with the clean state."""

    apply_label: str = APPLY_LABEL_CLEAN
    pop_label: str = POP_LABEL_CLEAN

    def compose(self) -> ComposeResult:
        yield Static(DROP_LABEL, classes="hint hint-left")
        yield Static(self.apply_label, id="apply-hint", classes="hint hint-center")
        yield Static(QUIT_LABEL, classes="hint hint-right")
        yield Static(HELP_LABEL, classes="hint hint-left")
        yield Static(self.pop_label, id="pop-hint", classes="hint hint-center")
        yield Static(MOVE_LABEL, classes="hint hint-right")

    def update_labels(self, apply_label: str, pop_label: str) -> None:
        self.apply_label = apply_label
        self.pop_label = pop_label
        self.query_one("#apply-hint", Static).update(apply_label)
        self.query_one("#pop-hint", Static).update(pop_label)

    def toggle(self) -> bool:
        """Show or hide the bar, returning the new visibility."""
        self.display = not self.display
        return self.display
