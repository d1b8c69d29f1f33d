"""Base modal class for Stashboard modals."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, cast

from textual.screen import ModalScreen

from stashboard.keybindings import MODAL_DISMISS_BINDINGS

if TYPE_CHECKING:
    from stashboard.app import StashboardApp

ResultT = TypeVar("ResultT")


class StashboardModalScreen(ModalScreen[ResultT]):
    """Modal with typed app access and the shared dismiss keys."""

    BINDINGS = MODAL_DISMISS_BINDINGS

    @property
    def stashboard_app(self) -> StashboardApp:
        return cast("StashboardApp", self.app)

    def action_close(self) -> None:
        self.dismiss(None)
