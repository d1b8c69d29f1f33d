"""Base screen class for Stashboard screens."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen

if TYPE_CHECKING:
    from stashboard.app import StashboardApp
    from stashboard.bootstrap import AppContext


class StashboardScreen(Screen):
    """Base screen with typed app access."""

    @property
    def stashboard_app(self) -> StashboardApp:
        """Get the typed StashboardApp instance."""
        return cast("StashboardApp", self.app)

    @property
    def ctx(self) -> AppContext:
        """Get the application context for service access."""
        return self.stashboard_app.ctx
