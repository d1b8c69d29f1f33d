"""Screens for Stashboard."""

from stashboard.ui.screens.stash import StashScreen

__all__ = ["StashScreen"]
