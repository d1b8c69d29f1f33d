"""Widget components for Stashboard."""

from stashboard.ui.widgets.command_bar import CommandBar
from stashboard.ui.widgets.preview import PatchPreview
from stashboard.ui.widgets.stash_list import StashList

__all__ = [
    "CommandBar",
    "PatchPreview",
    "StashList",
]
