"""Modal components for Stashboard."""

from stashboard.ui.modals.base import StashboardModalScreen
from stashboard.ui.modals.debug_log import DebugLogModal
from stashboard.ui.modals.error import ErrorModal

__all__ = [
    "DebugLogModal",
    "ErrorModal",
    "StashboardModalScreen",
]
