"""Shared constants for Stashboard."""

from __future__ import annotations

APP_NAME = "stashboard"
CONFIG_FILENAME = "config.toml"

# UI defaults
DEFAULT_SCROLL_STEP = 3
DEFAULT_LIST_HEIGHT = 5

EMPTY_STASH_PLACEHOLDER = "Empty stash"
NO_STASHES_MESSAGE = "No stashes in current git repo"
POP_FAILED_MESSAGE = "Stash did not apply cleanly"

# Command bar labels
DROP_LABEL = "d - drop"
QUIT_LABEL = "q - quit"
HELP_LABEL = "? - toggle help"
MOVE_LABEL = "j/k - move"
APPLY_LABEL_CLEAN = "a - apply"
APPLY_LABEL_DIRTY = "a - apply & exit"
POP_LABEL_CLEAN = "p - pop"
POP_LABEL_DIRTY = "(conflicts found)"

# Substrings git prints when a stash reference does not resolve
STASH_NOT_FOUND_MARKERS = (
    "is not a valid reference",
    "no stash entries found",
    "not a stash-like commit",
    "unknown revision",
    "only has",
)

# Substrings git prints when applying a stash runs into the working tree
STASH_CONFLICT_MARKERS = (
    "conflict",
    "would be overwritten",
    "could not restore untracked files",
    "needs merge",
)
