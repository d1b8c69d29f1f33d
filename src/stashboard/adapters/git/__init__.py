"""Git adapter contracts."""

from stashboard.adapters.git.base import GitCommandResult, GitCommandRunner
from stashboard.adapters.git.patch import GitPatchValidator, PatchChecker
from stashboard.adapters.git.stash import GitStashAdapter, StashAdapter
from stashboard.adapters.git.types import OutcomeKind, StashEntry, StashOutcome

__all__ = [
    "GitCommandResult",
    "GitCommandRunner",
    "GitPatchValidator",
    "GitStashAdapter",
    "OutcomeKind",
    "PatchChecker",
    "StashAdapter",
    "StashEntry",
    "StashOutcome",
]
