"""Exception hierarchy for Stashboard."""

from __future__ import annotations


class StashboardError(Exception):
    """Base class for all Stashboard errors."""


class ConfigError(StashboardError):
    """Raised when the configuration file cannot be parsed or is invalid."""


class NotAGitRepositoryError(StashboardError):
    """Raised when the working directory is not inside a git work tree."""


class StashError(StashboardError):
    """Raised when a stash read operation fails at the git level."""


class PatchValidationError(StashboardError):
    """Raised when `git apply --check` rejects a patch.

    The exit code and stderr are kept for logging; callers only care that the
    patch would not apply cleanly.
    """

    def __init__(self, returncode: int | None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "patch does not apply"
        super().__init__(f"git apply --check failed (rc={returncode}): {detail}")
