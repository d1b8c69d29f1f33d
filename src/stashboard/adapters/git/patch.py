"""Dry-run patch validation via `git apply --check`."""

from __future__ import annotations

import logging
from typing import Protocol

from stashboard.adapters.git.base import GitAdapterBase
from stashboard.errors import PatchValidationError

log = logging.getLogger(__name__)


class PatchChecker(Protocol):
    """Adapter contract for checking whether a patch applies cleanly."""

    async def check(self, patch: str) -> None:
        """Return if the patch applies cleanly, raise PatchValidationError otherwise."""


class GitPatchValidator(GitAdapterBase):
    """Check patches against the working tree without touching it."""

    async def check(self, patch: str) -> None:
        try:
            result = await self._run_git_result(["apply", "--check"], input=patch)
        except (OSError, RuntimeError) as exc:
            raise PatchValidationError(None, str(exc)) from exc
        if result.returncode != 0:
            log.debug("Patch rejected: %s", result.stderr.strip())
            raise PatchValidationError(result.returncode, result.stderr)
