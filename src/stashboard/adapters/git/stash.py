"""Stash stack adapter backed by the git CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from stashboard.adapters.git.base import GitAdapterBase, GitCommandResult
from stashboard.adapters.git.types import StashEntry, StashOutcome
from stashboard.constants import STASH_CONFLICT_MARKERS, STASH_NOT_FOUND_MARKERS
from stashboard.errors import StashError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)

_FIELD_SEPARATOR = "\x00"
_LIST_FORMAT = "--format=%H%x00%gs"

# Patch text must stay in the form `git apply` expects, whatever the user's diff config
_DIFF_OPTIONS = (
    "--no-color",
    "--no-ext-diff",
    "--no-textconv",
    "--no-relative",
    "--src-prefix=a/",
    "--dst-prefix=b/",
)


class StashAdapter(Protocol):
    """Adapter contract for stash stack operations."""

    async def list_stashes(self) -> list[StashEntry]:
        """Return stash entries, most recent first."""

    async def get_diff_patch(self, identifier: str) -> str:
        """Return the stash's changes as unified patch text."""

    async def drop(self, index: int) -> StashOutcome:
        """Remove the stash at index without applying it."""

    async def apply(self, index: int) -> StashOutcome:
        """Apply the stash at index, keeping it on the stack."""

    async def pop(self, index: int) -> StashOutcome:
        """Apply the stash at index and remove it from the stack."""


def stash_ref(index: int) -> str:
    return f"stash@{{{index}}}"


def parse_stash_list(output: str) -> list[StashEntry]:
    """Parse `git stash list --format=%H%x00%gs` output into entries."""
    entries: list[StashEntry] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        identifier, _, message = line.partition(_FIELD_SEPARATOR)
        entries.append(StashEntry(message=message, identifier=identifier.strip()))
    return entries


def outcome_from_result(result: GitCommandResult) -> StashOutcome:
    """Translate a git stash mutation result into a StashOutcome."""
    if result.returncode == 0:
        return StashOutcome.success()

    output = result.output
    lowered = output.lower()
    if any(marker in lowered for marker in STASH_NOT_FOUND_MARKERS):
        return StashOutcome.not_found(output)
    if any(marker in lowered for marker in STASH_CONFLICT_MARKERS):
        return StashOutcome.conflicts(result.returncode, output)
    return StashOutcome.unknown(result.returncode, output)


class GitStashAdapter(GitAdapterBase):
    """Stash operations for a single repository."""

    async def list_stashes(self) -> list[StashEntry]:
        stdout = await self._run_git(["stash", "list", _LIST_FORMAT])
        entries = parse_stash_list(stdout)
        log.debug("Loaded %d stash entries", len(entries))
        return entries

    async def get_diff_patch(self, identifier: str) -> str:
        result = await self._run_git_result(
            ["diff", *_DIFF_OPTIONS, f"{identifier}^1", identifier]
        )
        if result.returncode != 0:
            err = result.stderr.strip() or "unknown git error"
            raise StashError(f"Could not read diff for stash {identifier[:8]}: {err}")
        return result.stdout

    async def drop(self, index: int) -> StashOutcome:
        return await self._mutate(["stash", "drop", stash_ref(index)])

    async def apply(self, index: int) -> StashOutcome:
        return await self._mutate(["stash", "apply", stash_ref(index)])

    async def pop(self, index: int) -> StashOutcome:
        return await self._mutate(["stash", "pop", stash_ref(index)])

    async def _mutate(self, args: Sequence[str]) -> StashOutcome:
        try:
            result = await self._run_git_result(args)
        except (OSError, RuntimeError) as exc:
            log.warning("git %s raised: %s", " ".join(args), exc)
            return StashOutcome.unknown(None, str(exc))
        outcome = outcome_from_result(result)
        log.info("git %s -> %s", " ".join(args), outcome.kind.value)
        return outcome
