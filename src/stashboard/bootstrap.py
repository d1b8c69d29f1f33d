"""Application context: the single place where the repository is bound."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from stashboard.adapters.git import GitCommandRunner, GitPatchValidator, GitStashAdapter
from stashboard.config import StashboardConfig
from stashboard.errors import NotAGitRepositoryError
from stashboard.git_utils import find_repo_root

if TYPE_CHECKING:
    from pathlib import Path

    from stashboard.adapters.git import PatchChecker, StashAdapter


@dataclass(frozen=True)
class AppContext:
    """Services shared by the controller and the UI for one repository."""

    repo_root: Path
    stashes: StashAdapter
    validator: PatchChecker
    config: StashboardConfig = field(default_factory=StashboardConfig)


async def create_app_context(cwd: Path, config: StashboardConfig | None = None) -> AppContext:
    """Resolve the repository containing cwd and build its adapters.

    Raises:
        NotAGitRepositoryError: If cwd is not inside a git work tree.
    """
    repo_root = await find_repo_root(cwd)
    if repo_root is None:
        raise NotAGitRepositoryError(f"Not a git repository: {cwd}")

    runner = GitCommandRunner()
    return AppContext(
        repo_root=repo_root,
        stashes=GitStashAdapter(repo_root, runner),
        validator=GitPatchValidator(repo_root, runner),
        config=config or StashboardConfig(),
    )
