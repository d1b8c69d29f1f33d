"""Helpers for locating the git work tree stashboard operates on.

All functions are async to avoid blocking the event loop during subprocess calls.
"""

from __future__ import annotations

import asyncio
from pathlib import Path


async def _rev_parse(path: Path, flag: str) -> str | None:
    """Run `git rev-parse <flag>` in path; None if git fails or is missing."""
    try:
        proc = await asyncio.create_subprocess_exec(
            "git",
            "rev-parse",
            flag,
            cwd=path,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (FileNotFoundError, NotADirectoryError):
        return None
    stdout, _ = await proc.communicate()
    if proc.returncode != 0:
        return None
    return stdout.decode().strip()


async def has_git_repo(path: Path) -> bool:
    """Return True if the path is inside a git work tree."""
    return await _rev_parse(path, "--is-inside-work-tree") == "true"


async def find_repo_root(path: Path) -> Path | None:
    """Return the top-level directory of the work tree containing path, if any."""
    if not await has_git_repo(path):
        return None
    root = await _rev_parse(path, "--show-toplevel")
    return Path(root) if root else None
