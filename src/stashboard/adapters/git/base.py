"""Shared git command runner and adapter base."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitCommandResult:
    """Result of a git command invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        """Combined stderr and stdout, for matching git's human-readable messages."""
        return f"{self.stderr}\n{self.stdout}".strip()


class GitCommandRunner:
    """Run git commands in subprocesses."""

    async def run(
        self,
        cwd: Path,
        args: Sequence[str],
        *,
        input: str | None = None,
        check: bool = True,
    ) -> GitCommandResult:
        try:
            proc = await asyncio.create_subprocess_exec(
                "git",
                *args,
                cwd=cwd,
                stdin=asyncio.subprocess.PIPE if input is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:  # pragma: no cover - environment dependent
            raise RuntimeError("git executable not found") from exc

        stdin_bytes = input.encode() if input is not None else None
        stdout_bytes, stderr_bytes = await proc.communicate(stdin_bytes)
        returncode = proc.returncode if proc.returncode is not None else 1
        stdout = stdout_bytes.decode(errors="replace") if stdout_bytes else ""
        stderr = stderr_bytes.decode(errors="replace") if stderr_bytes else ""
        log.debug("git %s -> rc=%s", " ".join(args), returncode)

        if check and returncode != 0:
            cmd = " ".join(args)
            err = stderr.strip() or stdout.strip() or "unknown git error"
            raise RuntimeError(f"git {cmd} failed (rc={returncode}): {err}")

        return GitCommandResult(returncode=returncode, stdout=stdout, stderr=stderr)


class GitAdapterBase:
    """Base helper for git adapters bound to one repository root."""

    def __init__(self, repo_root: Path, runner: GitCommandRunner | None = None) -> None:
        self._repo_root = repo_root
        self._runner = runner or GitCommandRunner()

    @property
    def repo_root(self) -> Path:
        return self._repo_root

    async def _run_git(self, args: Sequence[str], *, check: bool = True) -> str:
        result = await self._runner.run(self._repo_root, args, check=check)
        return result.stdout

    async def _run_git_result(
        self,
        args: Sequence[str],
        *,
        input: str | None = None,
    ) -> GitCommandResult:
        return await self._runner.run(self._repo_root, args, input=input, check=False)
