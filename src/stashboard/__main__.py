"""CLI entry point for Stashboard."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from stashboard import __version__
from stashboard.config import StashboardConfig
from stashboard.constants import NO_STASHES_MESSAGE
from stashboard.errors import ConfigError, NotAGitRepositoryError

if TYPE_CHECKING:
    from stashboard.adapters.git import StashEntry
    from stashboard.bootstrap import AppContext


async def _load(cwd: Path, config: StashboardConfig) -> tuple[AppContext, list[StashEntry]]:
    from stashboard.bootstrap import create_app_context

    ctx = await create_app_context(cwd, config)
    return ctx, await ctx.stashes.list_stashes()


@click.command()
@click.option(
    "--repo",
    "repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Repository to browse (defaults to the current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file",
)
@click.option(
    "--color-diff/--no-color-diff",
    default=None,
    help="Colorize the patch preview (overrides config)",
)
@click.option(
    "--scroll-step",
    type=click.IntRange(min=1),
    default=None,
    help="Lines scrolled by page up/down in the preview (overrides config)",
)
@click.version_option(__version__, "--version", prog_name="stashboard")
def cli(
    repo: Path | None,
    config_path: Path | None,
    color_diff: bool | None,
    scroll_step: int | None,
) -> None:
    """Browse, preview, apply, pop and drop git stashes."""
    try:
        config = StashboardConfig.load(config_path).with_overrides(
            color_diff=color_diff,
            scroll_step=scroll_step,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    cwd = repo or Path.cwd()
    try:
        ctx, entries = asyncio.run(_load(cwd, config))
    except NotAGitRepositoryError as exc:
        raise click.ClickException(str(exc)) from exc
    except RuntimeError as exc:
        raise click.ClickException(f"Could not list stashes: {exc}") from exc

    if not entries:
        click.echo(NO_STASHES_MESSAGE)
        sys.exit(0)

    from stashboard.app import StashboardApp

    app = StashboardApp(ctx, entries)
    app.run()

    if app.exit_message:
        click.echo(app.exit_message, err=True)
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    cli()
