"""Pytest fixtures for Stashboard tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stashboard.app import StashboardApp
from stashboard.bootstrap import AppContext
from stashboard.config import StashboardConfig
from stashboard.core.selection import SelectionController
from tests.helpers.fakes import FakeStashAdapter, FakeValidator, RecordingView, make_entries
from tests.helpers.git import init_repo
from tests.helpers.patches import PATCH_A, PATCH_B

if TYPE_CHECKING:
    from pathlib import Path


# =============================================================================
# Unit Test Fixtures
# =============================================================================


@pytest.fixture
def entries():
    return make_entries("WIP on main: a", "WIP on main: b", "On main: c")


@pytest.fixture
def adapter(entries) -> FakeStashAdapter:
    return FakeStashAdapter(entries, diffs={"id0": PATCH_A, "id1": PATCH_B, "id2": ""})


@pytest.fixture
def validator() -> FakeValidator:
    return FakeValidator(clean=True)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def controller(adapter, validator, view) -> SelectionController:
    return SelectionController(adapter, validator, view, adapter.entries)


# =============================================================================
# E2E Test Fixtures
# =============================================================================


@pytest.fixture
def app_context(tmp_path: Path, adapter, validator) -> AppContext:
    """Context wired to in-memory adapters; no git process is spawned."""
    return AppContext(
        repo_root=tmp_path,
        stashes=adapter,
        validator=validator,
        config=StashboardConfig(),
    )


@pytest.fixture
def app(app_context: AppContext, entries) -> StashboardApp:
    return StashboardApp(app_context, entries)


# =============================================================================
# Integration Test Fixtures
# =============================================================================


@pytest.fixture
async def git_repo(tmp_path: Path) -> Path:
    """A real git repository with one committed file and no stashes."""
    repo = tmp_path / "repo"
    repo.mkdir()
    return await init_repo(repo)
