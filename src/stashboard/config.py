"""Configuration loading for Stashboard.

Settings live in a TOML file, by default ``$XDG_CONFIG_HOME/stashboard/config.toml``::

    [ui]
    scroll_step = 3
    list_height = 5
    show_help = true
    color_diff = true

A missing file yields the defaults.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from stashboard.constants import APP_NAME, CONFIG_FILENAME, DEFAULT_LIST_HEIGHT, DEFAULT_SCROLL_STEP
from stashboard.errors import ConfigError


def default_config_path() -> Path:
    """Return the per-user config file location."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME / CONFIG_FILENAME


@dataclass(frozen=True)
class UiConfig:
    """Display settings."""

    scroll_step: int = DEFAULT_SCROLL_STEP
    list_height: int = DEFAULT_LIST_HEIGHT
    show_help: bool = True
    color_diff: bool = True

    def __post_init__(self) -> None:
        for name in ("scroll_step", "list_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"ui.{name} must be a positive integer, got {value!r}")
        for name in ("show_help", "color_diff"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"ui.{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class StashboardConfig:
    """Root configuration object."""

    ui: UiConfig = field(default_factory=UiConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> StashboardConfig:
        """Load config from path (or the default location); defaults if it doesn't exist."""
        config_path = path or default_config_path()
        if not config_path.exists():
            return cls()
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {config_path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read {config_path}: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StashboardConfig:
        ui_data = data.get("ui", {})
        if not isinstance(ui_data, dict):
            raise ConfigError("[ui] must be a table")
        known = {f.name for f in fields(UiConfig)}
        unknown = sorted(set(ui_data) - known)
        if unknown:
            raise ConfigError(f"Unknown [ui] keys: {', '.join(unknown)}")
        return cls(ui=UiConfig(**ui_data))

    def with_overrides(self, **ui_overrides: Any) -> StashboardConfig:
        """Return a copy with non-None UI overrides applied (used for CLI flags)."""
        overrides = {key: value for key, value in ui_overrides.items() if value is not None}
        if not overrides:
            return self
        return replace(self, ui=replace(self.ui, **overrides))
