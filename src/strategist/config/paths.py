"""Centralized path management for Strategist.

Follows XDG Base Directory Specification for global settings:
- Config: $XDG_CONFIG_HOME/strategist (default: ~/.config/strategist)

Workspace-local files live under ``.strategist/`` in the working directory.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


@dataclass
class StrategistPaths:
    """Centralized path management following XDG spec."""

    workspace: Path  # Current working directory

    _config_home: Path = field(default_factory=_xdg_config_home)

    # === WORKSPACE PATHS ===

    @property
    def workspace_config(self) -> Path:
        """Workspace .strategist/ directory."""
        return self.workspace / ".strategist"

    @property
    def debug_log(self) -> Path:
        """Debug log: .strategist/debug.log"""
        return self.workspace_config / "debug.log"

    @property
    def default_document(self) -> Path:
        """Planning document snapshot: .strategist/plan.json"""
        return self.workspace_config / "plan.json"

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/strategist/"""
        return self._config_home / "strategist"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/strategist/settings.json"""
        return self.global_config_dir / "settings.json"

    # === DIRECTORY CREATION ===

    def ensure_workspace_dirs(self) -> None:
        """Create the workspace .strategist/ directory."""
        self.workspace_config.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: StrategistPaths | None = None


def get_paths(workspace: Path | None = None) -> StrategistPaths:
    """Get the paths singleton.

    On first call, optionally set the workspace directory.
    Subsequent calls return the same instance.

    Args:
        workspace: The workspace directory. If not provided on first call,
                   defaults to current working directory.
    """
    global _paths
    if _paths is None:
        _paths = StrategistPaths(workspace=workspace or Path.cwd())
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
