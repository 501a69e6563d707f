"""Configuration management for Strategist."""
from __future__ import annotations

from strategist.config.paths import StrategistPaths, get_paths, reset_paths
from strategist.config.settings import Settings, get_settings_path, settings

__all__ = [
    "Settings",
    "StrategistPaths",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
