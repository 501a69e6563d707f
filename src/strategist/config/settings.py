"""Configuration and settings persistence."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from strategist.config.paths import get_paths

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5"
DEFAULT_MAX_TURNS = 1
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for Strategist."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                data = {}
            self._data = data if isinstance(data, dict) else {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s", path)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a raw setting value."""
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    def _generation(self) -> dict[str, Any]:
        raw = self._data.get("generation", {})
        return raw if isinstance(raw, dict) else {}

    # --- Generation Settings ---

    @property
    def llm_model(self) -> str:
        """Model used by the generation client."""
        model = self._generation().get("model")
        if isinstance(model, str) and model.strip():
            return model.strip()
        return DEFAULT_MODEL

    @llm_model.setter
    def llm_model(self, value: str) -> None:
        generation = self._generation()
        generation["model"] = value
        self.set("generation", generation)

    @property
    def generation_max_turns(self) -> int:
        """Agent turns allowed per generation call."""
        raw = self._generation().get("max_turns", DEFAULT_MAX_TURNS)
        try:
            turns = int(raw)
        except (TypeError, ValueError):
            return DEFAULT_MAX_TURNS
        return turns if turns > 0 else DEFAULT_MAX_TURNS

    @generation_max_turns.setter
    def generation_max_turns(self, value: int) -> None:
        generation = self._generation()
        generation["max_turns"] = max(1, int(value))
        self.set("generation", generation)

    # --- Workspace Settings ---

    @property
    def default_document(self) -> Path:
        """Document snapshot used when a command names none.

        Returns the configured path, or defaults to the workspace
        .strategist/plan.json.
        """
        saved = self._data.get("default_document")
        if isinstance(saved, str) and saved:
            return Path(saved).expanduser()
        return get_paths().default_document

    @default_document.setter
    def default_document(self, value: str | Path) -> None:
        self.set("default_document", str(value))

    @property
    def log_level(self) -> str:
        """Log level name, used when STRATEGIST_LOG_LEVEL is unset."""
        raw = str(self._data.get("log_level", "INFO")).strip().upper()
        return raw if raw in LOG_LEVELS else "INFO"

    @log_level.setter
    def log_level(self, value: str) -> None:
        normalized = str(value).strip().upper()
        self.set("log_level", normalized if normalized in LOG_LEVELS else "INFO")


# Global settings instance
settings = Settings()
