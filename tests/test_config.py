from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from strategist.config.paths import get_paths, reset_paths
from strategist.config.settings import DEFAULT_MODEL, Settings


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.chdir(tmp_path)
    reset_paths()
    yield home
    reset_paths()


class TestPaths:
    def test_workspace_paths(self, config_home: Path, tmp_path: Path) -> None:
        paths = get_paths()
        assert paths.workspace == tmp_path
        assert paths.default_document == tmp_path / ".strategist" / "plan.json"
        assert paths.debug_log == tmp_path / ".strategist" / "debug.log"
        assert paths.global_settings == config_home / "strategist" / "settings.json"

    def test_singleton_until_reset(self, config_home: Path) -> None:
        assert get_paths() is get_paths()
        first = get_paths()
        reset_paths()
        assert get_paths() is not first

    def test_ensure_workspace_dirs(self, config_home: Path, tmp_path: Path) -> None:
        get_paths().ensure_workspace_dirs()
        assert (tmp_path / ".strategist").is_dir()


class TestSettings:
    def test_defaults(self, config_home: Path, tmp_path: Path) -> None:
        settings = Settings()
        assert settings.llm_model == DEFAULT_MODEL
        assert settings.generation_max_turns == 1
        assert settings.log_level == "INFO"
        assert settings.default_document == tmp_path / ".strategist" / "plan.json"

    def test_persists_values(self, config_home: Path) -> None:
        settings = Settings()
        settings.llm_model = "claude-opus-4-1"
        settings.generation_max_turns = 3
        settings.log_level = "debug"

        path = config_home / "strategist" / "settings.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "generation": {"model": "claude-opus-4-1", "max_turns": 3},
            "log_level": "DEBUG",
        }
        reloaded = Settings()
        assert reloaded.llm_model == "claude-opus-4-1"
        assert reloaded.generation_max_turns == 3
        assert reloaded.log_level == "DEBUG"

    def test_invalid_values_fall_back(self, config_home: Path) -> None:
        path = config_home / "strategist" / "settings.json"
        path.parent.mkdir(parents=True)
        path.write_text(
            json.dumps(
                {"generation": {"max_turns": "many"}, "log_level": "loud"}
            ),
            encoding="utf-8",
        )
        settings = Settings()
        assert settings.generation_max_turns == 1
        assert settings.log_level == "INFO"

    def test_corrupt_file_is_ignored(self, config_home: Path) -> None:
        path = config_home / "strategist" / "settings.json"
        path.parent.mkdir(parents=True)
        path.write_text("{broken", encoding="utf-8")
        assert Settings().llm_model == DEFAULT_MODEL

    def test_default_document_setting(self, config_home: Path, tmp_path: Path) -> None:
        settings = Settings()
        settings.default_document = tmp_path / "plans" / "city.json"
        assert settings.default_document == tmp_path / "plans" / "city.json"
