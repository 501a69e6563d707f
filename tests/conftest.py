from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path

import pytest

from strategist.config.paths import reset_paths
from strategist.config.settings import settings
from strategist.models.document import Document
from strategist.models.foundation import PlanContext
from strategist.normalize.identity import IdentityAssigner


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Prevent tests from persisting settings to disk."""
    original_data = copy.deepcopy(settings._data)

    def _noop_save() -> None:
        return None

    monkeypatch.setattr(settings, "_save", _noop_save)
    try:
        yield
    finally:
        settings._data = original_data


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run with the workspace paths rooted at a temporary directory."""
    monkeypatch.chdir(tmp_path)
    reset_paths()
    try:
        yield tmp_path
    finally:
        reset_paths()


@pytest.fixture
def ids() -> IdentityAssigner:
    return IdentityAssigner("t")


@pytest.fixture
def empty_document() -> Document:
    return Document()


@pytest.fixture
def planned_document() -> Document:
    """Document with a plan context ending in 2030."""
    return Document(context=PlanContext(start_year=2025, end_year=2030))
