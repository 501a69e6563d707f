from __future__ import annotations

from typing import Any

import pytest

from strategist.errors import RegistryError, UnknownPhaseError
from strategist.models.document import BRANCH_KEYS, Document
from strategist.phases import PhaseRegistry, get_registry, phases


def _table(**overrides: Any) -> dict[str, Any]:
    entry = {
        "id": "risks",
        "step": 7,
        "canonical_key": "risks",
        "title": "Risk Register",
        "prompt": "build_risks_prompt",
        "schema": "RISKS_SCHEMA",
    }
    entry.update(overrides)
    return {"phases": [entry]}


class TestBundledTable:
    def test_seventeen_phases_in_order(self) -> None:
        specs = phases()
        assert len(specs) == 17
        assert [spec.step for spec in specs] == list(range(1, 18))

    def test_canonical_keys_cover_every_branch(self) -> None:
        keys = [spec.canonical_key for spec in get_registry()]
        assert sorted(keys) == sorted(BRANCH_KEYS)

    def test_lookup_by_id_and_step(self) -> None:
        registry = get_registry()
        assert registry.lookup("national").canonical_key == "national_alignment"
        assert registry.lookup(13).canonical_key == "resource_plan"
        assert registry.lookup(" 17 ").id == "change"

    @pytest.mark.parametrize("phase_id", ["budget", 0, 18, "", True, None, 2.5])
    def test_unknown_phase(self, phase_id: Any) -> None:
        with pytest.raises(UnknownPhaseError):
            get_registry().lookup(phase_id)

    def test_contains(self) -> None:
        registry = get_registry()
        assert "swot" in registry
        assert 5 in registry
        assert "budget" not in registry

    def test_prompts_build(self) -> None:
        for spec in get_registry():
            prompt = spec.build_prompt(Document())
            assert isinstance(prompt, str)
            assert prompt

    def test_schemas_are_objects(self) -> None:
        for spec in get_registry():
            assert spec.schema["type"] == "object"


class TestFromTable:
    def test_valid_entry(self) -> None:
        registry = PhaseRegistry.from_table(_table())
        assert len(registry) == 1
        assert registry.lookup(7).title == "Risk Register"

    def test_requires_phase_list(self) -> None:
        with pytest.raises(RegistryError):
            PhaseRegistry.from_table({"phase": []})
        with pytest.raises(RegistryError):
            PhaseRegistry.from_table(None)

    def test_unknown_branch(self) -> None:
        with pytest.raises(RegistryError, match="branch"):
            PhaseRegistry.from_table(_table(canonical_key="budget"))

    def test_unknown_prompt_builder(self) -> None:
        with pytest.raises(RegistryError, match="prompt"):
            PhaseRegistry.from_table(_table(prompt="build_missing_prompt"))

    def test_unknown_schema(self) -> None:
        with pytest.raises(RegistryError, match="schema"):
            PhaseRegistry.from_table(_table(schema="MISSING_SCHEMA"))

    def test_invalid_step(self) -> None:
        with pytest.raises(RegistryError):
            PhaseRegistry.from_table(_table(step="seven"))

    def test_duplicate_ids(self) -> None:
        table = _table()
        table["phases"].append(dict(table["phases"][0], step=8))
        with pytest.raises(RegistryError, match="Duplicate"):
            PhaseRegistry.from_table(table)
