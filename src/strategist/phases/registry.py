"""Phase registry loaded from the bundled ``phases.yaml`` table.

Each phase maps an id and a step number to the canonical document branch
it writes, its prompt builder and its response schema. Prompt builders and
schemas are referenced by name and resolved when the table is loaded, so a
broken table fails at startup rather than mid-session.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from importlib import resources
from typing import Any

import yaml

from strategist.errors import RegistryError, UnknownPhaseError
from strategist.llm import prompts, schemas
from strategist.models.document import BRANCH_KEYS, Document

logger = logging.getLogger(__name__)

PHASES_RESOURCE = "phases.yaml"

PromptBuilder = Callable[[Document], str]


@dataclass(frozen=True, slots=True)
class PhaseSpec:
    """One registered phase."""

    id: str
    step: int
    canonical_key: str
    title: str
    prompt_builder: PromptBuilder
    schema: dict[str, Any]

    def build_prompt(self, document: Document) -> str:
        """Build the generation prompt for this phase from ``document``."""
        return self.prompt_builder(document)


class PhaseRegistry:
    """Lookup of phases by id or step number."""

    def __init__(self, specs: list[PhaseSpec]) -> None:
        self._by_id: dict[str, PhaseSpec] = {}
        self._by_step: dict[int, PhaseSpec] = {}
        for spec in specs:
            if spec.id in self._by_id:
                raise RegistryError(f"Duplicate phase id: {spec.id}")
            if spec.step in self._by_step:
                raise RegistryError(f"Duplicate phase step: {spec.step}")
            self._by_id[spec.id] = spec
            self._by_step[spec.step] = spec

    def lookup(self, phase_id: str | int) -> PhaseSpec:
        """Return the phase registered under ``phase_id``.

        Accepts the phase id, its step number, or the step as a digit string.

        Raises:
            UnknownPhaseError: If no phase matches.
        """
        if isinstance(phase_id, bool):
            raise UnknownPhaseError(phase_id)
        if isinstance(phase_id, int):
            spec = self._by_step.get(phase_id)
        elif isinstance(phase_id, str):
            key = phase_id.strip()
            spec = self._by_id.get(key)
            if spec is None and key.isdigit():
                spec = self._by_step.get(int(key))
        else:
            spec = None
        if spec is None:
            raise UnknownPhaseError(phase_id)
        return spec

    def __contains__(self, phase_id: object) -> bool:
        try:
            self.lookup(phase_id)  # type: ignore[arg-type]
        except UnknownPhaseError:
            return False
        return True

    def __iter__(self) -> Iterator[PhaseSpec]:
        return iter(self.phases())

    def __len__(self) -> int:
        return len(self._by_id)

    def phases(self) -> list[PhaseSpec]:
        """All phases in step order."""
        return [self._by_step[step] for step in sorted(self._by_step)]

    @classmethod
    def from_table(cls, data: Any) -> PhaseRegistry:
        """Build a registry from the parsed phase table.

        Raises:
            RegistryError: If the table is malformed or references an
                unknown branch, prompt builder or schema.
        """
        if not isinstance(data, dict) or not isinstance(data.get("phases"), list):
            raise RegistryError("Phase table must contain a 'phases' list")
        specs = [_parse_entry(entry) for entry in data["phases"]]
        logger.debug("Loaded %d phases", len(specs))
        return cls(specs)

    @classmethod
    def load(cls) -> PhaseRegistry:
        """Load the phase table bundled with the package."""
        resource = resources.files("strategist.phases").joinpath(PHASES_RESOURCE)
        try:
            data = yaml.safe_load(resource.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise RegistryError(f"Cannot read {PHASES_RESOURCE}: {e}") from e
        return cls.from_table(data)


def _parse_entry(entry: Any) -> PhaseSpec:
    if not isinstance(entry, dict):
        raise RegistryError(f"Phase entry must be a mapping, got {entry!r}")
    try:
        phase_id = str(entry["id"])
        step = int(entry["step"])
        canonical_key = str(entry["canonical_key"])
        prompt_name = str(entry["prompt"])
        schema_name = str(entry["schema"])
    except (KeyError, TypeError, ValueError) as e:
        raise RegistryError(f"Invalid phase entry {entry!r}: {e}") from e

    if canonical_key not in BRANCH_KEYS:
        raise RegistryError(f"Phase {phase_id}: unknown branch {canonical_key!r}")

    builder = getattr(prompts, prompt_name, None)
    if not callable(builder):
        raise RegistryError(f"Phase {phase_id}: unknown prompt builder {prompt_name!r}")

    schema = getattr(schemas, schema_name, None)
    if not isinstance(schema, dict):
        raise RegistryError(f"Phase {phase_id}: unknown schema {schema_name!r}")

    return PhaseSpec(
        id=phase_id,
        step=step,
        canonical_key=canonical_key,
        title=str(entry.get("title", phase_id)),
        prompt_builder=builder,
        schema=schema,
    )


_registry: PhaseRegistry | None = None


def get_registry() -> PhaseRegistry:
    """Return the process-wide registry, loading it on first use."""
    global _registry
    if _registry is None:
        _registry = PhaseRegistry.load()
    return _registry


def phases() -> list[PhaseSpec]:
    """All registered phases in step order."""
    return get_registry().phases()
