"""Planning session - drives phases through generate, normalize and apply.

The session owns the current document and is the only place it is
replaced. Generation is optional: replies obtained elsewhere can be
ingested directly, and ``preview`` computes the result of a reply without
committing it so a regenerated phase can be compared and discarded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from strategist.merge import apply_update, changed_branches
from strategist.models.document import Document
from strategist.normalize.identity import IdentityAssigner
from strategist.normalize.normalizer import PhaseUpdate, normalize
from strategist.phases.registry import PhaseRegistry, get_registry

logger = logging.getLogger(__name__)


class Generator(Protocol):
    """Anything that turns a prompt into a raw JSON reply."""

    def generate(self, prompt: str, schema: dict[str, Any] | None = None) -> Any: ...


@dataclass(frozen=True, slots=True)
class Application:
    """Record of one committed phase update."""

    phase_id: str
    canonical_key: str


@dataclass(frozen=True, slots=True)
class Preview:
    """Uncommitted result of normalizing a reply."""

    update: PhaseUpdate
    document: Document
    changed: list[str]


class PlanningSession:
    """Holds the planning document across phase runs."""

    def __init__(
        self,
        document: Document | None = None,
        client: Generator | None = None,
        registry: PhaseRegistry | None = None,
    ) -> None:
        self._document = document if document is not None else Document()
        self._client = client
        self._registry = registry or get_registry()
        self._history: list[Application] = []

    @property
    def document(self) -> Document:
        """The current document."""
        return self._document

    @property
    def history(self) -> list[Application]:
        """Committed applications, oldest first."""
        return list(self._history)

    @property
    def client(self) -> Generator:
        """Generation client, created on first use."""
        if self._client is None:
            from strategist.llm.client import GenerationClient

            self._client = GenerationClient()
        return self._client

    def generate(self, phase_id: str | int) -> Any:
        """Produce a raw reply for a phase from the current document.

        Raises:
            UnknownPhaseError: If the phase is not registered.
            GenerationError: If generation fails.
        """
        spec = self._registry.lookup(phase_id)
        prompt = spec.build_prompt(self._document)
        logger.info("Generating phase %s (step %d)", spec.id, spec.step)
        return self.client.generate(prompt, spec.schema)

    def preview(
        self,
        phase_id: str | int,
        raw_response: Any,
        *,
        ids: IdentityAssigner | None = None,
    ) -> Preview:
        """Normalize and apply a reply without committing the result."""
        update = normalize(
            phase_id, raw_response, self._document, ids=ids, registry=self._registry
        )
        document = apply_update(self._document, update)
        return Preview(
            update=update,
            document=document,
            changed=changed_branches(self._document, document),
        )

    def ingest(
        self,
        phase_id: str | int,
        raw_response: Any,
        *,
        ids: IdentityAssigner | None = None,
    ) -> Document:
        """Normalize and apply a reply, committing the new document."""
        return self.commit(self.preview(phase_id, raw_response, ids=ids))

    def commit(self, preview: Preview) -> Document:
        """Make a previewed document current."""
        self._document = preview.document
        self._history.append(
            Application(
                phase_id=preview.update.phase_id,
                canonical_key=preview.update.canonical_key,
            )
        )
        logger.info(
            "Committed phase %s (changed: %s)",
            preview.update.phase_id,
            ", ".join(preview.changed) or "nothing",
        )
        return self._document

    def run_phase(
        self,
        phase_id: str | int,
        *,
        ids: IdentityAssigner | None = None,
    ) -> Document:
        """Generate, normalize and apply one phase."""
        raw_response = self.generate(phase_id)
        return self.ingest(phase_id, raw_response, ids=ids)
