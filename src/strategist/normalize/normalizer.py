"""Turn a raw generated reply into an update for one document branch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from strategist.models.document import Document
from strategist.normalize.analysis import (
    normalize_dependencies,
    normalize_pestel,
    normalize_risks,
    normalize_scenarios,
    normalize_stakeholders,
    normalize_swot,
)
from strategist.normalize.fields import as_mapping
from strategist.normalize.foundation import normalize_context, normalize_vision
from strategist.normalize.identity import IdentityAssigner
from strategist.normalize.organization import (
    normalize_change,
    normalize_communication,
    normalize_governance,
)
from strategist.normalize.planning import (
    normalize_actions,
    normalize_kpis,
    normalize_national,
    normalize_objectives,
    normalize_resources,
    normalize_timeline,
)

if TYPE_CHECKING:
    from strategist.phases.registry import PhaseRegistry

logger = logging.getLogger(__name__)

PhaseNormalizer = Callable[[Mapping[str, Any], Document, IdentityAssigner], Any]

# Keyed by canonical branch key.
NORMALIZERS: dict[str, PhaseNormalizer] = {
    "context": normalize_context,
    "vision": normalize_vision,
    "stakeholders": normalize_stakeholders,
    "pestel": normalize_pestel,
    "swot": normalize_swot,
    "scenarios": normalize_scenarios,
    "risks": normalize_risks,
    "dependencies": normalize_dependencies,
    "objectives": normalize_objectives,
    "national_alignment": normalize_national,
    "kpis": normalize_kpis,
    "actions": normalize_actions,
    "resource_plan": normalize_resources,
    "timeline": normalize_timeline,
    "governance": normalize_governance,
    "communication_plan": normalize_communication,
    "change_management": normalize_change,
}


@dataclass(frozen=True, slots=True)
class PhaseUpdate:
    """Replacement value for the branch named by ``canonical_key``."""

    phase_id: str
    canonical_key: str
    update: Any


def _size(update: Any) -> str:
    if isinstance(update, tuple):
        return f"{len(update)} items"
    return type(update).__name__


def normalize(
    phase_id: str | int,
    raw_response: Any,
    document: Document,
    *,
    ids: IdentityAssigner | None = None,
    registry: PhaseRegistry | None = None,
) -> PhaseUpdate:
    """Normalize a raw reply for ``phase_id`` against ``document``.

    Neither input is mutated. A non-object reply is treated as empty.

    Args:
        phase_id: Phase id or step number.
        raw_response: Parsed JSON reply of the generation service.
        document: Current document; supplies values kept when the reply
            omits them and cross-branch lookups.
        ids: Identity assigner for new list items. A fresh one is created
            when omitted; pass a seeded one for reproducible output.
        registry: Phase registry; the process-wide one by default.

    Raises:
        UnknownPhaseError: If ``phase_id`` is not registered.
    """
    if registry is None:
        from strategist.phases.registry import get_registry

        registry = get_registry()
    spec = registry.lookup(phase_id)

    source = as_mapping(raw_response)
    if ids is None:
        ids = IdentityAssigner.fresh()

    update = NORMALIZERS[spec.canonical_key](source, document, ids)
    logger.info(
        "Normalized phase %s into %s (%s)", spec.id, spec.canonical_key, _size(update)
    )
    return PhaseUpdate(phase_id=spec.id, canonical_key=spec.canonical_key, update=update)
