"""The canonical strategic-plan document.

The document is an immutable aggregate with one branch per phase. It is
created empty at session start and only ever replaced, branch by branch,
through normalize/apply cycles. Snapshots carry a schema header so that
persisted documents can be validated when read back.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Self

from strategist.errors import DocumentFormatError
from strategist.models.analysis import (
    DependencyRegister,
    PestelAnalysis,
    Risk,
    ScenarioSet,
    StakeholderMap,
    SwotAnalysis,
)
from strategist.models.foundation import PlanContext, VisionFramework
from strategist.models.organization import (
    ChangeManagement,
    CommunicationPlan,
    GovernanceStructure,
)
from strategist.models.planning import (
    ActionPlan,
    Kpi,
    NationalAlignment,
    Objective,
    ResourcePlan,
    Timeline,
)
from strategist.models.record import Record

logger = logging.getLogger(__name__)

SCHEMA_TYPE = "strategic_plan"
SCHEMA_VERSION = "1.0"


@dataclass(frozen=True, slots=True)
class Document(Record):
    """Aggregate root of the strategic plan, addressed by branch key."""

    context: PlanContext = PlanContext()
    vision: VisionFramework = VisionFramework()
    stakeholders: StakeholderMap = StakeholderMap()
    pestel: PestelAnalysis = PestelAnalysis()
    swot: SwotAnalysis = SwotAnalysis()
    scenarios: ScenarioSet = ScenarioSet()
    risks: tuple[Risk, ...] = ()
    dependencies: DependencyRegister = DependencyRegister()
    objectives: tuple[Objective, ...] = ()
    national_alignment: tuple[NationalAlignment, ...] = ()
    kpis: tuple[Kpi, ...] = ()
    actions: tuple[ActionPlan, ...] = ()
    resource_plan: ResourcePlan = ResourcePlan()
    timeline: Timeline = Timeline()
    governance: GovernanceStructure = GovernanceStructure()
    communication_plan: CommunicationPlan = CommunicationPlan()
    change_management: ChangeManagement = ChangeManagement()

    @property
    def end_year(self) -> int | None:
        """Plan end year, inherited by KPI and objective targets."""
        return self.context.end_year

    def branch(self, key: str) -> Any:
        """Return the value of one branch."""
        return getattr(self, key)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a snapshot dictionary with schema header."""
        return {
            "_schema": SCHEMA_TYPE,
            "_version": SCHEMA_VERSION,
            **Record.to_dict(self),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from a snapshot dictionary.

        Snapshots without schema fields are read as legacy documents.

        Raises:
            DocumentFormatError: If the snapshot has the wrong schema type.
        """
        schema_type = data.get("_schema")
        if schema_type is not None and schema_type != SCHEMA_TYPE:
            raise DocumentFormatError(
                "snapshot", f"Expected schema '{SCHEMA_TYPE}', got '{schema_type}'"
            )
        if schema_type is None:
            logger.debug("Legacy document snapshot (no schema fields)")
        body = {k: v for k, v in data.items() if not k.startswith("_")}
        return super(Document, cls).from_dict(body)


BRANCH_KEYS: tuple[str, ...] = tuple(f.name for f in fields(Document))


def load_document(path: Path) -> Document:
    """Read a document snapshot from a JSON file.

    A missing file yields an empty document.

    Raises:
        DocumentFormatError: If the file is not a valid snapshot.
    """
    if not path.exists():
        logger.info("No document at %s, starting empty", path)
        return Document()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        raise DocumentFormatError(path, str(e)) from e
    if not isinstance(data, dict):
        raise DocumentFormatError(path, "top-level value must be an object")
    try:
        return Document.from_dict(data)
    except DocumentFormatError as e:
        raise DocumentFormatError(path, e.reason) from e
    except (TypeError, ValueError) as e:
        raise DocumentFormatError(path, str(e)) from e


def save_document(document: Document, path: Path) -> None:
    """Write a document snapshot atomically (temp file, then rename)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document.to_dict(), f, ensure_ascii=False, indent=2)
        temp_path.replace(path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise
    logger.info("Saved document to %s", path)
