"""Planning branches: objectives, national alignment, KPIs, actions, resources, timeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from strategist.models.bilingual import BilingualText
from strategist.models.enums import (
    ActionType,
    ActivityStatus,
    Frequency,
    KpiCategory,
    Level,
    MilestoneType,
    PhaseCategory,
    Priority,
    Timeframe,
)
from strategist.models.record import Record


@dataclass(frozen=True, slots=True)
class Objective(Record):
    """A strategic objective."""

    id: str = ""
    name: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    sector_code: str = ""
    priority: Priority = Priority.MEDIUM
    target_year: int | None = None


@dataclass(frozen=True, slots=True)
class NationalAlignment(Record):
    """Link between an objective (by position) and a national target."""

    id: str = ""
    key: str = ""
    objective_index: int | None = None
    goal_code: str = ""
    target_code: str = ""
    objective_name: str = ""
    innovation_alignment: str = ""


@dataclass(frozen=True, slots=True)
class KpiMilestone(Record):
    """Interim KPI target."""

    year: int | None = None
    target: str = ""


@dataclass(frozen=True, slots=True)
class Kpi(Record):
    """A key performance indicator."""

    id: str = ""
    name: BilingualText = BilingualText()
    category: KpiCategory = KpiCategory.OUTCOME
    objective_index: int | None = None
    unit: str = ""
    baseline_value: str = ""
    target_value: str = ""
    target_year: int | None = None
    frequency: Frequency = Frequency.QUARTERLY
    data_source: str = ""
    data_collection_method: str = ""
    owner: str = ""
    milestones: tuple[KpiMilestone, ...] = ()


@dataclass(frozen=True, slots=True)
class ActionPlan(Record):
    """An action plan item, optionally turned into a tracked entity."""

    id: str = ""
    name: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    objective_index: int | None = None
    type: ActionType = ActionType.CHALLENGE
    priority: Priority = Priority.MEDIUM
    budget_estimate: str = ""
    start_date: str = ""
    end_date: str = ""
    owner: str = ""
    deliverables: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    innovation_impact: int = 2
    success_criteria: BilingualText = BilingualText()
    linked_risks: tuple[str, ...] = ()
    should_create_entity: bool = False


@dataclass(frozen=True, slots=True)
class Resource(Record):
    """A resource requirement line."""

    id: str = ""
    name: BilingualText = BilingualText()
    quantity: str = "1"
    cost: str = ""
    category: str = ""
    acquisition_phase: Timeframe = Timeframe.SHORT_TERM
    priority: Priority = Priority.MEDIUM
    justification: BilingualText = BilingualText()
    notes: BilingualText = BilingualText()
    entity_allocations: tuple[dict[str, Any], ...] = ()


RESOURCE_GROUPS: dict[str, str] = {
    "hr_requirements": "hr",
    "technology_requirements": "tech",
    "infrastructure_requirements": "infra",
    "budget_allocation": "budget",
}


@dataclass(frozen=True, slots=True)
class ResourcePlan(Record):
    """Resource requirements grouped by kind."""

    hr_requirements: tuple[Resource, ...] = ()
    technology_requirements: tuple[Resource, ...] = ()
    infrastructure_requirements: tuple[Resource, ...] = ()
    budget_allocation: tuple[Resource, ...] = ()


@dataclass(frozen=True, slots=True)
class TimelinePhase(Record):
    """An implementation phase."""

    id: str = ""
    name: BilingualText = BilingualText()
    category: PhaseCategory = PhaseCategory.FOUNDATION
    description: BilingualText = BilingualText()
    start_date: str = ""
    end_date: str = ""
    objectives_covered: tuple[int, ...] = ()
    key_deliverables: BilingualText = BilingualText()
    success_metrics: BilingualText = BilingualText()
    budget_allocation: str = ""


@dataclass(frozen=True, slots=True)
class Milestone(Record):
    """A dated checkpoint, optionally tied to a phase by position."""

    id: str = ""
    name: BilingualText = BilingualText()
    date: str = ""
    type: MilestoneType = MilestoneType.MILESTONE
    status: ActivityStatus = ActivityStatus.PLANNED
    criticality: Level = Level.MEDIUM
    description: BilingualText = BilingualText()
    linked_phase: int | None = None
    success_criteria: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class Timeline(Record):
    """Implementation phases and milestones."""

    phases: tuple[TimelinePhase, ...] = ()
    milestones: tuple[Milestone, ...] = ()
