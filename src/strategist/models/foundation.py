"""Plan foundation branches: context and vision."""

from __future__ import annotations

from dataclasses import dataclass

from strategist.models.bilingual import BilingualText
from strategist.models.record import Record


@dataclass(frozen=True, slots=True)
class PlanContext(Record):
    """Identity, duration and discovery inputs of the plan."""

    name: BilingualText = BilingualText()
    vision: BilingualText = BilingualText()
    mission: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    start_year: int | None = None
    end_year: int | None = None
    budget_range: str = ""
    target_sectors: tuple[str, ...] = ()
    strategic_themes: tuple[str, ...] = ()
    focus_technologies: tuple[str, ...] = ()
    national_programs: tuple[str, ...] = ()
    target_regions: tuple[str, ...] = ()
    innovation_focus: str = ""
    strategic_rationale: str = ""
    quick_stakeholders: tuple[BilingualText, ...] = ()
    key_challenges: BilingualText = BilingualText()
    available_resources: BilingualText = BilingualText()
    initial_constraints: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class CoreValue(Record):
    """A core value of the organization."""

    id: str = ""
    name: BilingualText = BilingualText()
    description: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class StrategicPillar(Record):
    """A strategic pillar grouping objectives."""

    id: str = ""
    name: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    icon: str = "Target"


@dataclass(frozen=True, slots=True)
class VisionFramework(Record):
    """Core values and strategic pillars."""

    core_values: tuple[CoreValue, ...] = ()
    strategic_pillars: tuple[StrategicPillar, ...] = ()
