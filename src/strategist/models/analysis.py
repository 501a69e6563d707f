"""Analysis branches: stakeholders, PESTEL, SWOT, scenarios, risks, dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from strategist.models.bilingual import BilingualText
from strategist.models.enums import (
    AssumptionCategory,
    ConstraintType,
    DependencyStatus,
    DependencyType,
    EngagementLevel,
    Level,
    Priority,
    RiskCategory,
    RiskStatus,
    StakeholderType,
    Timeframe,
    Trend,
)
from strategist.models.record import Record

# --- Stakeholders ---


@dataclass(frozen=True, slots=True)
class Stakeholder(Record):
    """A stakeholder on the power/interest grid."""

    id: str = ""
    name: BilingualText = BilingualText()
    type: StakeholderType = StakeholderType.GOVERNMENT
    power: Level = Level.MEDIUM
    interest: Level = Level.MEDIUM
    engagement_level: EngagementLevel = EngagementLevel.CONSULT
    influence_strategy: BilingualText = BilingualText()
    contact_person: BilingualText = BilingualText()
    notes: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class StakeholderMap(Record):
    """Stakeholder list plus the overall engagement plan."""

    stakeholders: tuple[Stakeholder, ...] = ()
    engagement_plan: BilingualText = BilingualText()


# --- PESTEL ---

PESTEL_CATEGORIES: tuple[str, ...] = (
    "political",
    "economic",
    "social",
    "technological",
    "environmental",
    "legal",
)


@dataclass(frozen=True, slots=True)
class PestelFactor(Record):
    """One external factor within a PESTEL category."""

    id: str = ""
    factor: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    impact: Level = Level.MEDIUM
    trend: Trend = Trend.STABLE
    timeframe: Timeframe = Timeframe.MEDIUM_TERM
    implications: BilingualText = BilingualText()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PestelSummary(Record):
    """Cross-category conclusions of the PESTEL analysis."""

    key_opportunities: tuple[str, ...] = ()
    key_threats: tuple[str, ...] = ()
    critical_success_factors: tuple[str, ...] = ()
    priority_actions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PestelAnalysis(Record):
    """Six-category PESTEL breakdown."""

    political: tuple[PestelFactor, ...] = ()
    economic: tuple[PestelFactor, ...] = ()
    social: tuple[PestelFactor, ...] = ()
    technological: tuple[PestelFactor, ...] = ()
    environmental: tuple[PestelFactor, ...] = ()
    legal: tuple[PestelFactor, ...] = ()
    summary: PestelSummary | None = None


# --- SWOT ---

SWOT_CATEGORIES: tuple[str, ...] = ("strengths", "weaknesses", "opportunities", "threats")


@dataclass(frozen=True, slots=True)
class SwotItem(Record):
    """A single SWOT entry."""

    id: str = ""
    text: BilingualText = BilingualText()
    priority: Priority = Priority.MEDIUM


@dataclass(frozen=True, slots=True)
class SwotAnalysis(Record):
    """Four-category SWOT breakdown."""

    strengths: tuple[SwotItem, ...] = ()
    weaknesses: tuple[SwotItem, ...] = ()
    opportunities: tuple[SwotItem, ...] = ()
    threats: tuple[SwotItem, ...] = ()


# --- Scenarios ---

# Probability used when a scenario carries no usable value.
SCENARIO_DEFAULT_PROBABILITY: dict[str, float] = {
    "best_case": 20,
    "worst_case": 20,
    "most_likely": 60,
}


@dataclass(frozen=True, slots=True)
class ScenarioOutcome(Record):
    """Expected metric value under a scenario."""

    metric: BilingualText = BilingualText()
    value: str = ""


@dataclass(frozen=True, slots=True)
class Scenario(Record):
    """A named planning scenario."""

    description: BilingualText = BilingualText()
    assumptions: tuple[BilingualText, ...] = ()
    outcomes: tuple[ScenarioOutcome, ...] = ()
    probability: float = 0


@dataclass(frozen=True, slots=True)
class ScenarioSet(Record):
    """Best, worst and most likely scenarios."""

    best_case: Scenario = Scenario(probability=20)
    worst_case: Scenario = Scenario(probability=20)
    most_likely: Scenario = Scenario(probability=60)


# --- Risks ---


@dataclass(frozen=True, slots=True)
class Risk(Record):
    """A register entry; ``risk_score`` is derived from likelihood and impact."""

    id: str = ""
    title: BilingualText = BilingualText()
    description: BilingualText = BilingualText()
    category: RiskCategory = RiskCategory.OPERATIONAL
    likelihood: Level = Level.MEDIUM
    impact: Level = Level.MEDIUM
    risk_score: int = 4
    mitigation_strategy: BilingualText = BilingualText()
    contingency_plan: BilingualText = BilingualText()
    owner: str = ""
    status: RiskStatus = RiskStatus.IDENTIFIED


def compute_risk_score(likelihood: Level, impact: Level) -> int:
    """Composite score on a 1-9 scale."""
    return likelihood.ordinal * impact.ordinal


# --- Dependencies ---


@dataclass(frozen=True, slots=True)
class Dependency(Record):
    """Something the plan relies on."""

    id: str = ""
    name: BilingualText = BilingualText()
    type: DependencyType = DependencyType.INTERNAL
    source: str = ""
    target: str = ""
    criticality: Level = Level.MEDIUM
    status: DependencyStatus = DependencyStatus.PENDING
    notes: str = ""


@dataclass(frozen=True, slots=True)
class Constraint(Record):
    """A limiting condition and how to work around it."""

    id: str = ""
    description: BilingualText = BilingualText()
    type: ConstraintType = ConstraintType.RESOURCE
    impact: Level = Level.MEDIUM
    mitigation: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class Assumption(Record):
    """A planning assumption and how it will be validated."""

    id: str = ""
    statement: BilingualText = BilingualText()
    category: AssumptionCategory = AssumptionCategory.OPERATIONAL
    confidence: Level = Level.MEDIUM
    validation_method: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class DependencyRegister(Record):
    """Dependencies, constraints and assumptions."""

    dependencies: tuple[Dependency, ...] = ()
    constraints: tuple[Constraint, ...] = ()
    assumptions: tuple[Assumption, ...] = ()
