"""Normalizers for the analysis phases.

Covers stakeholders, PESTEL, SWOT, scenarios, risks and dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from strategist.models.analysis import (
    PESTEL_CATEGORIES,
    SCENARIO_DEFAULT_PROBABILITY,
    SWOT_CATEGORIES,
    Assumption,
    Constraint,
    Dependency,
    DependencyRegister,
    PestelAnalysis,
    PestelFactor,
    PestelSummary,
    Risk,
    Scenario,
    ScenarioOutcome,
    ScenarioSet,
    Stakeholder,
    StakeholderMap,
    SwotAnalysis,
    SwotItem,
    compute_risk_score,
)
from strategist.models.document import Document
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
from strategist.normalize.fields import (
    as_mapping,
    bilingual,
    bilingual_list,
    entries,
    enum_value,
    parse_percentage,
    pick_list,
    pick_text,
    text_list,
    text_of,
)
from strategist.normalize.identity import IdentityAssigner

# --- Stakeholders ---


def _stakeholder(item: Mapping[str, Any], item_id: str) -> Stakeholder:
    return Stakeholder(
        id=item_id,
        name=bilingual(item, "name"),
        type=enum_value(item.get("type"), StakeholderType, StakeholderType.GOVERNMENT),
        power=enum_value(item.get("power"), Level, Level.MEDIUM),
        interest=enum_value(item.get("interest"), Level, Level.MEDIUM),
        engagement_level=enum_value(
            item.get("engagement_level"), EngagementLevel, EngagementLevel.CONSULT
        ),
        influence_strategy=bilingual(item, "influence_strategy"),
        contact_person=bilingual(item, "contact_person"),
        notes=bilingual(item, "notes"),
    )


def normalize_stakeholders(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> StakeholderMap:
    current = document.stakeholders
    stakeholders = current.stakeholders
    raw = pick_list(source, "stakeholders")
    if raw is not None:
        stakeholders = tuple(
            _stakeholder(item, ids.assign("sh", position))
            for position, item in enumerate(entries(raw, promote_to="name"))
        )
    return StakeholderMap(
        stakeholders=stakeholders,
        engagement_plan=bilingual(
            source, "stakeholder_engagement_plan", fallback=current.engagement_plan
        ),
    )


# --- PESTEL ---


def _pestel_factor(item: Mapping[str, Any], item_id: str) -> PestelFactor:
    return PestelFactor(
        id=item_id,
        factor=bilingual(item, "factor"),
        description=bilingual(item, "description"),
        impact=enum_value(item.get("impact"), Level, Level.MEDIUM),
        trend=enum_value(item.get("trend"), Trend, Trend.STABLE),
        timeframe=enum_value(item.get("timeframe"), Timeframe, Timeframe.MEDIUM_TERM),
        implications=bilingual(item, "implications"),
        recommendations=text_list(item.get("recommendations")),
    )


def normalize_pestel(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> PestelAnalysis:
    """Six PESTEL categories, each empty when absent from the reply."""
    categories = {
        category: tuple(
            _pestel_factor(item, ids.assign(category, position))
            for position, item in enumerate(
                entries(source.get(category), promote_to="factor")
            )
        )
        for category in PESTEL_CATEGORIES
    }

    summary = document.pestel.summary
    raw_summary = source.get("summary")
    if isinstance(raw_summary, Mapping):
        summary = PestelSummary(
            key_opportunities=text_list(raw_summary.get("key_opportunities")),
            key_threats=text_list(raw_summary.get("key_threats")),
            critical_success_factors=text_list(
                raw_summary.get("critical_success_factors")
            ),
            priority_actions=text_list(raw_summary.get("priority_actions")),
        )

    return PestelAnalysis(**categories, summary=summary)


# --- SWOT ---


def normalize_swot(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> SwotAnalysis:
    """Four SWOT categories; entries may be bare strings."""
    categories = {
        category: tuple(
            SwotItem(
                id=ids.assign(category, position),
                text=bilingual(item, "text"),
                priority=enum_value(item.get("priority"), Priority, Priority.MEDIUM),
            )
            for position, item in enumerate(
                entries(source.get(category), promote_to="text")
            )
        )
        for category in SWOT_CATEGORIES
    }
    return SwotAnalysis(**categories)


# --- Scenarios ---


def _scenario(raw: Any, fallback_probability: float) -> Scenario:
    item = as_mapping(raw)
    outcomes = tuple(
        ScenarioOutcome(
            metric=bilingual(outcome, "metric"),
            value=text_of(outcome.get("value")),
        )
        for outcome in entries(item.get("outcomes"), promote_to="metric")
    )
    return Scenario(
        description=bilingual(item, "description"),
        assumptions=bilingual_list(item.get("assumptions"), "text"),
        outcomes=outcomes,
        probability=parse_percentage(item.get("probability"), fallback_probability),
    )


def normalize_scenarios(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> ScenarioSet:
    """Best, worst and most likely scenarios with clamped probabilities."""
    return ScenarioSet(
        **{
            name: _scenario(source.get(name), fallback)
            for name, fallback in SCENARIO_DEFAULT_PROBABILITY.items()
        }
    )


# --- Risks ---


def _risk(item: Mapping[str, Any], item_id: str) -> Risk:
    likelihood = enum_value(item.get("likelihood"), Level, Level.MEDIUM)
    impact = enum_value(item.get("impact"), Level, Level.MEDIUM)
    return Risk(
        id=item_id,
        title=bilingual(item, "title"),
        description=bilingual(item, "description"),
        category=enum_value(item.get("category"), RiskCategory, RiskCategory.OPERATIONAL),
        likelihood=likelihood,
        impact=impact,
        # Never taken from the reply.
        risk_score=compute_risk_score(likelihood, impact),
        mitigation_strategy=bilingual(item, "mitigation_strategy", "mitigation"),
        contingency_plan=bilingual(item, "contingency_plan"),
        owner=pick_text(item, "owner"),
        status=RiskStatus.IDENTIFIED,
    )


def normalize_risks(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> tuple[Risk, ...]:
    raw = pick_list(source, "risks")
    if raw is None:
        return document.risks
    return tuple(
        _risk(item, ids.assign("risk", position))
        for position, item in enumerate(entries(raw, promote_to="title"))
    )


# --- Dependencies ---


def normalize_dependencies(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> DependencyRegister:
    """Dependencies, constraints and assumptions; absent lists are kept."""
    current = document.dependencies

    dependencies = current.dependencies
    raw = pick_list(source, "dependencies")
    if raw is not None:
        dependencies = tuple(
            Dependency(
                id=ids.assign("dep", position),
                name=bilingual(item, "name"),
                type=enum_value(item.get("type"), DependencyType, DependencyType.INTERNAL),
                source=pick_text(item, "source"),
                target=pick_text(item, "target"),
                criticality=enum_value(item.get("criticality"), Level, Level.MEDIUM),
                status=enum_value(
                    item.get("status"), DependencyStatus, DependencyStatus.PENDING
                ),
                notes=pick_text(item, "notes"),
            )
            for position, item in enumerate(entries(raw, promote_to="name"))
        )

    constraints = current.constraints
    raw = pick_list(source, "constraints")
    if raw is not None:
        constraints = tuple(
            Constraint(
                id=ids.assign("con", position),
                description=bilingual(item, "description"),
                type=enum_value(item.get("type"), ConstraintType, ConstraintType.RESOURCE),
                impact=enum_value(item.get("impact"), Level, Level.MEDIUM),
                mitigation=bilingual(item, "mitigation"),
            )
            for position, item in enumerate(entries(raw, promote_to="description"))
        )

    assumptions = current.assumptions
    raw = pick_list(source, "assumptions")
    if raw is not None:
        assumptions = tuple(
            Assumption(
                id=ids.assign("asm", position),
                statement=bilingual(item, "statement"),
                category=enum_value(
                    item.get("category"),
                    AssumptionCategory,
                    AssumptionCategory.OPERATIONAL,
                ),
                confidence=enum_value(item.get("confidence"), Level, Level.MEDIUM),
                validation_method=bilingual(item, "validation_method"),
            )
            for position, item in enumerate(entries(raw, promote_to="statement"))
        )

    return DependencyRegister(
        dependencies=dependencies,
        constraints=constraints,
        assumptions=assumptions,
    )
