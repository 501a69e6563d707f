"""Normalizers for objectives, national alignment, KPIs, actions, resources and timeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from strategist.models.document import Document
from strategist.models.enums import (
    ActionType,
    Frequency,
    KpiCategory,
    Level,
    MilestoneType,
    PhaseCategory,
    Priority,
    Timeframe,
)
from strategist.models.planning import (
    RESOURCE_GROUPS,
    ActionPlan,
    Kpi,
    KpiMilestone,
    Milestone,
    NationalAlignment,
    Objective,
    Resource,
    ResourcePlan,
    Timeline,
    TimelinePhase,
)
from strategist.normalize.fields import (
    bilingual,
    copy_objects,
    entries,
    enum_value,
    parse_flag,
    parse_int,
    pick_list,
    pick_text,
    text_list,
    text_of,
)
from strategist.normalize.identity import IdentityAssigner

logger = logging.getLogger(__name__)


def _inherited_year(value: Any, end_year: int | None) -> int | None:
    year = parse_int(value)
    return year if year is not None and year > 0 else end_year


# --- Objectives ---


def normalize_objectives(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> tuple[Objective, ...]:
    """Objectives; ``target_year`` defaults to the plan's end year."""
    raw = pick_list(source, "objectives")
    if raw is None:
        return document.objectives
    return tuple(
        Objective(
            id=ids.assign("obj", position),
            name=bilingual(item, "name", "title"),
            description=bilingual(item, "description"),
            sector_code=pick_text(item, "sector_code"),
            priority=enum_value(item.get("priority"), Priority, Priority.MEDIUM),
            target_year=_inherited_year(item.get("target_year"), document.end_year),
        )
        for position, item in enumerate(entries(raw, promote_to="name"))
    )


# --- National alignment ---


def _objective_name(document: Document, index: int | None) -> str:
    if index is None or index < 0 or index >= len(document.objectives):
        return ""
    return document.objectives[index].name.en


def normalize_national(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> tuple[NationalAlignment, ...]:
    """Objective-to-national-target links.

    ``objective_name`` is looked up by position in the current objectives.
    """
    raw = pick_list(source, "alignments", "national_alignments")
    if raw is None:
        return document.national_alignment

    alignments = []
    for position, item in enumerate(entries(raw)):
        index = parse_int(item.get("objective_index"))
        target_code = pick_text(item, "target_code")
        key_index = "" if index is None else str(index)
        alignments.append(
            NationalAlignment(
                id=ids.assign("nat", position),
                key=f"{key_index}-{target_code}",
                objective_index=index,
                goal_code=pick_text(item, "goal_code"),
                target_code=target_code,
                objective_name=_objective_name(document, index),
                innovation_alignment=pick_text(item, "innovation_alignment"),
            )
        )
    return tuple(alignments)


# --- KPIs ---


def _milestones(value: Any, end_year: int | None) -> tuple[KpiMilestone, ...]:
    return tuple(
        KpiMilestone(
            year=_inherited_year(item.get("year"), end_year),
            target=text_of(item.get("target")),
        )
        for item in entries(value)
    )


def normalize_kpis(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> tuple[Kpi, ...]:
    """KPIs; years missing from the reply inherit the plan's end year."""
    raw = pick_list(source, "kpis")
    if raw is None:
        return document.kpis
    end_year = document.end_year
    return tuple(
        Kpi(
            id=ids.assign("kpi", position),
            name=bilingual(item, "name"),
            category=enum_value(item.get("category"), KpiCategory, KpiCategory.OUTCOME),
            objective_index=parse_int(item.get("objective_index")),
            unit=pick_text(item, "unit"),
            baseline_value=pick_text(item, "baseline_value", "baseline"),
            target_value=pick_text(item, "target_value", "target"),
            target_year=_inherited_year(item.get("target_year"), end_year),
            frequency=enum_value(item.get("frequency"), Frequency, Frequency.QUARTERLY),
            data_source=pick_text(item, "data_source"),
            data_collection_method=pick_text(item, "data_collection_method"),
            owner=pick_text(item, "owner"),
            milestones=_milestones(item.get("milestones"), end_year),
        )
        for position, item in enumerate(entries(raw, promote_to="name"))
    )


# --- Actions ---


def _innovation_impact(value: Any) -> int:
    parsed = parse_int(value)
    return 2 if parsed is None else parsed


def normalize_actions(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> tuple[ActionPlan, ...]:
    raw = pick_list(source, "action_plans", "actions")
    if raw is None:
        return document.actions
    return tuple(
        ActionPlan(
            id=ids.assign("act", position),
            name=bilingual(item, "name"),
            description=bilingual(item, "description"),
            objective_index=parse_int(item.get("objective_index")),
            type=enum_value(item.get("type"), ActionType, ActionType.CHALLENGE),
            priority=enum_value(item.get("priority"), Priority, Priority.MEDIUM),
            budget_estimate=pick_text(item, "budget_estimate"),
            start_date=pick_text(item, "start_date"),
            end_date=pick_text(item, "end_date"),
            owner=pick_text(item, "owner"),
            deliverables=text_list(item.get("deliverables")),
            dependencies=text_list(item.get("dependencies")),
            innovation_impact=_innovation_impact(item.get("innovation_impact")),
            success_criteria=bilingual(item, "success_criteria"),
            linked_risks=text_list(item.get("linked_risks")),
            should_create_entity=parse_flag(item.get("should_create_entity")),
        )
        for position, item in enumerate(entries(raw, promote_to="name"))
    )


# --- Resources ---


def _resource(item: Mapping[str, Any], item_id: str) -> Resource:
    return Resource(
        id=item_id,
        name=bilingual(item, "name"),
        quantity=pick_text(item, "quantity", default="1"),
        cost=pick_text(item, "cost"),
        category=pick_text(item, "category"),
        acquisition_phase=enum_value(
            item.get("acquisition_phase"), Timeframe, Timeframe.SHORT_TERM
        ),
        priority=enum_value(item.get("priority"), Priority, Priority.MEDIUM),
        justification=bilingual(item, "justification", "notes"),
        notes=bilingual(item, "notes"),
        entity_allocations=copy_objects(item.get("entity_allocations")),
    )


def normalize_resources(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> ResourcePlan:
    """Four resource groups, each rebuilt from the reply."""
    groups = {
        group: tuple(
            _resource(item, ids.assign(tag, position))
            for position, item in enumerate(entries(source.get(group), promote_to="name"))
        )
        for group, tag in RESOURCE_GROUPS.items()
    }
    return ResourcePlan(**groups)


# --- Timeline ---


def _covered(value: Any) -> tuple[int, ...]:
    if not isinstance(value, list):
        return ()
    indexes = (parse_int(item) for item in value)
    return tuple(index for index in indexes if index is not None)


def normalize_timeline(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> Timeline:
    current = document.timeline

    phases = current.phases
    raw = pick_list(source, "phases")
    if raw is not None:
        phases = tuple(
            TimelinePhase(
                id=ids.assign("phase", position),
                name=bilingual(item, "name"),
                category=enum_value(
                    item.get("category"), PhaseCategory, PhaseCategory.FOUNDATION
                ),
                description=bilingual(item, "description"),
                start_date=pick_text(item, "start_date"),
                end_date=pick_text(item, "end_date"),
                objectives_covered=_covered(item.get("objectives_covered")),
                key_deliverables=bilingual(item, "key_deliverables", join=True),
                success_metrics=bilingual(item, "success_metrics", join=True),
                budget_allocation=pick_text(item, "budget_allocation"),
            )
            for position, item in enumerate(entries(raw, promote_to="name"))
        )

    milestones = current.milestones
    raw = pick_list(source, "milestones")
    if raw is not None:
        milestones = tuple(
            Milestone(
                id=ids.assign("ms", position),
                name=bilingual(item, "name"),
                date=pick_text(item, "date"),
                type=enum_value(item.get("type"), MilestoneType, MilestoneType.MILESTONE),
                criticality=enum_value(item.get("criticality"), Level, Level.MEDIUM),
                description=bilingual(item, "description"),
                linked_phase=parse_int(item.get("linked_phase")),
                success_criteria=bilingual(item, "success_criteria"),
            )
            for position, item in enumerate(entries(raw, promote_to="name"))
        )

    logger.debug(
        "Timeline resolved to %d phases and %d milestones", len(phases), len(milestones)
    )
    return Timeline(phases=phases, milestones=milestones)
