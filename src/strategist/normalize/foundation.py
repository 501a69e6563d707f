"""Normalizers for the context and vision phases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from strategist.models.document import Document
from strategist.models.foundation import (
    CoreValue,
    PlanContext,
    StrategicPillar,
    VisionFramework,
)
from strategist.normalize.fields import (
    bilingual,
    bilingual_list,
    entries,
    parse_int,
    pick_list,
    pick_text,
    pick_text_list,
)
from strategist.normalize.identity import IdentityAssigner


def _year(source: Mapping[str, Any], name: str, current: int | None) -> int | None:
    parsed = parse_int(source.get(name))
    return parsed if parsed is not None and parsed > 0 else current


def normalize_context(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> PlanContext:
    """Plan identity, duration and discovery inputs.

    Every field keeps its current value unless the reply supplies a usable
    replacement.
    """
    current = document.context
    quick_stakeholders = current.quick_stakeholders
    raw_quick = source.get("quick_stakeholders")
    if isinstance(raw_quick, list):
        quick_stakeholders = bilingual_list(raw_quick, "name")

    return PlanContext(
        name=bilingual(source, "name", fallback=current.name),
        vision=bilingual(source, "vision", fallback=current.vision),
        mission=bilingual(source, "mission", fallback=current.mission),
        description=bilingual(source, "description", fallback=current.description),
        start_year=_year(source, "start_year", current.start_year),
        end_year=_year(source, "end_year", current.end_year),
        budget_range=pick_text(source, "budget_range", default=current.budget_range),
        target_sectors=pick_text_list(
            source, "target_sectors", current=current.target_sectors
        ),
        strategic_themes=pick_text_list(
            source,
            "strategic_themes",
            "suggested_themes",
            current=current.strategic_themes,
        ),
        focus_technologies=pick_text_list(
            source,
            "focus_technologies",
            "suggested_technologies",
            current=current.focus_technologies,
        ),
        national_programs=pick_text_list(
            source,
            "vision_2030_programs",
            "suggested_vision_programs",
            "national_programs",
            current=current.national_programs,
        ),
        target_regions=pick_text_list(
            source, "target_regions", current=current.target_regions
        ),
        innovation_focus=pick_text(
            source, "innovation_focus", default=current.innovation_focus
        ),
        strategic_rationale=pick_text(
            source, "strategic_rationale", default=current.strategic_rationale
        ),
        quick_stakeholders=quick_stakeholders,
        key_challenges=bilingual(
            source, "key_challenges", fallback=current.key_challenges
        ),
        available_resources=bilingual(
            source, "available_resources", fallback=current.available_resources
        ),
        initial_constraints=bilingual(
            source, "initial_constraints", fallback=current.initial_constraints
        ),
    )


def normalize_vision(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> VisionFramework:
    """Core values and strategic pillars; each list only replaced when non-empty."""
    current = document.vision

    core_values = current.core_values
    raw_values = entries(pick_list(source, "core_values"), promote_to="name")
    if raw_values:
        core_values = tuple(
            CoreValue(
                id=ids.assign("cv", position),
                name=bilingual(item, "name"),
                description=bilingual(item, "description"),
            )
            for position, item in enumerate(raw_values)
        )

    pillars = current.strategic_pillars
    raw_pillars = entries(pick_list(source, "strategic_pillars"), promote_to="name")
    if raw_pillars:
        pillars = tuple(
            StrategicPillar(
                id=ids.assign("p", position),
                name=bilingual(item, "name"),
                description=bilingual(item, "description"),
            )
            for position, item in enumerate(raw_pillars)
        )

    return VisionFramework(core_values=core_values, strategic_pillars=pillars)
