"""Advisory JSON schemas for the phase replies.

The schemas describe the reply shape requested from the generation
service. They are embedded in the instruction only; replies are never
validated against them, the normalizer tolerates anything.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from strategist.models.analysis import PESTEL_CATEGORIES, SWOT_CATEGORIES
from strategist.models.enums import (
    ActionType,
    ActivityStatus,
    AssumptionCategory,
    ChangePhase,
    CommitteeType,
    ConstraintType,
    DashboardType,
    DependencyStatus,
    DependencyType,
    EngagementLevel,
    Frequency,
    ImpactLevel,
    KpiCategory,
    Level,
    MessageType,
    MilestoneType,
    PhaseCategory,
    Priority,
    RaciArea,
    Readiness,
    ResistanceType,
    RiskCategory,
    RoleType,
    StakeholderType,
    Timeframe,
    TrainingCategory,
    TrainingType,
    Trend,
)
from strategist.models.planning import RESOURCE_GROUPS

Schema = dict[str, Any]

STRING: Schema = {"type": "string"}
INTEGER: Schema = {"type": "integer"}
NUMBER: Schema = {"type": "number"}
BOOLEAN: Schema = {"type": "boolean"}


def _enum(enum_cls: type[Enum]) -> Schema:
    return {"type": "string", "enum": [member.value for member in enum_cls]}


def _array(items: Schema) -> Schema:
    return {"type": "array", "items": items}


def _bilingual(*bases: str) -> Schema:
    """Properties ``{base}_en`` and ``{base}_ar`` for each base."""
    properties: Schema = {}
    for base in bases:
        properties[f"{base}_en"] = STRING
        properties[f"{base}_ar"] = STRING
    return properties


def _object(properties: Schema, required: list[str] | None = None) -> Schema:
    schema: Schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


STRING_LIST = _array(STRING)

CONTEXT_SCHEMA = _object(
    {
        **_bilingual(
            "name",
            "vision",
            "mission",
            "description",
            "key_challenges",
            "available_resources",
            "initial_constraints",
        ),
        "start_year": INTEGER,
        "end_year": INTEGER,
        "budget_range": STRING,
        "target_sectors": STRING_LIST,
        "strategic_themes": STRING_LIST,
        "focus_technologies": STRING_LIST,
        "vision_2030_programs": STRING_LIST,
        "target_regions": STRING_LIST,
        "innovation_focus": STRING,
        "strategic_rationale": STRING,
        "quick_stakeholders": _array(_object(_bilingual("name"))),
    },
    required=["name_en", "vision_en", "mission_en"],
)

_NAMED = _object(_bilingual("name", "description"), required=["name_en"])

VISION_SCHEMA = _object(
    {"core_values": _array(_NAMED), "strategic_pillars": _array(_NAMED)},
    required=["core_values", "strategic_pillars"],
)

STAKEHOLDERS_SCHEMA = _object(
    {
        "stakeholders": _array(
            _object(
                {
                    **_bilingual("name", "influence_strategy", "contact_person", "notes"),
                    "type": _enum(StakeholderType),
                    "power": _enum(Level),
                    "interest": _enum(Level),
                    "engagement_level": _enum(EngagementLevel),
                },
                required=["name_en", "type"],
            )
        ),
        **_bilingual("stakeholder_engagement_plan"),
    },
    required=["stakeholders"],
)

_PESTEL_FACTOR = _object(
    {
        **_bilingual("factor", "description", "implications"),
        "impact": _enum(Level),
        "trend": _enum(Trend),
        "timeframe": _enum(Timeframe),
        "recommendations": STRING_LIST,
    },
    required=["factor_en"],
)

PESTEL_SCHEMA = _object(
    {
        **{category: _array(_PESTEL_FACTOR) for category in PESTEL_CATEGORIES},
        "summary": _object(
            {
                "key_opportunities": STRING_LIST,
                "key_threats": STRING_LIST,
                "critical_success_factors": STRING_LIST,
                "priority_actions": STRING_LIST,
            }
        ),
    },
    required=list(PESTEL_CATEGORIES),
)

SWOT_SCHEMA = _object(
    {
        category: _array(
            _object(
                {**_bilingual("text"), "priority": _enum(Priority)},
                required=["text_en"],
            )
        )
        for category in SWOT_CATEGORIES
    },
    required=list(SWOT_CATEGORIES),
)

_SCENARIO = _object(
    {
        **_bilingual("description"),
        "assumptions": _array(_object(_bilingual("text"))),
        "outcomes": _array(_object({**_bilingual("metric"), "value": STRING})),
        "probability": NUMBER,
    }
)

SCENARIOS_SCHEMA = _object(
    {"best_case": _SCENARIO, "worst_case": _SCENARIO, "most_likely": _SCENARIO},
    required=["best_case", "worst_case", "most_likely"],
)

RISKS_SCHEMA = _object(
    {
        "risks": _array(
            _object(
                {
                    **_bilingual(
                        "title", "description", "mitigation_strategy", "contingency_plan"
                    ),
                    "category": _enum(RiskCategory),
                    "likelihood": _enum(Level),
                    "impact": _enum(Level),
                    "owner": STRING,
                },
                required=["title_en", "likelihood", "impact"],
            )
        )
    },
    required=["risks"],
)

DEPENDENCIES_SCHEMA = _object(
    {
        "dependencies": _array(
            _object(
                {
                    **_bilingual("name"),
                    "type": _enum(DependencyType),
                    "source": STRING,
                    "target": STRING,
                    "criticality": _enum(Level),
                    "status": _enum(DependencyStatus),
                    "notes": STRING,
                }
            )
        ),
        "constraints": _array(
            _object(
                {
                    **_bilingual("description", "mitigation"),
                    "type": _enum(ConstraintType),
                    "impact": _enum(Level),
                }
            )
        ),
        "assumptions": _array(
            _object(
                {
                    **_bilingual("statement", "validation_method"),
                    "category": _enum(AssumptionCategory),
                    "confidence": _enum(Level),
                }
            )
        ),
    }
)

OBJECTIVES_SCHEMA = _object(
    {
        "objectives": _array(
            _object(
                {
                    **_bilingual("name", "description"),
                    "sector_code": STRING,
                    "priority": _enum(Priority),
                },
                required=["name_en"],
            )
        )
    },
    required=["objectives"],
)

NATIONAL_SCHEMA = _object(
    {
        "alignments": _array(
            _object(
                {
                    "objective_index": INTEGER,
                    "goal_code": STRING,
                    "target_code": STRING,
                    "innovation_alignment": STRING,
                },
                required=["objective_index", "target_code"],
            )
        )
    },
    required=["alignments"],
)

KPIS_SCHEMA = _object(
    {
        "kpis": _array(
            _object(
                {
                    **_bilingual("name"),
                    "category": _enum(KpiCategory),
                    "objective_index": INTEGER,
                    "unit": STRING,
                    "baseline_value": STRING,
                    "target_value": STRING,
                    "target_year": INTEGER,
                    "frequency": _enum(Frequency),
                    "data_source": STRING,
                    "data_collection_method": STRING,
                    "owner": STRING,
                    "milestones": _array(
                        _object({"year": INTEGER, "target": STRING})
                    ),
                },
                required=["name_en", "target_value"],
            )
        )
    },
    required=["kpis"],
)

ACTIONS_SCHEMA = _object(
    {
        "action_plans": _array(
            _object(
                {
                    **_bilingual("name", "description", "success_criteria"),
                    "objective_index": INTEGER,
                    "type": _enum(ActionType),
                    "priority": _enum(Priority),
                    "budget_estimate": STRING,
                    "start_date": STRING,
                    "end_date": STRING,
                    "owner": STRING,
                    "deliverables": STRING_LIST,
                    "dependencies": STRING_LIST,
                    "innovation_impact": INTEGER,
                    "linked_risks": STRING_LIST,
                    "should_create_entity": BOOLEAN,
                },
                required=["name_en"],
            )
        )
    },
    required=["action_plans"],
)

_RESOURCE = _object(
    {
        **_bilingual("name", "justification", "notes"),
        "quantity": STRING,
        "cost": STRING,
        "category": STRING,
        "acquisition_phase": _enum(Timeframe),
        "priority": _enum(Priority),
    },
    required=["name_en"],
)

RESOURCES_SCHEMA = _object({group: _array(_RESOURCE) for group in RESOURCE_GROUPS})

TIMELINE_SCHEMA = _object(
    {
        "phases": _array(
            _object(
                {
                    **_bilingual(
                        "name", "description", "key_deliverables", "success_metrics"
                    ),
                    "category": _enum(PhaseCategory),
                    "start_date": STRING,
                    "end_date": STRING,
                    "objectives_covered": _array(INTEGER),
                    "budget_allocation": STRING,
                }
            )
        ),
        "milestones": _array(
            _object(
                {
                    **_bilingual("name", "description", "success_criteria"),
                    "date": STRING,
                    "type": _enum(MilestoneType),
                    "criticality": _enum(Level),
                    "linked_phase": INTEGER,
                }
            )
        ),
    },
    required=["phases", "milestones"],
)

GOVERNANCE_SCHEMA = _object(
    {
        "committees": _array(
            _object(
                {
                    **_bilingual("name", "chair_role", "responsibilities"),
                    "type": _enum(CommitteeType),
                    "members": STRING_LIST,
                    "meeting_frequency": STRING,
                }
            )
        ),
        "roles": _array(
            _object(
                {
                    **_bilingual("title", "department", "key_responsibilities", "reports_to"),
                    "type": _enum(RoleType),
                }
            )
        ),
        "dashboards": _array(
            _object(
                {
                    **_bilingual("name", "description", "key_metrics", "audience"),
                    "type": _enum(DashboardType),
                    "update_frequency": _enum(Frequency),
                }
            )
        ),
        "raci_matrix": _array(
            _object(
                {
                    **_bilingual("responsible", "accountable", "consulted", "informed"),
                    "area": _enum(RaciArea),
                }
            )
        ),
        "reporting_frequency": _enum(Frequency),
        "escalation_path": _array(
            _object(
                {**_bilingual("role", "timeframe", "description"), "level": INTEGER}
            )
        ),
    }
)

COMMUNICATION_SCHEMA = _object(
    {
        **_bilingual("master_narrative"),
        "target_audiences": _array(_object(_bilingual("name"))),
        "key_messages": _array(
            _object(
                {
                    **_bilingual("text"),
                    "type": _enum(MessageType),
                    "audience": STRING,
                    "channel": STRING,
                }
            )
        ),
        "internal_channels": STRING_LIST,
        "external_channels": STRING_LIST,
    },
    required=["master_narrative_en", "key_messages"],
)

CHANGE_SCHEMA = _object(
    {
        **_bilingual("readiness_assessment", "change_approach", "resistance_management"),
        "training_plan": _array(
            _object(
                {
                    **_bilingual("name", "target_audience", "duration", "timeline"),
                    "type": _enum(TrainingType),
                    "category": _enum(TrainingCategory),
                    "priority": _enum(Priority),
                }
            )
        ),
        "stakeholder_impacts": _array(
            _object(
                {
                    **_bilingual("group", "description", "support_needs"),
                    "impact_level": _enum(ImpactLevel),
                    "readiness": _enum(Readiness),
                }
            )
        ),
        "change_activities": _array(
            _object(
                {
                    **_bilingual("name"),
                    "phase": _enum(ChangePhase),
                    "owner": STRING,
                    "timeline": STRING,
                    "status": _enum(ActivityStatus),
                }
            )
        ),
        "resistance_strategies": _array(
            _object(
                {
                    **_bilingual("mitigation"),
                    "type": _enum(ResistanceType),
                    "owner": STRING,
                    "timeline": STRING,
                }
            )
        ),
    }
)
