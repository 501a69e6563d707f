"""Prompt builders for the seventeen planning phases.

Every builder takes the current document and returns the prompt text for
its phase. Builders are pure: the same document always yields the same
prompt.
"""
from __future__ import annotations

from enum import Enum

from strategist.models.bilingual import BilingualText
from strategist.models.document import Document
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

SYSTEM_PROMPT = """\
You are an expert strategic planning advisor for government entities.
You write every narrative field in both English and Arabic, using the
field names ending in _en and _ar. Output valid JSON only."""

BILINGUAL_RULES = """\
Rules:
- Provide every text field in English (_en) and Arabic (_ar)
- Use only the enumerated values listed for enumerated fields
- Output ONLY the JSON object, no markdown code blocks or other text"""


def _text(value: BilingualText, default: str = "Not yet defined") -> str:
    return value.en or value.ar or default


def _choices(enum_cls: type[Enum]) -> str:
    return ", ".join(str(member.value) for member in enum_cls)


def _items(values: tuple[str, ...], default: str = "General") -> str:
    return ", ".join(values) if values else default


def plan_summary(document: Document) -> str:
    """Shared context block describing the plan so far."""
    context = document.context
    years = ""
    if context.start_year or context.end_year:
        years = f"{context.start_year or '?'}-{context.end_year or '?'}"
    return f"""## Plan
Name: {_text(context.name, "Strategic Plan")}
Vision: {_text(context.vision)}
Mission: {_text(context.mission)}
Duration: {years or "Not yet defined"}
Target sectors: {_items(context.target_sectors)}
Strategic themes: {_items(context.strategic_themes)}
Focus technologies: {_items(context.focus_technologies)}
National programs: {_items(context.national_programs, "None")}"""


def _objective_lines(document: Document) -> str:
    if not document.objectives:
        return "No objectives defined yet."
    return "\n".join(
        f"[{index}] {_text(objective.name, 'Untitled')}"
        for index, objective in enumerate(document.objectives)
    )


def _compose(document: Document, task: str) -> str:
    return f"{plan_summary(document)}\n\n## Task\n{task}\n\n{BILINGUAL_RULES}"


# --- Foundation ---


def build_context_prompt(document: Document) -> str:
    return _compose(
        document,
        """\
Generate the strategic plan foundation:
- name, vision, mission and description
- start_year and end_year (integers), budget_range
- target_sectors, strategic_themes, focus_technologies and
  vision_2030_programs (arrays of strings), target_regions
- innovation_focus and strategic_rationale
- quick_stakeholders (array of {name_en, name_ar})
- key_challenges, available_resources and initial_constraints""",
    )


def build_vision_prompt(document: Document) -> str:
    return _compose(
        document,
        """\
Generate 4-6 core_values and 3-5 strategic_pillars.
Each entry has name_en, name_ar, description_en and description_ar.""",
    )


# --- Analysis ---


def build_stakeholders_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Identify 8-12 stakeholders. Each has name, type ({_choices(StakeholderType)}),
power and interest ({_choices(Level)}), engagement_level
({_choices(EngagementLevel)}), influence_strategy, contact_person and notes.
Also provide stakeholder_engagement_plan_en and stakeholder_engagement_plan_ar.""",
    )


def build_pestel_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Produce a PESTEL analysis with 3-4 factors in each of political, economic,
social, technological, environmental and legal. Each factor has factor,
description, impact ({_choices(Level)}), trend ({_choices(Trend)}),
timeframe ({_choices(Timeframe)}), implications and recommendations
(array of strings).
Add a summary with key_opportunities, key_threats, critical_success_factors
and priority_actions (arrays of strings).""",
    )


def build_swot_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Produce a SWOT analysis with 4-6 items in each of strengths, weaknesses,
opportunities and threats. Each item has text_en, text_ar and priority
({_choices(Priority)}).""",
    )


def build_scenarios_prompt(document: Document) -> str:
    return _compose(
        document,
        """\
Describe best_case, worst_case and most_likely scenarios. Each has
description, assumptions (array of {text_en, text_ar}), outcomes (array of
{metric_en, metric_ar, value}) and probability (0-100).""",
    )


def build_risks_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
List 8-12 risks. Each has title, description, category
({_choices(RiskCategory)}), likelihood and impact ({_choices(Level)}),
mitigation_strategy, contingency_plan and owner.""",
    )


def build_dependencies_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
List dependencies (name, type ({_choices(DependencyType)}), source, target,
criticality ({_choices(Level)}), status ({_choices(DependencyStatus)}),
notes), constraints (description, type ({_choices(ConstraintType)}),
impact ({_choices(Level)}), mitigation) and assumptions (statement,
category ({_choices(AssumptionCategory)}), confidence ({_choices(Level)}),
validation_method).""",
    )


# --- Planning ---


def build_objectives_prompt(document: Document) -> str:
    swot = document.swot
    strengths = "; ".join(_text(item.text, "") for item in swot.strengths[:5])
    return _compose(
        document,
        f"""\
Define 5-8 SMART strategic objectives. Each has name, description,
sector_code and priority ({_choices(Priority)}).
Build on these strengths: {strengths or "None recorded"}""",
    )


def build_national_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Align the objectives below with national goals and targets. Return
alignments, each with objective_index (integer position in the list),
goal_code, target_code and innovation_alignment.

Objectives:
{_objective_lines(document)}""",
    )


def build_kpis_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Define 2-3 KPIs per objective. Each has name, category
({_choices(KpiCategory)}), objective_index, unit, baseline_value,
target_value, target_year, frequency ({_choices(Frequency)}), data_source,
data_collection_method, owner and milestones (array of {{year, target}}).

Objectives:
{_objective_lines(document)}""",
    )


def build_actions_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Define action_plans, 1-3 per objective. Each has name, description,
objective_index, type ({_choices(ActionType)}), priority, budget_estimate,
start_date, end_date, owner, deliverables (array), dependencies (array),
innovation_impact (1-3), success_criteria, linked_risks (array) and
should_create_entity (boolean).

Objectives:
{_objective_lines(document)}""",
    )


def build_resources_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Plan resources in hr_requirements, technology_requirements,
infrastructure_requirements and budget_allocation. Each entry has name,
quantity, cost, category, acquisition_phase ({_choices(Timeframe)}),
priority, justification and notes.
There are {len(document.actions)} action plans to resource.""",
    )


def build_timeline_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Lay out implementation phases (name, category ({_choices(PhaseCategory)}),
description, start_date, end_date, objectives_covered (array of objective
indexes), key_deliverables, success_metrics, budget_allocation) and
milestones (name, date, type ({_choices(MilestoneType)}), criticality,
description, linked_phase (phase index), success_criteria).

Objectives:
{_objective_lines(document)}""",
    )


# --- Organization ---


def build_governance_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Design the governance structure:
- committees: name, type ({_choices(CommitteeType)}), chair_role,
  responsibilities, members, meeting_frequency
- roles: title, type ({_choices(RoleType)}), department,
  key_responsibilities, reports_to
- dashboards: name, type ({_choices(DashboardType)}), description,
  key_metrics, update_frequency, audience
- raci_matrix: area ({_choices(RaciArea)}), responsible, accountable,
  consulted, informed
- reporting_frequency ({_choices(Frequency)})
- escalation_path: array of {{level, role, timeframe, description}}""",
    )


def build_communication_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Write the communication plan: master_narrative, target_audiences (array of
{{name_en, name_ar}}), key_messages (text, type ({_choices(MessageType)}),
audience, channel), internal_channels and external_channels (arrays of
strings).""",
    )


def build_change_prompt(document: Document) -> str:
    return _compose(
        document,
        f"""\
Write the change management plan:
- readiness_assessment, change_approach, resistance_management
- training_plan: name, type ({_choices(TrainingType)}), category
  ({_choices(TrainingCategory)}), target_audience, duration, timeline,
  priority
- stakeholder_impacts: group, impact_level ({_choices(ImpactLevel)}),
  readiness ({_choices(Readiness)}), description, support_needs
- change_activities: phase ({_choices(ChangePhase)}), name, owner,
  timeline, status ({_choices(ActivityStatus)})
- resistance_strategies: type ({_choices(ResistanceType)}), mitigation,
  owner, timeline""",
    )
