from __future__ import annotations

from strategist.models.bilingual import BilingualText
from strategist.models.document import Document
from strategist.models.enums import (
    ActionType,
    Frequency,
    KpiCategory,
    MilestoneType,
    PhaseCategory,
    Priority,
    Timeframe,
)
from strategist.models.planning import (
    KpiMilestone,
    Milestone,
    Objective,
    Timeline,
    TimelinePhase,
)
from strategist.normalize.identity import IdentityAssigner
from strategist.normalize.planning import (
    normalize_actions,
    normalize_kpis,
    normalize_national,
    normalize_objectives,
    normalize_resources,
    normalize_timeline,
)


class TestObjectives:
    def test_target_year_inherits_end_year(
        self, planned_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "objectives": [
                {"title": "Grow exports", "priority": "high"},
                {"name_en": "Train staff", "target_year": "2028"},
            ]
        }
        first, second = normalize_objectives(raw, planned_document, ids)
        assert first.id == "t-obj-0"
        assert first.name == BilingualText(en="Grow exports")
        assert first.priority is Priority.HIGH
        assert first.target_year == 2030
        assert second.target_year == 2028

    def test_no_end_year(self, empty_document: Document, ids: IdentityAssigner) -> None:
        (objective,) = normalize_objectives({"objectives": ["A"]}, empty_document, ids)
        assert objective.target_year is None

    def test_non_positive_target_year_inherits_end_year(
        self, planned_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "objectives": [
                {"name": "A", "target_year": "-3"},
                {"name": "B", "target_year": -1},
                {"name": "C", "target_year": 0},
            ]
        }
        objectives = normalize_objectives(raw, planned_document, ids)
        assert [objective.target_year for objective in objectives] == [2030] * 3


class TestNationalAlignment:
    def test_objective_lookup(self, ids: IdentityAssigner) -> None:
        document = Document(
            objectives=(Objective(id="o1", name=BilingualText(en="Grow exports")),)
        )
        raw = {
            "alignments": [
                {"objective_index": 0, "goal_code": "G1", "target_code": "1.2"},
                {"objective_index": "5", "target_code": "3.1"},
                {"target_code": "4.4"},
            ]
        }
        first, second, third = normalize_national(raw, document, ids)
        assert first.key == "0-1.2"
        assert first.objective_name == "Grow exports"
        assert first.id == "t-nat-0"
        assert second.objective_index == 5
        assert second.objective_name == ""
        assert third.key == "-4.4"
        assert third.objective_index is None

    def test_alias_list_name(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {"national_alignments": [{"objective_index": 1, "target_code": "2"}]}
        (alignment,) = normalize_national(raw, empty_document, ids)
        assert alignment.key == "1-2"


class TestKpis:
    def test_years_and_aliases(
        self, planned_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "kpis": [
                {
                    "name_en": "Startups founded",
                    "category": "output",
                    "baseline": 10,
                    "target": "100",
                    "frequency": "annual",
                    "milestones": [{"year": 2027, "target": 40}, {"target": "100"}],
                }
            ]
        }
        (kpi,) = normalize_kpis(raw, planned_document, ids)
        assert kpi.id == "t-kpi-0"
        assert kpi.category is KpiCategory.OUTPUT
        assert kpi.baseline_value == "10"
        assert kpi.target_value == "100"
        assert kpi.target_year == 2030
        assert kpi.frequency is Frequency.ANNUAL
        assert kpi.milestones == (
            KpiMilestone(year=2027, target="40"),
            KpiMilestone(year=2030, target="100"),
        )

    def test_non_positive_years_inherit_end_year(
        self, planned_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "kpis": [
                {
                    "name": "A",
                    "target_year": -1,
                    "milestones": [{"year": "-3", "target": "5"}],
                }
            ]
        }
        (kpi,) = normalize_kpis(raw, planned_document, ids)
        assert kpi.target_year == 2030
        assert kpi.milestones == (KpiMilestone(year=2030, target="5"),)

    def test_defaults(self, empty_document: Document, ids: IdentityAssigner) -> None:
        (kpi,) = normalize_kpis({"kpis": [{"frequency": "hourly"}]}, empty_document, ids)
        assert kpi.category is KpiCategory.OUTCOME
        assert kpi.frequency is Frequency.QUARTERLY
        assert kpi.objective_index is None


class TestActions:
    def test_entries(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "action_plans": [
                {
                    "name_en": "Launch sandbox",
                    "type": "pilot",
                    "objective_index": "2",
                    "deliverables": "Charter; Platform",
                    "innovation_impact": "4",
                    "should_create_entity": "yes",
                }
            ]
        }
        (action,) = normalize_actions(raw, empty_document, ids)
        assert action.id == "t-act-0"
        assert action.type is ActionType.PILOT
        assert action.objective_index == 2
        assert action.deliverables == ("Charter", "Platform")
        assert action.innovation_impact == 4
        assert action.should_create_entity is True

    def test_alias_and_defaults(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        (action,) = normalize_actions({"actions": [{}]}, empty_document, ids)
        assert action.type is ActionType.CHALLENGE
        assert action.innovation_impact == 2
        assert action.should_create_entity is False


class TestResources:
    def test_groups(self, empty_document: Document, ids: IdentityAssigner) -> None:
        allocations = [{"entity": "Lab", "share": 60}]
        raw = {
            "hr_requirements": [
                {
                    "name_en": "Data scientists",
                    "quantity": 5,
                    "acquisition_phase": "medium term",
                    "notes": "Hire locally",
                    "entity_allocations": allocations,
                }
            ],
            "budget_allocation": ["Pilot fund"],
        }
        result = normalize_resources(raw, empty_document, ids)
        (hr,) = result.hr_requirements
        assert hr.id == "t-hr-0"
        assert hr.quantity == "5"
        assert hr.acquisition_phase is Timeframe.MEDIUM_TERM
        assert hr.justification == BilingualText(en="Hire locally")
        assert hr.entity_allocations == ({"entity": "Lab", "share": 60},)
        assert hr.entity_allocations[0] is not allocations[0]
        (budget,) = result.budget_allocation
        assert budget.id == "t-budget-0"
        assert budget.quantity == "1"
        assert result.technology_requirements == ()


class TestTimeline:
    def test_phases_and_milestones(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "phases": [
                {
                    "name_en": "Foundation",
                    "category": "foundation",
                    "objectives_covered": [0, "1", "x"],
                    "key_deliverables": ["Charter", "Team"],
                }
            ],
            "milestones": [{"name_en": "Go live", "type": "launch", "linked_phase": 0}],
        }
        result = normalize_timeline(raw, empty_document, ids)
        (phase,) = result.phases
        assert phase.id == "t-phase-0"
        assert phase.category is PhaseCategory.FOUNDATION
        assert phase.objectives_covered == (0, 1)
        assert phase.key_deliverables == BilingualText(en="Charter\nTeam")
        (milestone,) = result.milestones
        assert milestone.id == "t-ms-0"
        assert milestone.type is MilestoneType.LAUNCH
        assert milestone.linked_phase == 0

    def test_absent_lists_keep_current(self, ids: IdentityAssigner) -> None:
        current = Timeline(
            phases=(TimelinePhase(id="old-phase"),),
            milestones=(Milestone(id="old-ms"),),
        )
        result = normalize_timeline(
            {"milestones": []}, Document(timeline=current), ids
        )
        assert result.phases == current.phases
        assert result.milestones == ()
