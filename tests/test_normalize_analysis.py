from __future__ import annotations

from strategist.models.analysis import (
    Assumption,
    Constraint,
    DependencyRegister,
    PestelAnalysis,
    PestelSummary,
    Risk,
    Stakeholder,
    StakeholderMap,
)
from strategist.models.bilingual import BilingualText
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
    Trend,
)
from strategist.normalize.analysis import (
    normalize_dependencies,
    normalize_pestel,
    normalize_risks,
    normalize_scenarios,
    normalize_stakeholders,
    normalize_swot,
)
from strategist.normalize.identity import IdentityAssigner


class TestStakeholders:
    def test_entries(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "stakeholders": [
                {
                    "name_en": "Ministry of Health",
                    "type": "government",
                    "power": "High",
                    "interest": "unknown",
                    "engagement_level": "collaborate",
                },
                "Patients",
            ],
            "stakeholder_engagement_plan_en": "Quarterly forums",
        }
        result = normalize_stakeholders(raw, empty_document, ids)
        first, second = result.stakeholders
        assert first.id == "t-sh-0"
        assert first.type is StakeholderType.GOVERNMENT
        assert first.power is Level.HIGH
        assert first.interest is Level.MEDIUM
        assert first.engagement_level is EngagementLevel.COLLABORATE
        assert second == Stakeholder(id="t-sh-1", name=BilingualText(en="Patients"))
        assert result.engagement_plan == BilingualText(en="Quarterly forums")

    def test_absent_list_keeps_current(self, ids: IdentityAssigner) -> None:
        current = StakeholderMap(
            stakeholders=(Stakeholder(id="old"),),
            engagement_plan=BilingualText(en="Plan"),
        )
        result = normalize_stakeholders({}, Document(stakeholders=current), ids)
        assert result == current


class TestPestel:
    def test_categories(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "political": [{"factor_en": "New regulation", "trend": "growing"}],
            "economic": ["Oil prices"],
            "summary": {"key_threats": ["Talent gap"], "priority_actions": "A; B"},
        }
        result = normalize_pestel(raw, empty_document, ids)
        assert result.political[0].id == "t-political-0"
        assert result.political[0].trend is Trend.GROWING
        assert result.economic[0].factor == BilingualText(en="Oil prices")
        assert result.economic[0].id == "t-economic-0"
        assert result.social == ()
        assert result.summary == PestelSummary(
            key_threats=("Talent gap",), priority_actions=("A", "B")
        )

    def test_summary_kept_when_not_an_object(self, ids: IdentityAssigner) -> None:
        summary = PestelSummary(key_opportunities=("Growth",))
        document = Document(pestel=PestelAnalysis(summary=summary))
        result = normalize_pestel({"summary": "n/a"}, document, ids)
        assert result.summary == summary


class TestSwot:
    def test_strings_and_objects(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "strengths": ["Skilled staff", {"text_en": "Funding", "priority": "HIGH"}],
            "threats": "Competition",
        }
        result = normalize_swot(raw, empty_document, ids)
        assert [s.text.en for s in result.strengths] == ["Skilled staff", "Funding"]
        assert result.strengths[1].id == "t-strengths-1"
        assert result.strengths[1].priority is Priority.HIGH
        assert result.threats[0].text.en == "Competition"
        assert result.weaknesses == ()


class TestScenarios:
    def test_probabilities(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "best_case": {
                "description_en": "Rapid growth",
                "probability": "150%",
                "assumptions": ["Stable funding", {"text_ar": "دعم"}],
                "outcomes": [{"metric_en": "Jobs", "value": 5000}],
            },
            "worst_case": {"probability": "-5"},
            "most_likely": {"probability": "abc"},
        }
        result = normalize_scenarios(raw, empty_document, ids)
        assert result.best_case.probability == 100
        assert result.worst_case.probability == 0
        assert result.most_likely.probability == 60
        assert result.best_case.assumptions == (
            BilingualText(en="Stable funding"),
            BilingualText(ar="دعم"),
        )
        assert result.best_case.outcomes[0].value == "5000"

    def test_missing_scenarios_use_defaults(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        result = normalize_scenarios({}, empty_document, ids)
        assert result.best_case.probability == 20
        assert result.worst_case.probability == 20
        assert result.most_likely.probability == 60
        assert result.best_case.description.is_empty


class TestRisks:
    def test_score_is_derived(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "risks": [
                {
                    "title_en": "Data breach",
                    "category": "technology",
                    "likelihood": "high",
                    "impact": "medium",
                    "risk_score": 1,
                    "mitigation": "Encrypt data",
                    "status": "resolved",
                }
            ]
        }
        (risk,) = normalize_risks(raw, empty_document, ids)
        assert risk.id == "t-risk-0"
        assert risk.category is RiskCategory.TECHNOLOGY
        assert risk.risk_score == 6
        assert risk.mitigation_strategy == BilingualText(en="Encrypt data")
        assert risk.status is RiskStatus.IDENTIFIED

    def test_defaults(self, empty_document: Document, ids: IdentityAssigner) -> None:
        (risk,) = normalize_risks({"risks": [{}]}, empty_document, ids)
        assert risk.category is RiskCategory.OPERATIONAL
        assert risk.risk_score == 4

    def test_absent_list_keeps_current(self, ids: IdentityAssigner) -> None:
        document = Document(risks=(Risk(id="old"),))
        assert normalize_risks({"risks": None}, document, ids) == document.risks

    def test_empty_list_clears(self, ids: IdentityAssigner) -> None:
        document = Document(risks=(Risk(id="old"),))
        assert normalize_risks({"risks": []}, document, ids) == ()


class TestDependencies:
    def test_all_lists(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "dependencies": [
                {"name_en": "Cloud contract", "type": "External", "status": "blocked"}
            ],
            "constraints": ["Budget cap"],
            "assumptions": [{"statement_en": "Demand grows"}],
        }
        result = normalize_dependencies(raw, empty_document, ids)
        (dependency,) = result.dependencies
        assert dependency.id == "t-dep-0"
        assert dependency.type is DependencyType.EXTERNAL
        assert dependency.status is DependencyStatus.BLOCKED
        assert result.constraints == (
            Constraint(id="t-con-0", description=BilingualText(en="Budget cap")),
        )
        assert result.assumptions[0].id == "t-asm-0"

    def test_constraint_and_assumption_attributes(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "constraints": [
                {
                    "description_en": "Budget",
                    "type": "Regulatory",
                    "impact": "high",
                    "mitigation_en": "Phase spending",
                },
                {"description_en": "Staff", "type": "headcount", "impact": "huge"},
            ],
            "assumptions": [
                {
                    "statement_en": "Funding continues",
                    "category": "financial",
                    "confidence": "LOW",
                }
            ],
        }
        result = normalize_dependencies(raw, empty_document, ids)
        budget, staff = result.constraints
        assert budget.type is ConstraintType.REGULATORY
        assert budget.impact is Level.HIGH
        assert budget.mitigation == BilingualText(en="Phase spending")
        assert staff.type is ConstraintType.RESOURCE
        assert staff.impact is Level.MEDIUM
        assert result.assumptions == (
            Assumption(
                id="t-asm-0",
                statement=BilingualText(en="Funding continues"),
                category=AssumptionCategory.FINANCIAL,
                confidence=Level.LOW,
            ),
        )

    def test_attributes_survive_serialization(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "constraints": [
                {"description_en": "Budget", "type": "budget", "impact": "high"}
            ]
        }
        (constraint,) = normalize_dependencies(raw, empty_document, ids).constraints
        data = constraint.to_dict()
        assert data["type"] == "budget"
        assert data["impact"] == "high"
        assert Constraint.from_dict(data) == constraint

    def test_partial_reply_keeps_other_lists(self, ids: IdentityAssigner) -> None:
        current = DependencyRegister(
            constraints=(Constraint(id="old", description=BilingualText(en="Law")),)
        )
        result = normalize_dependencies(
            {"dependencies": []}, Document(dependencies=current), ids
        )
        assert result.dependencies == ()
        assert result.constraints == current.constraints
