from __future__ import annotations

from strategist.models.bilingual import BilingualText
from strategist.models.document import Document
from strategist.models.foundation import (
    CoreValue,
    PlanContext,
    StrategicPillar,
    VisionFramework,
)
from strategist.normalize.foundation import normalize_context, normalize_vision
from strategist.normalize.identity import IdentityAssigner


class TestNormalizeContext:
    def test_full_reply(self, empty_document: Document, ids: IdentityAssigner) -> None:
        raw = {
            "name_en": "Digital Health",
            "name_ar": "الصحة الرقمية",
            "vision": "Healthier citizens",
            "start_year": "2025",
            "end_year": 2030,
            "budget_range": "100M",
            "target_sectors": "Health; Insurance",
            "suggested_themes": ["AI", "", "Telemedicine"],
            "vision_2030_programs": ["Health Sector Transformation"],
            "quick_stakeholders": ["Ministry", {"name_en": "Hospitals"}],
        }
        context = normalize_context(raw, empty_document, ids)
        assert context.name == BilingualText(en="Digital Health", ar="الصحة الرقمية")
        assert context.vision == BilingualText(en="Healthier citizens")
        assert context.start_year == 2025
        assert context.end_year == 2030
        assert context.budget_range == "100M"
        assert context.target_sectors == ("Health", "Insurance")
        assert context.strategic_themes == ("AI", "Telemedicine")
        assert context.national_programs == ("Health Sector Transformation",)
        assert context.quick_stakeholders == (
            BilingualText(en="Ministry"),
            BilingualText(en="Hospitals"),
        )

    def test_omitted_fields_keep_current(self, ids: IdentityAssigner) -> None:
        document = Document(
            context=PlanContext(
                name=BilingualText(en="Plan", ar="خطة"),
                end_year=2030,
                target_sectors=("Energy",),
            )
        )
        context = normalize_context({"name_en": "Renamed"}, document, ids)
        assert context.name == BilingualText(en="Renamed", ar="خطة")
        assert context.end_year == 2030
        assert context.target_sectors == ("Energy",)

    def test_unparsable_year_keeps_current(self, ids: IdentityAssigner) -> None:
        document = Document(context=PlanContext(end_year=2030))
        context = normalize_context({"end_year": "later"}, document, ids)
        assert context.end_year == 2030

    def test_non_positive_years_keep_current(self, ids: IdentityAssigner) -> None:
        document = Document(context=PlanContext(start_year=2025, end_year=2030))
        context = normalize_context(
            {"start_year": -1, "end_year": "-3"}, document, ids
        )
        assert context.start_year == 2025
        assert context.end_year == 2030

        context = normalize_context({"end_year": 0}, document, ids)
        assert context.end_year == 2030

    def test_blank_values_do_not_overwrite(self, ids: IdentityAssigner) -> None:
        document = Document(
            context=PlanContext(
                name=BilingualText(en="Plan", ar="خطة"),
                budget_range="50M",
            )
        )
        context = normalize_context(
            {"name_en": "", "name_ar": "  ", "budget_range": "   "}, document, ids
        )
        assert context.name == BilingualText(en="Plan", ar="خطة")
        assert context.budget_range == "50M"


class TestNormalizeVision:
    def test_values_and_pillars(
        self, empty_document: Document, ids: IdentityAssigner
    ) -> None:
        raw = {
            "core_values": [
                {"name_en": "Integrity", "description_en": "Act honestly"},
                "Agility",
            ],
            "strategic_pillars": [{"name": "People"}],
        }
        vision = normalize_vision(raw, empty_document, ids)
        assert vision.core_values == (
            CoreValue(
                id="t-cv-0",
                name=BilingualText(en="Integrity"),
                description=BilingualText(en="Act honestly"),
            ),
            CoreValue(id="t-cv-1", name=BilingualText(en="Agility")),
        )
        assert vision.strategic_pillars == (
            StrategicPillar(id="t-p-0", name=BilingualText(en="People")),
        )

    def test_empty_lists_keep_current(self, ids: IdentityAssigner) -> None:
        current = VisionFramework(
            core_values=(CoreValue(id="old", name=BilingualText(en="Trust")),)
        )
        document = Document(vision=current)
        vision = normalize_vision({"core_values": []}, document, ids)
        assert vision.core_values == current.core_values
