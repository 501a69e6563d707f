from __future__ import annotations

import pytest

from strategist.errors import BranchTypeError, UnknownBranchError
from strategist.merge import apply, apply_update, changed_branches
from strategist.models.analysis import Risk, SwotAnalysis
from strategist.models.bilingual import BilingualText
from strategist.models.document import Document
from strategist.models.foundation import PlanContext
from strategist.models.planning import Objective
from strategist.normalize import PhaseUpdate


class TestApply:
    def test_replaces_one_branch(self) -> None:
        document = Document()
        risks = (Risk(id="r1"),)
        updated = apply(document, "risks", risks)
        assert updated.risks == risks
        assert document.risks == ()
        assert updated.context is document.context

    def test_object_branch(self) -> None:
        context = PlanContext(name=BilingualText(en="Plan"))
        assert apply(Document(), "context", context).context is context

    def test_empty_list_clears_branch(self) -> None:
        document = Document(risks=(Risk(id="r1"),))
        assert apply(document, "risks", ()).risks == ()

    def test_unknown_branch(self) -> None:
        with pytest.raises(UnknownBranchError, match="budget"):
            apply(Document(), "budget", ())

    def test_wrong_object_type(self) -> None:
        with pytest.raises(BranchTypeError):
            apply(Document(), "context", SwotAnalysis())

    def test_list_branch_requires_tuple(self) -> None:
        with pytest.raises(BranchTypeError, match="tuple"):
            apply(Document(), "risks", [Risk()])

    def test_list_branch_checks_items(self) -> None:
        with pytest.raises(BranchTypeError, match="Risk"):
            apply(Document(), "risks", (Objective(),))

    def test_errors_are_caller_errors(self) -> None:
        with pytest.raises(KeyError):
            apply(Document(), "nope", None)
        with pytest.raises(TypeError):
            apply(Document(), "kpis", "text")


class TestApplyUpdate:
    def test_uses_canonical_key(self) -> None:
        update = PhaseUpdate(phase_id="risks", canonical_key="risks", update=())
        assert apply_update(Document(), update) == Document()


class TestChangedBranches:
    def test_reports_changed_keys(self) -> None:
        before = Document()
        after = apply(before, "risks", (Risk(id="r1"),))
        assert changed_branches(before, after) == ["risks"]

    def test_equal_documents(self) -> None:
        assert changed_branches(Document(), Document()) == []
