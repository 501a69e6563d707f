from __future__ import annotations

from strategist.normalize.identity import IdentityAssigner


class TestIdentityAssigner:
    def test_assign_format(self) -> None:
        ids = IdentityAssigner("abc")
        assert ids.assign("risk", 0) == "abc-risk-0"
        assert ids.assign("risk", 3) == "abc-risk-3"

    def test_integer_seed(self) -> None:
        assert IdentityAssigner(7).assign("kpi", 1) == "7-kpi-1"

    def test_same_seed_reproduces_ids(self) -> None:
        first = IdentityAssigner("s")
        second = IdentityAssigner("s")
        assert first.assign("obj", 2) == second.assign("obj", 2)

    def test_fresh_assigners_differ(self) -> None:
        seeds = {IdentityAssigner.fresh().seed for _ in range(50)}
        assert len(seeds) == 50

    def test_repr(self) -> None:
        assert repr(IdentityAssigner("x")) == "IdentityAssigner(seed='x')"
