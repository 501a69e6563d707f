"""Synthetic identities for list items introduced by a normalization pass."""

from __future__ import annotations

import itertools
import time

_pass_counter = itertools.count(1)


class IdentityAssigner:
    """Assigns ids of the form ``{seed}-{tag}-{position}``.

    The seed is captured once per normalization pass, so ids are unique
    within each list built during the pass. Separate passes are only as
    distinct as their seeds; pass an explicit seed for reproducible output.
    """

    def __init__(self, seed: str | int) -> None:
        self.seed = str(seed)

    @classmethod
    def fresh(cls) -> IdentityAssigner:
        """Create an assigner seeded from the clock and a process-wide counter."""
        return cls(f"{time.time_ns():x}{next(_pass_counter):04x}")

    def assign(self, tag: str, position: int) -> str:
        """Return the id for the item at ``position`` of the list tagged ``tag``."""
        return f"{self.seed}-{tag}-{position}"

    def __repr__(self) -> str:
        return f"IdentityAssigner(seed={self.seed!r})"
