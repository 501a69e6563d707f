"""Phase registry for the planning wizard."""
from __future__ import annotations

from strategist.phases.registry import PhaseRegistry, PhaseSpec, get_registry, phases

__all__ = [
    "PhaseRegistry",
    "PhaseSpec",
    "get_registry",
    "phases",
]
