"""Response normalization for generated phase replies."""
from __future__ import annotations

from strategist.normalize.identity import IdentityAssigner
from strategist.normalize.normalizer import NORMALIZERS, PhaseUpdate, normalize

__all__ = [
    "NORMALIZERS",
    "IdentityAssigner",
    "PhaseUpdate",
    "normalize",
]
