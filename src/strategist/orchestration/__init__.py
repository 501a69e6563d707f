"""Planning session orchestration."""
from __future__ import annotations

from strategist.orchestration.session import (
    Application,
    Generator,
    PlanningSession,
    Preview,
)

__all__ = [
    "Application",
    "Generator",
    "PlanningSession",
    "Preview",
]
