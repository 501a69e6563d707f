"""Closed value sets for enumerated plan fields.

Each enum lists every value the planning document may hold. The normalizer
maps anything else to the documented default of the field it fills.
"""

from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Ordinal low/medium/high scale (impact, likelihood, power, ...)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def ordinal(self) -> int:
        """Position on the scale, used for derived scores."""
        return {"low": 1, "medium": 2, "high": 3}[self.value]


class Priority(Enum):
    """Priority of an item."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class StakeholderType(Enum):
    """Stakeholder taxonomy."""

    GOVERNMENT = "GOVERNMENT"
    PRIVATE_SECTOR = "PRIVATE_SECTOR"
    ACADEMIC = "ACADEMIC"
    NGO = "NGO"
    CITIZENS = "CITIZENS"
    INTERNATIONAL = "INTERNATIONAL"


class EngagementLevel(Enum):
    """Stakeholder engagement spectrum."""

    INFORM = "inform"
    CONSULT = "consult"
    INVOLVE = "involve"
    COLLABORATE = "collaborate"
    EMPOWER = "empower"


class Trend(Enum):
    """Direction of a PESTEL factor."""

    GROWING = "growing"
    STABLE = "stable"
    DECLINING = "declining"


class Timeframe(Enum):
    """Planning horizon."""

    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


class RiskCategory(Enum):
    """Risk register categories."""

    STRATEGIC = "STRATEGIC"
    OPERATIONAL = "OPERATIONAL"
    FINANCIAL = "FINANCIAL"
    COMPLIANCE = "COMPLIANCE"
    REPUTATIONAL = "REPUTATIONAL"
    TECHNOLOGY = "TECHNOLOGY"
    POLITICAL = "POLITICAL"
    ENVIRONMENTAL = "ENVIRONMENTAL"


class RiskStatus(Enum):
    """Lifecycle of a risk."""

    IDENTIFIED = "identified"
    ANALYZING = "analyzing"
    MITIGATING = "mitigating"
    ACCEPTED = "accepted"
    RESOLVED = "resolved"


class DependencyType(Enum):
    """Where a dependency originates."""

    INTERNAL = "internal"
    EXTERNAL = "external"


class DependencyStatus(Enum):
    """Resolution state of a dependency."""

    PENDING = "pending"
    RESOLVED = "resolved"
    BLOCKED = "blocked"


class ConstraintType(Enum):
    """Kind of limit a constraint places on the plan."""

    BUDGET = "budget"
    TIME = "time"
    RESOURCE = "resource"
    REGULATORY = "regulatory"
    TECHNICAL = "technical"


class AssumptionCategory(Enum):
    """Area a planning assumption is about."""

    OPERATIONAL = "operational"
    FINANCIAL = "financial"
    MARKET = "market"
    STAKEHOLDER = "stakeholder"
    REGULATORY = "regulatory"


class KpiCategory(Enum):
    """Position of a KPI in the results chain."""

    INPUT = "input"
    PROCESS = "process"
    OUTPUT = "output"
    OUTCOME = "outcome"
    IMPACT = "impact"


class Frequency(Enum):
    """Reporting or measurement cadence."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class ActionType(Enum):
    """Kind of entity an action plan turns into."""

    CHALLENGE = "challenge"
    INITIATIVE = "initiative"
    PROGRAM = "program"
    PROJECT = "project"
    PILOT = "pilot"


class PhaseCategory(Enum):
    """Implementation stage of a timeline phase."""

    FOUNDATION = "foundation"
    ACCELERATION = "acceleration"
    SCALE = "scale"
    SUSTAIN = "sustain"


class MilestoneType(Enum):
    """Kind of timeline milestone."""

    MILESTONE = "milestone"
    LAUNCH = "launch"
    REVIEW = "review"
    GATE = "gate"
    DELIVERABLE = "deliverable"


class CommitteeType(Enum):
    """Governance committee kinds."""

    STEERING = "steering"
    EXECUTIVE = "executive"
    TECHNICAL = "technical"
    ADVISORY = "advisory"
    WORKING_GROUP = "working_group"


class RoleType(Enum):
    """Governance role kinds."""

    EXECUTIVE = "executive"
    MANAGEMENT = "management"
    OPERATIONAL = "operational"
    ADVISORY = "advisory"


class DashboardType(Enum):
    """Audience tier of a dashboard."""

    EXECUTIVE = "executive"
    OPERATIONAL = "operational"
    ANALYTICAL = "analytical"
    PUBLIC = "public"


class RaciArea(Enum):
    """Decision areas covered by the RACI matrix."""

    STRATEGIC_DECISIONS = "strategic_decisions"
    BUDGET_APPROVAL = "budget_approval"
    RESOURCE_ALLOCATION = "resource_allocation"
    PERFORMANCE_REVIEW = "performance_review"
    RISK_MANAGEMENT = "risk_management"
    STAKEHOLDER_COMMUNICATION = "stakeholder_communication"


class MessageType(Enum):
    """Kind of key communication message."""

    ANNOUNCEMENT = "announcement"
    UPDATE = "update"
    SUCCESS_STORY = "success_story"
    CALL_TO_ACTION = "call_to_action"


class TrainingType(Enum):
    """Delivery format of a training item."""

    WORKSHOP = "workshop"
    ELEARNING = "elearning"
    COACHING = "coaching"
    CERTIFICATION = "certification"
    ONTHEJOB = "onthejob"
    MENTORING = "mentoring"


class TrainingCategory(Enum):
    """Skill area of a training item."""

    TECHNICAL = "technical"
    LEADERSHIP = "leadership"
    PROCESS = "process"
    SOFT = "soft"
    COMPLIANCE = "compliance"
    CULTURE = "culture"


class ImpactLevel(Enum):
    """How strongly a group is affected by the change."""

    TRANSFORMATIONAL = "transformational"
    SIGNIFICANT = "significant"
    MODERATE = "moderate"
    MINOR = "minor"
    MINIMAL = "minimal"


class Readiness(Enum):
    """Change readiness of a stakeholder group."""

    READY = "ready"
    PREPARING = "preparing"
    AT_RISK = "at_risk"
    NOT_READY = "not_ready"


class ChangePhase(Enum):
    """ADKAR stage of a change activity."""

    AWARENESS = "awareness"
    DESIRE = "desire"
    KNOWLEDGE = "knowledge"
    ABILITY = "ability"
    REINFORCEMENT = "reinforcement"


class ActivityStatus(Enum):
    """Progress of a change activity."""

    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ResistanceType(Enum):
    """Root cause of resistance to change."""

    FEAR_UNKNOWN = "fear_unknown"
    LOSS_CONTROL = "loss_control"
    SKILL_GAPS = "skill_gaps"
    PAST_FAILURES = "past_failures"
    POOR_COMMUNICATION = "poor_communication"
    LACK_TRUST = "lack_trust"
