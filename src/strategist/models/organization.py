"""Organization branches: governance, communication and change management."""

from __future__ import annotations

from dataclasses import dataclass

from strategist.models.bilingual import BilingualText
from strategist.models.enums import (
    ActivityStatus,
    ChangePhase,
    CommitteeType,
    DashboardType,
    Frequency,
    ImpactLevel,
    MessageType,
    Priority,
    RaciArea,
    Readiness,
    ResistanceType,
    RoleType,
    TrainingCategory,
    TrainingType,
)
from strategist.models.record import Record

# --- Governance ---


@dataclass(frozen=True, slots=True)
class Committee(Record):
    """A governance committee."""

    id: str = ""
    name: BilingualText = BilingualText()
    type: CommitteeType = CommitteeType.STEERING
    chair_role: BilingualText = BilingualText()
    responsibilities: BilingualText = BilingualText()
    members: tuple[str, ...] = ()
    meeting_frequency: str = ""


@dataclass(frozen=True, slots=True)
class GovernanceRole(Record):
    """A named governance role."""

    id: str = ""
    title: BilingualText = BilingualText()
    type: RoleType = RoleType.MANAGEMENT
    department: BilingualText = BilingualText()
    key_responsibilities: BilingualText = BilingualText()
    reports_to: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class Dashboard(Record):
    """A monitoring dashboard."""

    id: str = ""
    name: BilingualText = BilingualText()
    type: DashboardType = DashboardType.EXECUTIVE
    description: BilingualText = BilingualText()
    key_metrics: BilingualText = BilingualText()
    update_frequency: Frequency = Frequency.WEEKLY
    audience: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class RaciEntry(Record):
    """Decision rights for one area."""

    id: str = ""
    area: RaciArea = RaciArea.STRATEGIC_DECISIONS
    responsible: BilingualText = BilingualText()
    accountable: BilingualText = BilingualText()
    consulted: BilingualText = BilingualText()
    informed: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class EscalationStep(Record):
    """One level of the escalation path."""

    id: str = ""
    level: int = 1
    role: BilingualText = BilingualText()
    timeframe: BilingualText = BilingualText()
    description: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class GovernanceStructure(Record):
    """Committees, roles, dashboards, RACI and escalation."""

    committees: tuple[Committee, ...] = ()
    roles: tuple[GovernanceRole, ...] = ()
    dashboards: tuple[Dashboard, ...] = ()
    raci_matrix: tuple[RaciEntry, ...] = ()
    reporting_frequency: Frequency = Frequency.MONTHLY
    escalation_path: tuple[EscalationStep, ...] = ()


# --- Communication ---


@dataclass(frozen=True, slots=True)
class KeyMessage(Record):
    """A key message for a given audience and channel."""

    id: str = ""
    text: BilingualText = BilingualText()
    type: MessageType = MessageType.ANNOUNCEMENT
    audience: str = ""
    channel: str = ""


@dataclass(frozen=True, slots=True)
class CommunicationPlan(Record):
    """Narrative, audiences, messages and channels."""

    master_narrative: BilingualText = BilingualText()
    target_audiences: tuple[BilingualText, ...] = ()
    key_messages: tuple[KeyMessage, ...] = ()
    internal_channels: tuple[str, ...] = ()
    external_channels: tuple[str, ...] = ()


# --- Change management ---


@dataclass(frozen=True, slots=True)
class TrainingItem(Record):
    """A training program within the change plan."""

    id: str = ""
    name: BilingualText = BilingualText()
    type: TrainingType = TrainingType.WORKSHOP
    category: TrainingCategory = TrainingCategory.TECHNICAL
    target_audience: BilingualText = BilingualText()
    duration: BilingualText = BilingualText()
    timeline: BilingualText = BilingualText()
    priority: Priority = Priority.MEDIUM


@dataclass(frozen=True, slots=True)
class StakeholderImpact(Record):
    """How a stakeholder group is affected by the change."""

    id: str = ""
    group: BilingualText = BilingualText()
    impact_level: ImpactLevel = ImpactLevel.MODERATE
    readiness: Readiness = Readiness.PREPARING
    description: BilingualText = BilingualText()
    support_needs: BilingualText = BilingualText()


@dataclass(frozen=True, slots=True)
class ChangeActivity(Record):
    """An ADKAR-staged change activity."""

    id: str = ""
    phase: ChangePhase = ChangePhase.AWARENESS
    name: BilingualText = BilingualText()
    owner: str = ""
    timeline: str = ""
    status: ActivityStatus = ActivityStatus.PLANNED


@dataclass(frozen=True, slots=True)
class ResistanceStrategy(Record):
    """A counter-measure for one source of resistance."""

    id: str = ""
    type: ResistanceType = ResistanceType.FEAR_UNKNOWN
    mitigation: BilingualText = BilingualText()
    owner: str = ""
    timeline: str = ""


@dataclass(frozen=True, slots=True)
class ChangeManagement(Record):
    """Readiness, approach, training and resistance handling."""

    readiness_assessment: BilingualText = BilingualText()
    change_approach: BilingualText = BilingualText()
    resistance_management: BilingualText = BilingualText()
    training_plan: tuple[TrainingItem, ...] = ()
    stakeholder_impacts: tuple[StakeholderImpact, ...] = ()
    change_activities: tuple[ChangeActivity, ...] = ()
    resistance_strategies: tuple[ResistanceStrategy, ...] = ()
