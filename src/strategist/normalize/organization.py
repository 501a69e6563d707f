"""Normalizers for governance, communication and change management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from strategist.models.document import Document
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
from strategist.models.organization import (
    ChangeActivity,
    ChangeManagement,
    Committee,
    CommunicationPlan,
    Dashboard,
    EscalationStep,
    GovernanceRole,
    GovernanceStructure,
    KeyMessage,
    RaciEntry,
    ResistanceStrategy,
    StakeholderImpact,
    TrainingItem,
)
from strategist.normalize.fields import (
    bilingual,
    bilingual_list,
    entries,
    enum_value,
    parse_int,
    pick_list,
    pick_text,
    text_list,
)
from strategist.normalize.identity import IdentityAssigner

logger = logging.getLogger(__name__)

# --- Governance ---


def _committee(item: Mapping[str, Any], item_id: str) -> Committee:
    return Committee(
        id=item_id,
        name=bilingual(item, "name"),
        type=enum_value(item.get("type"), CommitteeType, CommitteeType.STEERING),
        chair_role=bilingual(item, "chair_role"),
        responsibilities=bilingual(item, "responsibilities", join=True),
        members=text_list(item.get("members")),
        meeting_frequency=pick_text(item, "meeting_frequency"),
    )


def _role(item: Mapping[str, Any], item_id: str) -> GovernanceRole:
    return GovernanceRole(
        id=item_id,
        title=bilingual(item, "title"),
        type=enum_value(item.get("type"), RoleType, RoleType.MANAGEMENT),
        department=bilingual(item, "department"),
        key_responsibilities=bilingual(item, "key_responsibilities", join=True),
        reports_to=bilingual(item, "reports_to"),
    )


def _dashboard(item: Mapping[str, Any], item_id: str) -> Dashboard:
    return Dashboard(
        id=item_id,
        name=bilingual(item, "name"),
        type=enum_value(item.get("type"), DashboardType, DashboardType.EXECUTIVE),
        description=bilingual(item, "description"),
        key_metrics=bilingual(item, "key_metrics", join=True),
        update_frequency=enum_value(
            item.get("update_frequency"), Frequency, Frequency.WEEKLY
        ),
        audience=bilingual(item, "audience"),
    )


def _raci(item: Mapping[str, Any], item_id: str) -> RaciEntry:
    return RaciEntry(
        id=item_id,
        area=enum_value(item.get("area"), RaciArea, RaciArea.STRATEGIC_DECISIONS),
        responsible=bilingual(item, "responsible"),
        accountable=bilingual(item, "accountable"),
        consulted=bilingual(item, "consulted"),
        informed=bilingual(item, "informed"),
    )


def escalation_path(value: Any, ids: IdentityAssigner) -> tuple[EscalationStep, ...]:
    """Resolve an escalation path from steps, bare strings or one delimited string.

    Blank entries are dropped first so that every accepted shape yields the
    same ids and levels. A step without a positive ``level`` takes its
    one-based position.
    """
    steps = []
    for position, item in enumerate(entries(value, promote_to="role")):
        level = parse_int(item.get("level"))
        steps.append(
            EscalationStep(
                id=ids.assign("esc", position),
                level=level if level and level > 0 else position + 1,
                role=bilingual(item, "role"),
                timeframe=bilingual(item, "timeframe"),
                description=bilingual(item, "description"),
            )
        )
    if isinstance(value, str):
        logger.debug("Escalation path given as text, split into %d steps", len(steps))
    return tuple(steps)


def normalize_governance(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> GovernanceStructure:
    """Governance structure; every sub-list is rebuilt from the reply."""
    return GovernanceStructure(
        committees=tuple(
            _committee(item, ids.assign("comm", position))
            for position, item in enumerate(entries(source.get("committees"), "name"))
        ),
        roles=tuple(
            _role(item, ids.assign("role", position))
            for position, item in enumerate(entries(source.get("roles"), "title"))
        ),
        dashboards=tuple(
            _dashboard(item, ids.assign("dash", position))
            for position, item in enumerate(entries(source.get("dashboards"), "name"))
        ),
        raci_matrix=tuple(
            _raci(item, ids.assign("raci", position))
            for position, item in enumerate(
                entries(pick_list(source, "raci_matrix", "decision_rights"))
            )
        ),
        reporting_frequency=enum_value(
            source.get("reporting_frequency"),
            Frequency,
            document.governance.reporting_frequency,
        ),
        escalation_path=escalation_path(source.get("escalation_path"), ids),
    )


# --- Communication ---


def _key_message(item: Mapping[str, Any], item_id: str) -> KeyMessage:
    return KeyMessage(
        id=item_id,
        text=bilingual(item, "text"),
        type=enum_value(item.get("type"), MessageType, MessageType.ANNOUNCEMENT),
        audience=pick_text(item, "audience"),
        channel=pick_text(item, "channel"),
    )


def normalize_communication(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> CommunicationPlan:
    """Communication plan.

    The narrative and audiences keep their current values when the reply
    omits them; messages and channels are rebuilt.
    """
    current = document.communication_plan
    audiences = current.target_audiences
    raw_audiences = source.get("target_audiences")
    if isinstance(raw_audiences, list) or (
        isinstance(raw_audiences, str) and raw_audiences.strip()
    ):
        audiences = bilingual_list(raw_audiences, "name", "text")

    return CommunicationPlan(
        master_narrative=bilingual(
            source, "master_narrative", fallback=current.master_narrative
        ),
        target_audiences=audiences,
        key_messages=tuple(
            _key_message(item, ids.assign("msg", position))
            for position, item in enumerate(entries(source.get("key_messages"), "text"))
        ),
        internal_channels=text_list(source.get("internal_channels")),
        external_channels=text_list(source.get("external_channels")),
    )


# --- Change management ---


def _training(item: Mapping[str, Any], item_id: str) -> TrainingItem:
    return TrainingItem(
        id=item_id,
        name=bilingual(item, "name"),
        type=enum_value(item.get("type"), TrainingType, TrainingType.WORKSHOP),
        category=enum_value(
            item.get("category"), TrainingCategory, TrainingCategory.TECHNICAL
        ),
        target_audience=bilingual(item, "target_audience"),
        duration=bilingual(item, "duration"),
        timeline=bilingual(item, "timeline"),
        priority=enum_value(item.get("priority"), Priority, Priority.MEDIUM),
    )


def _impact(item: Mapping[str, Any], item_id: str) -> StakeholderImpact:
    return StakeholderImpact(
        id=item_id,
        group=bilingual(item, "group"),
        impact_level=enum_value(
            item.get("impact_level"), ImpactLevel, ImpactLevel.MODERATE
        ),
        readiness=enum_value(item.get("readiness"), Readiness, Readiness.PREPARING),
        description=bilingual(item, "description"),
        support_needs=bilingual(item, "support_needs"),
    )


def _activity(item: Mapping[str, Any], item_id: str) -> ChangeActivity:
    return ChangeActivity(
        id=item_id,
        phase=enum_value(item.get("phase"), ChangePhase, ChangePhase.AWARENESS),
        name=bilingual(item, "name"),
        owner=pick_text(item, "owner"),
        timeline=pick_text(item, "timeline"),
        status=enum_value(item.get("status"), ActivityStatus, ActivityStatus.PLANNED),
    )


def _resistance(item: Mapping[str, Any], item_id: str) -> ResistanceStrategy:
    return ResistanceStrategy(
        id=item_id,
        type=enum_value(item.get("type"), ResistanceType, ResistanceType.FEAR_UNKNOWN),
        mitigation=bilingual(item, "mitigation"),
        owner=pick_text(item, "owner"),
        timeline=pick_text(item, "timeline"),
    )


def normalize_change(
    source: Mapping[str, Any], document: Document, ids: IdentityAssigner
) -> ChangeManagement:
    current = document.change_management
    return ChangeManagement(
        readiness_assessment=bilingual(
            source, "readiness_assessment", fallback=current.readiness_assessment
        ),
        change_approach=bilingual(
            source, "change_approach", fallback=current.change_approach
        ),
        resistance_management=bilingual(
            source, "resistance_management", fallback=current.resistance_management
        ),
        training_plan=tuple(
            _training(item, ids.assign("train", position))
            for position, item in enumerate(entries(source.get("training_plan"), "name"))
        ),
        stakeholder_impacts=tuple(
            _impact(item, ids.assign("si", position))
            for position, item in enumerate(
                entries(source.get("stakeholder_impacts"), "group")
            )
        ),
        change_activities=tuple(
            _activity(item, ids.assign("ca", position))
            for position, item in enumerate(
                entries(source.get("change_activities"), "name")
            )
        ),
        resistance_strategies=tuple(
            _resistance(item, ids.assign("rs", position))
            for position, item in enumerate(
                entries(source.get("resistance_strategies"), "mitigation")
            )
        ),
    )
