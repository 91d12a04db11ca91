"""
단계(Phase) 모델입니다.

8단계의 고정 순서를 정의하고, 순서 비교를 통해 각 단계를
완료(Completed) / 현재(Current) / 대기(Pending)로 분류합니다.

분류 규칙 (위치 비교):
- index(phase) < index(current_stage) → Completed
- index(phase) == index(current_stage) → Current
- index(phase) > index(current_stage) → Pending

단계 전환 자체는 검증하지 않습니다. current_stage는 필드 채움 여부와 상관없이
앞뒤 어느 단계로든 옮길 수 있습니다.

또한 단계별 필드 소유 관계(PHASE_FIELDS)를 정의합니다.
요청 레코드는 평평하지만, 각 선택 필드는 한 단계의 편집기만 쓸 수 있습니다.
"""

import logging
from typing import Iterable

from ittracker.exceptions import FieldOwnershipError
from ittracker.models import (
    Stage,
    PhaseStatus,
    TrackerPhase,
    DevelopmentRequest,
    PhaseProgress,
)

logger = logging.getLogger(__name__)


# 진행 순서. 진행률 표시, 분류, MIS 활동 보고서가 모두 이 순서에 의존합니다.
PHASE_ORDER: tuple[Stage, ...] = (
    Stage.REQUIREMENT_GATHERING,
    Stage.ANALYSIS,
    Stage.APPROVAL,
    Stage.DEVELOPMENT,
    Stage.TESTING,
    Stage.UAT,
    Stage.DEPLOYMENT,
    Stage.COMPLETED,
)

PHASE_LABELS: dict[Stage, str] = {
    Stage.REQUIREMENT_GATHERING: "Requirement Gathering",
    Stage.ANALYSIS: "Analysis",
    Stage.APPROVAL: "Approval",
    Stage.DEVELOPMENT: "Development",
    Stage.TESTING: "Testing",
    Stage.UAT: "UAT",
    Stage.DEPLOYMENT: "Deployment",
    Stage.COMPLETED: "Completed",
}

# 단계별 편집기가 소유하는 필드
PHASE_FIELDS: dict[Stage, tuple[str, ...]] = {
    Stage.REQUIREMENT_GATHERING: (
        "title",
        "requested_by",
        "department",
        "priority",
        "business_justification",
        "related_module",
        "request_date",
    ),
    Stage.ANALYSIS: (
        "requirement_description",
        "feasibility_status",
        "estimated_effort",
        "assigned_analyst",
        "impacted_systems",
        "dependencies",
    ),
    Stage.APPROVAL: (
        "approval_status",
        "approved_date",
        "approver_comments",
        "budget_allocation",
    ),
    Stage.DEVELOPMENT: (
        "assigned_developer",
        "start_date",
        "target_completion_date",
        "development_notes",
    ),
    Stage.TESTING: (
        "test_case_reference",
        "test_start_date",
        "test_completion_date",
        "test_status",
        "bugs_reported",
        "rework_needed",
    ),
    Stage.UAT: (
        "uat_status",
        "uat_completion_date",
        "uat_feedback",
    ),
    Stage.DEPLOYMENT: (
        "deployment_date",
        "deployed_by",
        "deployment_type",
        "environment",
        "rollback_plan",
    ),
    Stage.COMPLETED: (
        "outcome",
        "issues",
        "lessons_learned",
        "close_date",
        "final_status",
    ),
}

_FIELD_OWNERS: dict[str, Stage] = {
    field: phase for phase, fields in PHASE_FIELDS.items() for field in fields
}

# 추적 항목 단계 → 요청 단계
TRACKER_STAGES: dict[TrackerPhase, Stage] = {
    TrackerPhase.TESTING: Stage.TESTING,
    TrackerPhase.UAT: Stage.UAT,
    TrackerPhase.POST_DEPLOYMENT: Stage.COMPLETED,
}


def phases() -> tuple[Stage, ...]:
    """8단계를 진행 순서대로 반환합니다."""
    return PHASE_ORDER


def index_of(phase: Stage) -> int:
    return PHASE_ORDER.index(Stage(phase))


def classify(phase: Stage, current_stage: Stage) -> PhaseStatus:
    """현재 단계를 기준으로 특정 단계의 상태를 분류합니다."""
    position = index_of(phase)
    current = index_of(current_stage)
    if position < current:
        return PhaseStatus.COMPLETED
    if position == current:
        return PhaseStatus.CURRENT
    return PhaseStatus.PENDING


def label_of(phase: Stage) -> str:
    """단계 표시 이름."""
    return PHASE_LABELS[Stage(phase)]


def activity_label_of(phase: Stage) -> str:
    """MIS 활동 표에서 쓰는 단계 이름. 마지막 단계는 "Post-Deployment"로 표시합니다."""
    if Stage(phase) == Stage.COMPLETED:
        return "Post-Deployment"
    return label_of(phase)


def fields_of(phase: Stage) -> tuple[str, ...]:
    return PHASE_FIELDS[Stage(phase)]


def owner_of(field: str):
    """필드를 소유한 단계. 어느 단계에도 속하지 않는 필드(id, current_stage 등)는 None."""
    return _FIELD_OWNERS.get(field)


def check_field_ownership(phase: Stage, fields: Iterable[str]) -> None:
    """
    단계 편집기가 자신의 필드만 수정하는지 확인합니다.

    Raises:
        FieldOwnershipError: 소유하지 않은 필드가 하나라도 있음
    """
    phase = Stage(phase)
    owned = fields_of(phase)
    foreign = [field for field in fields if field not in owned]
    if foreign:
        owners = {field: getattr(owner_of(field), "value", None) for field in foreign}
        logger.warning(f"{label_of(phase)} 단계 편집기가 다른 단계의 필드를 수정하려 함: {owners}")
        raise FieldOwnershipError(
            f"{label_of(phase)} 단계에서 수정할 수 없는 필드입니다: {', '.join(foreign)}",
            phase=phase.value,
            fields=foreign,
        )


def progress(request: DevelopmentRequest) -> list[PhaseProgress]:
    """요청 상세 화면의 진행 타임라인 (8단계 전체)."""
    return [
        PhaseProgress(
            phase=phase,
            label=label_of(phase),
            status=classify(phase, request.current_stage),
        )
        for phase in PHASE_ORDER
    ]


def tracker_stage(phase: TrackerPhase) -> Stage:
    """추적 항목 단계가 대응하는 요청 단계."""
    return TRACKER_STAGES[TrackerPhase(phase)]
