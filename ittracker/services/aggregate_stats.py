"""
대시보드 집계 함수 모음입니다.

모든 함수는 요청 목록을 입력으로 받아 결과를 새로 계산하는 순수 함수입니다.
캐시나 내부 상태가 없으므로 화면을 그릴 때마다 호출해도 같은 결과가 나옵니다.

비율 계산은 모두 percentage()를 거칩니다 (total이 0이면 0).
"""

import math
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ittracker.models import (
    Stage,
    Priority,
    ApprovalStatus,
    TestStatus,
    UATStatus,
    FinalStatus,
    Severity,
    ItemStatus,
    DevelopmentRequest,
    TrackedItem,
    PhaseActivity,
    BreakdownEntry,
    MonthlyStats,
    DashboardOverview,
)
from ittracker.services import phase_model
from ittracker.utils.validation import parse_month_key

# 대시보드 우선순위 표시 순서
PRIORITY_ORDER: tuple[Priority, ...] = (
    Priority.URGENT,
    Priority.HIGH,
    Priority.MEDIUM,
    Priority.LOW,
)


def percentage(count: int, total: int) -> int:
    """전체 대비 비율(%)을 정수로 반올림합니다. total이 0 이하이면 0."""
    if total <= 0:
        return 0
    # 0.5는 올림 (round()의 은행가 반올림을 쓰지 않음)
    return math.floor(count / total * 100 + 0.5)


def stage_breakdown(requests: Iterable[DevelopmentRequest]) -> dict[Stage, int]:
    """단계별 건수. 8단계가 모두 포함되며 해당 요청이 없는 단계는 0."""
    counts = {stage: 0 for stage in phase_model.phases()}
    for request in requests:
        counts[request.current_stage] += 1
    return counts


def priority_breakdown(requests: Iterable[DevelopmentRequest]) -> dict[Priority, int]:
    """우선순위별 건수. 4개 값이 모두 포함됩니다."""
    counts = {priority: 0 for priority in PRIORITY_ORDER}
    for request in requests:
        counts[request.priority] += 1
    return counts


def department_breakdown(requests: Iterable[DevelopmentRequest]) -> dict[str, int]:
    """
    부서별 건수.
    부서는 자유 입력이므로 0으로 채우지 않고, 실제로 등장한 부서만 처음 등장한 순서대로 담습니다.
    """
    counts: dict[str, int] = {}
    for request in requests:
        counts[request.department] = counts.get(request.department, 0) + 1
    return counts


def _in_month(value: Optional[date], year: int, month: int) -> bool:
    return value is not None and value.year == year and value.month == month


def monthly_filter(
    requests: Iterable[DevelopmentRequest], month_key: str
) -> list[DevelopmentRequest]:
    """요청일(request_date)이 해당 월에 속하는 요청만 추립니다."""
    year, month = parse_month_key(month_key)
    return [r for r in requests if _in_month(r.request_date, year, month)]


# ==================== 단계별 활동 ====================

# 단계 → 활동 날짜로 쓰는 필드
PHASE_DATE_FIELDS: dict[Stage, str] = {
    Stage.REQUIREMENT_GATHERING: "request_date",
    Stage.ANALYSIS: "request_date",
    Stage.APPROVAL: "approved_date",
    Stage.DEVELOPMENT: "start_date",
    Stage.TESTING: "test_start_date",
    Stage.UAT: "uat_completion_date",
    Stage.DEPLOYMENT: "deployment_date",
    Stage.COMPLETED: "close_date",
}


def _approval_action(request: DevelopmentRequest) -> str:
    if request.approval_status == ApprovalStatus.APPROVED:
        return "Request approved"
    status = request.approval_status or ApprovalStatus.PENDING
    return f"Request {status.value.lower()}"


def _testing_action(request: DevelopmentRequest) -> str:
    if request.test_status == TestStatus.PASS:
        return "Testing completed successfully"
    return "Testing in progress"


def _uat_action(request: DevelopmentRequest) -> str:
    if request.uat_status == UATStatus.ACCEPTED:
        return "UAT accepted by business"
    return "UAT feedback received"


def _deployment_action(request: DevelopmentRequest) -> str:
    if request.environment is None:
        return "Deployed"
    return f"Deployed to {request.environment.value}"


def _closure_action(request: DevelopmentRequest) -> str:
    if request.final_status == FinalStatus.CLOSED:
        return "Project closed successfully"
    return "Post-deployment review completed"


PHASE_ACTIONS: dict[Stage, Callable[[DevelopmentRequest], str]] = {
    Stage.REQUIREMENT_GATHERING: lambda _: "Requirements collected and documented",
    Stage.ANALYSIS: lambda _: "Technical analysis completed",
    Stage.APPROVAL: _approval_action,
    Stage.DEVELOPMENT: lambda _: "Development work started",
    Stage.TESTING: _testing_action,
    Stage.UAT: _uat_action,
    Stage.DEPLOYMENT: _deployment_action,
    Stage.COMPLETED: _closure_action,
}


def phase_action(phase: Stage, request: DevelopmentRequest) -> str:
    """단계별 활동 설명 문구 (형제 상태 필드에 따라 달라짐)."""
    return PHASE_ACTIONS[Stage(phase)](request)


def phase_activity(
    requests: Iterable[DevelopmentRequest], month_key: str
) -> list[PhaseActivity]:
    """
    해당 월에 일어난 단계별 활동 목록.

    요청마다 8단계의 날짜 필드를 훑어 해당 월에 속하는 날짜마다 한 줄을 만듭니다.
    한 요청이 여러 줄을 낼 수 있습니다 (같은 달에 승인과 배포가 모두 있는 경우 등).
    결과는 요청 순서, 그 안에서는 단계 순서를 따릅니다.
    """
    year, month = parse_month_key(month_key)
    rows: list[PhaseActivity] = []
    for request in requests:
        for phase in phase_model.phases():
            value = getattr(request, PHASE_DATE_FIELDS[phase])
            if not _in_month(value, year, month):
                continue
            rows.append(
                PhaseActivity(
                    request_id=request.id,
                    title=request.title,
                    department=request.department,
                    phase=phase,
                    phase_label=phase_model.activity_label_of(phase),
                    action=phase_action(phase, request),
                    date=value,
                    status=phase_model.classify(phase, request.current_stage),
                )
            )
    return rows


# ==================== 요약 통계 ====================

def monthly_stats(
    requests: Iterable[DevelopmentRequest], month_key: str
) -> MonthlyStats:
    """해당 월에 접수된 요청들의 요약 지표와 핵심 비율."""
    scoped = monthly_filter(requests, month_key)
    total = len(scoped)
    completed = sum(1 for r in scoped if r.current_stage == Stage.COMPLETED)
    approved = sum(1 for r in scoped if r.approval_status == ApprovalStatus.APPROVED)
    deployed = sum(1 for r in scoped if r.deployment_date is not None)

    return MonthlyStats(
        month=month_key,
        total_requests=total,
        completed_requests=completed,
        approved_requests=approved,
        in_development=sum(1 for r in scoped if r.current_stage == Stage.DEVELOPMENT),
        in_testing=sum(
            1 for r in scoped if r.current_stage in (Stage.TESTING, Stage.UAT)
        ),
        deployed=deployed,
        in_progress=total - completed,
        completion_rate=percentage(completed, total),
        approval_rate=percentage(approved, total),
        deployment_rate=percentage(deployed, total),
    )


def breakdown_entries(counts: dict, total: int) -> list[BreakdownEntry]:
    """건수 매핑을 비율이 포함된 목록으로 변환합니다."""
    return [
        BreakdownEntry(
            key=getattr(key, "value", key),
            count=count,
            percentage=percentage(count, total),
        )
        for key, count in counts.items()
    ]


def overview(
    requests: Sequence[DevelopmentRequest], recent: int = 5
) -> DashboardOverview:
    """메인 대시보드 요약 (단계/우선순위 분포, 최근 요청)."""
    total = len(requests)
    stages = stage_breakdown(requests)
    completed = stages[Stage.COMPLETED]

    return DashboardOverview(
        total_requests=total,
        completed_requests=completed,
        in_progress_requests=total - completed,
        completion_rate=percentage(completed, total),
        stages=breakdown_entries(stages, total),
        priorities=breakdown_entries(priority_breakdown(requests), total),
        recent_requests=list(requests[: max(0, recent)]),
    )


def item_breakdown(items: Iterable[TrackedItem]) -> dict[str, dict[str, int]]:
    """추적 항목의 상태별/심각도별 건수 (모든 값 0으로 채움)."""
    by_status = {status.value: 0 for status in ItemStatus}
    by_severity = {severity.value: 0 for severity in Severity}
    for item in items:
        by_status[item.status.value] += 1
        by_severity[item.severity.value] += 1
    return {"by_status": by_status, "by_severity": by_severity}
