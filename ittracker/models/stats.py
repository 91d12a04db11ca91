"""
대시보드 집계 결과 모델입니다.
모두 요청 목록으로부터 매번 새로 계산되는 파생 데이터이며 저장되지 않습니다.
"""

from datetime import date
from pydantic import BaseModel, Field

from .common import Stage, PhaseStatus
from .request import DevelopmentRequest


class PhaseProgress(BaseModel):
    """요청 상세 화면의 진행 타임라인 한 칸입니다."""

    phase: Stage
    label: str
    status: PhaseStatus


class PhaseActivity(BaseModel):
    """MIS 보고서의 단계별 활동 한 줄입니다."""

    request_id: str
    title: str
    department: str
    phase: Stage
    phase_label: str
    action: str
    date: date
    status: PhaseStatus


class BreakdownEntry(BaseModel):
    """건수와 전체 대비 비율(%)."""

    key: str
    count: int
    percentage: int


class MonthlyStats(BaseModel):
    """특정 월에 접수된 요청들의 요약 통계입니다."""

    month: str
    total_requests: int = 0
    completed_requests: int = 0
    approved_requests: int = 0
    in_development: int = 0
    in_testing: int = 0
    deployed: int = 0
    in_progress: int = 0
    completion_rate: int = 0
    approval_rate: int = 0
    deployment_rate: int = 0


class DashboardOverview(BaseModel):
    """메인 대시보드 요약입니다."""

    total_requests: int
    completed_requests: int
    in_progress_requests: int
    completion_rate: int
    stages: list[BreakdownEntry] = Field(default_factory=list)
    priorities: list[BreakdownEntry] = Field(default_factory=list)
    recent_requests: list[DevelopmentRequest] = Field(default_factory=list)


class MISSummary(BaseModel):
    """월간 MIS 대시보드 응답입니다."""

    month: str
    label: str
    stats: MonthlyStats
    departments: list[BreakdownEntry] = Field(default_factory=list)
    activities: list[PhaseActivity] = Field(default_factory=list)
