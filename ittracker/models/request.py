"""
개발 요청(DevelopmentRequest) 데이터 모델입니다.
요청 한 건이 8단계를 거치며 쌓는 모든 필드를 하나의 평평한 레코드에 담습니다.
각 선택 필드는 정확히 한 단계의 편집기만 수정할 수 있습니다 (services.phase_model 참고).
"""

from datetime import date
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .common import (
    Stage,
    Priority,
    FeasibilityStatus,
    ApprovalStatus,
    TestStatus,
    UATStatus,
    DeploymentType,
    Environment,
    Outcome,
    FinalStatus,
)


class DevelopmentRequest(BaseModel):
    """
    개발 요청 레코드입니다.
    저장소가 ID를 부여하며, 생성 이후에는 단계별 편집기가 필드 단위로 갱신합니다.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="요청 ID (예: REQ-001)")

    # 요구사항 수집 단계
    title: str = Field(..., description="요청 제목 (요약)")
    request_date: date = Field(default_factory=date.today, description="요청일")
    requested_by: str = Field(..., description="요청자")
    department: str = Field(..., description="요청 부서")
    priority: Priority = Field(default=Priority.MEDIUM)
    business_justification: str = Field(..., description="비즈니스 근거")
    related_module: str = Field(..., description="관련 모듈/시스템")

    # 진행 메타데이터 (참고용, 필드 채움 여부와 무관)
    current_stage: Stage = Field(default=Stage.REQUIREMENT_GATHERING)
    status: str = Field(default="New Request", description="상태 문구")

    # 분석 단계
    requirement_description: Optional[str] = None
    feasibility_status: Optional[FeasibilityStatus] = None
    estimated_effort: Optional[int] = Field(default=None, description="예상 공수 (시간)")
    assigned_analyst: Optional[str] = None
    impacted_systems: Optional[str] = None
    dependencies: Optional[str] = None

    # 승인 단계
    approval_status: Optional[ApprovalStatus] = None
    approved_date: Optional[date] = None
    approver_comments: Optional[str] = None
    budget_allocation: Optional[float] = None

    # 개발 단계
    assigned_developer: Optional[str] = None
    start_date: Optional[date] = None
    target_completion_date: Optional[date] = None
    development_notes: Optional[str] = None

    # 테스트 단계
    test_case_reference: Optional[str] = None
    test_start_date: Optional[date] = None
    test_completion_date: Optional[date] = None
    test_status: Optional[TestStatus] = None
    bugs_reported: Optional[str] = None
    rework_needed: Optional[bool] = None

    # UAT 단계
    uat_status: Optional[UATStatus] = None
    uat_completion_date: Optional[date] = None
    uat_feedback: Optional[str] = None

    # 배포 단계
    deployment_date: Optional[date] = None
    deployed_by: Optional[str] = None
    deployment_type: Optional[DeploymentType] = None
    environment: Optional[Environment] = None
    rollback_plan: Optional[bool] = None

    # 배포 후 검토 (종료)
    outcome: Optional[Outcome] = None
    issues: Optional[str] = None
    lessons_learned: Optional[str] = None
    close_date: Optional[date] = None
    final_status: Optional[FinalStatus] = None


class RequestDraft(BaseModel):
    """
    요청 생성 폼 입력값입니다.
    빈 문자열도 받아들이고, 필수 항목 검사는 저장소에서 수행합니다.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    requested_by: str = ""
    department: str = ""
    priority: Priority = Priority.MEDIUM
    business_justification: str = ""
    related_module: str = ""
    request_date: Optional[date] = None


class RequestFilter(BaseModel):
    """요청 목록 필터. priority/stage가 "all"이면 해당 조건을 적용하지 않습니다."""

    search_term: str = ""
    priority: Union[Literal["all"], Priority] = "all"
    stage: Union[Literal["all"], Stage] = "all"

    def matches(self, request: DevelopmentRequest) -> bool:
        """검색어는 제목/ID/요청자 중 하나라도 포함하면 일치 (대소문자 무시)."""
        term = self.search_term.lower()
        matches_search = (
            term in request.title.lower()
            or term in request.id.lower()
            or term in request.requested_by.lower()
        )
        matches_priority = self.priority == "all" or request.priority == self.priority
        matches_stage = self.stage == "all" or request.current_stage == self.stage
        return matches_search and matches_priority and matches_stage
