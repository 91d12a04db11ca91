"""
버그/작업 추적 항목(TrackedItem)과 첨부 문서(Document) 모델입니다.
테스트, UAT, 배포 후 단계에서만 요청에 연결됩니다.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


class TrackerPhase(str, Enum):
    """추적 항목을 가질 수 있는 단계입니다."""

    TESTING = "Testing"
    UAT = "UAT"
    POST_DEPLOYMENT = "Post-Deployment"


class ItemType(str, Enum):
    BUG = "Bug"
    TASK = "Task"


class Severity(str, Enum):
    """심각도입니다."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ItemStatus(str, Enum):
    """처리 상태입니다."""

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class Document(BaseModel):
    """
    첨부 문서 메타데이터입니다.
    url은 업로드한 클라이언트 측의 임시 참조일 뿐, 실제 저장소 경로가 아닙니다.
    """

    id: str = Field(..., description="문서 ID (예: doc-1718000000000-0)")
    name: str = Field(..., description="파일명")
    size: int = Field(..., ge=0, description="파일 크기 (bytes)")
    type: str = Field(..., description="MIME 타입")
    uploaded_by: str
    uploaded_date: date = Field(default_factory=date.today)
    url: Optional[str] = None

    @computed_field
    @property
    def size_display(self) -> str:
        """사람이 읽기 좋은 파일 크기 (예: 1.5 KB). 응답 JSON에도 포함됩니다."""
        if self.size == 0:
            return "0 Bytes"
        units = ["Bytes", "KB", "MB", "GB"]
        value = float(self.size)
        index = 0
        while value >= 1024 and index < len(units) - 1:
            value /= 1024
            index += 1
        return f"{round(value, 2):g} {units[index]}"


class DocumentDraft(BaseModel):
    """첨부 요청 입력값. ID와 업로드일은 저장소에서 채웁니다."""

    name: str
    size: int = Field(..., ge=0)
    type: str
    uploaded_by: str
    url: Optional[str] = None


class TrackedItem(BaseModel):
    """(요청, 단계) 묶음에 속한 버그 또는 작업 한 건입니다."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="항목 ID (예: testing-1718000000000)")
    request_id: str
    type: ItemType = ItemType.BUG
    title: str
    description: str
    severity: Severity = Severity.MEDIUM
    status: ItemStatus = ItemStatus.OPEN
    assigned_to: str
    reported_by: str
    reported_date: date = Field(default_factory=date.today)
    resolved_date: Optional[date] = None
    phase: TrackerPhase
    documents: list[Document] = Field(default_factory=list)


class TrackedItemDraft(BaseModel):
    """항목 추가 폼 입력값입니다."""

    model_config = ConfigDict(extra="forbid")

    type: ItemType = ItemType.BUG
    title: str = ""
    description: str = ""
    severity: Severity = Severity.MEDIUM
    status: ItemStatus = ItemStatus.OPEN
    assigned_to: str = ""
    reported_by: str = ""
    reported_date: Optional[date] = None
    resolved_date: Optional[date] = None
    documents: list[Document] = Field(default_factory=list)
