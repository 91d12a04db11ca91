"""
공통 열거형 모듈입니다.
요청 레코드의 단계/상태 필드는 모두 닫힌 열거형으로 정의되며,
정의되지 않은 값은 레코드 생성 시점(역직렬화 경계)에서 거부됩니다.
"""

from enum import Enum


class Stage(str, Enum):
    """
    요청이 거치는 8단계 생애주기입니다.
    정의 순서가 곧 진행 순서입니다 (진행률 표시와 완료/현재/대기 분류에 사용).
    """
    REQUIREMENT_GATHERING = "requirement-gathering"
    ANALYSIS = "analysis"
    APPROVAL = "approval"
    DEVELOPMENT = "development"
    TESTING = "testing"
    UAT = "uat"
    DEPLOYMENT = "deployment"
    COMPLETED = "completed"


class Priority(str, Enum):
    """우선순위입니다."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class PhaseStatus(str, Enum):
    """현재 단계와 비교한 특정 단계의 분류 결과입니다."""

    COMPLETED = "Completed"
    CURRENT = "Current"
    PENDING = "Pending"


class FeasibilityStatus(str, Enum):
    """분석 단계: 구현 가능 여부."""

    YES = "Yes"
    NO = "No"
    PARTIAL = "Partial"


class ApprovalStatus(str, Enum):
    """승인 단계: 승인 결과."""

    APPROVED = "Approved"
    REJECTED = "Rejected"
    ON_HOLD = "On Hold"
    PENDING = "Pending"


class TestStatus(str, Enum):
    """테스트 단계: 테스트 결과."""

    __test__ = False  # pytest 수집 대상 아님

    PASS = "Pass"
    FAIL = "Fail"
    PENDING = "Pending"


class UATStatus(str, Enum):
    """UAT 단계: 사용자 인수 테스트 결과."""

    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    CHANGES_REQUIRED = "Changes Required"
    PENDING = "Pending"


class DeploymentType(str, Enum):
    """배포 유형."""

    HOTFIX = "Hotfix"
    MINOR_RELEASE = "Minor Release"
    MAJOR_RELEASE = "Major Release"


class Environment(str, Enum):
    """배포 환경."""

    DEV = "Dev"
    UAT = "UAT"
    PROD = "Prod"


class Outcome(str, Enum):
    """배포 후 결과."""

    SUCCESSFUL = "Successful"
    ISSUES_FOUND = "Issues Found"
    PENDING = "Pending"


class FinalStatus(str, Enum):
    """종료 상태."""

    CLOSED = "Closed"
    PENDING_REWORK = "Pending Rework"
