"""
IT 요청 트래커 커스텀 예외 계층입니다.
저장소/서비스별 구조화된 에러 코드와 메시지를 제공합니다.
"""

from typing import Optional, Any


class TrackerError(Exception):
    """IT 요청 트래커 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class ValidationError(TrackerError):
    """필수 항목 누락 또는 레코드 내용이 유효하지 않을 때 발생하는 에러."""

    def __init__(
        self,
        message: str,
        fields: Optional[list[str]] = None,
        details: Optional[Any] = None,
        error_code: str = "ERR_VALID_001",
    ):
        self.fields = list(fields or [])
        if details is None and self.fields:
            details = {"fields": self.fields}
        super().__init__(message, error_code=error_code, details=details)


class FieldOwnershipError(ValidationError):
    """단계 편집기가 자신이 소유하지 않은 필드를 수정하려 할 때 발생하는 에러."""

    def __init__(self, message: str, phase: str, fields: list[str]):
        self.phase = phase
        super().__init__(
            message,
            fields=fields,
            details={"phase": phase, "fields": list(fields)},
            error_code="ERR_VALID_002",
        )


class InputValidationError(TrackerError):
    """입력 형식 오류 (잘못된 월 키, 알 수 없는 섹션 등)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class NotFoundError(TrackerError):
    """존재하지 않는 ID로 조회/수정을 시도했을 때 발생하는 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_NOTFOUND_001", details=details)
