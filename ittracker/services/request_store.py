"""
개발 요청 저장소 서비스입니다.
요청 레코드 컬렉션을 메모리에 보관하고 생성/수정/조회 기능을 제공합니다.

데이터는 프로세스가 살아 있는 동안에만 유지됩니다 (영속화 없음).
요청은 삭제하지 않습니다.
"""

import logging
import re
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ittracker.exceptions import NotFoundError, ValidationError
from ittracker.models import (
    Stage,
    DevelopmentRequest,
    RequestDraft,
    RequestFilter,
)
from ittracker.services import phase_model
from ittracker.utils.validation import require_fields

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = (
    "title",
    "requested_by",
    "department",
    "business_justification",
    "related_module",
)

ID_PREFIX = "REQ-"
_ID_PATTERN = re.compile(r"^REQ-(\d+)$")


def _patch_to_dict(patch: Union[Mapping[str, Any], BaseModel]) -> dict[str, Any]:
    if isinstance(patch, BaseModel):
        return patch.model_dump(exclude_unset=True)
    return dict(patch)


def to_validation_error(exc: PydanticValidationError, message: str) -> ValidationError:
    """pydantic 검증 에러를 트래커 ValidationError로 변환합니다 (필드 경로 포함)."""
    errors = exc.errors(include_url=False, include_context=False)
    fields = [".".join(str(part) for part in err["loc"]) for err in errors]
    return ValidationError(
        f"{message}: {', '.join(fields)}",
        fields=fields,
        details={"fields": fields, "errors": errors},
    )


def validate_request(data: Mapping[str, Any]) -> DevelopmentRequest:
    """dict를 요청 레코드로 변환합니다. 알 수 없는 필드나 열거형 값은 ValidationError."""
    try:
        return DevelopmentRequest.model_validate(data)
    except PydanticValidationError as e:
        raise to_validation_error(e, "요청 데이터가 유효하지 않습니다") from e


class RequestStore:
    """메모리 기반 개발 요청 저장소입니다."""

    def __init__(self):
        self._requests: list[DevelopmentRequest] = []
        # 마지막으로 발급한 번호. 컬렉션 크기와 무관하게 단조 증가합니다.
        self._counter = 0

    def __len__(self) -> int:
        return len(self._requests)

    def _next_id(self) -> str:
        self._counter += 1
        return f"{ID_PREFIX}{self._counter:03d}"

    def _index_of(self, request_id: str) -> int:
        for i, request in enumerate(self._requests):
            if request.id == request_id:
                return i
        raise NotFoundError(
            f"요청을 찾을 수 없습니다: {request_id}",
            details={"request_id": request_id},
        )

    # ==================== 생성 ====================

    def create(self, draft: Union[RequestDraft, Mapping[str, Any]]) -> DevelopmentRequest:
        """
        새 요청을 등록합니다.

        제목, 요청자, 부서, 비즈니스 근거, 관련 모듈은 필수입니다.
        우선순위는 항상 기본값(Medium)이 있으므로 누락될 수 없습니다.

        Raises:
            ValidationError: 필수 항목이 비어 있음
        """
        if not isinstance(draft, RequestDraft):
            try:
                draft = RequestDraft.model_validate(dict(draft))
            except PydanticValidationError as e:
                raise to_validation_error(e, "요청 입력값이 유효하지 않습니다") from e

        require_fields(draft, REQUIRED_FIELDS, entity="request")

        request = DevelopmentRequest(
            id=self._next_id(),
            title=draft.title,
            requested_by=draft.requested_by,
            department=draft.department,
            priority=draft.priority,
            business_justification=draft.business_justification,
            related_module=draft.related_module,
            request_date=draft.request_date or date.today(),
            current_stage=Stage.REQUIREMENT_GATHERING,
        )
        self._requests.append(request)
        logger.info(f"요청 생성: {request.id} ({request.title})")
        return request

    # ==================== 조회 ====================

    def get(self, request_id: str) -> DevelopmentRequest:
        """ID로 요청을 조회합니다. 없으면 NotFoundError."""
        return self._requests[self._index_of(request_id)]

    def list_requests(self, filter: Optional[RequestFilter] = None) -> list[DevelopmentRequest]:
        """
        필터에 맞는 요청 목록을 새 리스트로 반환합니다.
        저장된 순서(등록 순)를 유지하며 내부 컬렉션은 건드리지 않습니다.
        """
        if filter is None:
            return list(self._requests)
        return [r for r in self._requests if filter.matches(r)]

    # ==================== 수정 ====================

    def update(
        self,
        request_id: str,
        patch: Union[Mapping[str, Any], BaseModel],
    ) -> DevelopmentRequest:
        """
        기존 요청에 patch를 얕게 병합합니다 (필드 단위 마지막 쓰기 우선).
        patch에 없는 필드는 그대로 유지됩니다. 동시 수정 충돌 검사는 하지 않습니다.

        Raises:
            NotFoundError: 해당 ID의 요청이 없음
            ValidationError: ID 변경 시도, 알 수 없는 필드, 잘못된 값, 필수 항목을 빈 값으로 바꿈
        """
        index = self._index_of(request_id)
        changes = _patch_to_dict(patch)

        if "id" in changes and changes["id"] != request_id:
            raise ValidationError("요청 ID는 변경할 수 없습니다", fields=["id"])

        merged = validate_request({**self._requests[index].model_dump(), **changes})
        touched = [name for name in REQUIRED_FIELDS if name in changes]
        if touched:
            require_fields(merged, touched, entity="request")

        self._requests[index] = merged
        logger.info(f"요청 수정: {request_id} ({', '.join(changes) or '변경 없음'})")
        return merged

    def update_phase(
        self,
        request_id: str,
        phase: Stage,
        patch: Union[Mapping[str, Any], BaseModel],
    ) -> DevelopmentRequest:
        """
        단계 편집기 저장. 해당 단계가 소유한 필드만 수정할 수 있습니다.

        Raises:
            NotFoundError: 해당 ID의 요청이 없음
            FieldOwnershipError: 다른 단계 소유의 필드가 포함됨
        """
        self._index_of(request_id)
        changes = _patch_to_dict(patch)
        phase_model.check_field_ownership(phase, changes)
        return self.update(request_id, changes)

    def set_stage(
        self,
        request_id: str,
        stage: Stage,
        status: Optional[str] = None,
    ) -> DevelopmentRequest:
        """
        현재 단계를 옮깁니다.
        단계 필드가 채워졌는지는 확인하지 않으며, 이전 단계로 되돌리는 것도 허용합니다.
        """
        changes: dict[str, Any] = {"current_stage": stage}
        if status is not None:
            changes["status"] = status
        return self.update(request_id, changes)

    # ==================== 일괄 적재 ====================

    def load(self, records: Iterable[Union[DevelopmentRequest, Mapping[str, Any]]]) -> int:
        """
        기존 레코드(샘플 데이터 등)를 그대로 적재합니다.
        이후 발급되는 ID가 겹치지 않도록 카운터를 가장 큰 번호 뒤로 옮깁니다.
        """
        loaded = 0
        for record in records:
            request = record if isinstance(record, DevelopmentRequest) else validate_request(record)
            if any(r.id == request.id for r in self._requests):
                raise ValidationError(
                    f"이미 존재하는 요청 ID입니다: {request.id}",
                    fields=["id"],
                )
            self._requests.append(request)
            match = _ID_PATTERN.match(request.id)
            if match:
                self._counter = max(self._counter, int(match.group(1)))
            loaded += 1

        logger.info(f"요청 {loaded}건 적재 완료 (다음 번호: {self._counter + 1})")
        return loaded


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_request_store: Optional[RequestStore] = None


def get_request_store() -> RequestStore:
    """RequestStore 인스턴스를 반환합니다."""
    global _request_store
    if _request_store is None:
        _request_store = RequestStore()
    return _request_store
