"""
개발 요청 API입니다.
요청 등록, 목록 검색, 상세 조회와 단계별 편집 기능을 제공합니다.
"""

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ittracker.models import Stage, DevelopmentRequest, RequestDraft, RequestFilter
from ittracker.services import get_request_store, phase_model
from ittracker.services.request_store import to_validation_error

router = APIRouter()


class StageChange(BaseModel):
    """단계 이동 요청 데이터 모델"""
    stage: Stage
    status: Optional[str] = None  # 함께 바꿀 상태 문구


@router.get("")
async def list_requests(
    search: str = "",
    priority: str = "all",
    stage: str = "all",
) -> dict:
    """
    요청 목록을 조회합니다.

    - search: 제목/ID/요청자에서 대소문자 구분 없이 검색
    - priority, stage: 정확히 일치하는 값만 ("all"이면 조건 없음)
    """
    try:
        request_filter = RequestFilter(search_term=search, priority=priority, stage=stage)
    except PydanticValidationError as e:
        raise to_validation_error(e, "검색 조건이 유효하지 않습니다") from e

    requests = get_request_store().list_requests(request_filter)
    return {
        "total": len(requests),
        "requests": requests,
    }


@router.post("", status_code=201)
async def create_request(draft: RequestDraft) -> DevelopmentRequest:
    """새 요청을 등록합니다. 등록된 요청은 요구사항 수집 단계에서 시작합니다."""
    return get_request_store().create(draft)


@router.get("/{request_id}")
async def get_request(request_id: str) -> DevelopmentRequest:
    """요청 상세 정보를 조회하는 API"""
    return get_request_store().get(request_id)


@router.patch("/{request_id}")
async def update_request(request_id: str, patch: dict[str, Any]) -> DevelopmentRequest:
    """요청 필드 일부를 수정합니다. 전달하지 않은 필드는 그대로 유지됩니다."""
    return get_request_store().update(request_id, patch)


@router.get("/{request_id}/phases/{stage}")
async def get_request_phase(request_id: str, stage: Stage) -> dict:
    """단계 편집기에 채울 값: 해당 단계가 소유한 필드와 현재 값."""
    request = get_request_store().get(request_id)
    return {
        "request_id": request.id,
        "phase": stage.value,
        "label": phase_model.label_of(stage),
        "status": phase_model.classify(stage, request.current_stage).value,
        "fields": {name: getattr(request, name) for name in phase_model.fields_of(stage)},
    }


@router.patch("/{request_id}/phases/{stage}")
async def update_request_phase(
    request_id: str,
    stage: Stage,
    patch: dict[str, Any],
) -> DevelopmentRequest:
    """
    단계 편집기 저장 API.
    해당 단계가 소유한 필드만 수정할 수 있습니다 (예: 승인 단계 → approval_status, approved_date ...).
    """
    return get_request_store().update_phase(request_id, stage, patch)


@router.put("/{request_id}/stage")
async def change_stage(request_id: str, change: StageChange) -> DevelopmentRequest:
    """현재 단계를 옮깁니다. 앞뒤 어느 방향으로든 이동할 수 있습니다."""
    return get_request_store().set_stage(request_id, change.stage, change.status)


@router.get("/{request_id}/progress")
async def get_request_progress(request_id: str) -> dict:
    """8단계 진행 타임라인 (완료/현재/대기)."""
    request = get_request_store().get(request_id)
    return {
        "request_id": request.id,
        "current_stage": request.current_stage.value,
        "phases": phase_model.progress(request),
    }
