"""
버그/작업 추적 항목 API입니다.
테스트, UAT, 배포 후 단계의 항목 등록과 첨부 문서 관리를 담당합니다.
"""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from ittracker.models import TrackerPhase, TrackedItem, TrackedItemDraft, DocumentDraft
from ittracker.services import get_request_store, get_tracked_item_store, aggregate_stats, phase_model

router = APIRouter()


class DocumentUpload(BaseModel):
    """문서 첨부 데이터 모델 (여러 파일을 한 번에)"""
    documents: list[DocumentDraft]


@router.get("/requests/{request_id}/items/{phase}")
async def list_items(request_id: str, phase: TrackerPhase) -> dict:
    """
    요청의 특정 단계에 등록된 항목들을 등록 순서대로 조회합니다.
    stage/stage_status는 이 추적 단계에 대응하는 요청 단계와 그 진행 상태입니다.
    """
    request = get_request_store().get(request_id)
    items = get_tracked_item_store().list_items(request_id, phase)
    stage = phase_model.tracker_stage(phase)
    return {
        "request_id": request_id,
        "phase": phase.value,
        "stage": stage.value,
        "stage_status": phase_model.classify(stage, request.current_stage).value,
        "total": len(items),
        "items": items,
    }


@router.post("/requests/{request_id}/items/{phase}", status_code=201)
async def create_item(
    request_id: str,
    phase: TrackerPhase,
    draft: TrackedItemDraft,
) -> TrackedItem:
    """
    항목 추가 API.
    제목, 설명, 담당자, 보고자는 필수입니다.
    """
    get_request_store().get(request_id)
    return get_tracked_item_store().create(request_id, phase, draft)


@router.get("/requests/{request_id}/items/{phase}/stats")
async def get_item_stats(request_id: str, phase: TrackerPhase) -> dict:
    """상태별/심각도별 항목 건수."""
    get_request_store().get(request_id)
    items = get_tracked_item_store().list_items(request_id, phase)
    return {
        "request_id": request_id,
        "phase": phase.value,
        "total": len(items),
        **aggregate_stats.item_breakdown(items),
    }


@router.get("/items/{item_id}")
async def get_item(item_id: str) -> TrackedItem:
    return get_tracked_item_store().get(item_id)


@router.patch("/items/{item_id}")
async def update_item(item_id: str, patch: dict[str, Any]) -> TrackedItem:
    """항목 필드 일부를 수정합니다. ID, 요청, 단계는 바꿀 수 없습니다."""
    return get_tracked_item_store().update(item_id, patch)


@router.delete("/items/{item_id}")
async def delete_item(item_id: str) -> dict:
    """항목을 삭제합니다. 이미 없는 항목이어도 성공으로 응답합니다."""
    get_tracked_item_store().delete(item_id)
    return {"message": "항목이 삭제되었습니다", "id": item_id}


@router.post("/items/{item_id}/documents", status_code=201)
async def attach_documents(item_id: str, upload: DocumentUpload) -> TrackedItem:
    """항목에 문서 메타데이터를 첨부합니다 (파일 내용은 저장하지 않음)."""
    return get_tracked_item_store().attach_documents(item_id, upload.documents)


@router.delete("/items/{item_id}/documents/{document_id}")
async def remove_document(item_id: str, document_id: str) -> TrackedItem:
    return get_tracked_item_store().remove_document(item_id, document_id)
