"""
버그/작업 추적 항목 저장소 서비스입니다.
(요청 ID, 단계) 묶음별로 항목을 관리하며 첨부 문서 메타데이터도 함께 보관합니다.

요청 저장소와는 request_id 외래키로만 연결됩니다.
"""

import logging
import time
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ittracker.exceptions import NotFoundError, ValidationError
from ittracker.models import (
    TrackerPhase,
    Document,
    DocumentDraft,
    TrackedItem,
    TrackedItemDraft,
)
from ittracker.services.request_store import to_validation_error
from ittracker.utils.validation import require_fields

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("title", "description", "assigned_to", "reported_by")
DOCUMENT_REQUIRED_FIELDS = ("name", "type", "uploaded_by")

# 생성 후 바꿀 수 없는 필드
IMMUTABLE_FIELDS = ("id", "request_id", "phase")


def _now_ms() -> int:
    return int(time.time() * 1000)


def new_document(
    draft: Union[DocumentDraft, Mapping[str, Any]],
    index: int = 0,
    uploaded_date: Optional[date] = None,
    taken: Iterable[str] = (),
) -> Document:
    """
    첨부 입력값으로 문서 메타데이터를 만듭니다.
    ID는 "doc-<밀리초>-<순번>" 형식이며, 한 번에 여러 파일을 올릴 때 순번으로 구분합니다.
    taken에 이미 있는 ID면 밀리초를 1씩 뒤로 밉니다.
    """
    if not isinstance(draft, DocumentDraft):
        try:
            draft = DocumentDraft.model_validate(dict(draft))
        except PydanticValidationError as e:
            raise to_validation_error(e, "문서 정보가 유효하지 않습니다") from e

    require_fields(draft, DOCUMENT_REQUIRED_FIELDS, entity="document")

    taken = set(taken)
    stamp = _now_ms()
    while f"doc-{stamp}-{index}" in taken:
        stamp += 1

    return Document(
        id=f"doc-{stamp}-{index}",
        name=draft.name,
        size=draft.size,
        type=draft.type,
        uploaded_by=draft.uploaded_by.strip(),
        uploaded_date=uploaded_date or date.today(),
        url=draft.url,
    )


class TrackedItemStore:
    """메모리 기반 추적 항목 저장소입니다."""

    def __init__(self):
        self._items: list[TrackedItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise NotFoundError(
            f"추적 항목을 찾을 수 없습니다: {item_id}",
            details={"item_id": item_id},
        )

    def _new_id(self, phase: TrackerPhase) -> str:
        """ID 형식은 <단계 소문자>-<밀리초>. 같은 밀리초에 이미 있으면 1ms씩 뒤로 밉니다."""
        existing = {item.id for item in self._items}
        stamp = _now_ms()
        item_id = f"{phase.value.lower()}-{stamp}"
        while item_id in existing:
            stamp += 1
            item_id = f"{phase.value.lower()}-{stamp}"
        return item_id

    # ==================== 생성/조회 ====================

    def create(
        self,
        request_id: str,
        phase: TrackerPhase,
        draft: Union[TrackedItemDraft, Mapping[str, Any]],
    ) -> TrackedItem:
        """
        (요청, 단계) 묶음에 새 항목을 추가합니다.

        Raises:
            ValidationError: 제목, 설명, 담당자, 보고자 중 비어 있는 항목이 있음
        """
        phase = TrackerPhase(phase)
        if not isinstance(draft, TrackedItemDraft):
            try:
                draft = TrackedItemDraft.model_validate(dict(draft))
            except PydanticValidationError as e:
                raise to_validation_error(e, "항목 입력값이 유효하지 않습니다") from e

        require_fields(draft, REQUIRED_FIELDS, entity="tracked item")

        item = TrackedItem(
            id=self._new_id(phase),
            request_id=request_id,
            type=draft.type,
            title=draft.title,
            description=draft.description,
            severity=draft.severity,
            status=draft.status,
            assigned_to=draft.assigned_to,
            reported_by=draft.reported_by,
            reported_date=draft.reported_date or date.today(),
            resolved_date=draft.resolved_date,
            phase=phase,
            documents=list(draft.documents),
        )
        self._items.append(item)
        logger.info(f"{phase.value} {item.type.value} 추가: {item.id} (요청 {request_id})")
        return item

    def get(self, item_id: str) -> TrackedItem:
        return self._items[self._index_of(item_id)]

    def list_items(
        self,
        request_id: Optional[str] = None,
        phase: Optional[TrackerPhase] = None,
    ) -> list[TrackedItem]:
        """묶음의 항목들을 추가된 순서대로 반환합니다. 인자를 생략하면 해당 조건을 적용하지 않습니다."""
        return [
            item
            for item in self._items
            if (request_id is None or item.request_id == request_id)
            and (phase is None or item.phase == TrackerPhase(phase))
        ]

    # ==================== 수정/삭제 ====================

    def update(
        self,
        item_id: str,
        patch: Union[Mapping[str, Any], BaseModel],
    ) -> TrackedItem:
        """
        항목에 patch를 얕게 병합합니다 (요청 저장소의 update와 같은 규칙).

        Raises:
            NotFoundError: 해당 ID의 항목이 없음
            ValidationError: ID/요청/단계 변경 시도 또는 잘못된 값
        """
        index = self._index_of(item_id)
        current = self._items[index]
        changes = (
            patch.model_dump(exclude_unset=True)
            if isinstance(patch, BaseModel)
            else dict(patch)
        )

        locked = [
            name
            for name in IMMUTABLE_FIELDS
            if name in changes and changes[name] != getattr(current, name)
        ]
        if locked:
            raise ValidationError(
                f"변경할 수 없는 필드입니다: {', '.join(locked)}",
                fields=locked,
            )

        try:
            merged = TrackedItem.model_validate({**current.model_dump(), **changes})
        except PydanticValidationError as e:
            raise to_validation_error(e, "항목 데이터가 유효하지 않습니다") from e

        self._items[index] = merged
        logger.info(f"추적 항목 수정: {item_id}")
        return merged

    def delete(self, item_id: str) -> None:
        """항목을 삭제합니다. 없는 ID여도 에러 없이 넘어갑니다."""
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        if len(self._items) < before:
            logger.info(f"추적 항목 삭제: {item_id}")

    # ==================== 첨부 문서 ====================

    def attach_documents(
        self,
        item_id: str,
        documents: Iterable[Union[Document, DocumentDraft, Mapping[str, Any]]],
    ) -> TrackedItem:
        """
        항목의 문서 목록 뒤에 문서들을 덧붙입니다.
        중복 제거나 내용 검사는 하지 않습니다 (필수 메타데이터만 확인).
        """
        index = self._index_of(item_id)
        item = self._items[index]
        taken = {d.id for d in item.documents}
        attached: list[Document] = []
        for i, doc in enumerate(documents):
            if isinstance(doc, Document):
                document = doc
            elif isinstance(doc, Mapping) and "id" in doc:
                try:
                    document = Document.model_validate(dict(doc))
                except PydanticValidationError as e:
                    raise to_validation_error(e, "문서 정보가 유효하지 않습니다") from e
            else:
                document = new_document(doc, index=i, taken=taken)
            taken.add(document.id)
            attached.append(document)

        updated = item.model_copy(update={"documents": [*item.documents, *attached]})
        self._items[index] = updated
        logger.info(f"문서 {len(attached)}건 첨부: {item_id}")
        return updated

    def remove_document(self, item_id: str, document_id: str) -> TrackedItem:
        """항목에서 문서 하나를 뺍니다. 없는 문서 ID는 무시합니다."""
        index = self._index_of(item_id)
        item = self._items[index]
        updated = item.model_copy(
            update={"documents": [d for d in item.documents if d.id != document_id]}
        )
        self._items[index] = updated
        return updated


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_tracked_item_store: Optional[TrackedItemStore] = None


def get_tracked_item_store() -> TrackedItemStore:
    """TrackedItemStore 인스턴스를 반환합니다."""
    global _tracked_item_store
    if _tracked_item_store is None:
        _tracked_item_store = TrackedItemStore()
    return _tracked_item_store
