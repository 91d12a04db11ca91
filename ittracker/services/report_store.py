"""
월간 MIS 보고서 저장소 서비스입니다.

월 키(YYYY-MM)별로 보고서 스냅샷을 보관합니다.

주요 규칙:
- 처음 조회하는 월은 기본값 보고서를 만들어 저장한 뒤 반환합니다.
  (이후 편집/저장이 화면에 표시된 것과 같은 보고서를 대상으로 하도록)
- 저장은 섹션 단위 교체입니다. 전달된 섹션은 통째로 바뀌고
  (섹션 안의 빠진 하위 필드는 이전 값이 아니라 기본값이 됨), 전달되지 않은 섹션은 유지됩니다.
- 수치 범위는 검증하지 않습니다.
"""

import logging
import typing
from datetime import date
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ittracker.exceptions import InputValidationError
from ittracker.models import SECTION_KEYS, MonthlyReport, MonthOption
from ittracker.services.request_store import to_validation_error
from ittracker.utils.validation import parse_month_key, month_label

logger = logging.getLogger(__name__)

# 진행 중 프로젝트 ID 접두사 (P001, P002 ...)
ONGOING_PROJECT_PREFIX = "P"


def default_report() -> MonthlyReport:
    """
    기본값으로 완전히 채워진 보고서를 만듭니다.
    매번 새 객체를 반환하며 결과는 항상 같습니다 (무작위 값 없음).
    """
    return MonthlyReport()


def _section_model(section: str) -> type[BaseModel]:
    if section not in SECTION_KEYS:
        raise InputValidationError(
            f"알 수 없는 보고서 섹션입니다: {section}",
            details={"section": section, "allowed": list(SECTION_KEYS)},
        )
    return MonthlyReport.model_fields[section].annotation


def _list_item_model(section: str, list_key: str) -> type[BaseModel]:
    """섹션 안의 목록 필드가 담는 항목 모델 (예: risks.major_risks → MajorRisk)."""
    model = _section_model(section)
    field = model.model_fields.get(list_key)
    if field is None or typing.get_origin(field.annotation) is not list:
        raise InputValidationError(
            f"{section} 섹션에 목록 항목 {list_key}이(가) 없습니다",
            details={"section": section, "list_key": list_key},
        )
    return typing.get_args(field.annotation)[0]


class MonthlyReportStore:
    """메모리 기반 월간 보고서 저장소입니다."""

    def __init__(self):
        self._reports: dict[str, MonthlyReport] = {}

    def __contains__(self, month_key: str) -> bool:
        return month_key in self._reports

    def months(self) -> list[str]:
        """저장된(한 번이라도 조회/저장된) 월 키 목록 (오름차순)."""
        return sorted(self._reports)

    def get(self, month_key: str) -> MonthlyReport:
        """
        월 보고서를 조회합니다.
        처음 보는 월이면 기본값 보고서를 만들어 저장해 둡니다.

        Raises:
            InputValidationError: 월 키 형식 오류
        """
        parse_month_key(month_key)
        if month_key not in self:
            self._reports[month_key] = default_report()
            logger.info(f"MIS 보고서 기본값 생성: {month_key}")
        return self._reports[month_key]

    def save(
        self,
        month_key: str,
        partial: Union[MonthlyReport, Mapping[str, Any]],
    ) -> MonthlyReport:
        """
        보고서 일부(섹션 단위)를 저장합니다.

        Args:
            month_key: "YYYY-MM"
            partial: 섹션 키 → 섹션 값. MonthlyReport를 넘기면 명시적으로 설정된 섹션만 반영합니다.

        Returns:
            병합된 보고서

        Raises:
            InputValidationError: 월 키 형식 오류 또는 알 수 없는 섹션
            ValidationError: 섹션 내용이 모델과 맞지 않음
        """
        existing = self.get(month_key)

        if isinstance(partial, MonthlyReport):
            sections = {key: getattr(partial, key) for key in partial.model_fields_set}
        else:
            sections = dict(partial)

        replaced: dict[str, BaseModel] = {}
        for key, value in sections.items():
            model = _section_model(key)
            try:
                replaced[key] = model.model_validate(value)
            except PydanticValidationError as e:
                raise to_validation_error(e, f"{key} 섹션 데이터가 유효하지 않습니다") from e

        report = existing.model_copy(update=replaced)
        self._reports[month_key] = report
        logger.info(f"MIS 보고서 저장: {month_key} ({', '.join(replaced) or '변경 없음'})")
        return report

    # ==================== 목록 항목 편집 ====================

    def append_entry(
        self,
        month_key: str,
        section: str,
        list_key: str,
        entry: Union[BaseModel, Mapping[str, Any]],
    ) -> MonthlyReport:
        """
        섹션의 목록 필드 끝에 항목 하나를 추가하고 섹션 단위로 저장합니다.
        진행 중 프로젝트(projects.ongoing)는 ID가 비어 있으면 "P" + 세 자리 순번을 붙입니다.
        """
        item_model = _list_item_model(section, list_key)
        try:
            item = item_model.model_validate(
                entry.model_dump() if isinstance(entry, BaseModel) else dict(entry)
            )
        except PydanticValidationError as e:
            raise to_validation_error(e, f"{section}.{list_key} 항목이 유효하지 않습니다") from e

        current = getattr(self.get(month_key), section)
        entries = getattr(current, list_key)
        if (section, list_key) == ("projects", "ongoing") and not item.id:
            item = item.model_copy(update={"id": f"{ONGOING_PROJECT_PREFIX}{len(entries) + 1:03d}"})

        updated = current.model_copy(update={list_key: [*entries, item]})
        return self.save(month_key, {section: updated})

    def remove_entry(
        self,
        month_key: str,
        section: str,
        list_key: str,
        index: int,
    ) -> MonthlyReport:
        """섹션의 목록 필드에서 index 위치의 항목을 뺍니다. 범위를 벗어난 index는 무시합니다."""
        _list_item_model(section, list_key)
        current = getattr(self.get(month_key), section)
        entries = getattr(current, list_key)
        updated = current.model_copy(
            update={list_key: [e for i, e in enumerate(entries) if i != index]}
        )
        return self.save(month_key, {section: updated})


def month_options(today: Optional[date] = None) -> list[MonthOption]:
    """월 선택 목록: 작년 1월부터 내년 12월까지 36개월."""
    today = today or date.today()
    options = []
    for year in range(today.year - 1, today.year + 2):
        for month in range(1, 13):
            key = f"{year:04d}-{month:02d}"
            options.append(MonthOption(key=key, label=month_label(key)))
    return options


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_report_store: Optional[MonthlyReportStore] = None


def get_report_store() -> MonthlyReportStore:
    """MonthlyReportStore 인스턴스를 반환합니다."""
    global _report_store
    if _report_store is None:
        _report_store = MonthlyReportStore()
    return _report_store
