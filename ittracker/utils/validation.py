"""입력 유효성 검증 유틸리티.

폼 제출 시 필수 항목 검사와 월 키(YYYY-MM) 파싱을 담당합니다.
"""

import calendar
import logging
import re
from datetime import date
from typing import Any, Iterable, Mapping, Union

from pydantic import BaseModel

from ittracker.exceptions import InputValidationError, ValidationError

logger = logging.getLogger(__name__)


# 월 키 형식: 4자리 연도 + "-" + 01~12
MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(
    values: Union[Mapping[str, Any], BaseModel],
    fields: Iterable[str],
    entity: str = "record",
) -> None:
    """
    필수 항목 검증.

    비어 있는(None 또는 공백뿐인) 항목을 모두 모아 한 번에 보고합니다.

    Args:
        values: 검사할 입력값 (dict 또는 pydantic 모델)
        fields: 필수 항목 이름들 (검사 순서대로)
        entity: 에러 메시지에 표시할 대상 이름

    Raises:
        ValidationError: 하나 이상의 필수 항목이 비어 있음.
            fields 속성에 비어 있는 항목 전체가 순서대로 담깁니다.
    """
    if isinstance(values, BaseModel):
        values = values.model_dump()

    missing = [name for name in fields if _is_blank(values.get(name))]
    if missing:
        logger.warning(f"{entity} 필수 항목 누락: {missing}")
        raise ValidationError(
            f"필수 항목을 입력해 주세요: {missing[0]}",
            fields=missing,
        )


def parse_month_key(month_key: str) -> tuple[int, int]:
    """
    월 키 파싱.

    Args:
        month_key: "YYYY-MM" 형식 문자열

    Returns:
        (연도, 월) 튜플

    Raises:
        InputValidationError: 형식이 맞지 않음
    """
    match = MONTH_KEY_PATTERN.match(month_key or "")
    if not match:
        raise InputValidationError(
            f"잘못된 월 형식입니다 (YYYY-MM): {month_key}",
            details={"month": month_key},
        )
    return int(match.group(1)), int(match.group(2))


def month_key_of(value: date) -> str:
    """날짜가 속한 월 키를 반환합니다 (2024-06-15 → "2024-06")."""
    return f"{value.year:04d}-{value.month:02d}"


def previous_month_key(today: date) -> str:
    """기준일의 직전 달 월 키 (1월이면 전년도 12월)."""
    if today.month == 1:
        return f"{today.year - 1:04d}-12"
    return f"{today.year:04d}-{today.month - 1:02d}"


def month_label(month_key: str) -> str:
    """월 키를 표시용 이름으로 변환합니다 ("2026-01" → "January 2026")."""
    year, month = parse_month_key(month_key)
    return f"{calendar.month_name[month]} {year}"
