"""
월간 MIS 보고서 API입니다.
월별 보고서 조회, 섹션 단위 저장, 목록 항목 추가/삭제를 제공합니다.
"""

from typing import Any

from fastapi import APIRouter

from ittracker.models import MonthlyReport
from ittracker.services import get_report_store
from ittracker.services.report_store import month_options

router = APIRouter()


@router.get("/months")
async def list_report_months() -> dict:
    """한 번이라도 조회/저장된 월 목록."""
    months = get_report_store().months()
    return {"total": len(months), "months": months}


@router.get("/month-options")
async def list_month_options() -> dict:
    """월 선택 목록 (작년 1월 ~ 내년 12월)."""
    return {"options": month_options()}


@router.get("/{month}")
async def get_report(month: str) -> MonthlyReport:
    """월 보고서를 조회합니다. 처음 보는 월이면 기본값 보고서가 만들어집니다."""
    return get_report_store().get(month)


@router.patch("/{month}")
async def save_report(month: str, sections: dict[str, Any]) -> MonthlyReport:
    """
    보고서 저장 API.
    전달한 섹션만 통째로 교체되고 나머지 섹션은 그대로 유지됩니다.
    """
    return get_report_store().save(month, sections)


@router.post("/{month}/{section}/{list_key}", status_code=201)
async def append_report_entry(
    month: str,
    section: str,
    list_key: str,
    entry: dict[str, Any],
) -> MonthlyReport:
    """섹션의 목록 필드(예: risks/major_risks)에 항목 하나를 추가합니다."""
    return get_report_store().append_entry(month, section, list_key, entry)


@router.delete("/{month}/{section}/{list_key}/{index}")
async def remove_report_entry(
    month: str,
    section: str,
    list_key: str,
    index: int,
) -> MonthlyReport:
    return get_report_store().remove_entry(month, section, list_key, index)
