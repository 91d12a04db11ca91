"""
대시보드 API입니다.
메인 대시보드 요약과 월간 MIS 통계를 요청 목록에서 매번 새로 계산합니다.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter

from ittracker.config import get_settings
from ittracker.models import DashboardOverview, MISSummary
from ittracker.services import get_request_store, aggregate_stats
from ittracker.utils import month_label, previous_month_key

router = APIRouter()


@router.get("/overview")
async def get_overview() -> DashboardOverview:
    """전체 요청 수, 완료율, 단계/우선순위 분포, 최근 요청."""
    settings = get_settings()
    requests = get_request_store().list_requests()
    return aggregate_stats.overview(requests, recent=settings.recent_request_count)


@router.get("/mis")
async def get_mis_summary(month: Optional[str] = None) -> MISSummary:
    """
    월간 MIS 통계.

    - month: "YYYY-MM" (생략하면 지난달)
    - stats/departments: 해당 월에 접수된 요청 기준
    - activities: 해당 월에 날짜가 찍힌 모든 단계 활동
    """
    month_key = month or previous_month_key(date.today())
    requests = get_request_store().list_requests()
    stats = aggregate_stats.monthly_stats(requests, month_key)
    scoped = aggregate_stats.monthly_filter(requests, month_key)

    return MISSummary(
        month=month_key,
        label=month_label(month_key),
        stats=stats,
        departments=aggregate_stats.breakdown_entries(
            aggregate_stats.department_breakdown(scoped), len(scoped)
        ),
        activities=aggregate_stats.phase_activity(requests, month_key),
    )
