"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from ittracker.api.endpoints import health, requests, tracked_items, dashboard, reports

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 개발 요청 엔드포인트: 등록, 검색, 단계별 편집 (/requests)
api_router.include_router(
    requests.router,
    prefix="/requests",
    tags=["requests"]
)

# 추적 항목 엔드포인트: 요청 하위 항목 목록과 개별 항목 (/requests/{id}/items, /items)
api_router.include_router(
    tracked_items.router,
    tags=["tracked-items"]
)

# 대시보드 엔드포인트: 전체 요약과 월간 MIS 통계 (/dashboard)
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"]
)

# 월간 보고서 엔드포인트: 섹션별 보고서 편집 (/reports)
api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"]
)
