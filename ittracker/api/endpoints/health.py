"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from ittracker.config import get_settings
from ittracker.services import get_request_store, get_tracked_item_store, get_report_store

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 설정과 저장소별 보관 건수도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "app_name": settings.app_name,
            "load_sample_data": settings.load_sample_data,
            "recent_request_count": settings.recent_request_count,
        },
        "stores": {
            "requests": len(get_request_store()),
            "tracked_items": len(get_tracked_item_store()),
            "report_months": len(get_report_store().months()),
        },
    }
