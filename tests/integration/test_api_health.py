"""
API 헬스 체크 및 루트 엔드포인트 통합 테스트.
서버의 기본 응답과 문서 페이지 접근을 확인합니다.
"""

from httpx import AsyncClient


async def test_root_endpoint(client: AsyncClient):
    """GET / 는 서버 기본 정보(name, version, docs)를 200으로 반환해야 한다."""
    response = await client.get("/")

    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "IT Development Tracker"
    assert "version" in data
    assert data["api"] == "/api/v1"


async def test_docs_endpoint(client: AsyncClient):
    """GET /docs 는 Swagger UI 페이지를 200으로 반환해야 한다."""
    response = await client.get("/docs")

    assert response.status_code == 200


async def test_health_check(client: AsyncClient):
    """GET /api/v1/health 는 healthy 상태를 반환해야 한다."""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_health_detail_reports_store_sizes(client: AsyncClient, fresh_request_store, request_draft):
    """상세 헬스 체크는 저장소별 보관 건수를 보여줘야 한다."""
    fresh_request_store.create(request_draft)

    response = await client.get("/api/v1/health/detail")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["stores"] == {"requests": 1, "tracked_items": 0, "report_months": 0}
    assert "app_name" in data["config"]
