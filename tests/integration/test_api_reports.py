"""
월간 MIS 보고서 API 통합 테스트.
기본값 생성, 섹션 단위 저장, 목록 항목 편집을 확인합니다.
"""

from httpx import AsyncClient


async def test_get_unknown_month_returns_defaults(client: AsyncClient):
    """처음 보는 월은 기본값 보고서를 반환하고 저장된 월 목록에 추가되어야 한다."""
    response = await client.get("/api/v1/reports/2024-06")

    assert response.status_code == 200
    data = response.json()
    assert data["budget"]["monthly"]["opex"]["budget"] == 150000
    assert data["it_operations"]["tickets"]["total"] == 45

    response = await client.get("/api/v1/reports/months")
    assert response.json()["months"] == ["2024-06"]


async def test_patch_replaces_only_given_sections(client: AsyncClient):
    await client.patch("/api/v1/reports/2024-06", json={"budget": {"forecast": {"next_month": 1000}}})

    response = await client.patch(
        "/api/v1/reports/2024-06",
        json={"it_operations": {"tickets": {"total": 60}}},
    )

    data = response.json()
    assert data["budget"]["forecast"]["next_month"] == 1000
    assert data["it_operations"]["tickets"]["total"] == 60
    assert data["it_operations"]["tickets"]["resolved"] == 38


async def test_unknown_section_returns_400(client: AsyncClient):
    response = await client.patch("/api/v1/reports/2024-06", json={"weather": {}})

    assert response.status_code == 400
    assert response.json()["error_code"] == "ERR_INPUT_001"


async def test_bad_month_returns_400(client: AsyncClient):
    response = await client.get("/api/v1/reports/June")

    assert response.status_code == 400


async def test_append_and_remove_entry(client: AsyncClient):
    """목록 항목 추가/삭제 API는 해당 목록만 바꿔야 한다."""
    response = await client.post(
        "/api/v1/reports/2024-06/risks/major_risks",
        json={"risk": "Vendor exit", "severity": "High", "owner": "IT"},
    )
    assert response.status_code == 201
    assert response.json()["risks"]["major_risks"][0]["risk"] == "Vendor exit"

    response = await client.delete("/api/v1/reports/2024-06/risks/major_risks/0")
    assert response.status_code == 200
    assert response.json()["risks"]["major_risks"] == []


async def test_month_options(client: AsyncClient):
    response = await client.get("/api/v1/reports/month-options")

    options = response.json()["options"]
    assert len(options) == 36
    assert options[0]["key"].endswith("-01")
    assert options[-1]["key"].endswith("-12")
