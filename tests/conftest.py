"""공유 pytest fixture 모음."""

import pytest
from datetime import date

from ittracker.models import (
    Stage,
    Priority,
    ApprovalStatus,
    TestStatus,
    UATStatus,
    Environment,
    FinalStatus,
    DevelopmentRequest,
)
from ittracker.services import request_store, tracked_item_store, report_store
from ittracker.services import RequestStore, TrackedItemStore, MonthlyReportStore


def make_request(request_id: str = "REQ-001", **overrides) -> DevelopmentRequest:
    """필수 필드가 채워진 DevelopmentRequest를 만듭니다."""
    data = {
        "id": request_id,
        "title": "Sample request",
        "request_date": date(2024, 6, 3),
        "requested_by": "Jane Doe",
        "department": "IT",
        "priority": Priority.MEDIUM,
        "business_justification": "Needed for operations",
        "related_module": "Core",
        "current_stage": Stage.REQUIREMENT_GATHERING,
    }
    data.update(overrides)
    return DevelopmentRequest(**data)


@pytest.fixture
def request_factory():
    """make_request 함수 fixture."""
    return make_request


@pytest.fixture
def request_draft():
    """등록 폼 입력값 fixture."""
    return {
        "title": "Inventory report export",
        "requested_by": "Sarah Wilson",
        "department": "Operations",
        "priority": "High",
        "business_justification": "Weekly stock reports are built by hand",
        "related_module": "Inventory System",
    }


@pytest.fixture
def item_draft():
    """추적 항목 입력값 fixture."""
    return {
        "type": "Bug",
        "title": "Export button does nothing",
        "description": "Clicking export on the report page has no effect",
        "severity": "High",
        "status": "Open",
        "assigned_to": "Bob Martinez",
        "reported_by": "Sarah Wilson",
    }


@pytest.fixture
def sample_requests_mixed():
    """단계/우선순위/날짜가 섞인 요청 목록 fixture."""
    return [
        make_request(
            "REQ-001",
            title="Completed in June",
            request_date=date(2024, 6, 1),
            department="Security",
            priority=Priority.HIGH,
            current_stage=Stage.COMPLETED,
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 6, 5),
            test_status=TestStatus.PASS,
            uat_status=UATStatus.ACCEPTED,
            deployment_date=date(2024, 6, 20),
            environment=Environment.PROD,
            close_date=date(2024, 7, 1),
            final_status=FinalStatus.CLOSED,
        ),
        make_request(
            "REQ-002",
            title="In development",
            request_date=date(2024, 6, 10),
            department="Operations",
            priority=Priority.MEDIUM,
            current_stage=Stage.DEVELOPMENT,
            approval_status=ApprovalStatus.APPROVED,
            approved_date=date(2024, 6, 12),
            start_date=date(2024, 6, 15),
        ),
        make_request(
            "REQ-003",
            title="Awaiting approval",
            request_date=date(2024, 7, 2),
            department="Security",
            priority=Priority.URGENT,
            current_stage=Stage.APPROVAL,
            approval_status=ApprovalStatus.PENDING,
        ),
    ]


@pytest.fixture
def fresh_request_store(monkeypatch):
    """비어 있는 RequestStore로 싱글톤을 교체합니다."""
    store = RequestStore()
    monkeypatch.setattr(request_store, "_request_store", store)
    return store


@pytest.fixture
def fresh_item_store(monkeypatch):
    """비어 있는 TrackedItemStore로 싱글톤을 교체합니다."""
    store = TrackedItemStore()
    monkeypatch.setattr(tracked_item_store, "_tracked_item_store", store)
    return store


@pytest.fixture
def fresh_report_store(monkeypatch):
    """비어 있는 MonthlyReportStore로 싱글톤을 교체합니다."""
    store = MonthlyReportStore()
    monkeypatch.setattr(report_store, "_report_store", store)
    return store


@pytest.fixture
def fresh_stores(fresh_request_store, fresh_item_store, fresh_report_store):
    """세 저장소를 모두 새로 만듭니다 (API 테스트용)."""
    return fresh_request_store, fresh_item_store, fresh_report_store


@pytest.fixture
async def client(fresh_stores):
    """httpx AsyncClient fixture (FastAPI 테스트용). 저장소는 테스트마다 비어 있습니다."""
    from httpx import AsyncClient, ASGITransport
    from ittracker.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
