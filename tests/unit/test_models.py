"""Unit tests for Pydantic data models.

Tests creation, defaults, and rejection of unknown values
for request, tracked item, and report models.
"""

import pytest
from datetime import date
from pydantic import ValidationError as PydanticValidationError

from ittracker.models import (
    Stage,
    Priority,
    DevelopmentRequest,
    RequestFilter,
    RequestDraft,
    Document,
    TrackedItem,
    TrackerPhase,
    MonthlyReport,
    SECTION_KEYS,
)


# ---------------------------------------------------------------------------
# DevelopmentRequest
# ---------------------------------------------------------------------------

class TestDevelopmentRequest:
    def test_defaults(self, request_factory):
        req = request_factory()
        assert req.current_stage == Stage.REQUIREMENT_GATHERING
        assert req.status == "New Request"
        assert req.approval_status is None
        assert req.deployment_date is None

    def test_unknown_stage_rejected(self, request_factory):
        with pytest.raises(PydanticValidationError):
            request_factory(current_stage="archived")

    def test_unknown_field_rejected(self, request_factory):
        with pytest.raises(PydanticValidationError):
            request_factory(colour="blue")

    def test_stage_values_are_wire_strings(self, request_factory):
        data = request_factory(current_stage=Stage.UAT).model_dump(mode="json")
        assert data["current_stage"] == "uat"
        assert data["priority"] == "Medium"

    def test_request_draft_defaults(self):
        draft = RequestDraft()
        assert draft.priority == Priority.MEDIUM
        assert draft.title == ""


# ---------------------------------------------------------------------------
# RequestFilter
# ---------------------------------------------------------------------------

class TestRequestFilter:
    def test_empty_filter_matches_everything(self, request_factory):
        assert RequestFilter().matches(request_factory())

    def test_search_is_case_insensitive_over_title_id_requester(self, request_factory):
        req = request_factory("REQ-042", title="Payroll Sync", requested_by="Lisa Rodriguez")
        assert RequestFilter(search_term="payroll").matches(req)
        assert RequestFilter(search_term="req-042").matches(req)
        assert RequestFilter(search_term="RODRIGUEZ").matches(req)
        assert not RequestFilter(search_term="inventory").matches(req)

    def test_priority_and_stage_exact(self, request_factory):
        req = request_factory(priority=Priority.HIGH, current_stage=Stage.TESTING)
        assert RequestFilter(priority="High", stage="testing").matches(req)
        assert not RequestFilter(priority="Low").matches(req)
        assert not RequestFilter(stage="uat").matches(req)

    def test_unknown_priority_rejected(self):
        with pytest.raises(PydanticValidationError):
            RequestFilter(priority="Critical")


# ---------------------------------------------------------------------------
# Tracked items and documents
# ---------------------------------------------------------------------------

class TestDocument:
    @pytest.mark.parametrize(
        "size,expected",
        [(0, "0 Bytes"), (512, "512 Bytes"), (1536, "1.5 KB"), (1048576, "1 MB")],
    )
    def test_size_display(self, size, expected):
        doc = Document(id="doc-1-0", name="a.txt", size=size, type="text/plain", uploaded_by="me")
        assert doc.size_display == expected
        assert doc.model_dump()["size_display"] == expected

    def test_negative_size_rejected(self):
        with pytest.raises(PydanticValidationError):
            Document(id="doc-1-0", name="a.txt", size=-1, type="text/plain", uploaded_by="me")


class TestTrackedItem:
    def test_phase_must_be_known(self):
        with pytest.raises(PydanticValidationError):
            TrackedItem(
                id="x-1",
                request_id="REQ-001",
                title="t",
                description="d",
                assigned_to="a",
                reported_by="r",
                phase="Development",
            )

    def test_post_deployment_phase_value(self):
        assert TrackerPhase("Post-Deployment") == TrackerPhase.POST_DEPLOYMENT


# ---------------------------------------------------------------------------
# MonthlyReport
# ---------------------------------------------------------------------------

class TestMonthlyReport:
    def test_all_sections_present(self):
        report = MonthlyReport()
        for key in SECTION_KEYS:
            assert getattr(report, key) is not None

    def test_default_budget_figures(self):
        report = MonthlyReport()
        assert report.budget.monthly.opex.budget == 150000
        assert report.budget.monthly.opex.actual == 142000
        assert report.budget.monthly.opex.variance == -8000
        assert report.budget.monthly.capex.budget == 200000

    def test_defaults_are_deterministic(self):
        assert MonthlyReport().model_dump() == MonthlyReport().model_dump()
