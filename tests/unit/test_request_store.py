"""Unit tests for the in-memory request store.

Covers creation with required fields, id issuance, filtering,
patch merging, phase-scoped edits, stage moves, and bulk loading.
"""

import pytest
from datetime import date

from ittracker.exceptions import FieldOwnershipError, NotFoundError, ValidationError
from ittracker.models import Stage, Priority, ApprovalStatus, RequestDraft, RequestFilter
from ittracker.services import RequestStore, get_request_store


@pytest.fixture
def store():
    return RequestStore()


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------

class TestCreate:
    def test_create_from_mapping(self, store, request_draft):
        req = store.create(request_draft)
        assert req.id == "REQ-001"
        assert req.current_stage == Stage.REQUIREMENT_GATHERING
        assert req.status == "New Request"
        assert req.priority == Priority.HIGH
        assert req.request_date == date.today()
        assert len(store) == 1

    def test_create_from_draft_model(self, store, request_draft):
        req = store.create(RequestDraft(**request_draft, request_date=date(2024, 1, 2)))
        assert req.request_date == date(2024, 1, 2)

    def test_ids_are_sequential(self, store, request_draft):
        ids = [store.create(request_draft).id for _ in range(3)]
        assert ids == ["REQ-001", "REQ-002", "REQ-003"]

    def test_missing_required_field_names_first_blank(self, store, request_draft):
        request_draft["department"] = ""
        request_draft["related_module"] = "  "
        with pytest.raises(ValidationError) as exc_info:
            store.create(request_draft)
        assert exc_info.value.fields == ["department", "related_module"]
        assert "department" in exc_info.value.message
        assert len(store) == 0

    def test_priority_defaults_to_medium(self, store, request_draft):
        del request_draft["priority"]
        assert store.create(request_draft).priority == Priority.MEDIUM

    def test_unknown_priority_rejected(self, store, request_draft):
        request_draft["priority"] = "Critical"
        with pytest.raises(ValidationError) as exc_info:
            store.create(request_draft)
        assert "priority" in exc_info.value.fields

    def test_unknown_field_rejected(self, store, request_draft):
        request_draft["colour"] = "blue"
        with pytest.raises(ValidationError):
            store.create(request_draft)


# ---------------------------------------------------------------------------
# get / list
# ---------------------------------------------------------------------------

class TestQuery:
    def test_get_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.get("REQ-999")

    def test_list_returns_copy_in_insertion_order(self, store, sample_requests_mixed):
        store.load(sample_requests_mixed)
        listed = store.list_requests()
        assert [r.id for r in listed] == ["REQ-001", "REQ-002", "REQ-003"]
        listed.clear()
        assert len(store) == 3

    def test_list_with_filter(self, store, sample_requests_mixed):
        store.load(sample_requests_mixed)
        result = store.list_requests(RequestFilter(priority="Urgent"))
        assert [r.id for r in result] == ["REQ-003"]
        result = store.list_requests(RequestFilter(search_term="DEVELOPMENT"))
        assert [r.id for r in result] == ["REQ-002"]


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

class TestUpdate:
    def test_shallow_merge_keeps_other_fields(self, store, request_draft):
        req = store.create(request_draft)
        updated = store.update(req.id, {"assigned_developer": "Emma Davis"})
        assert updated.assigned_developer == "Emma Davis"
        assert updated.title == req.title
        assert store.get(req.id).assigned_developer == "Emma Davis"

    def test_partial_patch_keeps_unspecified_fields(self, store, request_draft):
        request_draft.update(title="A", priority="Low")
        req = store.create(request_draft)
        updated = store.update(req.id, {"priority": "High"})
        assert updated.title == "A"
        assert updated.priority == Priority.HIGH

    def test_last_write_wins(self, store, request_draft):
        req = store.create(request_draft)
        store.update(req.id, {"title": "First"})
        store.update(req.id, {"title": "Second"})
        assert store.get(req.id).title == "Second"

    def test_update_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.update("REQ-404", {"title": "x"})

    def test_id_cannot_change(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(ValidationError) as exc_info:
            store.update(req.id, {"id": "REQ-777"})
        assert exc_info.value.fields == ["id"]

    def test_invalid_enum_leaves_record_unchanged(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(ValidationError):
            store.update(req.id, {"test_status": "Maybe"})
        assert store.get(req.id) == req

    def test_blank_required_field_rejected_on_update(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(ValidationError) as exc_info:
            store.update(req.id, {"title": "  ", "department": "Finance"})
        assert exc_info.value.fields == ["title"]
        assert store.get(req.id) == req

    def test_requirement_editor_cannot_blank_title(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(ValidationError):
            store.update_phase(req.id, Stage.REQUIREMENT_GATHERING, {"title": ""})
        assert store.get(req.id).title == request_draft["title"]

    def test_update_phase_owned_fields(self, store, request_draft):
        req = store.create(request_draft)
        updated = store.update_phase(
            req.id,
            Stage.APPROVAL,
            {"approval_status": "Approved", "approved_date": "2024-06-05"},
        )
        assert updated.approval_status == ApprovalStatus.APPROVED
        assert updated.approved_date == date(2024, 6, 5)

    def test_update_phase_rejects_foreign_field(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(FieldOwnershipError):
            store.update_phase(req.id, "analysis", {"approval_status": "Approved"})
        assert store.get(req.id).approval_status is None

    def test_update_phase_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.update_phase("REQ-404", Stage.ANALYSIS, {"assigned_analyst": "x"})


# ---------------------------------------------------------------------------
# set_stage
# ---------------------------------------------------------------------------

class TestSetStage:
    def test_forward_move_with_status(self, store, request_draft):
        req = store.create(request_draft)
        moved = store.set_stage(req.id, Stage.ANALYSIS, "Under Analysis")
        assert moved.current_stage == Stage.ANALYSIS
        assert moved.status == "Under Analysis"

    def test_backward_move_allowed(self, store, request_draft):
        req = store.create(request_draft)
        store.set_stage(req.id, Stage.TESTING)
        moved = store.set_stage(req.id, Stage.DEVELOPMENT)
        assert moved.current_stage == Stage.DEVELOPMENT

    def test_status_kept_when_omitted(self, store, request_draft):
        req = store.create(request_draft)
        moved = store.set_stage(req.id, "uat")
        assert moved.status == "New Request"

    def test_unknown_stage(self, store, request_draft):
        req = store.create(request_draft)
        with pytest.raises(ValidationError):
            store.set_stage(req.id, "archived")


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------

class TestLoad:
    def test_ids_stay_unique_after_load_with_gaps(self, store, request_factory, request_draft):
        store.load([request_factory("REQ-001"), request_factory("REQ-007")])
        created = store.create(request_draft)
        assert created.id == "REQ-008"
        ids = [r.id for r in store.list_requests()]
        assert len(ids) == len(set(ids))

    def test_duplicate_id_rejected(self, store, request_factory):
        store.load([request_factory("REQ-001")])
        with pytest.raises(ValidationError):
            store.load([request_factory("REQ-001")])

    def test_load_from_mapping(self, store, request_factory):
        record = request_factory("REQ-003").model_dump(mode="json")
        assert store.load([record]) == 1
        assert store.get("REQ-003").request_date == date(2024, 6, 3)

    def test_sample_data_loads(self, store):
        from ittracker.services import sample_requests

        assert store.load(sample_requests()) == 12
        assert store.get("REQ-012").current_stage == Stage.APPROVAL


class TestSingleton:
    def test_getter_returns_same_instance(self, fresh_request_store):
        assert get_request_store() is fresh_request_store
        assert get_request_store() is get_request_store()
