"""Unit tests for input validation utilities.

Tests required-field checks and month key parsing/formatting.
All tests are pure unit tests with no I/O.
"""

import pytest
from datetime import date

from ittracker.exceptions import InputValidationError, ValidationError
from ittracker.models import RequestDraft
from ittracker.utils import (
    require_fields,
    parse_month_key,
    month_key_of,
    previous_month_key,
    month_label,
)


# ---------------------------------------------------------------------------
# require_fields
# ---------------------------------------------------------------------------

class TestRequireFields:
    def test_all_present_passes(self):
        require_fields({"a": "x", "b": "y"}, ["a", "b"])

    def test_reports_every_blank_field_in_order(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"a": "", "b": "ok", "c": None}, ["a", "b", "c"])
        assert exc_info.value.fields == ["a", "c"]
        assert "a" in exc_info.value.message

    def test_whitespace_only_is_blank(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"title": "   "}, ["title"])
        assert exc_info.value.fields == ["title"]

    def test_missing_key_is_blank(self):
        with pytest.raises(ValidationError):
            require_fields({}, ["title"])

    def test_accepts_pydantic_model(self):
        draft = RequestDraft(title="T", requested_by="R")
        with pytest.raises(ValidationError) as exc_info:
            require_fields(draft, ["title", "requested_by", "department"])
        assert exc_info.value.fields == ["department"]

    def test_non_string_values_are_not_blank(self):
        require_fields({"count": 0, "flag": False}, ["count", "flag"])


# ---------------------------------------------------------------------------
# Month keys
# ---------------------------------------------------------------------------

class TestParseMonthKey:
    def test_valid_key(self):
        assert parse_month_key("2024-06") == (2024, 6)

    @pytest.mark.parametrize("bad", ["2024-13", "2024-00", "2024-6", "24-06", "2024/06", "", "june"])
    def test_invalid_keys(self, bad):
        with pytest.raises(InputValidationError):
            parse_month_key(bad)


class TestMonthHelpers:
    def test_month_key_of(self):
        assert month_key_of(date(2024, 6, 15)) == "2024-06"

    def test_previous_month_mid_year(self):
        assert previous_month_key(date(2024, 6, 15)) == "2024-05"

    def test_previous_month_wraps_year(self):
        assert previous_month_key(date(2025, 1, 3)) == "2024-12"

    def test_month_label(self):
        assert month_label("2026-01") == "January 2026"
