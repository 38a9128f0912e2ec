"""Unit tests for per-field validation helpers."""

from decimal import Decimal

import pytest

from propertyops.core.errors import ValidationError
from propertyops.core.validation import (
    MAX_RECORD_ID,
    FieldErrors,
    humanize_choices,
    is_blank,
    is_record_id,
    truncate_float,
)


class TestHumanizeChoices:
    """Tests for humanize_choices."""

    @pytest.mark.parametrize(
        ("choices", "expected"),
        [
            ([], ""),
            (["cash"], "cash"),
            (["low", "high"], "low or high"),
            (["cash", "card", "ach", "check"], "cash, card, ach, or check"),
        ],
    )
    def test_joins_choices(self, choices, expected):
        assert humanize_choices(choices) == expected


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["x", 0, Decimal("0"), False])
    def test_present_values(self, value):
        assert not is_blank(value)


class TestFieldErrors:
    """Tests for FieldErrors rules."""

    def test_empty_errors_do_not_raise(self):
        """Verify raise_if_any is a no-op with nothing collected."""
        errors = FieldErrors()

        errors.raise_if_any()

        assert not errors

    def test_messages_accumulate_per_field(self):
        """Verify several messages for one field are kept in order."""
        errors = FieldErrors()
        errors.add("status", "can't be blank")
        errors.add("status", "must be new or closed")

        with pytest.raises(ValidationError) as exc_info:
            errors.raise_if_any()

        assert exc_info.value.errors == {"status": ["can't be blank", "must be new or closed"]}
        assert exc_info.value.status_code == 422

    def test_inclusion_allows_nil_by_default(self):
        errors = FieldErrors()
        errors.inclusion({"status": None}, "status", ["a", "b"])

        assert "status" not in errors

    def test_inclusion_without_nil(self):
        errors = FieldErrors()
        errors.inclusion({}, "status", ["a", "b"], allow_nil=False)

        assert errors.as_dict() == {"status": ["must be a or b"]}

    @pytest.mark.parametrize("value", ["12", True, 1.5j])
    def test_numericality_rejects_non_numbers(self, value):
        """Verify strings, booleans and other types are not numbers."""
        errors = FieldErrors()
        errors.numericality({"amount": value}, "amount", greater_than=0)

        assert errors.as_dict() == {"amount": ["is not a number"]}

    def test_numericality_bounds(self):
        errors = FieldErrors()
        errors.numericality({"a": 0, "b": -1}, "a", greater_than=0)
        errors.numericality({"a": 0, "b": -1}, "b", greater_than_or_equal_to=0)

        assert errors.as_dict() == {
            "a": ["must be greater than 0"],
            "b": ["must be greater than or equal to 0"],
        }

    def test_numericality_allow_nil(self):
        errors = FieldErrors()
        errors.numericality({"rent": None}, "rent", greater_than_or_equal_to=0, allow_nil=True)

        assert not errors


class TestIsRecordId:
    """Tests for is_record_id."""

    @pytest.mark.parametrize("value", [1, 42, MAX_RECORD_ID])
    def test_usable_ids(self, value):
        assert is_record_id(value)

    @pytest.mark.parametrize("value", [None, 0, -1, MAX_RECORD_ID + 1, 2**80, True, "7", 1.0])
    def test_unusable_ids(self, value):
        assert not is_record_id(value)


class TestTruncateFloat:
    """Tests for truncate_float."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.5, 1), (215000.75, 215000), (-2.9, -2), (3, 3), ("12", "12"), (None, None)],
    )
    def test_truncates_only_finite_floats(self, value, expected):
        assert truncate_float(value) == expected

    def test_non_finite_float_is_left_for_validation(self):
        value = float("inf")

        assert truncate_float(value) == value
