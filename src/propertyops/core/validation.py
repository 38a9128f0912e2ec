"""Per-field record validation.

Services run a record's rules against the merged field values, collect
every failure in a ``FieldErrors`` map, and raise once at the end so the
client sees all problems in a single response.
"""

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator

from propertyops.core.errors import ValidationError


BLANK_MESSAGE = "can't be blank"
TAKEN_MESSAGE = "has already been taken"
MISSING_PARENT_MESSAGE = "must exist"
NOT_A_NUMBER_MESSAGE = "is not a number"

# Largest value a signed 64-bit integer primary key can hold
MAX_RECORD_ID = 2**63 - 1


def humanize_choices(choices: Iterable[str]) -> str:
    """Join choices into an English list.

    Examples:
        >>> humanize_choices(["cash", "card", "ach", "check"])
        'cash, card, ach, or check'
        >>> humanize_choices(["a", "b"])
        'a or b'
    """
    items = list(choices)
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} or {items[1]}"
    return f"{', '.join(items[:-1])}, or {items[-1]}"


def is_record_id(value: Any) -> bool:
    """Return True if ``value`` could be the id of a stored record."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 1 <= value <= MAX_RECORD_ID
    )


def truncate_float(value: Any) -> Any:
    """Drop the fraction of a float so it validates as an integer.

    Examples:
        >>> truncate_float(1.5)
        1
        >>> truncate_float("7")
        '7'
    """
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return value


# Integer field that accepts fractional input, keeping the whole part
TruncatedInt = Annotated[int, BeforeValidator(truncate_float)]


def is_blank(value: Any) -> bool:
    """Return True for None and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class FieldErrors:
    """Ordered map of field name to error messages."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        """Record a message against a field."""
        self._errors.setdefault(field, []).append(message)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __contains__(self, field: str) -> bool:
        return field in self._errors

    def as_dict(self) -> dict[str, list[str]]:
        """Return a copy of the collected messages."""
        return {field: list(messages) for field, messages in self._errors.items()}

    def raise_if_any(self) -> None:
        """Raise ValidationError when anything was collected."""
        if self._errors:
            raise ValidationError(errors=self.as_dict())

    # ------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------

    def presence(self, values: dict[str, Any], *fields: str) -> None:
        """Require each field to be present and not blank."""
        for field in fields:
            if is_blank(values.get(field)):
                self.add(field, BLANK_MESSAGE)

    def inclusion(
        self,
        values: dict[str, Any],
        field: str,
        choices: Iterable[str],
        allow_nil: bool = True,
    ) -> None:
        """Require the field's value to be one of ``choices``."""
        allowed = tuple(choices)
        value = values.get(field)
        if value is None and allow_nil:
            return
        if value not in allowed:
            self.add(field, f"must be {humanize_choices(allowed)}")

    def numericality(
        self,
        values: dict[str, Any],
        field: str,
        greater_than: int | None = None,
        greater_than_or_equal_to: int | None = None,
        allow_nil: bool = False,
    ) -> None:
        """Require the field to be a number within the given bounds."""
        value = values.get(field)
        if value is None:
            if not allow_nil:
                self.add(field, NOT_A_NUMBER_MESSAGE)
            return
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            self.add(field, NOT_A_NUMBER_MESSAGE)
            return
        if greater_than is not None and not value > greater_than:
            self.add(field, f"must be greater than {greater_than}")
        if greater_than_or_equal_to is not None and not value >= greater_than_or_equal_to:
            self.add(field, f"must be greater than or equal to {greater_than_or_equal_to}")
