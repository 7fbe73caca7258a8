# migrator/services/financial.py
"""
Normalization of legacy monetary and hour fields.

Legacy values arrive as JSON numbers or strings. They are converted to
``Decimal`` through their string form so binary float noise never reaches
the rounding step, rounded half-up to two places and stored as floats.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from migrator.exceptions import InvalidLegacyRecordError
from migrator.models.legacy import LegacyAssignment

TWO_PLACES = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Convert a raw legacy value to Decimal."""
    if value is None or value == "" or isinstance(value, bool):
        raise InvalidLegacyRecordError(
            message=f"Expected a numeric amount, got {value!r}",
            details={"value": value},
        )
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise InvalidLegacyRecordError(
            message=f"Expected a numeric amount, got {value!r}",
            details={"value": value},
        ) from e


def quantize_amount(value: Any) -> Decimal:
    """Round to exactly two fractional digits, half-up."""
    amount = to_decimal(value)
    if not amount.is_finite():
        raise InvalidLegacyRecordError(
            message=f"Expected a finite amount, got {value!r}",
            details={"value": str(value)},
        )
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def normalize_amount(value: Any) -> float:
    """Round half-up to two places and convert to the storage number type."""
    return float(quantize_amount(value))


@dataclass(frozen=True)
class NormalizedFinancials:
    """Two-decimal balance, rate and cost of an assignment."""

    balance: float
    rate: float
    cost: float


def normalize_assignment_financials(assignment: LegacyAssignment) -> NormalizedFinancials:
    try:
        return NormalizedFinancials(
            balance=normalize_amount(assignment.available_hours),
            rate=normalize_amount(assignment.rate),
            cost=normalize_amount(assignment.cost),
        )
    except InvalidLegacyRecordError as e:
        e.details.setdefault("assignment_id", assignment.id)
        raise
