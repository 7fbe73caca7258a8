"""
Unit tests for monetary normalization.
"""

from decimal import Decimal

import pytest


@pytest.mark.unit
class TestNormalizeAmount:
    """Tests for normalize_amount."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (10.005, 10.01),
            ("10.005", 10.01),
            (1.005, 1.01),
            (2.675, 2.68),
            (-2.675, -2.68),
            (12, 12.0),
            ("45.5", 45.5),
            (Decimal("0.125"), 0.13),
            (0.1 + 0.2, 0.3),
        ],
    )
    def test_rounds_half_up_to_two_places(self, raw, expected):
        """Values are rounded half-up from their string form."""
        from migrator.services.financial import normalize_amount

        assert normalize_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing_rejected(self, raw):
        """A missing amount is an unreadable record, not a zero balance."""
        from migrator.exceptions import InvalidLegacyRecordError
        from migrator.services.financial import normalize_amount

        with pytest.raises(InvalidLegacyRecordError):
            normalize_amount(raw)

    def test_idempotent(self):
        """Normalizing a normalized value changes nothing."""
        from migrator.services.financial import normalize_amount

        for raw in (10.005, -3.3349, "7.1", 0):
            once = normalize_amount(raw)
            assert normalize_amount(once) == once

    def test_quantize_keeps_two_fractional_digits(self):
        from migrator.services.financial import quantize_amount

        assert quantize_amount(3) == Decimal("3.00")
        assert quantize_amount("3.004").as_tuple().exponent == -2

    @pytest.mark.parametrize("raw", ["ten", "1,000", True, "NaN", "Infinity"])
    def test_non_numeric_rejected(self, raw):
        """Non-numeric input raises InvalidLegacyRecordError, a ValueError."""
        from migrator.exceptions import InvalidLegacyRecordError
        from migrator.services.financial import normalize_amount

        with pytest.raises(InvalidLegacyRecordError):
            normalize_amount(raw)
        with pytest.raises(ValueError):
            normalize_amount(raw)


@pytest.mark.unit
class TestNormalizeAssignmentFinancials:
    """Tests for normalize_assignment_financials."""

    def _assignment(self, **overrides):
        from migrator.models.legacy import LegacyAssignment

        data = {
            "id": 7,
            "docId": "asg-7",
            "customerId": 1,
            "employeeId": 2,
            "availableHours": 4.445,
            "rate": "50",
            "cost": 33.333,
        }
        data.update(overrides)
        return LegacyAssignment.from_dict(data)

    def test_normalizes_all_three(self):
        from migrator.services.financial import normalize_assignment_financials

        financials = normalize_assignment_financials(self._assignment())
        assert financials.balance == 4.45
        assert financials.rate == 50.0
        assert financials.cost == 33.33

    def test_error_names_the_assignment(self):
        from migrator.exceptions import InvalidLegacyRecordError
        from migrator.services.financial import normalize_assignment_financials

        with pytest.raises(InvalidLegacyRecordError) as exc_info:
            normalize_assignment_financials(self._assignment(rate="n/a"))
        assert exc_info.value.details["assignment_id"] == "7"
        assert exc_info.value.code == "INVALID_LEGACY_RECORD"

    def test_missing_hours_names_the_assignment(self):
        from migrator.exceptions import InvalidLegacyRecordError
        from migrator.services.financial import normalize_assignment_financials

        with pytest.raises(InvalidLegacyRecordError) as exc_info:
            normalize_assignment_financials(self._assignment(availableHours=None))
        assert exc_info.value.details["assignment_id"] == "7"
