"""
Unit tests for status and role classification.
"""

import pytest


@pytest.mark.unit
class TestUserClassification:
    """Tests for user_status and user_role."""

    @pytest.mark.parametrize(
        "is_active,is_auth,expected",
        [
            (True, True, "PENDING"),
            (True, False, "ARCHIVED"),
            (False, True, "ARCHIVED"),
            (False, False, "ARCHIVED"),
        ],
    )
    def test_user_status(self, is_active, is_auth, expected):
        """Only active and authenticated users stay pending."""
        from migrator.services.classifier import user_status

        assert user_status(is_active, is_auth).value == expected

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("customer", "CLIENT"),
            ("employee", "CONTRACTOR"),
            ("admin", "ADMIN"),
            ("Customer", "UNKNOWN"),
            ("", "UNKNOWN"),
            (None, "UNKNOWN"),
        ],
    )
    def test_user_role(self, tag, expected):
        """Legacy role tags map exactly; anything else is UNKNOWN."""
        from migrator.services.classifier import user_role

        assert user_role(tag).value == expected


@pytest.mark.unit
class TestAssignmentStatus:
    """Tests for assignment_status precedence."""

    @pytest.mark.parametrize(
        "is_deleted,is_active",
        [(True, True), (True, False), (False, True), (False, False)],
    )
    def test_negative_balance_wins_over_flags(self, is_deleted, is_active):
        """A negative balance is reported whatever the flags say."""
        from migrator.models.choices import AssignmentStatus
        from migrator.services.classifier import assignment_status

        status = assignment_status(is_deleted, is_active, -0.01)
        assert status == AssignmentStatus.NEGATIVE_BALANCE
        assert status.value == "Negative Balance"

    def test_deleted_is_archived(self):
        """Deleted assignments are archived even when active."""
        from migrator.services.classifier import assignment_status

        assert assignment_status(True, True, 5).value == "Archived"

    def test_active(self):
        """Active, non-deleted assignments are active."""
        from migrator.services.classifier import assignment_status

        assert assignment_status(False, True, 0).value == "Active"

    def test_inactive_is_archived(self):
        """Inactive assignments are archived."""
        from migrator.services.classifier import assignment_status

        assert assignment_status(False, False, 3.5).value == "Archived"


@pytest.mark.unit
class TestSubscriptionStatus:
    """Tests for subscription_status precedence."""

    def test_deleted_is_paused_even_when_active(self):
        """Deletion wins over the active flag."""
        from migrator.services.classifier import subscription_status

        assert subscription_status(True, True).value == "Paused"

    def test_active(self):
        from migrator.services.classifier import subscription_status

        assert subscription_status(False, True).value == "Active"

    def test_inactive_is_paused(self):
        from migrator.services.classifier import subscription_status

        assert subscription_status(False, False).value == "Paused"


@pytest.mark.unit
class TestChoices:
    """Tests for the str enums."""

    def test_enums_compare_as_strings(self):
        """Enum members can be written to documents as plain strings."""
        from migrator.models.choices import SubscriptionStatus, UserRole

        assert UserRole.CLIENT == "CLIENT"
        assert SubscriptionStatus.PAUSED == "Paused"
        assert not hasattr(SubscriptionStatus, "choices")
