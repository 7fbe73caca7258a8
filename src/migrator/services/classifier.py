# migrator/services/classifier.py
"""
Status and role classification for migrated documents.

All functions are pure. Statuses are recomputed from the legacy flags on
every run and never copied from the source data.
"""

from decimal import Decimal

from migrator.models.choices import (
    AssignmentStatus,
    SubscriptionStatus,
    UserRole,
    UserStatus,
)

LEGACY_ROLE_MAP: dict[str, UserRole] = {
    "customer": UserRole.CLIENT,
    "employee": UserRole.CONTRACTOR,
    "admin": UserRole.ADMIN,
}


def user_status(is_active: bool, is_authenticated: bool) -> UserStatus:
    """Only active users that completed authentication stay PENDING."""
    if is_active and is_authenticated:
        return UserStatus.PENDING
    return UserStatus.ARCHIVED


def user_role(legacy_role_tag: str | None) -> UserRole:
    """Map the legacy ``appRole`` tag to a profile role."""
    return LEGACY_ROLE_MAP.get(legacy_role_tag or "", UserRole.UNKNOWN)


def assignment_status(
    is_deleted: bool, is_active: bool, normalized_balance: Decimal | float
) -> AssignmentStatus:
    """
    Classify an assignment.

    A negative balance wins over every flag. Otherwise deleted assignments
    are archived, active ones are active and the rest are archived.
    """
    if normalized_balance < 0:
        return AssignmentStatus.NEGATIVE_BALANCE
    if is_deleted:
        return AssignmentStatus.ARCHIVED
    if is_active:
        return AssignmentStatus.ACTIVE
    return AssignmentStatus.ARCHIVED


def subscription_status(is_deleted: bool, is_active: bool) -> SubscriptionStatus:
    """Deleted subscriptions are paused even when flagged active."""
    if is_deleted:
        return SubscriptionStatus.PAUSED
    if is_active:
        return SubscriptionStatus.ACTIVE
    return SubscriptionStatus.PAUSED
