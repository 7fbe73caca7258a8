# migrator/models/__init__.py
from .choices import (
    AccountIdPolicy,
    AssignmentStatus,
    ReloadIntervalType,
    RoleClaimPolicy,
    SubscriptionStatus,
    UserRole,
    UserStatus,
)
from .documents import AuditStamp, DocumentRef, MigratedUser
from .legacy import LegacyAssignment, LegacyReload, LegacySubscription, LegacyUser

__all__ = [
    # Choices
    "AccountIdPolicy",
    "AssignmentStatus",
    "ReloadIntervalType",
    "RoleClaimPolicy",
    "SubscriptionStatus",
    "UserRole",
    "UserStatus",
    # Documents
    "AuditStamp",
    "DocumentRef",
    "MigratedUser",
    # Legacy records
    "LegacyAssignment",
    "LegacyReload",
    "LegacySubscription",
    "LegacyUser",
]
