# migrator/models/choices.py
"""
Choice definitions for the categorical fields of migrated documents.

The string values are stored verbatim in the destination collections, so
they must not change once a migration has been run.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role stored on the migrated user profile."""

    CLIENT = "CLIENT"
    CONTRACTOR = "CONTRACTOR"
    ADMIN = "ADMIN"
    UNKNOWN = "UNKNOWN"


class UserStatus(str, Enum):
    """Status options for migrated users."""

    PENDING = "PENDING"
    ARCHIVED = "ARCHIVED"


class AssignmentStatus(str, Enum):
    """Status options for migrated assignments."""

    ACTIVE = "Active"
    ARCHIVED = "Archived"
    NEGATIVE_BALANCE = "Negative Balance"


class SubscriptionStatus(str, Enum):
    """Status options for migrated reload subscriptions."""

    ACTIVE = "Active"
    PAUSED = "Paused"


class ReloadIntervalType(str, Enum):
    """Interval types for recurring subscriptions."""

    MONTHLY = "monthly"


class RoleClaimPolicy(str, Enum):
    """
    How the identity role claim is chosen.

    FIXED always grants CLIENT, whatever the profile role is.
    COMPUTED grants the role derived from the legacy role tag.
    """

    FIXED = "fixed"
    COMPUTED = "computed"


class AccountIdPolicy(str, Enum):
    """
    How account document ids are chosen.

    GENERATED lets the store allocate a fresh id on every run.
    DETERMINISTIC derives the id from the legacy client id.
    """

    GENERATED = "generated"
    DETERMINISTIC = "deterministic"


# Destination collection names
COLLECTION_USERS = "users"
COLLECTION_ACCOUNTS = "accounts"
COLLECTION_ASSIGNMENTS = "assignments"
COLLECTION_SUBSCRIPTIONS = "subscriptions"

# Legacy collection names
LEGACY_USERS = "users"
LEGACY_ASSIGNMENTS = "assignments"
LEGACY_RELOADS = "reloads"
LEGACY_SUBSCRIPTIONS = "subscriptions"
