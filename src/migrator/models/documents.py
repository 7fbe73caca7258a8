# migrator/models/documents.py
"""
Builders for the documents written to the destination collections.

Documents are plain dictionaries keyed by the destination field names.
Cross-document pointers are ``DocumentRef`` values; the document store
converts them to native references when it writes.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from nameparser import HumanName

from migrator.models.choices import (
    COLLECTION_ACCOUNTS,
    COLLECTION_ASSIGNMENTS,
    COLLECTION_SUBSCRIPTIONS,
    COLLECTION_USERS,
    AssignmentStatus,
    ReloadIntervalType,
    SubscriptionStatus,
    UserRole,
    UserStatus,
)
from migrator.models.legacy import LegacyReload, LegacySubscription, LegacyUser

ACCOUNT_TYPE_PERSON = "Person"


@dataclass(frozen=True)
class DocumentRef:
    """Pointer to a document by (collection, id)."""

    collection: str
    id: str

    @property
    def path(self) -> str:
        return f"{self.collection}/{self.id}"

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class AuditStamp:
    """Created/updated timestamps and the administrative actor of a run."""

    actor: DocumentRef
    at: datetime

    def fields(self) -> dict[str, Any]:
        return {
            "created": self.at,
            "createdBy": self.actor,
            "updated": self.at,
            "updatedBy": self.actor,
        }


@dataclass
class MigratedUser:
    """Roster entry for a user that has been written to the users collection."""

    uid: str
    prev_id: str
    role: UserRole
    display_name: str
    email: str
    stripe_customer_id: str | None = None

    @property
    def ref(self) -> DocumentRef:
        return DocumentRef(COLLECTION_USERS, self.uid)


def blank_address() -> dict[str, str]:
    return {"street": "", "city": "", "state": "", "zip": "", "country": ""}


def split_full_name(full_name: str | None) -> tuple[str, str]:
    """
    Split a display name into (first, last).

    Titles, middle names and suffixes are dropped. Surname particles stay
    with the last name ("van Beethoven"). A single word is a first name.
    """
    if not (full_name or "").strip():
        return "", ""
    name = HumanName(full_name)
    return name.first, name.last


def build_user_document(
    user: LegacyUser, role: UserRole, status: UserStatus, audit: AuditStamp
) -> dict[str, Any]:
    first, last = split_full_name(user.name)
    return {
        "prevId": user.raw_id,
        "role": role.value,
        "name": {"first": first, "last": last},
        "displayName": user.name,
        "email": user.email,
        "phone": user.phone,
        "address": blank_address(),
        "status": status.value,
        **audit.fields(),
    }


def build_account_document(client: MigratedUser, audit: AuditStamp) -> dict[str, Any]:
    """Account shell; ``assignments`` and billing fields are filled in later."""
    return {
        "name": client.display_name,
        "address": blank_address(),
        "billingEmail": client.email,
        "type": ACCOUNT_TYPE_PERSON,
        "users": [client.ref],
        "opportunities": [],
        "assignments": [],
        "stripeCustomerId": client.stripe_customer_id or "",
        **audit.fields(),
    }


def build_assignment_document(
    prev_id: Any,
    account_ref: DocumentRef,
    contractor: MigratedUser,
    balance: float,
    rate: float,
    cost: float,
    status: AssignmentStatus,
    audit: AuditStamp,
) -> dict[str, Any]:
    return {
        "prevId": prev_id,
        "accountRef": account_ref,
        "userRef": contractor.ref,
        "balance": balance,
        "rate": rate,
        "cost": cost,
        "status": status.value,
        **audit.fields(),
    }


def build_threshold_subscription_document(
    reload: LegacyReload,
    assignment_ref: DocumentRef,
    stripe_customer_id: str,
    status: SubscriptionStatus,
    audit: AuditStamp,
) -> dict[str, Any]:
    return {
        "prevId": reload.raw_id,
        "assignmentRef": assignment_ref,
        "thresholdMinimum": reload.min_hours,
        "reloadAmount": reload.hours,
        "stripeCustomerId": stripe_customer_id,
        "stripePaymentMethodId": reload.payment_method_id,
        "status": status.value,
        **audit.fields(),
    }


def build_monthly_subscription_document(
    subscription: LegacySubscription,
    assignment_ref: DocumentRef,
    stripe_customer_id: str,
    status: SubscriptionStatus,
    audit: AuditStamp,
    next_reload: datetime | None = None,
) -> dict[str, Any]:
    document = {
        "prevId": subscription.raw_id,
        "assignmentRef": assignment_ref,
        "reloadAmount": subscription.hours,
        "reloadIntervalType": ReloadIntervalType.MONTHLY.value,
        "stripeCustomerId": stripe_customer_id,
        "stripePaymentMethodId": subscription.payment_method_id,
        "status": status.value,
        **audit.fields(),
    }
    if next_reload is not None:
        document["nextReload"] = next_reload
    return document


def account_ref_for(doc_id: str) -> DocumentRef:
    return DocumentRef(COLLECTION_ACCOUNTS, doc_id)


def assignment_ref_for(doc_id: str) -> DocumentRef:
    return DocumentRef(COLLECTION_ASSIGNMENTS, doc_id)


def subscription_ref_for(doc_id: str) -> DocumentRef:
    return DocumentRef(COLLECTION_SUBSCRIPTIONS, doc_id)
