# migrator/models/legacy.py
"""
Typed views over the flat records exported from the legacy system.

Records are parsed from the camelCase dictionaries found in the export
files. Only ``id`` (and ``docId`` for records that keep their document id)
is mandatory; missing flags read as False and missing strings as "".

``id`` is the string form used to match cross-references between
collections. ``raw_id`` keeps the value exactly as exported and is what the
migrated documents store as their legacy identifier.
"""

from dataclasses import dataclass
from typing import Any

from migrator.exceptions import InvalidLegacyRecordError


def _require(data: dict[str, Any], key: str, kind: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise InvalidLegacyRecordError(
            message=f"Legacy {kind} record is missing '{key}'",
            details={"record": data},
        )
    return value


def _flag(data: dict[str, Any], key: str) -> bool:
    return bool(data.get(key) or False)


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class LegacyUser:
    """
    A user exported from the legacy system.

    ``uid`` is the pre-existing identity id, if any. It is overwritten with
    the provider-allocated id once the identity has been provisioned.
    """

    id: str
    name: str
    email: str
    phone: str
    app_role: str
    is_active: bool = False
    is_auth: bool = False
    uid: str | None = None
    stripe_customer_id: str | None = None
    raw_id: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LegacyUser":
        raw_id = _require(data, "id", "user")
        return cls(
            id=str(raw_id),
            raw_id=raw_id,
            name=_text(data, "name"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            app_role=_text(data, "appRole"),
            is_active=_flag(data, "isActive"),
            is_auth=_flag(data, "isAuth"),
            uid=data.get("uid") or None,
            stripe_customer_id=data.get("stripeCustomerId") or None,
        )


@dataclass(frozen=True)
class LegacyAssignment:
    """A customer/employee assignment with its hour balance."""

    id: str
    doc_id: str
    customer_id: str
    employee_id: str
    available_hours: Any
    rate: Any
    cost: Any
    is_deleted: bool = False
    is_active: bool = False
    has_reload: bool = False
    has_subscription: bool = False
    raw_id: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LegacyAssignment":
        raw_id = _require(data, "id", "assignment")
        return cls(
            id=str(raw_id),
            raw_id=raw_id,
            doc_id=str(_require(data, "docId", "assignment")),
            customer_id=_text(data, "customerId"),
            employee_id=_text(data, "employeeId"),
            available_hours=data.get("availableHours"),
            rate=data.get("rate"),
            cost=data.get("cost"),
            is_deleted=_flag(data, "isDeleted"),
            is_active=_flag(data, "isActive"),
            has_reload=_flag(data, "hasReload"),
            has_subscription=_flag(data, "hasSub"),
        )


@dataclass(frozen=True)
class LegacyReload:
    """A threshold reload: top up ``hours`` when the balance drops below ``min_hours``."""

    id: str
    doc_id: str
    assignment_id: str
    min_hours: Any
    hours: Any
    payment_method_id: str
    is_deleted: bool = False
    is_active: bool = False
    raw_id: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LegacyReload":
        raw_id = _require(data, "id", "reload")
        return cls(
            id=str(raw_id),
            raw_id=raw_id,
            doc_id=str(_require(data, "docId", "reload")),
            assignment_id=_text(data, "assignmentId"),
            min_hours=data.get("minHours"),
            hours=data.get("hours"),
            payment_method_id=_text(data, "paymentMethodId"),
            is_deleted=_flag(data, "isDeleted"),
            is_active=_flag(data, "isActive"),
        )


@dataclass(frozen=True)
class LegacySubscription:
    """A monthly reload of ``hours``."""

    id: str
    doc_id: str
    assignment_id: str
    hours: Any
    payment_method_id: str
    is_deleted: bool = False
    is_active: bool = False
    raw_id: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LegacySubscription":
        raw_id = _require(data, "id", "subscription")
        return cls(
            id=str(raw_id),
            raw_id=raw_id,
            doc_id=str(_require(data, "docId", "subscription")),
            assignment_id=_text(data, "assignmentId"),
            hours=data.get("hours"),
            payment_method_id=_text(data, "paymentMethodId"),
            is_deleted=_flag(data, "isDeleted"),
            is_active=_flag(data, "isActive"),
        )
