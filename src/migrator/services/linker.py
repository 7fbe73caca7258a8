# migrator/services/linker.py
"""
Resolution of legacy cross-references.

Legacy records point at each other through raw ids (customer id, employee
id, assignment id). The linker indexes the migrated roster and the legacy
collections once, then answers lookups from those indexes. A missing
target is fatal: a dangling reference must never be written.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from migrator.exceptions import LegacyRecordNotFoundError
from migrator.models.choices import UserRole
from migrator.models.documents import MigratedUser
from migrator.models.legacy import LegacyAssignment, LegacyReload, LegacySubscription

T = TypeVar("T")


def index_by(records: Iterable[T], key: Callable[[T], str]) -> dict[str, T]:
    """Map each key to its first record, in iteration order."""
    index: dict[str, T] = {}
    for record in records:
        index.setdefault(key(record), record)
    return index


def group_by(records: Iterable[T], key: Callable[[T], str]) -> dict[str, list[T]]:
    """Map each key to all its records, preserving iteration order."""
    groups: dict[str, list[T]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


class RelationshipLinker:
    """Lookups from legacy ids to migrated users and related legacy records."""

    def __init__(
        self,
        roster: Iterable[MigratedUser],
        assignments: Iterable[LegacyAssignment],
        reloads: Iterable[LegacyReload],
        subscriptions: Iterable[LegacySubscription],
    ):
        self.roster = list(roster)
        self._clients = [u for u in self.roster if u.role == UserRole.CLIENT]
        self._contractors = [u for u in self.roster if u.role == UserRole.CONTRACTOR]
        self._contractors_by_prev_id = index_by(self._contractors, lambda u: u.prev_id)
        self._assignments_by_customer = group_by(assignments, lambda a: a.customer_id)
        self._reloads_by_assignment = index_by(reloads, lambda r: r.assignment_id)
        self._subscriptions_by_assignment = index_by(
            subscriptions, lambda s: s.assignment_id
        )

    def clients(self) -> list[MigratedUser]:
        return list(self._clients)

    def contractors(self) -> list[MigratedUser]:
        return list(self._contractors)

    def assignments_for(self, client: MigratedUser) -> list[LegacyAssignment]:
        return list(self._assignments_by_customer.get(client.prev_id, []))

    def contractor_for(self, assignment: LegacyAssignment) -> MigratedUser:
        contractor = self._contractors_by_prev_id.get(assignment.employee_id)
        if contractor is None:
            raise LegacyRecordNotFoundError(
                message=(
                    f"No contractor found for assignment {assignment.id} "
                    f"(employee {assignment.employee_id})"
                ),
                details={
                    "assignment_id": assignment.id,
                    "employee_id": assignment.employee_id,
                },
            )
        return contractor

    def reload_for(self, assignment: LegacyAssignment) -> LegacyReload:
        reload = self._reloads_by_assignment.get(assignment.id)
        if reload is None:
            raise LegacyRecordNotFoundError(
                message=f"Assignment {assignment.id} has a reload but none was found",
                details={"assignment_id": assignment.id, "collection": "reloads"},
            )
        return reload

    def subscription_for(self, assignment: LegacyAssignment) -> LegacySubscription:
        subscription = self._subscriptions_by_assignment.get(assignment.id)
        if subscription is None:
            raise LegacyRecordNotFoundError(
                message=(
                    f"Assignment {assignment.id} has a subscription but none was found"
                ),
                details={"assignment_id": assignment.id, "collection": "subscriptions"},
            )
        return subscription
