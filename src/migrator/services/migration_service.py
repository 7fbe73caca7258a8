# migrator/services/migration_service.py
"""
Migration orchestrator.

Runs the whole conversion as one strictly sequential pass:

1. Every legacy user, in file order: provision identity, classify, write
   the profile document, pace.
2. Split the migrated roster into clients and contractors.
3. Every client, in roster order: allocate the account reference, migrate
   each of its assignments (subscription documents first, then the
   assignment that points at them), synchronize billing, write the
   account document, pace.

The first error of any kind propagates and aborts the run. Documents
already written stay in the store.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from dateutil.relativedelta import relativedelta

from migrator.context import MigrationContext
from migrator.models.choices import (
    COLLECTION_ACCOUNTS,
    COLLECTION_ASSIGNMENTS,
    COLLECTION_SUBSCRIPTIONS,
    COLLECTION_USERS,
    AccountIdPolicy,
    SubscriptionStatus,
)
from migrator.models.documents import (
    AuditStamp,
    DocumentRef,
    MigratedUser,
    account_ref_for,
    assignment_ref_for,
    build_account_document,
    build_assignment_document,
    build_monthly_subscription_document,
    build_threshold_subscription_document,
    build_user_document,
    subscription_ref_for,
)
from migrator.models.legacy import (
    LegacyAssignment,
    LegacyReload,
    LegacySubscription,
    LegacyUser,
)
from migrator.services.billing_service import BillingService
from migrator.services.classifier import (
    assignment_status,
    subscription_status,
    user_role,
    user_status,
)
from migrator.services.financial import normalize_assignment_financials
from migrator.services.identity_service import IdentityService
from migrator.services.linker import RelationshipLinker
from migrator.sources import LegacyDataSource, load_snapshot
from migratorutils.log_helpers import LogContext, log_document_written
from migratorutils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MigrationReport:
    """Counts of documents written by a completed run."""

    users: int = 0
    accounts: int = 0
    assignments: int = 0
    subscriptions: int = 0
    account_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class MigrationService:
    """Sequences identity, linking, normalization and billing over the legacy data."""

    def __init__(self, context: MigrationContext):
        self.context = context
        self.store = context.store
        self.pacer = context.pacer
        self.identity = IdentityService(context.identity, context.role_claim_policy)
        self.billing = BillingService(context.billing)
        self.report = MigrationReport()

    # ==========================================================================
    # ENTRY POINT
    # ==========================================================================

    def run(
        self, source: LegacyDataSource, user_limit: int | None = None
    ) -> MigrationReport:
        """
        Migrate every legacy collection served by ``source``.

        Args:
            source: Legacy data source
            user_limit: Only migrate the first N legacy users (trial runs)

        Returns:
            MigrationReport with the number of documents written

        Raises:
            MigrationError: The first failure of the run, unchanged
        """
        self.report = MigrationReport()
        snapshot = load_snapshot(source)
        users = snapshot.users if user_limit is None else snapshot.users[:user_limit]

        logger.info(
            "migration_started",
            users=len(users),
            assignments=len(snapshot.assignments),
            reloads=len(snapshot.reloads),
            subscriptions=len(snapshot.subscriptions),
            account_id_policy=self.context.account_id_policy.value,
            role_claim_policy=self.context.role_claim_policy.value,
        )

        roster = self.migrate_users(users)
        linker = RelationshipLinker(
            roster,
            snapshot.assignments,
            snapshot.reloads,
            snapshot.subscriptions,
        )
        for client in linker.clients():
            self.migrate_account(client, linker)

        logger.info("migration_complete", **self.report.to_dict())
        return self.report

    # ==========================================================================
    # USERS
    # ==========================================================================

    def migrate_users(self, users: list[LegacyUser]) -> list[MigratedUser]:
        roster = []
        for user in users:
            roster.append(self.migrate_user(user))
            self.pacer.pause()
        return roster

    def migrate_user(self, user: LegacyUser) -> MigratedUser:
        role = user_role(user.app_role)
        uid = self.identity.provision(user, role)
        status = user_status(user.is_active, user.is_auth)

        document = build_user_document(user, role, status, self._audit())
        self.store.write_document(COLLECTION_USERS, uid, document)
        self.report.users += 1
        log_document_written(COLLECTION_USERS, uid, legacy_id=user.id)

        return MigratedUser(
            uid=uid,
            prev_id=user.id,
            role=role,
            display_name=user.name,
            email=user.email,
            stripe_customer_id=user.stripe_customer_id,
        )

    # ==========================================================================
    # ACCOUNTS
    # ==========================================================================

    def migrate_account(
        self, client: MigratedUser, linker: RelationshipLinker
    ) -> DocumentRef:
        account_ref = self._allocate_account_ref(client)
        account = build_account_document(client, self._audit())

        with LogContext(client_uid=client.uid, client_legacy_id=client.prev_id):
            for assignment in linker.assignments_for(client):
                assignment_ref = self.migrate_assignment(
                    assignment, account, account_ref, linker
                )
                account["assignments"].append(assignment_ref)

            self.billing.synchronize(account, client)

        self.store.write_document(COLLECTION_ACCOUNTS, account_ref.id, account)
        self.report.accounts += 1
        self.report.account_ids.append(account_ref.id)
        log_document_written(
            COLLECTION_ACCOUNTS,
            account_ref.id,
            legacy_id=client.prev_id,
            assignments=len(account["assignments"]),
        )
        self.pacer.pause()
        return account_ref

    def _allocate_account_ref(self, client: MigratedUser) -> DocumentRef:
        if self.context.account_id_policy == AccountIdPolicy.DETERMINISTIC:
            return account_ref_for(client.prev_id)
        return self.store.new_reference(COLLECTION_ACCOUNTS)

    # ==========================================================================
    # ASSIGNMENTS & SUBSCRIPTIONS
    # ==========================================================================

    def migrate_assignment(
        self,
        assignment: LegacyAssignment,
        account: dict[str, Any],
        account_ref: DocumentRef,
        linker: RelationshipLinker,
    ) -> DocumentRef:
        assignment_ref = assignment_ref_for(assignment.doc_id)

        financials = normalize_assignment_financials(assignment)
        status = assignment_status(
            assignment.is_deleted, assignment.is_active, financials.balance
        )
        contractor = linker.contractor_for(assignment)

        document = build_assignment_document(
            prev_id=assignment.raw_id,
            account_ref=account_ref,
            contractor=contractor,
            balance=financials.balance,
            rate=financials.rate,
            cost=financials.cost,
            status=status,
            audit=self._audit(),
        )

        # Subscriptions are written before the assignment that references them
        if assignment.has_reload:
            reload = linker.reload_for(assignment)
            document["thresholdSubscriptionRef"] = self.migrate_threshold_reload(
                reload, assignment_ref, account["stripeCustomerId"]
            )

        if assignment.has_subscription:
            subscription = linker.subscription_for(assignment)
            document["monthlySubscriptionRef"] = self.migrate_monthly_subscription(
                subscription, assignment_ref, account["stripeCustomerId"]
            )

        self.store.write_document(COLLECTION_ASSIGNMENTS, assignment_ref.id, document)
        self.report.assignments += 1
        log_document_written(
            COLLECTION_ASSIGNMENTS,
            assignment_ref.id,
            legacy_id=assignment.id,
            status=status.value,
        )
        return assignment_ref

    def migrate_threshold_reload(
        self,
        reload: LegacyReload,
        assignment_ref: DocumentRef,
        stripe_customer_id: str,
    ) -> DocumentRef:
        document = build_threshold_subscription_document(
            reload,
            assignment_ref,
            stripe_customer_id,
            subscription_status(reload.is_deleted, reload.is_active),
            self._audit(),
        )
        return self._write_subscription(reload.doc_id, document, reload.id, "threshold")

    def migrate_monthly_subscription(
        self,
        subscription: LegacySubscription,
        assignment_ref: DocumentRef,
        stripe_customer_id: str,
    ) -> DocumentRef:
        status = subscription_status(subscription.is_deleted, subscription.is_active)
        next_reload = None
        if status == SubscriptionStatus.ACTIVE:
            next_reload = self.context.clock() + relativedelta(months=1)

        document = build_monthly_subscription_document(
            subscription,
            assignment_ref,
            stripe_customer_id,
            status,
            self._audit(),
            next_reload=next_reload,
        )
        return self._write_subscription(
            subscription.doc_id, document, subscription.id, "monthly"
        )

    def _write_subscription(
        self, doc_id: str, document: dict[str, Any], legacy_id: str, kind: str
    ) -> DocumentRef:
        ref = subscription_ref_for(doc_id)
        self.store.write_document(COLLECTION_SUBSCRIPTIONS, ref.id, document)
        self.report.subscriptions += 1
        log_document_written(
            COLLECTION_SUBSCRIPTIONS, ref.id, legacy_id=legacy_id, kind=kind
        )
        return ref

    def _audit(self) -> AuditStamp:
        return AuditStamp(actor=self.context.admin_ref, at=self.context.clock())
