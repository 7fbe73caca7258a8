# migrator/context.py
"""
Run context passed to the migration orchestrator.

Everything the migration touches outside of process memory is reached
through this object, so tests can substitute fakes for every service.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone

from migrator.models.choices import COLLECTION_USERS, AccountIdPolicy, RoleClaimPolicy
from migrator.models.documents import DocumentRef
from migrator.providers.base import BillingProvider, DocumentStore, IdentityProvider
from migrator.services.pacing import NoDelayPacer, Pacer


@dataclass
class MigrationContext:
    """
    Collaborators and policies of a migration run.

    Attributes:
        identity: Identity provider used to create login accounts
        store: Destination document store
        billing: Billing provider for customers and payment methods
        admin_user_id: Identity id of the administrative actor in audit stamps
        pacer: Pause policy applied after each top-level write
        role_claim_policy: How the identity role claim is chosen
        account_id_policy: How account document ids are chosen
        clock: Returns the timestamp used for audit stamps
    """

    identity: IdentityProvider
    store: DocumentStore
    billing: BillingProvider
    admin_user_id: str
    pacer: Pacer = field(default_factory=NoDelayPacer)
    role_claim_policy: RoleClaimPolicy = RoleClaimPolicy.FIXED
    account_id_policy: AccountIdPolicy = AccountIdPolicy.GENERATED
    clock: Callable[[], datetime] = timezone.now

    @property
    def admin_ref(self) -> DocumentRef:
        return DocumentRef(COLLECTION_USERS, self.admin_user_id)
