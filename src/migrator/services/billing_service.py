# migrator/services/billing_service.py
"""
Billing synchronization for migrated accounts.
"""

from typing import Any

from migrator.models.documents import MigratedUser
from migrator.providers.base import BillingProvider
from migratorutils.logging import get_logger

logger = get_logger(__name__)


class BillingService:
    """Attaches a billing customer and its card snapshot to account documents."""

    def __init__(self, provider: BillingProvider):
        self.provider = provider

    def synchronize(self, account: dict[str, Any], client: MigratedUser) -> dict[str, Any]:
        """
        Fill ``stripeCustomerId`` and ``stripePaymentMethods`` on ``account``.

        A client that already has a billing customer keeps it and gets a
        snapshot of its stored cards. Any other client gets a new customer
        created from the account billing email and an empty snapshot.

        Raises:
            BillingProviderError: On any provider failure
        """
        if client.stripe_customer_id:
            methods = self.provider.list_payment_methods(
                client.stripe_customer_id, type="card"
            )
            account["stripeCustomerId"] = client.stripe_customer_id
            account["stripePaymentMethods"] = [m.to_dict() for m in methods]
            logger.info(
                "billing_customer_reused",
                customer_id=client.stripe_customer_id,
                payment_methods=len(methods),
            )
        else:
            customer_id = self.provider.create_customer(account["billingEmail"])
            account["stripeCustomerId"] = customer_id
            account["stripePaymentMethods"] = []
            logger.info(
                "billing_customer_created",
                customer_id=customer_id,
                billing_email=account["billingEmail"],
            )
        return account
