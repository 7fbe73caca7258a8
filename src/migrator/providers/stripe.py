# migrator/providers/stripe.py
"""
Stripe implementation of the billing provider.

Only the two calls the migration needs are wrapped: customer creation and
listing a customer's stored card payment methods.
"""

import logging
from typing import Any

import stripe
from django.conf import settings

from migrator.exceptions import BillingProviderError
from migrator.providers.base import BillingProvider, PaymentMethodSnapshot

logger = logging.getLogger(__name__)

PAYMENT_METHOD_PAGE_SIZE = 100


class StripeBillingProvider(BillingProvider):
    """
    Stripe billing provider.

    Configuration:
        - secret_key: Stripe secret key (sk_live_... or sk_test_...)
        - api_version: Stripe API version to use
    """

    provider_name = "stripe"

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)

        # Get configuration from Django settings if not provided
        if not self.config:
            self.config = {
                "secret_key": getattr(settings, "STRIPE_SECRET_KEY", ""),
                "api_version": getattr(settings, "STRIPE_API_VERSION", "2023-10-16"),
            }

        secret_key = self.config.get("secret_key", "")
        if secret_key:
            stripe.api_key = secret_key
            stripe.api_version = self.config.get("api_version")

    def is_configured(self) -> bool:
        """Check if Stripe is properly configured."""
        return bool(self.config.get("secret_key"))

    def create_customer(self, email: str) -> str:
        try:
            customer = stripe.Customer.create(email=email)
        except stripe.StripeError as e:
            logger.error(f"Stripe customer creation failed for {email}: {e}")
            raise BillingProviderError(
                message=f"Could not create Stripe customer for {email}: {e}",
                code=getattr(e, "code", None),
                details={"email": email},
            ) from e

        logger.info(f"Stripe customer {customer.id} created for {email}")
        return customer.id

    def list_payment_methods(
        self, customer_id: str, type: str = "card"
    ) -> list[PaymentMethodSnapshot]:
        try:
            payment_methods = stripe.PaymentMethod.list(
                customer=customer_id,
                type=type,
                limit=PAYMENT_METHOD_PAGE_SIZE,
            )
            return [
                self._snapshot(payment_method)
                for payment_method in payment_methods.auto_paging_iter()
            ]
        except stripe.StripeError as e:
            logger.error(f"Stripe payment method listing failed for {customer_id}: {e}")
            raise BillingProviderError(
                message=f"Could not list payment methods of {customer_id}: {e}",
                code=getattr(e, "code", None),
                details={"customer_id": customer_id},
            ) from e

    @staticmethod
    def _snapshot(payment_method: Any) -> PaymentMethodSnapshot:
        card = getattr(payment_method, "card", None)
        return PaymentMethodSnapshot(
            id=payment_method.id,
            type=payment_method.type,
            last4=getattr(card, "last4", None),
            brand=getattr(card, "brand", None),
            exp_month=getattr(card, "exp_month", None),
            exp_year=getattr(card, "exp_year", None),
        )
