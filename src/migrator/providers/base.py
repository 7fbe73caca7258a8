# migrator/providers/base.py
"""
Base classes for the external services the migration talks to.

The migration only depends on these interfaces. Concrete providers wrap
the vendor SDKs (Firebase, Stripe) and translate their errors into the
migration exception hierarchy; tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from migrator.models.documents import DocumentRef


@dataclass(frozen=True)
class PaymentMethodSnapshot:
    """
    Normalized copy of a stored card payment method.

    Attributes:
        id: Provider payment method id (pm_...)
        type: Payment method type (always 'card' for the migration)
        last4: Last four digits of the card
        brand: Card brand (visa, mastercard, ...)
        exp_month: Expiry month
        exp_year: Expiry year
    """

    id: str
    type: str
    last4: str | None = None
    brand: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the field layout stored on account documents."""
        return {
            "id": self.id,
            "type": self.type,
            "last4": self.last4,
            "brand": self.brand,
            "expMonth": self.exp_month,
            "expYear": self.exp_year,
        }


class ExternalProvider(ABC):
    """Common configuration handling for provider strategies."""

    #: Provider identifier (e.g., 'firebase', 'stripe')
    provider_name: str = ""

    def __init__(self, config: dict[str, Any] | None = None):
        """
        Initialize the provider.

        Args:
            config: Provider-specific configuration (credentials, project ids)
        """
        self.config = config or {}

    @abstractmethod
    def is_configured(self) -> bool:
        """Return True if the provider has the credentials it needs."""
        pass


class IdentityProvider(ExternalProvider):
    """Creates login identities and assigns role claims."""

    @abstractmethod
    def create_identity(
        self, uid: str | None, display_name: str, email: str
    ) -> str:
        """
        Create an enabled identity.

        Args:
            uid: Identity id to reuse, or None to let the provider allocate one
            display_name: Name shown for the identity
            email: Login email

        Returns:
            The identity id

        Raises:
            IdentityProvisioningError: If the provider rejects the identity
        """
        pass

    @abstractmethod
    def set_role_claim(self, uid: str, role: str) -> None:
        """
        Replace the custom claims of an identity with ``{"role": role}``.

        Raises:
            IdentityProvisioningError: If the claim cannot be set
        """
        pass


class DocumentStore(ExternalProvider):
    """Destination document database."""

    @abstractmethod
    def new_reference(self, collection: str) -> DocumentRef:
        """Allocate a reference with a store-generated id without writing."""
        pass

    @abstractmethod
    def write_document(
        self, collection: str, doc_id: str, fields: dict[str, Any]
    ) -> DocumentRef:
        """
        Create or overwrite a document.

        ``DocumentRef`` values anywhere inside ``fields`` are stored as
        native references.

        Raises:
            DocumentWriteError: If the store rejects the write
        """
        pass

    @abstractmethod
    def stream_collection(self, collection: str) -> list[dict[str, Any]]:
        """
        Read every document of a collection.

        Each record carries its document id under ``docId``; native
        references are returned as ``DocumentRef``.
        """
        pass


class BillingProvider(ExternalProvider):
    """Billing customer and payment method management."""

    @abstractmethod
    def create_customer(self, email: str) -> str:
        """
        Create a billing customer.

        Returns:
            The provider customer id

        Raises:
            BillingProviderError: On any provider failure
        """
        pass

    @abstractmethod
    def list_payment_methods(
        self, customer_id: str, type: str = "card"
    ) -> list[PaymentMethodSnapshot]:
        """
        List the stored payment methods of a customer.

        Raises:
            BillingProviderError: On any provider failure
        """
        pass
