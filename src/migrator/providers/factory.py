# migrator/providers/factory.py
"""
Provider factory and migration context assembly.

Providers are looked up by name in per-kind registries and configured
from Django settings unless an explicit config is passed.
"""

import logging
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from migrator.context import MigrationContext
from migrator.exceptions import MigrationError
from migrator.models.choices import AccountIdPolicy, RoleClaimPolicy
from migrator.services.pacing import create_pacer

from .base import BillingProvider, DocumentStore, ExternalProvider, IdentityProvider
from .firebase import FirebaseIdentityProvider, FirestoreDocumentStore
from .stripe import StripeBillingProvider

logger = logging.getLogger(__name__)


# Provider registries - map provider names to their classes
IDENTITY_PROVIDERS: dict[str, type[IdentityProvider]] = {
    "firebase": FirebaseIdentityProvider,
}

DOCUMENT_STORES: dict[str, type[DocumentStore]] = {
    "firestore": FirestoreDocumentStore,
}

BILLING_PROVIDERS: dict[str, type[BillingProvider]] = {
    "stripe": StripeBillingProvider,
}


class ProviderFactory:
    """
    Factory for creating external provider instances.

    Usage:
        identity = ProviderFactory.create_identity_provider()
        store = ProviderFactory.create_document_store("firestore")
    """

    @classmethod
    def _create(
        cls,
        registry: dict[str, type[ExternalProvider]],
        kind: str,
        provider_name: str,
        config: dict[str, Any] | None,
    ) -> ExternalProvider:
        provider_class = registry.get(provider_name.lower())

        if not provider_class:
            available = ", ".join(registry.keys())
            raise MigrationError(
                message=f"Unknown {kind}: {provider_name}. "
                f"Available providers: {available}",
                code="PROVIDER_NOT_FOUND",
            )

        provider = provider_class(config)

        if not provider.is_configured():
            logger.warning(f"{kind} {provider_name} is not properly configured")

        return provider

    @classmethod
    def create_identity_provider(
        cls, provider_name: str | None = None, config: dict[str, Any] | None = None
    ) -> IdentityProvider:
        name = provider_name or getattr(settings, "MIGRATION_IDENTITY_PROVIDER", "firebase")
        return cls._create(IDENTITY_PROVIDERS, "identity provider", name, config)

    @classmethod
    def create_document_store(
        cls, provider_name: str | None = None, config: dict[str, Any] | None = None
    ) -> DocumentStore:
        name = provider_name or getattr(settings, "MIGRATION_DOCUMENT_STORE", "firestore")
        return cls._create(DOCUMENT_STORES, "document store", name, config)

    @classmethod
    def create_billing_provider(
        cls, provider_name: str | None = None, config: dict[str, Any] | None = None
    ) -> BillingProvider:
        name = provider_name or getattr(settings, "MIGRATION_BILLING_PROVIDER", "stripe")
        return cls._create(BILLING_PROVIDERS, "billing provider", name, config)


def build_migration_context(**overrides: Any) -> MigrationContext:
    """
    Assemble a MigrationContext from Django settings.

    Any MigrationContext field passed as a keyword argument replaces the
    value built from settings.
    """
    admin_user_id = overrides.pop(
        "admin_user_id", getattr(settings, "MIGRATION_ADMIN_USER_ID", "")
    )
    if not admin_user_id:
        raise ImproperlyConfigured(
            "MIGRATION_ADMIN_USER_ID must be set to the identity id of the "
            "administrative user stamped on every migrated document"
        )

    try:
        role_claim_policy = RoleClaimPolicy(
            overrides.pop(
                "role_claim_policy",
                getattr(settings, "MIGRATION_ROLE_CLAIM_POLICY", "fixed"),
            )
        )
        account_id_policy = AccountIdPolicy(
            overrides.pop(
                "account_id_policy",
                getattr(settings, "MIGRATION_ACCOUNT_ID_POLICY", "generated"),
            )
        )
    except ValueError as e:
        raise ImproperlyConfigured(f"Invalid migration policy: {e}") from e

    context_kwargs: dict[str, Any] = {
        "admin_user_id": admin_user_id,
        "role_claim_policy": role_claim_policy,
        "account_id_policy": account_id_policy,
    }
    if "identity" not in overrides:
        context_kwargs["identity"] = ProviderFactory.create_identity_provider()
    if "store" not in overrides:
        context_kwargs["store"] = ProviderFactory.create_document_store()
    if "billing" not in overrides:
        context_kwargs["billing"] = ProviderFactory.create_billing_provider()
    if "pacer" not in overrides:
        context_kwargs["pacer"] = create_pacer(
            float(getattr(settings, "MIGRATION_PACING_SECONDS", 0.01))
        )

    context_kwargs.update(overrides)
    return MigrationContext(**context_kwargs)
