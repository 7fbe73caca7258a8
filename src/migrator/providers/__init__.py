# migrator/providers/__init__.py
"""
External service providers used by the migration.

Supported providers:
- Firebase Authentication (identity)
- Cloud Firestore (document store)
- Stripe (billing)
"""

# Import from submodules directly:
#   from migrator.providers.base import IdentityProvider, DocumentStore, BillingProvider
#   from migrator.providers.factory import ProviderFactory, build_migration_context
