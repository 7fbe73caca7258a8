# migrator/__init__.py
"""
Legacy billing data migration.

Moves the legacy users, assignments, reloads and subscriptions exports
into the document model: identities, user profiles, accounts, assignments
and reload subscriptions.
"""
