# migrator/services/__init__.py
"""
Migration services: classification, normalization, linking, identity,
billing and the orchestrator that sequences them.
"""

# Import from submodules directly:
#   from migrator.services.migration_service import MigrationService
#   from migrator.services.classifier import assignment_status
