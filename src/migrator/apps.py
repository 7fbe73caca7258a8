# migrator/apps.py
"""
Django app configuration for the legacy migration application.

This module initializes the application and configures structured logging.
"""

from django.apps import AppConfig


class MigratorConfig(AppConfig):
    """Configuration for the migrator Django application."""

    name = "migrator"
    verbose_name = "Legacy Billing Migration"

    def ready(self) -> None:
        """
        Initialize application when Django starts.

        Management commands run after this, so logging is configured
        before the first migration message is emitted.
        """
        self._configure_structured_logging()

    def _configure_structured_logging(self) -> None:
        """Configure structured logging if enabled."""
        from django.conf import settings

        if getattr(settings, "USE_STRUCTURED_LOGGING", True):
            from migratorutils.logging import configure_logging

            configure_logging()
