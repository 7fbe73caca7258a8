# migrator/exceptions.py
"""
Exception hierarchy for the legacy data migration.

Every failure during a run is fatal: errors propagate out of the
orchestrator untouched so the first one aborts the whole migration.
"""

from typing import Any


class MigrationError(Exception):
    """
    Base exception for migration failures.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Additional error context (legacy ids, provider payloads)
    """

    default_code = "MIGRATION_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for structured logs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class IdentityProvisioningError(MigrationError):
    """The identity provider rejected an account or claim (e.g. duplicate email)."""

    default_code = "IDENTITY_PROVISIONING_FAILED"


class LegacyRecordNotFoundError(MigrationError, LookupError):
    """An expected related legacy record is missing."""

    default_code = "LEGACY_RECORD_NOT_FOUND"


class BillingProviderError(MigrationError):
    """The billing provider failed to create a customer or list payment methods."""

    default_code = "BILLING_PROVIDER_ERROR"


class DocumentWriteError(MigrationError):
    """The destination document store rejected a write."""

    default_code = "DOCUMENT_WRITE_FAILED"


class InvalidLegacyRecordError(MigrationError, ValueError):
    """A legacy record holds a value that cannot be converted."""

    default_code = "INVALID_LEGACY_RECORD"


class LegacyDataSourceError(MigrationError):
    """A legacy collection could not be loaded."""

    default_code = "LEGACY_DATA_SOURCE_ERROR"


class DocumentReadError(MigrationError):
    """The destination document store failed to read a collection."""

    default_code = "DOCUMENT_READ_FAILED"
