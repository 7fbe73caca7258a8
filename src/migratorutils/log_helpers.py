# migratorutils/log_helpers.py
"""
Helper functions for common logging scenarios.

This module provides utility functions for logging document writes,
command runs and failures with consistent field names.

Usage:
    from migratorutils.log_helpers import log_document_written

    log_document_written("assignments", "asg_123", legacy_id="42")
"""

from typing import Any

from .logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# DOCUMENT LOGGING
# =============================================================================


def log_document_written(
    collection: str,
    doc_id: str,
    legacy_id: str | None = None,
    **extra_context: Any,
) -> None:
    """
    Log a document written to the destination store.

    Args:
        collection: Destination collection name
        doc_id: Document id
        legacy_id: Identifier of the legacy record it came from
        **extra_context: Additional context

    Example:
        log_document_written("accounts", "Zx81...", legacy_id="17", assignments=2)
    """
    context = {
        "collection": collection,
        "doc_id": doc_id,
    }

    if legacy_id is not None:
        context["legacy_id"] = legacy_id

    context.update(extra_context)

    logger.info("document_written", **context)


# =============================================================================
# CONTEXT MANAGERS
# =============================================================================


class LogContext:
    """Context manager for adding temporary logging context."""

    def __init__(self, **context: Any):
        """
        Initialize the log context.

        Args:
            **context: Key-value pairs to add to logging context
        """
        self.context = context

    def __enter__(self):
        """Add context to structlog contextvars."""
        from structlog.contextvars import bind_contextvars

        bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Remove context from structlog contextvars."""
        from structlog.contextvars import unbind_contextvars

        unbind_contextvars(*self.context.keys())


# =============================================================================
# ERROR TRACKING
# =============================================================================


def log_exception(
    exception: Exception,
    context: dict[str, Any] | None = None,
    level: str = "error",
    logger_name: str | None = None,
) -> None:
    """
    Log an exception with full context.

    Args:
        exception: The exception to log
        context: Additional context information
        level: Log level (error or critical)
        logger_name: Custom logger name

    Example:
        try:
            service.run(source)
        except MigrationError as e:
            log_exception(e, context=e.to_dict())
    """
    exc_logger = get_logger(logger_name or __name__)

    log_context = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
    }

    if context:
        log_context.update(context)

    getattr(exc_logger, level)(
        "exception",
        **log_context,
        exc_info=exception,
    )


def log_command(
    command_name: str,
    status: str,
    error: Exception | None = None,
    duration: float | None = None,
    **extra_context: Any,
) -> None:
    """
    Log a management command run.

    Args:
        command_name: Name of the command
        status: Run status (started, success, failure)
        error: Exception if failed
        duration: Run duration in seconds
        **extra_context: Additional context

    Example:
        log_command("migrate_legacy_data", status="success", duration=812.4, users=1400)
    """
    context = {
        "command_name": command_name,
        "command_status": status,
    }

    if error:
        context["exception_type"] = type(error).__name__
        context["exception_message"] = str(error)

    if duration is not None:
        context["duration_seconds"] = round(duration, 2)

    context.update(extra_context)

    log_level = "error" if status == "failure" else "info"
    getattr(logger, log_level)("management_command", **context)


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    # Context manager
    "LogContext",
    # Command logging
    "log_command",
    # Document logging
    "log_document_written",
    # Error tracking
    "log_exception",
]
