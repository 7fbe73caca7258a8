# migratorutils/logging.py
"""
Structured logging configuration using structlog.

structlog events and plain stdlib records (provider adapters, firebase_admin,
google-cloud, stripe) go through the same stdlib handlers and are rendered
by one ``ProcessorFormatter``:
- Colored console lines in development
- JSON lines everywhere else
- Run-scoped context (run id, command) on every entry

Usage:
    from migratorutils.logging import get_logger

    logger = get_logger(__name__)
    logger.info("document_written", collection="users", doc_id="abc123")
"""

import logging
import logging.config
import sys
import uuid
from pathlib import Path

import structlog
from django.conf import settings
from structlog.types import EventDict, Processor, WrappedLogger

APP_NAME = "legacy-migration"

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("stripe", "urllib3", "google", "firebase_admin")


def is_development() -> bool:
    """Check if running in development mode."""
    return getattr(settings, "DEBUG", False)


def get_log_level() -> int:
    """Get the configured log level, INFO when unknown."""
    level = logging.getLevelName(getattr(settings, "LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logs_dir() -> Path:
    """Get the logs directory path, creating it if needed."""
    logs_dir = Path(getattr(settings, "LOGS_DIR", Path(settings.BASE_DIR) / "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


# =============================================================================
# PROCESSORS
# =============================================================================


def add_app_context(
    logger: WrappedLogger, name: str, event_dict: EventDict
) -> EventDict:
    """Tag every entry with the application and environment."""
    event_dict.setdefault("app", APP_NAME)
    event_dict.setdefault("environment", getattr(settings, "ENVIRONMENT", "unknown"))
    return event_dict


def rename_message_field(
    logger: WrappedLogger, name: str, event_dict: EventDict
) -> EventDict:
    """Rename 'event' field to 'message' for log aggregators."""
    event_dict["message"] = event_dict.pop("event", "")
    return event_dict


def order_keys(logger: WrappedLogger, name: str, event_dict: EventDict) -> EventDict:
    """Put the fields used for filtering first."""
    key_order = ["timestamp", "level", "logger", "message", "run_id", "command"]
    ordered = {k: event_dict.pop(k) for k in key_order if k in event_dict}
    ordered.update(event_dict)
    return ordered


# Run for structlog events before they reach stdlib, and for foreign
# stdlib records inside the formatter.
SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    add_app_context,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
]

CONSOLE_RENDERING: list[Processor] = [
    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    structlog.dev.ConsoleRenderer(
        colors=True, exception_formatter=structlog.dev.plain_traceback
    ),
]

JSON_RENDERING: list[Processor] = [
    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    structlog.processors.format_exc_info,
    rename_message_field,
    order_keys,
    structlog.processors.JSONRenderer(),
]


# =============================================================================
# STANDARD LIBRARY LOGGING CONFIGURATION
# =============================================================================


def get_standard_logging_config() -> dict:
    """
    Build the dictConfig for the stdlib logging tree.

    The console follows the environment (colored or JSON). The run log file
    is always JSON so a finished migration can be audited document by
    document. Errors are also collected in a python-json-logger file.
    """
    logs_dir = get_logs_dir()
    log_level = get_log_level()
    console_formatter = "console" if is_development() else "json"

    loggers = {
        name: {"level": "WARNING"} for name in QUIET_LOGGERS
    }
    loggers["django"] = {"level": log_level}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": CONSOLE_RENDERING,
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": JSON_RENDERING,
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
            "error_json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "level": log_level,
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": console_formatter,
            },
            "run_file": {
                "level": "DEBUG",
                "class": "logging.handlers.RotatingFileHandler",
                "filename": logs_dir / "migration.log",
                "maxBytes": 1024 * 1024 * 50,  # 50 MB
                "backupCount": 5,
                "formatter": "json",
            },
            "error_file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "filename": logs_dir / "migration_error.log",
                "maxBytes": 1024 * 1024 * 10,  # 10 MB
                "backupCount": 10,
                "formatter": "error_json",
            },
        },
        "loggers": loggers,
        "root": {
            "handlers": ["console", "run_file", "error_file"],
            "level": "DEBUG" if is_development() else "INFO",
        },
    }


# =============================================================================
# STRUCTLOG CONFIGURATION
# =============================================================================


def configure_structlog() -> None:
    """Route structlog through the stdlib handlers configured above."""
    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """
    Configure both standard logging and structlog.

    Called once from ``MigratorConfig.ready()``.
    """
    logging.config.dictConfig(get_standard_logging_config())
    configure_structlog()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__ of the calling module)
    """
    return structlog.get_logger(name)


# =============================================================================
# RUN CONTEXT
# =============================================================================


def bind_run_context(command: str, **extra: object) -> str:
    """
    Start a fresh logging context for one command run.

    Every log entry emitted until the next call carries the returned
    ``run_id`` plus the given fields.
    """
    structlog.contextvars.clear_contextvars()
    run_id = uuid.uuid4().hex
    structlog.contextvars.bind_contextvars(run_id=run_id, command=command, **extra)
    return run_id


__all__ = [
    "bind_run_context",
    "configure_logging",
    "configure_structlog",
    "get_log_level",
    "get_logger",
    "get_logs_dir",
    "get_standard_logging_config",
    "is_development",
]
