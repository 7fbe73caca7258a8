# settings/components.py
"""
Settings components - reusable setting groups for different concerns.

This module provides factory functions for environment-specific configurations.
Each function returns a dictionary of settings that can be applied to the
Django settings module.

Usage:
    from .components import get_migration_settings
    globals().update(get_migration_settings())
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Helper to get boolean environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes", "on")


def _get_env_float(key: str, default: float = 0.0) -> float:
    """Helper to get float environment variable."""
    try:
        return float(os.environ.get(key, str(default)))
    except (ValueError, TypeError):
        return default


# =============================================================================
# FIREBASE SETTINGS
# =============================================================================


def get_firebase_settings() -> dict:
    """
    Returns Firebase configuration.

    Environment variables:
        FIREBASE_CREDENTIALS_PATH: Service account JSON file
        FIREBASE_PROJECT_ID: Project id (required with default credentials)
        FIREBASE_APP_NAME: Name of the firebase_admin app instance
    """
    return {
        "FIREBASE_CREDENTIALS_PATH": os.environ.get("FIREBASE_CREDENTIALS_PATH", ""),
        "FIREBASE_PROJECT_ID": os.environ.get("FIREBASE_PROJECT_ID", ""),
        "FIREBASE_APP_NAME": os.environ.get("FIREBASE_APP_NAME", "legacy-migration"),
    }


# =============================================================================
# STRIPE SETTINGS
# =============================================================================


def get_stripe_settings() -> dict:
    """
    Returns Stripe configuration.

    Environment variables:
        STRIPE_SECRET_KEY: Stripe secret key
        STRIPE_API_VERSION: Stripe API version
    """
    return {
        "STRIPE_SECRET_KEY": os.environ.get("STRIPE_SECRET_KEY", ""),
        "STRIPE_API_VERSION": os.environ.get("STRIPE_API_VERSION", "2023-10-16"),
    }


# =============================================================================
# MIGRATION SETTINGS
# =============================================================================


def get_migration_settings() -> dict:
    """
    Returns legacy migration configuration.

    Environment variables:
        LEGACY_DATA_DIR: Directory holding users.json, assignments.json,
            reloads.json and subscriptions.json
        MIGRATION_ADMIN_USER_ID: Identity id stamped as creator/updater
        MIGRATION_PACING_SECONDS: Pause after each user and account write
        MIGRATION_ROLE_CLAIM_POLICY: fixed | computed
        MIGRATION_ACCOUNT_ID_POLICY: generated | deterministic
    """
    return {
        "LEGACY_DATA_DIR": os.environ.get("LEGACY_DATA_DIR", str(BASE_DIR / "data")),
        "MIGRATION_ADMIN_USER_ID": os.environ.get("MIGRATION_ADMIN_USER_ID", ""),
        "MIGRATION_PACING_SECONDS": _get_env_float("MIGRATION_PACING_SECONDS", 0.01),
        "MIGRATION_ROLE_CLAIM_POLICY": os.environ.get(
            "MIGRATION_ROLE_CLAIM_POLICY", "fixed"
        ).lower(),
        "MIGRATION_ACCOUNT_ID_POLICY": os.environ.get(
            "MIGRATION_ACCOUNT_ID_POLICY", "generated"
        ).lower(),
        "MIGRATION_IDENTITY_PROVIDER": os.environ.get(
            "MIGRATION_IDENTITY_PROVIDER", "firebase"
        ),
        "MIGRATION_DOCUMENT_STORE": os.environ.get(
            "MIGRATION_DOCUMENT_STORE", "firestore"
        ),
        "MIGRATION_BILLING_PROVIDER": os.environ.get(
            "MIGRATION_BILLING_PROVIDER", "stripe"
        ),
        "EXPORT_OUTPUT_DIR": os.environ.get(
            "EXPORT_OUTPUT_DIR", str(BASE_DIR / "exports")
        ),
    }


# =============================================================================
# LOGGING SETTINGS
# =============================================================================


def get_logging_settings() -> dict:
    """
    Returns logging switches.

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
        USE_STRUCTURED_LOGGING: Configure structlog when the app is ready
    """
    return {
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO").upper(),
        "USE_STRUCTURED_LOGGING": _get_env_bool("USE_STRUCTURED_LOGGING", True),
    }
