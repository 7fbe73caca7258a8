# settings/production.py
"""
Production settings - migration against the live project.

These settings are used when DJANGO_ENV=production or DJANGO_ENV=prod.

IMPORTANT: Before running in production, ensure:
1. FIREBASE_CREDENTIALS_PATH points at a service account for the target project
2. STRIPE_SECRET_KEY is the live secret key
3. MIGRATION_ADMIN_USER_ID is the uid of the administrative user
"""

from django.core.exceptions import ImproperlyConfigured

from .base import *

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENVIRONMENT = "production"
DEBUG = False

# =============================================================================
# REQUIRED SETTINGS VALIDATION
# =============================================================================


def _validate_required_settings():
    """
    Validate that required environment variables are set.
    Raises ImproperlyConfigured if any required setting is missing.
    """
    required_vars = [
        var
        for var in (
            "FIREBASE_CREDENTIALS_PATH",
            "STRIPE_SECRET_KEY",
            "MIGRATION_ADMIN_USER_ID",
        )
        if not os.environ.get(var)
    ]

    if required_vars:
        raise ImproperlyConfigured(
            f"The following required environment variables are missing: {', '.join(required_vars)}"
        )


_validate_required_settings()

# =============================================================================
# ERROR TRACKING
# =============================================================================

# Add Sentry for error tracking if configured
if os.environ.get("SENTRY_DSN"):
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=os.environ.get("SENTRY_DSN"),
        integrations=[
            DjangoIntegration(),
        ],
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
        send_default_pii=False,
        environment="production",
    )
