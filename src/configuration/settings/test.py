# settings/test.py
"""
Test settings - optimized for running tests.

These settings are used when DJANGO_ENV=test or DJANGO_ENV=testing.
Focus is on speed and isolation from external services: no pacing, no
provider credentials, a fixed administrative user.
"""

from .base import *

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENVIRONMENT = "test"
DEBUG = True
TEST = True
USE_STRUCTURED_LOGGING = False

# =============================================================================
# EXTERNAL SERVICES - Disabled
# =============================================================================

FIREBASE_CREDENTIALS_PATH = ""
FIREBASE_PROJECT_ID = ""
STRIPE_SECRET_KEY = ""

# =============================================================================
# MIGRATION
# =============================================================================

MIGRATION_ADMIN_USER_ID = "admin-test"
MIGRATION_PACING_SECONDS = 0
MIGRATION_ROLE_CLAIM_POLICY = "fixed"
MIGRATION_ACCOUNT_ID_POLICY = "generated"
