# settings/development.py
"""
Development settings - local runs against the Firebase emulators or a
scratch project.

These settings are used when DJANGO_ENV=development or when not specified.
"""

from .base import *

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENVIRONMENT = "development"
DEBUG = True

# =============================================================================
# LOGGING
# =============================================================================

# Colored console output (see migratorutils.logging.DEV_PROCESSORS)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()
