# settings/base.py
"""
Base Django settings - shared across all environments.

Django only hosts the management commands and the settings layer; the
migration keeps no relational state, so no database is configured.
Environment-specific settings are loaded from development.py, production.py, etc.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .components import (
    get_firebase_settings,
    get_logging_settings,
    get_migration_settings,
    get_stripe_settings,
)

# Load environment variables from .env file
# This should be called before any settings that reference environment variables
load_dotenv()

# Repository root
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
SRC_DIR = BASE_DIR / "src"


# =============================================================================
# ENVIRONMENT DETECTION
# =============================================================================

DJANGO_ENV = os.environ.get("DJANGO_ENV", "development").lower()
IS_PRODUCTION = DJANGO_ENV in ("production", "prod")
IS_TEST = DJANGO_ENV in ("test", "testing")
IS_DEVELOPMENT = not (IS_PRODUCTION or IS_TEST)


# =============================================================================
# CORE DJANGO SETTINGS
# =============================================================================

SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-dev-key-change-in-production"
)

# DEBUG mode - set in environment-specific files
DEBUG = False

USE_TZ = True
TIME_ZONE = "UTC"


# =============================================================================
# APPLICATION DEFINITION
# =============================================================================

DJANGO_APPS = [
    "django.contrib.contenttypes",
]

LOCAL_APPS = [
    "migrator",
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

DATABASES = {}


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOGS_DIR = BASE_DIR / "logs"

# The actual logging is configured via migratorutils.logging.configure_logging()
# This is called in the apps.py ready() method
globals().update(get_logging_settings())

# Django's own dictConfig is skipped; configure_logging() owns the tree
LOGGING_CONFIG = None


# =============================================================================
# EXTERNAL SERVICES
# =============================================================================

globals().update(get_firebase_settings())
globals().update(get_stripe_settings())


# =============================================================================
# MIGRATION
# =============================================================================

globals().update(get_migration_settings())
