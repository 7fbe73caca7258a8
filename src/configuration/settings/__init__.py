# settings/__init__.py
"""
Settings package - initializes the appropriate settings module based on environment.

The environment is determined by the DJANGO_ENV environment variable:
- development / dev / not set: Uses development.py (console logs, debug on)
- production / prod: Uses production.py (JSON logs, Sentry, required settings checked)
- test / testing: Uses test.py (no pacing, plain logging, fixed admin id)

Usage:
    export DJANGO_ENV=production  # Or set in .env file
    python manage.py migrate_legacy_data --data-dir ./export
"""

import os
import sys

# Get environment from DJANGO_ENV variable
# Default to 'development' for safety
_environment = os.environ.get("DJANGO_ENV", "development").lower()

# Normalize environment names
ENVIRONMENT_MAP = {
    "production": "production",
    "prod": "production",
    "test": "test",
    "testing": "test",
    "development": "development",
    "dev": "development",
    "local": "development",
}

# Determine which settings module to use
environment = ENVIRONMENT_MAP.get(_environment, "development")

if environment != "test":
    print(f"[Django] Using {environment.upper()} settings", file=sys.stderr)

if environment == "production":
    from .production import *  # noqa: F403
elif environment == "test":
    from .test import *  # noqa: F403
else:
    from .development import *  # noqa: F403

# Expose the current environment for use in code
CURRENT_ENVIRONMENT = environment
