# scriptbuild/settings/test.py
from .base import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Les tests déclarent leur propre document CDN via override_settings
SCRIPTS_CDN_FILE = None
SCRIPTS_CDN = None
SCRIPTS_CDN_ENABLED = True
LOG_LEVEL = "WARNING"
LOGGING["root"]["level"] = LOG_LEVEL
LOGGING["loggers"]["scripts"]["level"] = LOG_LEVEL
