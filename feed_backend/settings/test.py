"""
Test settings for the activity feed backend.

Uses an in-memory SQLite database and a local-memory cache, and runs
Celery tasks eagerly so signal-driven publishing happens inline.
"""
from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-insecure"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"},
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
