"""
Development settings for the activity feed backend.

Extends the base settings by enabling debugging and allowing all hosts.  Do
not use these settings in production.
"""
from .base import *  # noqa

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
LOGGING["loggers"]["activity_feed"]["level"] = "DEBUG"  # noqa: F405
