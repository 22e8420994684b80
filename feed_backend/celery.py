"""
Celery configuration for the activity feed backend.

This module defines and exposes a Celery application instance.  Celery
discovers tasks by inspecting any `tasks.py` modules in installed apps
(activity publishing lives in ``activity_feed.tasks``).
"""
import os
from celery import Celery

# Set default Django settings for Celery to pick configuration from settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "feed_backend.settings.dev")

app = Celery("feed_backend")

# Namespacing Celery settings with the "CELERY_" prefix in Django settings
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
