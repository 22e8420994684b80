"""
ASGI entry point for the activity feed backend.

The default settings module is the development configuration.  Feed
enrichment is synchronous ORM work; async callers use
``Enrich.aenrich_activities`` which runs it in a worker thread.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "feed_backend.settings.dev")

application = get_asgi_application()
