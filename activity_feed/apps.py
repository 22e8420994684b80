# activity_feed/apps.py
from django.apps import AppConfig


class ActivityFeedConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "activity_feed"
    verbose_name = "Activity feeds"

    def ready(self):
        # publish/remove activities of ActivityMixin models on save/delete
        from . import signals  # noqa
