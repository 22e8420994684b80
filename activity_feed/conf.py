"""App settings, read from ``settings.ACTIVITY_FEED`` with defaults."""
from django.conf import settings

DEFAULTS = {
    "AUTO_PUBLISH": True,
    "USER_FEED": "user",
    "NOTIFICATION_FEED": "notification",
    "DEFAULT_LIMIT": 25,
}


def get_setting(name: str):
    overrides = getattr(settings, "ACTIVITY_FEED", None) or {}
    return {**DEFAULTS, **overrides}[name]
