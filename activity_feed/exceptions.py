"""
Errors raised by the activity feed engine.

Unresolved references are not represented here: a reference whose object
no longer exists simply stays a ``"Type:id"`` string in the enriched
activity.
"""


class ActivityFeedError(Exception):
    """Base class for activity feed errors."""


class InvalidObjectError(ActivityFeedError, ValueError):
    """An object cannot be turned into a reference (no id, bad type name)."""


class StoreError(ActivityFeedError):
    """A batched lookup for one type failed in the backing store."""

    def __init__(self, type_name: str, ids=None, message: str | None = None):
        self.type_name = type_name
        self.ids = list(ids or [])
        super().__init__(message or f"Failed to fetch {type_name} ids {self.ids}")
