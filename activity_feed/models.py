"""
Models for the activity feed app.

``FeedItem`` is the local outbox of published activities: one row per
activity per target feed (``"<slug>:<user id>"``).  The activity is kept
in its serialized form, with references in place of related objects, and
is enriched again when it is read back.
"""
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone


class FeedItemQuerySet(models.QuerySet):
    def for_feed(self, feed_slug: str, feed_user_id):
        return self.filter(feed_slug=feed_slug, feed_user_id=str(feed_user_id))


class FeedItem(models.Model):
    """A serialized activity stored in one feed."""
    feed_slug = models.CharField(max_length=64)
    feed_user_id = models.CharField(max_length=64)
    verb = models.CharField(max_length=255)
    foreign_id = models.CharField(max_length=255, db_index=True)
    activity = models.JSONField(default=dict, encoder=DjangoJSONEncoder)
    time = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = FeedItemQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["feed_slug", "feed_user_id", "foreign_id"],
                name="feeditem_unique_per_feed",
            ),
        ]
        indexes = [
            models.Index(fields=["feed_slug", "feed_user_id", "time"], name="feeditem_feed_time_idx"),
        ]
        ordering = ["-time", "-id"]

    @property
    def feed_id(self) -> str:
        return f"{self.feed_slug}:{self.feed_user_id}"

    def __str__(self) -> str:
        return f"{self.verb} {self.foreign_id} in {self.feed_id}"
