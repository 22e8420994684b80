"""
Feed manager: publishes activities for domain objects into the local
``FeedItem`` outbox and reads them back in serialized form.

The manager never enriches; callers pass what it returns to ``Enrich``.
"""
import logging
from collections import OrderedDict

from django.db import transaction
from django.utils import timezone

from .conf import get_setting
from .enrich import Enrich
from .models import FeedItem
from .references import create_activity, parse_reference, serialize_value

logger = logging.getLogger(__name__)


def split_feed_id(feed_id: str):
    slug, sep, user_id = str(feed_id).partition(":")
    if not sep or not slug or not user_id:
        raise ValueError(f"Invalid feed id {feed_id!r}")
    return slug, user_id


class FeedManager:
    def __init__(self, enricher=None):
        self._enricher = enricher

    @property
    def enricher(self):
        if self._enricher is None:
            self._enricher = Enrich()
        return self._enricher

    def user_feed(self, user_id) -> str:
        return f"{get_setting('USER_FEED')}:{user_id}"

    def notification_feed(self, user_id) -> str:
        return f"{get_setting('NOTIFICATION_FEED')}:{user_id}"

    def target_feeds(self, activity) -> list:
        feeds = []
        actor = parse_reference(activity.get("actor"))
        if actor is not None:
            feeds.append(self.user_feed(actor.id))
        for feed_id in activity.get("to") or []:
            if feed_id not in feeds:
                feeds.append(feed_id)
        return feeds

    def activity_created(self, instance) -> list:
        """Store the serialized activity of ``instance`` in each target feed."""
        activity = create_activity(instance)
        self.enricher.serialize_activities([activity])
        time = activity.get("time") or timezone.now()
        items = []
        with transaction.atomic():
            for feed_id in self.target_feeds(activity):
                slug, user_id = split_feed_id(feed_id)
                item, _ = FeedItem.objects.update_or_create(
                    feed_slug=slug,
                    feed_user_id=user_id,
                    foreign_id=activity["foreign_id"],
                    defaults={"verb": activity["verb"], "activity": activity, "time": time},
                )
                items.append(item)
            # feeds that are no longer targets (e.g. a removed mention)
            FeedItem.objects.filter(foreign_id=activity["foreign_id"]).exclude(
                pk__in=[item.pk for item in items]
            ).delete()
        logger.info("Published %s to %d feeds", activity["foreign_id"], len(items))
        return items

    def activity_deleted(self, instance) -> int:
        foreign_id = serialize_value(instance)
        deleted, _ = FeedItem.objects.filter(foreign_id=foreign_id).delete()
        logger.info("Removed %s from feeds (%d rows)", foreign_id, deleted)
        return deleted

    def _items(self, feed_id, limit=None):
        slug, user_id = split_feed_id(feed_id)
        limit = limit or get_setting("DEFAULT_LIMIT")
        return list(FeedItem.objects.for_feed(slug, user_id)[:limit])

    def get_activities(self, feed_id, limit=None) -> list:
        """Serialized activities of a feed, newest first."""
        return [dict(item.activity) for item in self._items(feed_id, limit)]

    def aggregate(self, items) -> list:
        """
        Group feed items by verb and day, keeping the newest-first order of
        both the groups and the activities inside them.
        """
        groups = OrderedDict()
        for item in items:
            key = f"{item.verb}_{item.time.strftime('%Y-%m-%d')}"
            groups.setdefault(key, []).append(dict(item.activity))
        buckets = []
        for key, activities in groups.items():
            actors = {a.get("actor") for a in activities if a.get("actor") is not None}
            buckets.append({
                "group": key,
                "verb": activities[0].get("verb"),
                "activity_count": len(activities),
                "actor_count": len(actors),
                "activities": activities,
            })
        return buckets

    def get_aggregated_activities(self, feed_id, limit=None) -> list:
        return self.aggregate(self._items(feed_id, limit))


feed_manager = FeedManager()
