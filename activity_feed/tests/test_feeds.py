from datetime import datetime, timezone

import pytest

from activity_feed.feeds import feed_manager, split_feed_id
from activity_feed.models import FeedItem
from activity_feed.tasks import publish_activity_task
from posts.models import Tweet


def test_split_feed_id():
    assert split_feed_id("notification:1") == ("notification", "1")
    for bad in ("notification", ":1", "user:"):
        with pytest.raises(ValueError):
            split_feed_id(bad)


def test_feed_names_follow_settings(settings):
    settings.ACTIVITY_FEED = {"USER_FEED": "timeline"}
    assert feed_manager.user_feed(3) == "timeline:3"
    assert feed_manager.notification_feed(3) == "notification:3"


@pytest.mark.django_db
def test_activity_created_writes_serialized_activity(actor, user, link):
    tweet = Tweet.objects.create(text="hi", actor=actor, link=link, bg="blue")
    tweet.mentions.add(user)

    items = feed_manager.activity_created(tweet)

    assert [i.feed_id for i in items] == [f"user:{actor.pk}", f"notification:{user.pk}"]
    stored = feed_manager.get_activities(f"user:{actor.pk}")
    assert len(stored) == 1
    activity = stored[0]
    assert activity["actor"] == f"User:{actor.pk}"
    assert activity["object"] == f"Tweet:{tweet.pk}"
    assert activity["foreign_id"] == f"Tweet:{tweet.pk}"
    assert activity["link"] == f"Link:{link.pk}"
    assert activity["bg"] == "blue"
    assert activity["verb"] == "Tweet"
    assert activity["to"] == [f"notification:{user.pk}"]


@pytest.mark.django_db
def test_publishing_twice_does_not_duplicate(actor):
    tweet = Tweet.objects.create(text="hi", actor=actor)
    feed_manager.activity_created(tweet)
    feed_manager.activity_created(tweet)
    assert FeedItem.objects.filter(foreign_id=f"Tweet:{tweet.pk}").count() == 1


@pytest.mark.django_db
def test_create_publishes_on_commit(actor, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        tweet = Tweet.objects.create(text="hi", actor=actor)

    assert FeedItem.objects.for_feed("user", actor.pk).get().foreign_id == f"Tweet:{tweet.pk}"


@pytest.mark.django_db
def test_auto_publish_can_be_disabled(actor, settings, django_capture_on_commit_callbacks):
    settings.ACTIVITY_FEED = {**settings.ACTIVITY_FEED, "AUTO_PUBLISH": False}
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        Tweet.objects.create(text="hi", actor=actor)
    assert callbacks == []
    assert not FeedItem.objects.exists()


@pytest.mark.django_db
def test_delete_removes_activity(actor, user):
    tweet = Tweet.objects.create(text="hi", actor=actor)
    tweet.mentions.add(user)
    feed_manager.activity_created(tweet)
    foreign_id = f"Tweet:{tweet.pk}"

    tweet.delete()

    assert not FeedItem.objects.filter(foreign_id=foreign_id).exists()


@pytest.mark.django_db
def test_publish_task_for_missing_object():
    assert publish_activity_task("posts.Tweet", 999999) == 0


def test_aggregate_groups_by_verb_and_day():
    def item(verb, day, actor):
        return FeedItem(
            verb=verb,
            time=datetime(2024, 5, day, 10, tzinfo=timezone.utc),
            activity={"actor": actor, "verb": verb},
        )

    buckets = feed_manager.aggregate([
        item("Tweet", 2, "User:1"),
        item("Tweet", 2, "User:2"),
        item("Like", 2, "User:1"),
        item("Tweet", 1, "User:1"),
        item("Tweet", 2, "User:1"),
    ])

    assert [b["group"] for b in buckets] == ["Tweet_2024-05-02", "Like_2024-05-02", "Tweet_2024-05-01"]
    assert [b["activity_count"] for b in buckets] == [3, 1, 1]
    assert [b["actor_count"] for b in buckets] == [2, 1, 1]
    assert buckets[0]["verb"] == "Tweet"


@pytest.mark.django_db(transaction=True)
def test_mentions_added_after_create_reach_notification_feed(actor, user):
    tweet = Tweet.objects.create(text="hi", actor=actor)
    assert FeedItem.objects.for_feed("user", actor.pk).exists()

    tweet.mentions.add(user)

    item = FeedItem.objects.for_feed("notification", user.pk).get()
    assert item.activity["to"] == [f"notification:{user.pk}"]
    assert FeedItem.objects.for_feed("user", actor.pk).get().activity["to"] == [f"notification:{user.pk}"]

    tweet.mentions.remove(user)

    assert not FeedItem.objects.for_feed("notification", user.pk).exists()
    assert "to" not in FeedItem.objects.for_feed("user", actor.pk).get().activity


@pytest.mark.django_db(transaction=True)
def test_mention_from_related_side_republishes(actor, user):
    tweet = Tweet.objects.create(text="hi", actor=actor)

    user.mentioned_in_tweets.add(tweet)

    assert FeedItem.objects.for_feed("notification", user.pk).get().foreign_id == f"Tweet:{tweet.pk}"


@pytest.mark.django_db
def test_republish_drops_feeds_no_longer_targeted(actor, user):
    tweet = Tweet.objects.create(text="hi", actor=actor)
    tweet.mentions.add(user)
    feed_manager.activity_created(tweet)
    tweet.mentions.clear()

    items = feed_manager.activity_created(tweet)

    assert [i.feed_id for i in items] == [f"user:{actor.pk}"]
    assert not FeedItem.objects.for_feed("notification", user.pk).exists()
