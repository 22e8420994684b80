import pytest

from activity_feed.feeds import feed_manager
from posts.models import Tweet


@pytest.mark.django_db
def test_feed_requires_authentication(actor):
    from rest_framework.test import APIClient

    resp = APIClient().get(f"/api/activity/feeds/user/{actor.pk}/")
    assert resp.status_code in (401, 403)


@pytest.mark.django_db
def test_feed_returns_enriched_activities(api_client, actor, link):
    tweet = Tweet.objects.create(text="hello", actor=actor, link=link, bg="blue")
    feed_manager.activity_created(tweet)

    resp = api_client.get(f"/api/activity/feeds/user/{actor.pk}/")

    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 1
    activity = body["results"][0]
    assert activity["actor"] == {"id": actor.pk, "type": "User", "display": "actor1"}
    assert activity["object"] == {
        "id": tweet.pk,
        "type": "Tweet",
        "text": "hello",
        "actor_id": actor.pk,
        "link_id": link.pk,
    }
    assert activity["link"] == {"id": link.pk, "type": "Link", "display": "https://getstream.io"}
    assert activity["bg"] == "blue"
    assert activity["foreign_id"] == f"Tweet:{tweet.pk}"


@pytest.mark.django_db
def test_deleted_object_stays_a_reference(api_client, actor, link):
    tweet = Tweet.objects.create(text="hello", actor=actor, link=link)
    feed_manager.activity_created(tweet)
    link_ref = f"Link:{link.pk}"
    link.delete()

    resp = api_client.get(f"/api/activity/feeds/user/{actor.pk}/")

    assert resp.status_code == 200
    activity = resp.json()["results"][0]
    assert activity["link"] == link_ref
    assert activity["object"]["id"] == tweet.pk


@pytest.mark.django_db
def test_aggregated_feed(api_client, actor):
    first = Tweet.objects.create(text="one", actor=actor)
    second = Tweet.objects.create(text="two", actor=actor)
    feed_manager.activity_created(first)
    feed_manager.activity_created(second)

    resp = api_client.get(f"/api/activity/feeds/user/{actor.pk}/", {"aggregated": "1"})

    assert resp.status_code == 200
    buckets = resp.json()["results"]
    assert len(buckets) == 1
    assert buckets[0]["actor_count"] == 1
    assert buckets[0]["activity_count"] == 2
    assert {a["object"]["id"] for a in buckets[0]["activities"]} == {first.pk, second.pk}
    assert all(a["actor"]["id"] == actor.pk for a in buckets[0]["activities"])
