import pytest

from activity_feed.exceptions import InvalidObjectError
from activity_feed.references import (
    Reference,
    create_activity,
    model_reference,
    parse_reference,
    serialize_value,
)

from .fakes import Link, Tweet, Unsaved, User


class Renamed:
    id = 7

    @classmethod
    def activity_model_reference(cls):
        return "Post"


class Colon:
    id = 1

    @classmethod
    def activity_model_reference(cls):
        return "bad:name"


def test_model_reference_defaults_to_type_name():
    assert model_reference(User(1)) == "User"
    assert model_reference(User) == "User"


def test_model_reference_hook_overrides_name():
    assert model_reference(Renamed()) == "Post"
    assert serialize_value(Renamed()) == "Post:7"


def test_model_reference_rejects_colon():
    with pytest.raises(InvalidObjectError):
        serialize_value(Colon())


def test_serialize_value():
    assert serialize_value(Tweet(5)) == "Tweet:5"
    assert serialize_value(User("abc")) == "User:abc"


def test_serialize_value_requires_id():
    with pytest.raises(InvalidObjectError):
        serialize_value(Unsaved())


def test_parse_reference():
    assert parse_reference("Tweet:5") == Reference("Tweet", "5")
    assert str(parse_reference("Tweet:5")) == "Tweet:5"
    for value in ("Tweet", "a:b:c", ":5", "Tweet:", None, 5, {"id": 5}):
        assert parse_reference(value) is None


def test_create_activity_uses_hooks_and_defaults():
    actor = User(1, "a")
    link = Link(3)
    tweet = Tweet(5, "hi", actor=actor, link=link, bg="blue")

    activity = create_activity(tweet)

    assert activity["actor"] is actor
    assert activity["object"] is tweet
    assert activity["verb"] == "Tweet"
    assert activity["foreign_id"] == "Tweet:5"
    assert activity["to"] == ["notification:1", "notification:2"]
    assert activity["bg"] == "blue"
    assert activity["link"] is link
    assert "time" not in activity


def test_create_activity_without_hooks():
    user = User(2)
    user.actor = user

    activity = create_activity(user)

    assert activity == {"actor": user, "verb": "User", "object": user, "foreign_id": "User:2"}
