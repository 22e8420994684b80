"""
Models for the posts app.

``Tweet`` is an activity model: its actor is the author, its object is
itself and it carries two extra activity fields, ``bg`` (a plain value)
and ``link`` (a reference to a ``Link``).  ``Link`` defines no activity
hooks at all and is still serialized and resolved with the defaults.
"""
from django.conf import settings
from django.db import models

from activity_feed.feeds import feed_manager
from activity_feed.mixins import ActivityMixin


class Link(models.Model):
    href = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.href


class Tweet(ActivityMixin, models.Model):
    text = models.CharField(max_length=280, blank=True)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="tweets",
    )
    bg = models.CharField(max_length=32, blank=True)
    link = models.ForeignKey(
        Link,
        on_delete=models.SET_NULL,
        related_name="tweets",
        blank=True,
        null=True,
    )
    mentions = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="mentioned_in_tweets",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Tweet[{self.pk}] {self.text[:40]}"

    @classmethod
    def activity_reference_fields(cls):
        return ("link",)

    @classmethod
    def activity_related_models(cls):
        return ("actor", "link")

    def activity_notify(self):
        return [feed_manager.notification_feed(pk) for pk in self.mentions.order_by("pk").values_list("pk", flat=True)]

    def extra_activity_data(self) -> dict:
        return {"bg": self.bg, "link": self.link}

    def activity_representation(self) -> dict:
        return {
            "id": self.pk,
            "type": "Tweet",
            "text": self.text,
            "actor_id": self.actor_id,
            "link_id": self.link_id,
        }
