# activity_feed/signals.py
import logging

from django.db import transaction
from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from .conf import get_setting
from .feeds import feed_manager
from .mixins import ActivityMixin
from .tasks import publish_activity_task

logger = logging.getLogger(__name__)


def _schedule_publish(label: str, pk):
    transaction.on_commit(lambda: publish_activity_task.delay(label, pk))


@receiver(post_save, dispatch_uid="activity_feed_publish_on_create")
def publish_on_create(sender, instance, created: bool, **kwargs):
    """
    Publish the activity of a newly created ``ActivityMixin`` model once the
    transaction commits.  In autocommit mode that is immediately, before
    any m2m rows are added; ``republish_on_m2m_change`` covers those.
    """
    if not created or not isinstance(instance, ActivityMixin):
        return
    if not get_setting("AUTO_PUBLISH"):
        return
    _schedule_publish(instance._meta.label, instance.pk)


@receiver(m2m_changed, dispatch_uid="activity_feed_republish_on_m2m_change")
def republish_on_m2m_change(sender, instance, action: str, reverse: bool, model, pk_set, **kwargs):
    """
    Re-publish when a many-to-many relation of an activity model changes,
    since notify targets (e.g. mentions) usually live there.  Feeds that
    stop being targets are cleared by ``FeedManager.activity_created``.
    """
    if action not in ("post_add", "post_remove", "post_clear"):
        return
    if not get_setting("AUTO_PUBLISH"):
        return
    if not reverse:
        if isinstance(instance, ActivityMixin) and instance.pk is not None:
            _schedule_publish(instance._meta.label, instance.pk)
        return
    # reverse side: ``instance`` is the related row, ``model`` the activity model
    if not issubclass(model, ActivityMixin):
        return
    for pk in sorted(pk_set or ()):
        _schedule_publish(model._meta.label, pk)


@receiver(post_delete, dispatch_uid="activity_feed_remove_on_delete")
def remove_on_delete(sender, instance, **kwargs):
    if not isinstance(instance, ActivityMixin) or not get_setting("AUTO_PUBLISH"):
        return
    feed_manager.activity_deleted(instance)
