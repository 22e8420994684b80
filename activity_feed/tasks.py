"""
Celery tasks for the activity feed app.

Publishing runs asynchronously so saving a domain object never waits on
feed writes.  The task receives the model label and primary key rather
than the instance, and loads a fresh copy.
"""
import logging

from celery import shared_task
from django.apps import apps

logger = logging.getLogger(__name__)


@shared_task
def publish_activity_task(model_label: str, object_id) -> int:
    """
    Publish the activity of one object.  Returns the number of feeds the
    activity was written to (0 when the object no longer exists).
    """
    from .feeds import feed_manager

    model = apps.get_model(model_label)
    try:
        instance = model._default_manager.get(pk=object_id)
    except model.DoesNotExist:
        logger.warning("Not publishing %s %s: object no longer exists", model_label, object_id)
        return 0
    return len(feed_manager.activity_created(instance))
