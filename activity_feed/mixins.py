"""
Optional mixin giving a Django model the activity hooks with their
default behaviour.  Models do not have to use it: the codec looks hooks up
by name.  Saving or deleting a model that uses it publishes or removes its
activity (see ``activity_feed.signals``).
"""
from . import references


class ActivityMixin:
    @classmethod
    def activity_model_reference(cls) -> str:
        return cls._meta.object_name

    @classmethod
    def activity_reference_fields(cls):
        return ()

    @classmethod
    def activity_related_models(cls):
        return ()

    def activity_verb(self) -> str:
        return self.activity_model_reference()

    def activity_actor_attr(self) -> str:
        return "actor"

    def activity_notify(self):
        return []

    def extra_activity_data(self) -> dict:
        return {}

    def create_activity(self) -> dict:
        return references.create_activity(self)
