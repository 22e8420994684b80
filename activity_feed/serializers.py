from rest_framework import serializers

from .references import model_reference, object_id

SCALAR_TYPES = (str, int, float, bool)


def represent_value(value):
    """
    Render one activity value.  Resolved objects go through their
    ``activity_representation()`` hook when they have one; unresolved
    references are plain strings and are returned as is.
    """
    if value is None or isinstance(value, SCALAR_TYPES):
        return value
    if isinstance(value, dict):
        return {k: represent_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [represent_value(v) for v in value]
    hook = getattr(value, "activity_representation", None)
    if callable(hook):
        return hook()
    pk = object_id(value)
    if pk is None:
        return value
    return {"id": pk, "type": model_reference(value), "display": str(value)}


class EnrichedActivitySerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        return {key: represent_value(value) for key, value in instance.items()}


class AggregatedActivitySerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        data = {key: value for key, value in instance.items() if key != "activities"}
        data["activities"] = EnrichedActivitySerializer(
            instance["activities"], many=True, context=self.context
        ).data
        return data
