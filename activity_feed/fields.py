"""
Activity field walker.

Knows which fields of an activity may carry references: ``actor``,
``object``, ``target`` and the extra fields declared by the type named in
the activity's ``foreign_id``.  ``origin`` is opaque metadata and is never
visited even when it looks like a reference.
"""
from .references import parse_reference, reference_fields, serialize_value

BASE_REFERENCE_FIELDS = ("actor", "object", "target")
OPAQUE_FIELDS = frozenset({"origin", "foreign_id"})


class ActivityFieldWalker:
    def __init__(self, registry, fields=None):
        self.registry = registry
        self.base_fields = tuple(fields) if fields is not None else BASE_REFERENCE_FIELDS

    def declared_fields(self, activity) -> tuple:
        """Extra reference fields of the activity's originating type."""
        ref = parse_reference(activity.get("foreign_id"))
        if ref is None:
            return ()
        cls = self.registry.get(ref.model_reference)
        return reference_fields(cls) if cls is not None else ()

    def reference_fields(self, activity) -> list:
        names = []
        for name in self.base_fields + self.declared_fields(activity):
            if name in OPAQUE_FIELDS or name in names or name not in activity:
                continue
            names.append(name)
        return names

    def serialize(self, activity) -> dict:
        """
        Field updates that replace domain objects with references.  Strings
        (already references) and ``None`` are left alone.
        """
        updates = {}
        for name in self.reference_fields(activity):
            value = activity[name]
            if value is None or isinstance(value, str):
                continue
            updates[name] = serialize_value(value)
        return updates

    def collect(self, activity) -> list:
        refs = []
        for name in self.reference_fields(activity):
            ref = parse_reference(activity[name])
            if ref is not None:
                refs.append(ref)
        return refs

    def apply(self, activity, resolved) -> dict:
        """Copy of ``activity`` with resolved objects substituted."""
        enriched = dict(activity)
        for name in self.reference_fields(activity):
            value = activity[name]
            if isinstance(value, str) and value in resolved:
                enriched[name] = resolved[value]
        return enriched
