"""
Enrichment orchestrator.

Write path: ``serialize_activities`` replaces domain objects in the
reference fields of each activity with ``"Type:id"`` strings, in place.

Read path: ``enrich_activities`` and ``enrich_aggregated_activities``
collect every reference across the input, resolve them with one lookup per
type and return new activities (or buckets) with the objects substituted.
Inputs are never modified, and a failed lookup fails the whole call.
"""
from asgiref.sync import sync_to_async

from .fields import ActivityFieldWalker
from .registry import registry as default_registry
from .resolver import BatchResolver
from .store import ModelStore


class Enrich:
    def __init__(self, store=None, registry=None, fields=None):
        self.registry = registry or default_registry
        self.store = store or ModelStore(registry=self.registry)
        self.walker = ActivityFieldWalker(self.registry, fields=fields)
        self.resolver = BatchResolver(self.store)

    def serialize_activities(self, activities):
        # every update is computed before any is applied so that an invalid
        # object leaves the whole batch untouched
        updates = [self.walker.serialize(activity) for activity in activities]
        for activity, changes in zip(activities, updates):
            activity.update(changes)
        return activities

    def _enrich(self, activities) -> list:
        references = []
        for activity in activities:
            references.extend(self.walker.collect(activity))
        resolved = self.resolver.resolve(references) if references else {}
        return [self.walker.apply(activity, resolved) for activity in activities]

    def enrich_activities(self, activities) -> list:
        return self._enrich(list(activities))

    def enrich_aggregated_activities(self, aggregated_activities) -> list:
        buckets = list(aggregated_activities)
        flat = []
        for bucket in buckets:
            flat.extend(bucket["activities"])
        enriched = self._enrich(flat)

        result = []
        offset = 0
        for bucket in buckets:
            count = len(bucket["activities"])
            new_bucket = dict(bucket)
            new_bucket["activities"] = enriched[offset:offset + count]
            offset += count
            result.append(new_bucket)
        return result

    async def aenrich_activities(self, activities) -> list:
        return await sync_to_async(self.enrich_activities)(activities)

    async def aenrich_aggregated_activities(self, aggregated_activities) -> list:
        return await sync_to_async(self.enrich_aggregated_activities)(aggregated_activities)
