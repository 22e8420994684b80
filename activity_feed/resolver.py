"""
Batch resolver: one lookup per type for a whole set of references.
"""
import logging
from collections import defaultdict

from .references import Reference

logger = logging.getLogger(__name__)


def group_references(references) -> dict:
    """Unique ids per type name, in first-seen order."""
    grouped = defaultdict(dict)
    for ref in references:
        grouped[ref.model_reference].setdefault(ref.id, None)
    return {type_name: list(ids) for type_name, ids in grouped.items()}


class BatchResolver:
    def __init__(self, store):
        self.store = store

    def resolve(self, references) -> dict:
        """
        Map every resolvable ``"Type:id"`` string to its object.  Objects
        the store does not return are left out, so callers keep the raw
        reference.  A ``StoreError`` from any type aborts the whole call.
        """
        grouped = group_references(references)
        logger.debug(
            "Resolving %d references across types %s",
            sum(len(ids) for ids in grouped.values()), sorted(grouped),
        )
        resolved = {}
        for type_name, ids in grouped.items():
            found = self.store.fetch_by_ids(type_name, ids)
            for object_id, obj in found.items():
                resolved[str(Reference(type_name, str(object_id)))] = obj
            missing = len(ids) - len(found)
            if missing:
                logger.debug("%d %s references left unresolved", missing, type_name)
        return resolved
