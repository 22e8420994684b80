"""
Django ORM store used by the batch resolver.

``fetch_by_ids`` issues one ``in_bulk`` query per type.  Ids that do not
exist, or that cannot be converted to the model's primary key, are simply
missing from the result.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from .exceptions import StoreError
from .references import related_models
from .registry import registry as default_registry

logger = logging.getLogger(__name__)


class ModelStore:
    def __init__(self, registry=None, using: str | None = None):
        self.registry = registry or default_registry
        self.using = using

    def get_queryset(self, model):
        qs = model._default_manager.all()
        if self.using:
            qs = qs.using(self.using)
        related = related_models(model)
        if related:
            qs = qs.select_related(*related)
        return qs

    def _to_pks(self, model, ids) -> dict:
        """Converted primary keys mapped to the raw ids that produced them."""
        pk_field = model._meta.pk
        pks = {}
        for raw in ids:
            try:
                pk = pk_field.to_python(raw)
            except ValidationError:
                logger.debug("Skipping invalid %s id %r", model._meta.label, raw)
                continue
            pks.setdefault(pk, []).append(raw)
        return pks

    def fetch_by_ids(self, type_name: str, ids) -> dict:
        model = self.registry.get(type_name)
        if model is None:
            logger.warning("No model registered for reference type %s", type_name)
            return {}
        pks = self._to_pks(model, ids)
        if not pks:
            return {}
        try:
            objects = self.get_queryset(model).in_bulk(list(pks))
        except DatabaseError as exc:
            logger.exception("Fetching %s ids %s failed", type_name, list(ids))
            raise StoreError(type_name, ids) from exc
        # keyed by the requested ids, so "User:01" resolves like "User:1"
        return {raw: obj for pk, obj in objects.items() for raw in pks.get(pk, ())}
