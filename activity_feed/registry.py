"""
Lookup of domain types by model reference.

Django models are picked up lazily from the app registry the first time a
name is looked up.  Types registered explicitly take precedence over the
discovered ones.
"""
import logging

from django.apps import apps

from .references import model_reference

logger = logging.getLogger(__name__)


class ActivityModelRegistry:
    def __init__(self, discover: bool = True):
        self._explicit = {}
        self._discovered = None
        self._discover = discover

    def register(self, cls):
        name = model_reference(cls)
        self._explicit[name] = cls
        return cls

    def _discovered_models(self) -> dict:
        if self._discovered is None:
            found = {}
            if self._discover:
                for model in apps.get_models():
                    name = model_reference(model)
                    if name in found:
                        logger.warning(
                            "Model reference %s is used by %s and %s; keeping %s",
                            name, found[name]._meta.label, model._meta.label,
                            found[name]._meta.label,
                        )
                        continue
                    found[name] = model
            self._discovered = found
        return self._discovered

    def get(self, name: str):
        if name in self._explicit:
            return self._explicit[name]
        return self._discovered_models().get(name)

    def __contains__(self, name) -> bool:
        return self.get(name) is not None


registry = ActivityModelRegistry()
