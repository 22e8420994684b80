"""Activity feed app package

Publishes domain objects into feeds as compact ``"Type:id"`` references
and rebuilds full objects from those references when activities are read
back.  ``activity_feed.enrich.Enrich`` is the entry point for both
directions; ``activity_feed.mixins.ActivityMixin`` gives a model the
default activity hooks and automatic publishing (see
``activity_feed.signals``).
"""
