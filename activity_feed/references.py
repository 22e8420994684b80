"""
Reference codec.

Turns a single domain object into a ``"<model reference>:<id>"`` string
and builds activities from objects.  Every per-type customisation is an
optional hook looked up on the object (or its class); nothing here needs a
common base class and nothing here touches the database.

Hooks a domain type may define:

``activity_model_reference()``  type tag used in references (classmethod)
``activity_reference_fields()`` extra activity fields holding references
``activity_related_models()``   relations to ``select_related`` on fetch
``activity_verb()``             verb, defaults to the model reference
``activity_actor_attr()``       attribute holding the actor, ``"actor"``
``activity_object_attr()``      attribute holding the object, self if unset
``activity_time()``             activity time, ``created_at`` if present
``activity_notify()``           feed ids to copy the activity to
``extra_activity_data()``       extra fields merged into the activity
"""
from typing import NamedTuple

from .exceptions import InvalidObjectError

SEPARATOR = ":"


class Reference(NamedTuple):
    model_reference: str
    id: str

    def __str__(self) -> str:
        return f"{self.model_reference}{SEPARATOR}{self.id}"


def parse_reference(value):
    """Return a ``Reference`` for ``"Type:id"`` strings, ``None`` otherwise."""
    if not isinstance(value, str) or value.count(SEPARATOR) != 1:
        return None
    model_ref, _, object_id = value.partition(SEPARATOR)
    if not model_ref or not object_id:
        return None
    return Reference(model_ref, object_id)


def _hook(obj, name):
    return getattr(obj, name, None)


def model_reference(obj) -> str:
    """Type tag of ``obj`` (an instance or a class)."""
    hook = _hook(obj, "activity_model_reference")
    if callable(hook):
        name = hook()
    else:
        cls = obj if isinstance(obj, type) else type(obj)
        meta = getattr(cls, "_meta", None)
        name = getattr(meta, "object_name", None) or cls.__name__
    if not name or SEPARATOR in name:
        raise InvalidObjectError(f"Invalid model reference {name!r}")
    return name


def object_id(obj):
    pk = getattr(obj, "pk", None)
    if pk is None:
        pk = getattr(obj, "id", None)
    return pk


def serialize_value(obj) -> str:
    """Build the reference string for ``obj``."""
    pk = object_id(obj)
    if pk is None or pk == "":
        raise InvalidObjectError(f"{type(obj).__name__} instance has no id")
    return str(Reference(model_reference(obj), str(pk)))


def reference_fields(cls) -> tuple:
    hook = _hook(cls, "activity_reference_fields")
    return tuple(hook()) if callable(hook) else ()


def related_models(cls) -> tuple:
    hook = _hook(cls, "activity_related_models")
    return tuple(hook() or ()) if callable(hook) else ()


def activity_verb(obj) -> str:
    hook = _hook(obj, "activity_verb")
    return hook() if callable(hook) else model_reference(obj)


def activity_actor_attr(obj) -> str:
    hook = _hook(obj, "activity_actor_attr")
    return hook() if callable(hook) else "actor"


def activity_object(obj):
    hook = _hook(obj, "activity_object_attr")
    return getattr(obj, hook()) if callable(hook) else obj


def activity_time(obj):
    hook = _hook(obj, "activity_time")
    return hook() if callable(hook) else getattr(obj, "created_at", None)


def activity_notify(obj) -> list:
    hook = _hook(obj, "activity_notify")
    return list(hook() or []) if callable(hook) else []


def extra_activity_data(obj) -> dict:
    hook = _hook(obj, "extra_activity_data")
    return dict(hook() or {}) if callable(hook) else {}


def create_activity(obj) -> dict:
    """
    Build an activity for ``obj``.  Related objects are left as objects;
    ``Enrich.serialize_activities`` turns them into references before the
    activity is stored.
    """
    activity = {
        "actor": getattr(obj, activity_actor_attr(obj), None),
        "verb": activity_verb(obj),
        "object": activity_object(obj),
        "foreign_id": serialize_value(obj),
    }
    time = activity_time(obj)
    if time is not None:
        activity["time"] = time
    to = activity_notify(obj)
    if to:
        activity["to"] = to
    activity.update(extra_activity_data(obj))
    return activity
