from collections.abc import Iterable
from typing import Any


def apply_dict_updates[T](entity: T, update_data: dict[str, Any], excluded_attrs: Iterable[str] | None = None) -> T:
    """
    Copies key-value pairs from a dictionary onto an ORM entity.

    Args:
        entity: The SQLAlchemy ORM object (new or loaded into the session).
        update_data: Dictionary of fields and values to set.
        excluded_attrs: Attribute names that must never be mass-assigned (e.g. 'id', 'hashid').

    Unknown keys are ignored, so request payloads can be passed through as-is.
    """
    excluded = set(excluded_attrs or ())
    for key, value in update_data.items():
        if key in excluded:
            continue

        if hasattr(entity, key):
            setattr(entity, key, value)

    return entity
