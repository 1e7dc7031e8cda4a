"""
Helper functions for walking records during aggregation.
"""

from collections.abc import Mapping
from typing import Any


def keys(record: Any) -> list[Any]:
    """
    Own keys of a record, in insertion order.

    Mappings yield their keys; other objects yield their public instance
    attributes in the order they were set.
    """
    if isinstance(record, Mapping):
        return list(record.keys())

    try:
        attrs = vars(record)
    except TypeError:
        return []
    return [k for k in attrs if not k.startswith("_")]


def field_value(record: Any, key: Any) -> Any:
    """Read a field from a mapping or an object, None when absent."""
    if isinstance(record, Mapping):
        return record.get(key)
    if isinstance(key, str):
        return getattr(record, key, None)
    return None


def has_field(record: Any, key: Any) -> bool:
    if isinstance(record, Mapping):
        return key in record
    return isinstance(key, str) and hasattr(record, key)
