"""Path lookup on parsed value trees."""

from __future__ import annotations

from .values import Nil, Value, VDict, VList


def apply_getter(value: Value, accessor: str) -> Value:
    """Resolve a single accessor on a value.

    - VDict: key lookup
    - VList: 1-based integer index
    - anything else / miss: returns Nil
    """
    if isinstance(value, VDict):
        return value.entries.get(accessor, Nil)

    if isinstance(value, VList):
        try:
            idx = int(accessor) - 1
        except ValueError:
            return Nil
        if 0 <= idx < len(value.items):
            return value.items[idx]
        return Nil

    return Nil


def lookup(value: Value, path: str) -> Value:
    """Apply a dot-separated accessor path, e.g. ``"db.raffles.1.name"``."""
    for accessor in path.split("."):
        if not accessor:
            continue
        value = apply_getter(value, accessor)
    return value
