"""Join a sequence of collections into one."""

from __future__ import annotations

import copy
from typing import Any, Iterable


def concat(iterable: Iterable[Any], default: Any = None) -> Any:
    """Extend the first item with each of the rest and return the result.

    The first item is copied, never changed in place. Items with ``extend``
    (lists) or ``update`` (sets, dicts) are extended; others (strings,
    tuples) are joined with ``+``. An empty input gives ``default``.
    """
    items = iter(iterable)
    try:
        first = next(items)
    except StopIteration:
        return default
    if hasattr(first, "extend"):
        result = copy.copy(first)
        for item in items:
            result.extend(item)
        return result
    if hasattr(first, "update"):
        result = copy.copy(first)
        for item in items:
            result.update(item)
        return result
    result = first
    for item in items:
        result = result + item
    return result