"""Flatten the collections inside ``Ok`` values, passing ``Err`` values through."""

from __future__ import annotations

from typing import Iterable, Iterator

from iterkit.results import Err, Ok


def flatten_ok(iterable: Iterable[Ok | Err]) -> Iterator[Ok | Err]:
    """Yield ``Ok(x)`` for every ``x`` inside each ``Ok``; each ``Err`` is yielded as is."""
    for item in iterable:
        if isinstance(item, Err):
            yield item
            continue
        for value in item.value:
            yield Ok(value)