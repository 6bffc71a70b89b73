"""Yield elements that occur more than once."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator


def duplicates_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> Iterator[Any]:
    """Yield each element whose key has been seen exactly once before.

    Every repeated key is reported once, with the element that repeated it.
    """
    produced: dict[Hashable, bool] = {}
    for item in iterable:
        item_key = key(item)
        state = produced.get(item_key)
        if state is None:
            produced[item_key] = False
        elif not state:
            produced[item_key] = True
            yield item


def duplicates(iterable: Iterable[Hashable]) -> Iterator[Any]:
    """Yield each element the second time it appears."""
    return duplicates_by(iterable, lambda item: item)