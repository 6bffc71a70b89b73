"""Adaptors that merge or drop adjacent elements."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator

from iterkit.results import Err, Ok

_EMPTY: Any = object()


def coalesce(iterable: Iterable[Any], f: Callable[[Any, Any], Ok | Err]) -> Iterator[Any]:
    """Merge adjacent elements with ``f``.

    ``f(previous, current)`` returns ``Ok(merged)`` to join the two, or
    ``Err((previous, current))`` to emit ``previous`` and carry on with
    ``current``.
    """
    items = iter(iterable)
    last = next(items, _EMPTY)
    if last is _EMPTY:
        return
    for item in items:
        outcome = f(last, item)
        if isinstance(outcome, Ok):
            last = outcome.value
        elif isinstance(outcome, Err):
            emitted, last = outcome.error
            yield emitted
        else:
            raise TypeError("coalesce function must return Ok or Err")
    yield last


def dedup_by(iterable: Iterable[Any], same: Callable[[Any, Any], bool]) -> Iterator[Any]:
    """Drop elements that ``same`` deems equal to the element kept before them."""
    def merge(previous: Any, current: Any) -> Ok | Err:
        if same(previous, current):
            return Ok(previous)
        return Err((previous, current))

    return coalesce(iterable, merge)


def dedup(iterable: Iterable[Any]) -> Iterator[Any]:
    """Drop consecutive repeats of equal elements."""
    return dedup_by(iterable, operator.eq)


def dedup_by_with_count(
    iterable: Iterable[Any], same: Callable[[Any, Any], bool]
) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup_by`, yielding ``(count, element)`` for each run."""
    def merge(previous: tuple[int, Any], current: tuple[int, Any]) -> Ok | Err:
        count, kept = previous
        if same(kept, current[1]):
            return Ok((count + 1, kept))
        return Err((previous, current))

    return coalesce(((1, item) for item in iterable), merge)


def dedup_with_count(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup`, yielding ``(count, element)`` for each run."""
    return dedup_by_with_count(iterable, operator.eq)