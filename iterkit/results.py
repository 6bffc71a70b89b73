"""Adaptors that work inside ``Ok`` values and pass ``Err`` values through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(frozen=True)
class Ok:
    """A successful result carrying ``value``."""

    value: Any


@dataclass(frozen=True)
class Err:
    """A failed result carrying ``error``."""

    error: Any


def filter_ok(
    iterable: Iterable[Ok | Err], predicate: Callable[[Any], bool]
) -> Iterator[Ok | Err]:
    """Keep ``Ok`` values that satisfy ``predicate``; every ``Err`` passes."""
    for item in iterable:
        if isinstance(item, Err) or predicate(item.value):
            yield item


def filter_map_ok(
    iterable: Iterable[Ok | Err], f: Callable[[Any], Any]
) -> Iterator[Ok | Err]:
    """Map ``Ok`` values with ``f``, dropping those where it returns ``None``."""
    for item in iterable:
        if isinstance(item, Err):
            yield item
            continue
        mapped = f(item.value)
        if mapped is not None:
            yield Ok(mapped)


def map_ok(iterable: Iterable[Ok | Err], f: Callable[[Any], Any]) -> Iterator[Ok | Err]:
    """Apply ``f`` to the value inside every ``Ok``; ``Err`` is unchanged."""
    for item in iterable:
        yield item if isinstance(item, Err) else Ok(f(item.value))


def map_into(iterable: Iterable[Any], convert: Callable[[Any], Any]) -> Iterator[Any]:
    """Convert every element with ``convert``."""
    return (convert(item) for item in iterable)