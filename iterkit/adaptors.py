"""General iterator adaptors."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, Iterator

_EMPTY: Any = object()


def interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements from both inputs until both run out."""
    a, b = iter(first), iter(second)
    take_first = False
    while True:
        take_first = not take_first
        primary, secondary = (a, b) if take_first else (b, a)
        value = next(primary, _EMPTY)
        if value is _EMPTY:
            value = next(secondary, _EMPTY)
        if value is _EMPTY:
            return
        yield value


def interleave_shortest(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements from both inputs until either runs out."""
    sources = (iter(first), iter(second))
    phase = 0
    while True:
        value = next(sources[phase], _EMPTY)
        if value is _EMPTY:
            return
        yield value
        phase ^= 1


class PutBack:
    """An iterator with a single slot for putting one element back in front."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._top: Any = _EMPTY
        self._iter = iter(iterable)

    def __iter__(self) -> PutBack:
        return self

    def __next__(self) -> Any:
        if self._top is not _EMPTY:
            value, self._top = self._top, _EMPTY
            return value
        return next(self._iter)

    def with_value(self, value: Any) -> PutBack:
        """Put back ``value`` and return ``self``."""
        self.put_back(value)
        return self

    def into_parts(self) -> tuple[Any, Iterator[Any]]:
        """The put-back element (``None`` if the slot is empty) and the rest."""
        top = None if self._top is _EMPTY else self._top
        return top, self._iter

    def put_back(self, value: Any) -> None:
        """Put ``value`` in front; an element already in the slot is replaced."""
        self._top = value


def put_back(iterable: Iterable[Any]) -> PutBack:
    """An iterator over ``iterable`` that can take one element back."""
    return PutBack(iterable)


def cartesian_product(first: Iterable[Any], second: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Every pair ``(a, b)``, with ``b`` varying fastest."""
    pool = tuple(second)
    if not pool:
        return
    for a in first:
        for b in pool:
            yield a, b


def batching(iterable: Iterable[Any], f: Callable[[Iterator[Any]], Any]) -> Iterator[Any]:
    """Repeatedly call ``f`` with the iterator; stop when it returns ``None``."""
    source = iter(iterable)
    while True:
        value = f(source)
        if value is None:
            return
        yield value


def step(iterable: Iterable[Any], n: int) -> Iterator[Any]:
    """Every ``n``-th element, starting with the first."""
    if n <= 0:
        raise ValueError("step must be positive")
    return itertools.islice(iterable, 0, None, n)


def take_while_ref(iterator: Any, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Take elements while ``predicate`` holds, leaving the first failing one.

    ``iterator`` must support ``put_back``, as :class:`PutBack` does; the
    element that fails the predicate is put back so it is not lost.
    """
    if not callable(getattr(iterator, "put_back", None)):
        raise TypeError("take_while_ref needs an iterator with put_back")
    return _take_while_ref(iterator, predicate)


def _take_while_ref(iterator: Any, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    for value in iterator:
        if not predicate(value):
            iterator.put_back(value)
            return
        yield value


def while_some(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield elements until the first ``None``."""
    for value in iterable:
        if value is None:
            return
        yield value


def tuple_combinations(iterable: Iterable[Any], k: int) -> Iterator[tuple[Any, ...]]:
    """All ``k``-tuples of elements in their original order, ``k`` at least 1."""
    if k < 1:
        raise ValueError("tuple size must be at least 1")
    return itertools.combinations(iterable, k)


def positions(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Iterator[int]:
    """Indices of the elements for which ``predicate`` holds."""
    return (index for index, value in enumerate(iterable) if predicate(value))


def update(iterable: Iterable[Any], f: Callable[[Any], Any]) -> Iterator[Any]:
    """Call the mutating ``f`` on each element before yielding it."""
    for value in iterable:
        f(value)
        yield value