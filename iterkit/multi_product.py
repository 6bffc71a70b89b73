"""Cartesian product over any number of iterables."""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Iterator


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> Iterator[list[Any]]:
    """Every list taking one element from each iterable, the last varying fastest.

    Yields nothing when there are no iterables or when any of them is empty.
    """
    pools = [tuple(iterable) for iterable in iterables]
    if not pools or not all(pools):
        return
    for combo in itertools.product(*pools):
        yield list(combo)