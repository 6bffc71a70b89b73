"""Compare two iterables in lock-step and report where they part ways."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from iterkit.adaptors import PutBack, put_back

_END: Any = object()


@dataclass
class FirstMismatch:
    """The index of the first differing pair and what remains of both sides."""

    index: int
    first_remaining: PutBack
    second_remaining: PutBack


@dataclass
class Shorter:
    """The second side ended first: its length and what remains of the first."""

    index: int
    first_remaining: PutBack


@dataclass
class Longer:
    """The first side ended first: its length and what remains of the second."""

    index: int
    second_remaining: PutBack


def diff_with(
    first: Iterable[Any],
    second: Iterable[Any],
    is_equal: Callable[[Any, Any], bool] | None = None,
) -> FirstMismatch | Shorter | Longer | None:
    """Describe how ``second`` differs from ``first``; ``None`` if it does not."""
    same = is_equal or operator.eq
    a, b = iter(first), iter(second)
    index = 0
    for a_elem in a:
        b_elem = next(b, _END)
        if b_elem is _END:
            return Shorter(index, put_back(a).with_value(a_elem))
        if not same(a_elem, b_elem):
            return FirstMismatch(
                index,
                put_back(a).with_value(a_elem),
                put_back(b).with_value(b_elem),
            )
        index += 1
    b_elem = next(b, _END)
    if b_elem is _END:
        return None
    return Longer(index, put_back(b).with_value(b_elem))