"""Collect every element that ties for the minimum or maximum."""

from __future__ import annotations

from typing import Any, Callable, Iterable


def _ordering(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _min_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any],
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    items = iter(iterable)
    try:
        first = next(items)
    except StopIteration:
        return []
    current_key = key_for(first)
    result = [first]
    for element in items:
        key = key_for(element)
        order = compare(element, result[0], key, current_key)
        if order < 0:
            result = [element]
            current_key = key
        elif order == 0:
            result.append(element)
    return result


def _max_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any],
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    return _min_set_impl(
        iterable, key_for, lambda a, b, ka, kb: compare(b, a, kb, ka)
    )


def _identity(value: Any) -> Any:
    return value


def min_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """All elements whose key is minimal, in their original order."""
    return _min_set_impl(
        iterable, key or _identity, lambda _a, _b, ka, kb: _ordering(ka, kb)
    )


def max_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """All elements whose key is maximal, in their original order."""
    return _max_set_impl(
        iterable, key or _identity, lambda _a, _b, ka, kb: _ordering(ka, kb)
    )


def min_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """All minimal elements under ``compare`` (negative, zero or positive)."""
    return _min_set_impl(iterable, _identity, lambda a, b, _ka, _kb: compare(a, b))


def max_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """All maximal elements under ``compare`` (negative, zero or positive)."""
    return _max_set_impl(iterable, _identity, lambda a, b, _ka, _kb: compare(a, b))