"""Take the single element of an iterable, or fail keeping every element."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class ExactlyOneError(ValueError):
    """Raised when an iterable does not hold exactly one element.

    The error is itself an iterator yielding all the elements of the input,
    including the ones already taken while checking.
    """

    def __init__(self, first_two: Iterable[Any] = (), rest: Iterable[Any] = ()) -> None:
        self._pending: deque[Any] = deque(first_two)
        self._rest: Iterator[Any] = iter(rest)
        super().__init__(self._message())

    def _message(self) -> str:
        if self._pending:
            return "got at least 2 elements when exactly one was expected"
        return "got zero elements when exactly one was expected"

    def __str__(self) -> str:
        return self._message()

    def __repr__(self) -> str:
        pending = list(self._pending)
        if len(pending) == 2:
            return (
                f"ExactlyOneError[First: {pending[0]!r}, Second: {pending[1]!r}, "
                f"RemainingIter: {self._rest!r}]"
            )
        if len(pending) == 1:
            return f"ExactlyOneError[Second: {pending[0]!r}, RemainingIter: {self._rest!r}]"
        return f"ExactlyOneError[RemainingIter: {self._rest!r}]"

    def __iter__(self) -> ExactlyOneError:
        return self

    def __next__(self) -> Any:
        if self._pending:
            return self._pending.popleft()
        return next(self._rest)


_END: Any = object()


def exactly_one(iterable: Iterable[Any]) -> Any:
    """The only element of ``iterable``; raise :class:`ExactlyOneError` otherwise."""
    items = iter(iterable)
    first = next(items, _END)
    if first is _END:
        raise ExactlyOneError((), items)
    second = next(items, _END)
    if second is not _END:
        raise ExactlyOneError((first, second), items)
    return first