"""A value holding a left value, a right value, or both."""

from __future__ import annotations

from typing import Any, Callable

_MISSING: Any = object()


class EitherOrBoth:
    """Holds a left value, a right value, or both at once.

    Build instances with :meth:`of_left`, :meth:`of_right` or :meth:`of_both`.
    Accessors that may find nothing return ``None``.
    """

    __slots__ = ("_left", "_right")

    def __init__(self, left: Any = _MISSING, right: Any = _MISSING) -> None:
        if left is _MISSING and right is _MISSING:
            raise ValueError("EitherOrBoth needs a left value, a right value or both")
        self._left = left
        self._right = right

    @classmethod
    def of_left(cls, value: Any) -> EitherOrBoth:
        """Only a left value."""
        return cls(left=value)

    @classmethod
    def of_right(cls, value: Any) -> EitherOrBoth:
        """Only a right value."""
        return cls(right=value)

    @classmethod
    def of_both(cls, left: Any, right: Any) -> EitherOrBoth:
        """Both a left and a right value."""
        return cls(left=left, right=right)

    def _key(self) -> tuple:
        has_left, has_right = self.has_left(), self.has_right()
        return (
            has_left,
            self._left if has_left else None,
            has_right,
            self._right if has_right else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EitherOrBoth):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_both():
            return f"Both({self._left!r}, {self._right!r})"
        if self.is_left():
            return f"Left({self._left!r})"
        return f"Right({self._right!r})"

    def has_left(self) -> bool:
        """True for ``Left`` and ``Both``."""
        return self._left is not _MISSING

    def has_right(self) -> bool:
        """True for ``Right`` and ``Both``."""
        return self._right is not _MISSING

    def is_left(self) -> bool:
        """True only for ``Left``."""
        return self.has_left() and not self.has_right()

    def is_right(self) -> bool:
        """True only for ``Right``."""
        return self.has_right() and not self.has_left()

    def is_both(self) -> bool:
        """True only for ``Both``."""
        return self.has_left() and self.has_right()

    def left(self) -> Any:
        """The left value of ``Left`` or ``Both``, otherwise ``None``."""
        return self._left if self.has_left() else None

    def right(self) -> Any:
        """The right value of ``Right`` or ``Both``, otherwise ``None``."""
        return self._right if self.has_right() else None

    def left_and_right(self) -> tuple[Any, Any]:
        """Both sides as a pair, ``None`` standing in for a missing one."""
        return self.left(), self.right()

    def just_left(self) -> Any:
        """The left value only for ``Left``, otherwise ``None``."""
        return self._left if self.is_left() else None

    def just_right(self) -> Any:
        """The right value only for ``Right``, otherwise ``None``."""
        return self._right if self.is_right() else None

    def both(self) -> tuple[Any, Any] | None:
        """The pair of values for ``Both``, otherwise ``None``."""
        return (self._left, self._right) if self.is_both() else None

    def into_left(self, convert: Callable[[Any], Any] | None = None) -> Any:
        """The left value, or the right one passed through ``convert``."""
        if self.has_left():
            return self._left
        return convert(self._right) if convert is not None else self._right

    def into_right(self, convert: Callable[[Any], Any] | None = None) -> Any:
        """The right value, or the left one passed through ``convert``."""
        if self.has_right():
            return self._right
        return convert(self._left) if convert is not None else self._left

    def flip(self) -> EitherOrBoth:
        """Swap the left and right sides."""
        return EitherOrBoth(left=self._right, right=self._left)

    def map_left(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left value if present, keeping the variant."""
        return self.map_any(f, lambda value: value)

    def map_right(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the right value if present, keeping the variant."""
        return self.map_any(lambda value: value, f)

    def map_any(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left and ``g`` to the right value where present."""
        left = f(self._left) if self.has_left() else _MISSING
        right = g(self._right) if self.has_right() else _MISSING
        return EitherOrBoth(left=left, right=right)

    def left_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """``f(left)`` when a left value is present, otherwise ``self`` unchanged."""
        if self.has_left():
            return f(self._left)
        return EitherOrBoth.of_right(self._right)

    def right_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """``f(right)`` when a right value is present, otherwise ``self`` unchanged."""
        if self.has_right():
            return f(self._right)
        return EitherOrBoth.of_left(self._left)

    def or_(self, left: Any, right: Any) -> tuple[Any, Any]:
        """Both sides as a pair, filling a missing side with the given value."""
        return (
            self._left if self.has_left() else left,
            self._right if self.has_right() else right,
        )

    def or_else(
        self,
        left_factory: Callable[[], Any],
        right_factory: Callable[[], Any],
    ) -> tuple[Any, Any]:
        """Both sides as a pair, computing a missing side lazily."""
        return (
            self._left if self.has_left() else left_factory(),
            self._right if self.has_right() else right_factory(),
        )

    def left_or_insert(self, value: Any) -> Any:
        """The left value, inserting ``value`` first if it is missing."""
        return self.left_or_insert_with(lambda: value)

    def right_or_insert(self, value: Any) -> Any:
        """The right value, inserting ``value`` first if it is missing."""
        return self.right_or_insert_with(lambda: value)

    def left_or_insert_with(self, f: Callable[[], Any]) -> Any:
        """The left value, inserting ``f()`` first if it is missing."""
        if self.has_left():
            return self._left
        return self.insert_left(f())

    def right_or_insert_with(self, f: Callable[[], Any]) -> Any:
        """The right value, inserting ``f()`` first if it is missing."""
        if self.has_right():
            return self._right
        return self.insert_right(f())

    def insert_left(self, value: Any) -> Any:
        """Set the left value, leaving the right one alone; returns ``value``."""
        self._left = value
        return value

    def insert_right(self, value: Any) -> Any:
        """Set the right value, leaving the left one alone; returns ``value``."""
        self._right = value
        return value

    def insert_both(self, left: Any, right: Any) -> tuple[Any, Any]:
        """Turn this into ``Both(left, right)`` and return the pair."""
        self._left = left
        self._right = right
        return left, right

    def reduce(self, f: Callable[[Any, Any], Any]) -> Any:
        """The single present value, or ``f(left, right)`` for ``Both``."""
        if self.is_both():
            return f(self._left, self._right)
        return self._left if self.has_left() else self._right