from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeIs

from .._core import Pipeable, payload_str

if TYPE_CHECKING:
    from ._result import Result


class Maybe[T](Pipeable, ABC):
    """An optional value: either `Some(value)` or `NOTHING`.

    Build one from a nullable value with `into_maybe`, then consume it with `match` or the accessors below.

    None of the accessors raise.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the maybe is a `Some` value.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some(2).is_some()
            True
            >>> tb.NOTHING.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[Nothing]:  # type: ignore[misc]
        """
        Returns `True` if the maybe is `NOTHING`.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some(2).is_none()
            False
            >>> tb.NOTHING.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def get(self) -> T | None:
        """
        Returns the contained value, or `None` when there is nothing.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some("car").get()
            'car'
            >>> tb.NOTHING.get() is None
            True

            ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if there is nothing.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some("car").unwrap_or("bike")
            'car'
            >>> tb.NOTHING.unwrap_or("bike")
            'bike'

            ```
        """
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value, only called when there is nothing.

        Example:
            ```python
            >>> import tidbits as tb
            >>> k = 10
            >>> tb.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> tb.NOTHING.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.value if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Maybe[U]:
        """
        Maps a `Maybe[T]` to `Maybe[U]` by applying a function to a contained `Some` value,
        leaving `NOTHING` untouched.

        A function returning `None` yields `NOTHING`.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some("Hello, World!").map(len)
            Some(13)
            >>> tb.NOTHING.map(len)
            NOTHING
            >>> tb.Some({"a": 1}).map(lambda d: d.get("b"))
            NOTHING

            ```
        """
        if self.is_some():
            return Some(f(self.value))
        return NOTHING

    def and_then[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """
        Calls a function if the maybe is `Some`, otherwise returns `NOTHING`.

        Some languages call this operation flatmap.

        Example:
            ```python
            >>> import tidbits as tb
            >>> def half(x: int) -> tb.Maybe[int]:
            ...     return tb.Some(x // 2) if x % 2 == 0 else tb.NOTHING
            >>> tb.Some(8).and_then(half).and_then(half)
            Some(2)
            >>> tb.Some(6).and_then(half).and_then(half)
            NOTHING

            ```
        """
        if self.is_some():
            return f(self.value)
        return NOTHING

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """
        Returns the maybe if it contains a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some("barbarians").or_else(lambda: tb.Some("vikings"))
            Some('barbarians')
            >>> tb.NOTHING.or_else(lambda: tb.Some("vikings"))
            Some('vikings')

            ```
        """
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """
        Returns `NOTHING` if there is nothing or if **predicate** rejects the contained value.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> tb.Some(3).filter(lambda x: x % 2 == 0)
            NOTHING

            ```
        """
        if self.is_some() and predicate(self.value):
            return self
        return NOTHING

    def ok_or[E](self, err: E) -> Result[T, E]:
        """
        Transforms `Some(v)` into `Ok(v)` and `NOTHING` into `Err(err)`.

        Example:
            ```python
            >>> import tidbits as tb
            >>> tb.Some(1).ok_or("missing")
            Ok(1)
            >>> tb.NOTHING.ok_or("missing")
            Err('missing')

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.value)
        return Err(err)


@dataclass(slots=True, frozen=True, repr=False)
class Some[T](Maybe[T]):
    """Maybe variant representing the presence of a value.

    `Some(None)` and `Some(NOTHING)` are never built: they give back `NOTHING`.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.Some(42)
    Some(42)
    >>> tb.Some(None) is tb.NOTHING
    True
    >>> tb.Some(tb.NOTHING) is tb.NOTHING
    True

    ```
    """

    value: T

    def __new__(cls, value: T) -> Some[T]:
        if value is None or isinstance(value, Nothing):
            return NOTHING  # type: ignore[return-value]
        return object.__new__(cls)

    def __getnewargs__(self) -> tuple[T]:
        return (self.value,)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __str__(self) -> str:
        return f"Some({payload_str(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[Nothing]:  # type: ignore[misc]
        return False

    def get(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True, repr=False)
class Nothing(Maybe[Any]):
    """Maybe variant representing the absence of a value."""

    def __reduce__(self) -> str:
        return "NOTHING"

    def __repr__(self) -> str:
        return "NOTHING"

    def __str__(self) -> str:
        return "NOTHING"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[Nothing]:  # type: ignore[misc]
        return True

    def get(self) -> None:
        return None


NOTHING: Maybe[Any] = Nothing()
"""Singleton instance representing the absence of a value."""


def into_maybe[T](value: T | Maybe[T] | None) -> Maybe[T]:
    """Convert a nullable value into a `Maybe`.

    `None` becomes `NOTHING`, an existing `Maybe` is returned untouched, anything else is wrapped in `Some`.

    Falsy values are still values.

    Args:
        value (T | Maybe[T] | None): The nullable value.

    Returns:
        Maybe[T]: The wrapped value.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.into_maybe(0)
    Some(0)
    >>> tb.into_maybe(None)
    NOTHING
    >>> tb.into_maybe(tb.Some("a"))
    Some('a')

    ```
    """
    if isinstance(value, Maybe):
        return value
    return Some(value)
