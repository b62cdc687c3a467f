from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs, cast

from .._core import Pipeable, payload_str
from ._maybe import Maybe, Some, into_maybe

UNWRAP_ERR_MSG = "attempted to unwrap ERR result"


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](Pipeable, ABC):
    """Either a success `Ok(value)` or a failure `Err(error)`.

    Every combinator returns a new `Result` (or an existing one, they are immutable), nothing is mutated.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.Result.Ok("foo")
    Ok('foo')
    >>> str(tb.Result.Err("foo"))
    'Err("foo")'

    ```
    """

    __slots__ = ()

    @staticmethod
    def Ok[U](value: U) -> Result[U, Any]:  # noqa: N802
        """Build the success variant."""
        return Ok(value)

    @staticmethod
    def Err[F](error: F) -> Result[Any, F]:  # noqa: N802
        """Build the failure variant."""
        return Err(error)

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("foo").unwrap()
        'foo'
        >>> tb.Err("foo").unwrap()
        Traceback (most recent call last):
            ...
        tidbits._results._result.ResultUnwrapError: attempted to unwrap ERR result

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().
        """
        ...

    def ok(self) -> T | None:
        """
        Returns the Ok value, or `None` if the result is Err.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("foo").ok()
        'foo'
        >>> tb.Err("foo").ok() is None
        True

        ```
        """
        return self.unwrap() if self.is_ok() else None

    def err(self) -> E | None:
        """
        Returns the Err value, or `None` if the result is Ok.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Err("foo").err()
        'foo'
        >>> tb.Ok("foo").err() is None
        True

        ```
        """
        return self.unwrap_err() if self.is_err() else None

    def map[U, F](self, ok: Callable[[T], U], err: Callable[[E], F]) -> Result[U, F]:
        """
        Maps both sides of the result, only the function matching the variant is called.

        Args:
            ok: Callable to apply to the Ok value.
            err: Callable to apply to the Err value.

        Returns:
            Result[U, F]: Ok(ok(value)) if Ok, otherwise Err(err(error)).

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("foo").map(lambda v: v + "bar", str.upper)
        Ok('foobar')
        >>> tb.Err("foo").map(lambda v: v + "bar", str.upper)
        Err('FOO')

        ```
        """
        if self.is_ok():
            return Ok(ok(self.unwrap()))
        return Err(err(self.unwrap_err()))

    def map_ok[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Equivalent to Rust's Result::map().
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Equivalent to Rust's Result::map_err().
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Pattern matches on the result, calling ok if Ok, or err if Err.

        Args:
            ok: Callable to handle the Ok value.
            err: Callable to handle the Err value.

        Returns:
            The result of the called function.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok(2).map_or_else(lambda v: v * 10, len)
        20
        >>> tb.Err("four").map_or_else(lambda v: v * 10, len)
        4

        ```
        """
        match self:
            case Ok(value):
                return ok(value)
            case Err(error):
                return err(error)
            case _:
                raise RuntimeError("unreachable")

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns the Err untouched.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise Err(error).

        Example:
        ```python
        >>> import tidbits as tb
        >>> def parse(s: str) -> tb.Result[int, str]:
        ...     return tb.Ok(int(s)) if s.isdigit() else tb.Err(f"not a number: {s}")
        >>> tb.Ok("12").and_then(parse)
        Ok(12)
        >>> tb.Ok("x").and_then(parse)
        Err('not a number: x')
        >>> tb.Err("early").and_then(parse)
        Err('early')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls f if the result is Err, otherwise returns the Ok untouched.

        Equivalent to Rust's Result::or_else().
        """
        if self.is_err():
            return f(self.unwrap_err())
        return cast(Result[T, F], self)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """
        Returns **other** if the result is Ok, otherwise returns the Err of self.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("foo").and_(tb.Ok("bar"))
        Ok('bar')
        >>> tb.Err("foobar").and_(tb.Ok("foo"))
        Err('foobar')

        ```
        """
        if self.is_ok():
            return other
        return cast(Result[U, E], self)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """
        Returns **other** if the result is Err, otherwise returns the Ok of self.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Err("foobar").or_(tb.Ok("foobar"))
        Ok('foobar')
        >>> tb.Ok("foo").or_(tb.Ok("bar"))
        Ok('foo')

        ```
        """
        if self.is_err():
            return other
        return cast(Result[T, F], self)

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Equivalent to Rust's Result::expect().
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("foo").unwrap_or("bar")
        'foo'
        >>> tb.Err("foo").unwrap_or("bar")
        'bar'

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error.

        Args:
            f: Callable that takes the Err value and returns a T.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Err("fizz").unwrap_or_else(lambda e: e + "buzz")
        'fizzbuzz'
        >>> tb.Ok("fizz").unwrap_or_else(lambda e: e + "buzz")
        'fizz'

        ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def contains(self, value: object) -> bool:
        """
        Returns True if the result is Ok and its value equals **value**.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok("fizz").contains("fizz")
        True
        >>> tb.Err("fizz").contains("fizz")
        False

        ```
        """
        return self.is_ok() and self.unwrap() == value

    def contains_err(self, value: object) -> bool:
        """Returns True if the result is Err and its error equals **value**."""
        return self.is_err() and self.unwrap_err() == value

    def equals(self, other: object) -> bool:
        """
        Structural equality: same variant and equal payload.

        Same as `==`.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok([1, {"a": 2}]).equals(tb.Ok([1, {"a": 2}]))
        True
        >>> tb.Ok("foo").equals(tb.Err("foo"))
        False

        ```
        """
        return self == other

    def transpose[U](self: Result[Maybe[U] | U | None, E]) -> Maybe[Result[U, E]]:
        """
        Swaps a `Result` of a maybe-value into a `Maybe` of a `Result`.

        The Ok value is read as nullable: `NOTHING` and `None` both count as absent.

        - `Ok(NOTHING)` and `Ok(None)` give `NOTHING`.
        - `Ok(Some(v))` and `Ok(v)` give `Some(Ok(v))`.
        - `Err(e)` gives `Some(Err(e))`.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Ok(tb.Some(5)).transpose()
        Some(Ok(5))
        >>> tb.Ok(None).transpose()
        NOTHING
        >>> tb.Err("bad").transpose()
        Some(Err('bad'))

        ```
        """
        match self:
            case Ok(value):
                return into_maybe(value).map(Ok)
            case Err():
                return Some(cast(Result[U, E], self))
            case _:
                raise RuntimeError("unreachable")


@dataclass(slots=True, frozen=True, repr=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __str__(self) -> str:
        return f"Ok({payload_str(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("attempted to unwrap_err OK result")


@dataclass(slots=True, frozen=True, repr=False)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __str__(self) -> str:
        return f"Err({payload_str(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(UNWRAP_ERR_MSG)

    def unwrap_err(self) -> E:
        return self.error


