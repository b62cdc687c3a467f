"""Traversals that a callback can stop early by returning `bail(value)`."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeIs

from ._results import NOTHING, Err, Maybe, Ok, Result, Some


@dataclass(slots=True, frozen=True, eq=False)
class Bail[R]:
    """Stop signal returned by a traversal callback.

    Only the traversal that minted **token** reacts to it, any other `Bail` is an ordinary value.
    """

    token: object = field(repr=False)
    value: R


type BailFn[R] = Callable[[R], Bail[R]]


def _bailer[R]() -> tuple[object, BailFn[R]]:
    token = object()

    def bail(value: R) -> Bail[R]:
        return Bail(token, value)

    return token, bail


def _is_own_bail(value: object, token: object) -> TypeIs[Bail[Any]]:
    return isinstance(value, Bail) and value.token is token


def try_to_fold[T, A, R](
    data: Iterable[T],
    reducer: Callable[[A, T, BailFn[R]], A | Bail[R]],
    initial: A,
) -> Result[A, R]:
    """Fold **data** from the left, allowing **reducer** to give up.

    **reducer** receives the accumulator, the current element and a `bail` function.
    Returning `bail(value)` halts the fold immediately: no further element is pulled from **data**, and the fold returns `Err(value)`.

    Args:
        data (Iterable[T]): The elements to fold.
        reducer (Callable[[A, T, BailFn[R]], A | Bail[R]]): Computes the next accumulator, or bails.
        initial (A): The starting accumulator.

    Returns:
        Result[A, R]: `Ok(accumulator)` if the fold completed, `Err(value)` if it bailed.

    Example:
    ```python
    >>> import tidbits as tb
    >>> def divide(acc, n, bail):
    ...     return bail("divide by zero") if n == 0 else acc / n
    >>> tb.try_to_fold([5, 5, 2], divide, 100).ok()
    2.0
    >>> tb.try_to_fold([5, 5, 0], divide, 100).err()
    'divide by zero'
    >>> tb.try_to_fold([], divide, 100)
    Ok(100)

    ```
    """
    token, bail = _bailer()
    acc = initial
    for item in data:
        step = reducer(acc, item, bail)
        if _is_own_bail(step, token):
            return Err(step.value)
        acc = step
    return Ok(acc)


def bailable_map[T, U, R](
    data: Iterable[T],
    mapper: Callable[[T, BailFn[R]], U | Bail[R]],
) -> Result[list[U], R]:
    """Map every element of **data**, allowing **mapper** to give up.

    The first `bail(value)` returned halts the mapping and gives `Err(value)`, later elements are never passed to **mapper**.

    Example:
    ```python
    >>> import tidbits as tb
    >>> def inverse(n, bail):
    ...     return bail(f"can't invert {n}") if n == 0 else 1 / n
    >>> tb.bailable_map([1, 2, 4], inverse)
    Ok([1.0, 0.5, 0.25])
    >>> tb.bailable_map([1, 0, 4], inverse)
    Err("can't invert 0")

    ```
    """
    token, bail = _bailer()
    mapped: list[U] = []
    for item in data:
        step = mapper(item, bail)
        if _is_own_bail(step, token):
            return Err(step.value)
        mapped.append(step)
    return Ok(mapped)


def try_find[T, E](
    data: Iterable[T], predicate: Callable[[T], Result[bool, E]]
) -> Result[Maybe[T], E]:
    """Attempts to find the first element that satisfies a fallible predicate.

    Stops at the first `Err` returned by **predicate**, or at the first match.

    Raises:
        TypeError: If **predicate** returns something other than a `Result`.

    Returns:
        Result[Maybe[T], E]: `Ok(Some(item))` on a match, `Ok(NOTHING)` if nothing matched, `Err(error)` if the predicate failed.

    Example:
    ```python
    >>> import tidbits as tb
    >>> def is_big(s: str) -> tb.Result[bool, str]:
    ...     return tb.Ok(int(s) > 10) if s.isdigit() else tb.Err(f"bad input: {s}")
    >>> tb.try_find(["1", "20", "x"], is_big)
    Ok(Some('20'))
    >>> tb.try_find(["1", "x", "20"], is_big)
    Err('bad input: x')
    >>> tb.try_find(["1", "2"], is_big)
    Ok(NOTHING)

    ```
    """
    for item in data:
        match predicate(item):
            case Ok(found):
                if found:
                    return Ok(Some(item))
            case Err(error):
                return Err(error)
            case other:
                msg = f"predicate must return a Result, got {other!r}"
                raise TypeError(msg)
    return Ok(NOTHING)
