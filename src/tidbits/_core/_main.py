from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import tidbits as tb
        >>> def describe(res: tb.Result[int, str]) -> str:
        ...     match res:
        ...         case tb.Ok(value):
        ...             return f"got {value}"
        ...         case tb.Err(error):
        ...             return f"failed: {error}"
        ...     raise AssertionError
        >>>
        >>> tb.Ok(3).into(describe)
        'got 3'
        >>> tb.Err("boom").into(describe)
        'failed: boom'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import tidbits as tb
        >>> tb.Some(4).inspect(print).map(lambda x: x * 2)
        Some(4)
        Some(8)

        ```
        """
        func(self, *args, **kwargs)
        return self
