from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from ._results import NOTHING, Maybe, into_maybe


def get_obj_keys(obj: object) -> list[Any]:
    """Get the own keys of an object, in order.

    - Mappings give their keys.
    - Dataclass instances give their fields, slotted or not.
    - Named tuples give their `_fields`.
    - Other objects give the keys of their `__dict__`, or nothing if they don't have one.

    Example:
    ```python
    >>> import tidbits as tb
    >>> from dataclasses import dataclass
    >>> tb.get_obj_keys({"first": "jane", "last": "doe"})
    ['first', 'last']
    >>> @dataclass(slots=True)
    ... class Point:
    ...     x: int
    ...     y: int
    >>> tb.get_obj_keys(Point(1, 2))
    ['x', 'y']

    ```
    """
    if isinstance(obj, Mapping):
        return list(obj.keys())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [f.name for f in dataclasses.fields(obj)]
    if isinstance(obj, tuple) and hasattr(obj, "_fields"):
        return list(obj._fields)
    return list(getattr(obj, "__dict__", {}))


def get_property(obj: object, key: object) -> Maybe[Any]:
    """Look up **key** on **obj** without raising.

    Mappings are read by item, anything else by attribute. A missing key, or a `None` value, gives `NOTHING`.
    Unhashable keys on a mapping give `NOTHING` too.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.get_property({"a": 1}, "a")
    Some(1)
    >>> tb.get_property({"a": 1}, "b")
    NOTHING
    >>> tb.get_property(3 + 4j, "imag")
    Some(4.0)

    ```
    """
    if isinstance(obj, Mapping):
        try:
            return into_maybe(obj.get(key))
        except TypeError:
            return NOTHING
    if isinstance(key, str):
        return into_maybe(getattr(obj, key, None))
    return NOTHING
