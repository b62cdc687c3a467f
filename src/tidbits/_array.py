"""Pure helpers over sequences.

None of them mutate their input, every sequence returned is a new `list`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

import cytoolz as cz
import more_itertools as mit

from ._object import get_obj_keys, get_property
from ._results import Maybe, into_maybe


def select_keys[K, V](records: Iterable[Mapping[K, V]], *keys: K) -> list[dict[K, V]]:
    """Discard every key not in **keys** from each record.

    Keys absent from a record are skipped for that record.

    Example:
    ```python
    >>> import tidbits as tb
    >>> people = [
    ...     {"first": "johnny", "last": "appleseed", "age": 20},
    ...     {"first": "jane", "last": "doe", "age": 31},
    ... ]
    >>> tb.select_keys(people, "first", "age")
    [{'first': 'johnny', 'age': 20}, {'first': 'jane', 'age': 31}]

    ```
    """
    wanted = frozenset(keys)
    return [cz.dicttoolz.keyfilter(wanted.__contains__, record) for record in records]


def move_to_idx[T](arr: Sequence[T], start: int, end: int) -> list[T]:
    """Copy **arr** with the element at **start** moved to **end**, leaving no gap.

    Raises:
        IndexError: If **start** is out of range, including on an empty **arr**.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.move_to_idx(["a", "b", "c", "d"], 0, 2)
    ['b', 'c', 'a', 'd']

    ```
    """
    copy = clone_arr(arr)
    copy.insert(end, copy.pop(start))
    return copy


def array_is_empty(arr: Sequence[Any]) -> bool:
    return len(arr) == 0


def swap_at[T](arr: Sequence[T], i1: int, i2: int) -> list[T]:
    """Copy **arr** with the elements at **i1** and **i2** swapped.

    Raises:
        IndexError: If an index is out of range.

    Example:
    ```python
    >>> import tidbits as tb
    >>> fruits = ["apple", "banana", "pear"]
    >>> tb.swap_at(fruits, 1, 2)
    ['apple', 'pear', 'banana']
    >>> fruits
    ['apple', 'banana', 'pear']

    ```
    """
    copy = clone_arr(arr)
    copy[i1], copy[i2] = copy[i2], copy[i1]
    return copy


def last_elem[T](arr: Iterable[T]) -> Maybe[T]:
    """Get the last element, or `NOTHING` if **arr** is empty.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.last_elem([1, 2, 3, 4])
    Some(4)
    >>> tb.last_elem([])
    NOTHING

    ```
    """
    return into_maybe(mit.last(arr, None))


def find_first_and_replace[T](
    arr: Sequence[T], to_insert: T, predicate: Callable[[T], bool]
) -> list[T]:
    """Copy **arr**, replacing the first element matching **predicate** by **to_insert**.

    If nothing matches, the copy is returned unchanged.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.find_first_and_replace([1, 2, None, 3, None, 4], 9, lambda v: v is None)
    [1, 2, 9, 3, None, 4]

    ```
    """
    idx = mit.first(mit.locate(arr, predicate), None)
    if idx is None:
        return clone_arr(arr)
    return replace_at(arr, idx, to_insert)


def interleave[T](arr: Iterable[T], to_insert: T) -> list[T]:
    """Insert **to_insert** between each element of **arr**.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.interleave(["apple", "banana", "orange"], "|")
    ['apple', '|', 'banana', '|', 'orange']

    ```
    """
    return list(mit.intersperse(to_insert, arr))


def is_index_of(arr: Sequence[Any], i: int) -> bool:
    """Equivalent to `0 <= i < len(arr)`, negative indexes don't count."""
    return 0 <= i < len(arr)


def slice_around[T](arr: Sequence[T], i: int, v: T) -> list[T]:
    """Copy **arr** with **v** inserted at index **i**.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.slice_around(["one", "two", "three"], 2, "foo")
    ['one', 'two', 'foo', 'three']

    ```
    """
    return [*arr[:i], v, *arr[i:]]


def replace_at[T](arr: Sequence[T], i: int, v: T) -> list[T]:
    """Copy **arr** with the element at index **i** replaced by **v**.

    Raises:
        IndexError: If **i** is out of range.
    """
    copy = clone_arr(arr)
    copy[i] = v
    return copy


def clone_arr[T](arr: Iterable[T]) -> list[T]:
    return list(arr)


def arr_from_factory[T](size: int, factory: Callable[[int], T]) -> list[T]:
    """Build a list of **size** elements, each one computed from its index.

    Example:
    ```python
    >>> import tidbits as tb
    >>> tb.arr_from_factory(4, lambda i: i * i)
    [0, 1, 4, 9]

    ```
    """
    return mit.take(size, mit.tabulate(factory))


def objectify_arr(records: Iterable[object]) -> dict[Any, list[Any]]:
    """Turn a list of records into one record of lists.

    Every key found in any record maps to the values of that key, in record order.
    Records can be mappings, dataclasses, named tuples or plain objects, keys are read with `get_obj_keys`.

    Example:
    ```python
    >>> import tidbits as tb
    >>> people = [
    ...     {"first": "jane", "last": "doe"},
    ...     {"first": "john", "last": "appleseed"},
    ... ]
    >>> tb.objectify_arr(people)
    {'first': ['jane', 'john'], 'last': ['doe', 'appleseed']}

    ```
    """
    rows = [
        {key: get_property(record, key).get() for key in get_obj_keys(record)}
        for record in records
    ]
    return cz.dicttoolz.merge_with(list, rows)
