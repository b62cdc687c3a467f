"""Tests for the sequence helpers."""

from dataclasses import dataclass
from typing import NamedTuple

import pytest

import tidbits as tb


@dataclass
class _Person:
    first: str
    last: str


class _Point(NamedTuple):
    x: int
    y: int


@pytest.fixture
def fruits() -> list[str]:
    return ["apple", "banana", "pear"]


def test_select_keys() -> None:
    """Only the requested keys are kept, missing ones are skipped."""
    people = [
        {"first": "johnny", "last": "appleseed", "age": 20},
        {"first": "jane", "age": 31},
    ]
    assert tb.select_keys(people, "first", "last") == [
        {"first": "johnny", "last": "appleseed"},
        {"first": "jane"},
    ]
    assert people[0] == {"first": "johnny", "last": "appleseed", "age": 20}


def test_move_to_idx(fruits: list[str]) -> None:
    """The moved element leaves no gap."""
    assert tb.move_to_idx(fruits, 2, 0) == ["pear", "apple", "banana"]
    assert tb.move_to_idx(fruits, 0, 2) == ["banana", "pear", "apple"]
    assert fruits == ["apple", "banana", "pear"]


def test_move_to_idx_out_of_range(fruits: list[str]) -> None:
    with pytest.raises(IndexError):
        tb.move_to_idx(fruits, 5, 0)
    with pytest.raises(IndexError):
        tb.move_to_idx([], 0, 0)


def test_array_is_empty() -> None:
    assert tb.array_is_empty([]) is True
    assert tb.array_is_empty([0]) is False


def test_swap_at(fruits: list[str]) -> None:
    """Swapping returns a copy."""
    assert tb.swap_at(fruits, 1, 2) == ["apple", "pear", "banana"]
    assert fruits == ["apple", "banana", "pear"]
    with pytest.raises(IndexError):
        tb.swap_at(fruits, 0, 5)


def test_last_elem() -> None:
    """The last element, as a Maybe."""
    assert tb.last_elem([1, 2, 3, 4]) == tb.Some(4)
    assert tb.last_elem([]) is tb.NOTHING
    assert tb.last_elem(iter("ab")) == tb.Some("b")


def test_find_first_and_replace() -> None:
    """Only the first match is replaced."""
    arr = [1, 2, None, 3, None, 4]
    assert tb.find_first_and_replace(arr, 9, lambda v: v is None) == [1, 2, 9, 3, None, 4]
    assert arr == [1, 2, None, 3, None, 4]
    no_match = tb.find_first_and_replace(arr, 9, lambda v: v == 42)
    assert no_match == arr
    assert no_match is not arr


def test_interleave(fruits: list[str]) -> None:
    assert tb.interleave(fruits, "|") == ["apple", "|", "banana", "|", "pear"]
    assert tb.interleave(["solo"], "|") == ["solo"]
    assert tb.interleave([], "|") == []


@pytest.mark.parametrize(
    ("idx", "expected"), [(-1, False), (0, True), (2, True), (3, False)]
)
def test_is_index_of(fruits: list[str], idx: int, expected: bool) -> None:  # noqa: FBT001
    assert tb.is_index_of(fruits, idx) is expected


def test_slice_around() -> None:
    """Inserting keeps every element."""
    arr = ["one", "two", "three"]
    assert tb.slice_around(arr, 2, "foo") == ["one", "two", "foo", "three"]
    assert tb.slice_around(arr, 0, "foo") == ["foo", "one", "two", "three"]
    assert tb.slice_around(arr, 3, "foo") == ["one", "two", "three", "foo"]
    assert arr == ["one", "two", "three"]


def test_replace_at(fruits: list[str]) -> None:
    assert tb.replace_at(fruits, 1, "kiwi") == ["apple", "kiwi", "pear"]
    assert fruits == ["apple", "banana", "pear"]


def test_clone_arr(fruits: list[str]) -> None:
    clone = tb.clone_arr(fruits)
    assert clone == fruits
    assert clone is not fruits


def test_arr_from_factory() -> None:
    assert tb.arr_from_factory(3, str) == ["0", "1", "2"]
    assert tb.arr_from_factory(0, str) == []


def test_objectify_arr() -> None:
    """Records become one record of lists."""
    people = [
        {"first": "jane", "last": "doe"},
        {"first": "john", "last": "appleseed", "age": 40},
    ]
    assert tb.objectify_arr(people) == {
        "first": ["jane", "john"],
        "last": ["doe", "appleseed"],
        "age": [40],
    }
    assert tb.objectify_arr([]) == {}
    assert tb.objectify_arr([{"a": 1}]) == {"a": [1]}


def test_objectify_arr_any_record() -> None:
    """Dataclasses and named tuples are read like mappings."""
    people = [_Person("jane", "doe"), _Person("john", "appleseed")]
    assert tb.objectify_arr(people) == {
        "first": ["jane", "john"],
        "last": ["doe", "appleseed"],
    }
    assert tb.objectify_arr([_Point(1, 2), {"x": 3}]) == {"x": [1, 3], "y": [2]}
