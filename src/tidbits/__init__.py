from ._array import (
    arr_from_factory,
    array_is_empty,
    clone_arr,
    find_first_and_replace,
    interleave,
    is_index_of,
    last_elem,
    move_to_idx,
    objectify_arr,
    replace_at,
    select_keys,
    slice_around,
    swap_at,
)
from ._bail import Bail, BailFn, bailable_map, try_find, try_to_fold
from ._core import Config, Pipeable, get_config
from ._object import get_obj_keys, get_property
from ._results import (
    NOTHING,
    Err,
    Maybe,
    Nothing,
    Ok,
    Result,
    ResultUnwrapError,
    Some,
    into_maybe,
)

__all__ = [
    "NOTHING",
    "Bail",
    "BailFn",
    "Config",
    "Err",
    "Maybe",
    "Nothing",
    "Ok",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Some",
    "arr_from_factory",
    "array_is_empty",
    "bailable_map",
    "clone_arr",
    "find_first_and_replace",
    "get_config",
    "get_obj_keys",
    "get_property",
    "interleave",
    "into_maybe",
    "is_index_of",
    "last_elem",
    "move_to_idx",
    "objectify_arr",
    "replace_at",
    "select_keys",
    "slice_around",
    "swap_at",
    "try_find",
    "try_to_fold",
]
