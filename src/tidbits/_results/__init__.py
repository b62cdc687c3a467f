from ._maybe import NOTHING, Maybe, Nothing, Some, into_maybe
from ._result import Err, Ok, Result, ResultUnwrapError

__all__ = [
    "NOTHING",
    "Err",
    "Maybe",
    "Nothing",
    "Ok",
    "Result",
    "ResultUnwrapError",
    "Some",
    "into_maybe",
]
