"""common_utils: predicates, safe accessors and lazy sequence combinators."""

from common_utils.core.errors import (
    CommonUtilsError,
    InvalidArgumentError,
    EmptySequenceError,
    MaterializationLimitError,
)
from common_utils.functional.basics import noop, negate, identity, converter
from common_utils.functional.predicates import (
    exists,
    is_truthy,
    is_falsy,
    is_empty_string,
    is_non_empty_string,
    is_empty_array,
    is_non_empty_array,
    is_empty_object,
    is_non_empty_object,
    is_function,
    is_number,
)
from common_utils.functional.accessors import get_value, pick
from common_utils.functional.sequences import (
    infinite,
    take,
    slice,
    drop,
    drop_right,
    cat,
    construct,
    map,
    flat_map,
    map_cat,
    interpose,
    filter,
    reverse,
)
from common_utils.functional.reducers import to_list, to_ndarray, nth, first, reduce

__version__ = "0.1.0"

__all__ = [
    "CommonUtilsError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "MaterializationLimitError",
    "noop",
    "negate",
    "identity",
    "converter",
    "exists",
    "is_truthy",
    "is_falsy",
    "is_empty_string",
    "is_non_empty_string",
    "is_empty_array",
    "is_non_empty_array",
    "is_empty_object",
    "is_non_empty_object",
    "is_function",
    "is_number",
    "get_value",
    "pick",
    "infinite",
    "take",
    "slice",
    "drop",
    "drop_right",
    "cat",
    "construct",
    "map",
    "flat_map",
    "map_cat",
    "interpose",
    "filter",
    "reverse",
    "to_list",
    "to_ndarray",
    "nth",
    "first",
    "reduce",
]
