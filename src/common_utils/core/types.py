"""Reusable type definitions for common_utils.

Type Aliases:
    Predicate: A single-argument function returning a boolean.
    BinaryPredicate: A two-argument "strictly precedes" function.
    Comparator: A three-way comparator returning -1, 0 or 1.
    Count: A non-negative integer number of elements.
    Limit: A positive integer cap on materialized elements.

The validators convert pydantic validation failures into
:class:`~common_utils.core.errors.InvalidArgumentError` so callers only ever
see the package's own exception types.
"""

import numbers
import operator
import typing as tp

import annotated_types as at
from pydantic import TypeAdapter, ValidationError

from common_utils.core.errors import InvalidArgumentError
from common_utils.functional.predicates import is_number
from common_utils.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "T",
    "U",
    "Predicate",
    "BinaryPredicate",
    "Comparator",
    "Count",
    "Limit",
    "validate_count",
    "validate_limit",
    "validate_integer",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")

Predicate = tp.Callable[[T], bool]
BinaryPredicate = tp.Callable[[T, T], bool]
Comparator = tp.Callable[[T, T], int]

# Number of elements to skip or drop
Count = tp.Annotated[int, at.Ge(0)]

# Maximum number of elements a sequence may be materialized into
Limit = tp.Annotated[int, at.Gt(0)]

_count_adapter = TypeAdapter(Count)
_limit_adapter = TypeAdapter(Limit)


def _validate_with(
    adapter: TypeAdapter, value: tp.Any, argument: str, reason: str
) -> int:
    # NumPy and other Integral types become plain ints; bool stays bool and
    # is rejected by the strict adapter
    candidate = value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        candidate = operator.index(value)
    try:
        return adapter.validate_python(candidate, strict=True)
    except ValidationError as e:
        logger.debug(f"Rejected {argument}={value!r}: {e.errors()[0]['msg']}")
        raise InvalidArgumentError(argument, value, reason) from e


def validate_count(value: tp.Any, argument: str = "n") -> int:
    """Validate that ``value`` is a non-negative integer.

    Args:
        value: The value to check. Any integral type (NumPy integers
            included) is accepted; booleans and floats are rejected.
        argument: Name of the argument, used in the error message.

    Returns:
        The validated integer.

    Raises:
        InvalidArgumentError: If ``value`` is not a non-negative integer.
    """
    return _validate_with(
        _count_adapter, value, argument, "must be a non-negative integer"
    )


def validate_limit(value: tp.Any, argument: str = "limit") -> int:
    """Validate that ``value`` is a positive integer element limit.

    Same integral rules as :func:`validate_count`, but zero is rejected.

    Raises:
        InvalidArgumentError: If ``value`` is not a positive integer.
    """
    return _validate_with(_limit_adapter, value, argument, "must be a positive integer")


def validate_integer(value: tp.Any, argument: str = "index") -> int:
    """Validate that ``value`` is an integral number.

    Integral floats such as ``2.0`` are accepted and converted. Negative
    values are allowed; callers decide what they mean.

    Args:
        value: The value to check.
        argument: Name of the argument, used in the error message.

    Returns:
        ``value`` as an ``int``.

    Raises:
        InvalidArgumentError: If ``value`` is not a number, is NaN, is a
            boolean or has a fractional part.
    """
    if not is_number(value):
        raise InvalidArgumentError(argument, value, "must be a number")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise InvalidArgumentError(argument, value, "must be a whole number")
    return int(value)
