"""Existence, truthiness, emptiness and type predicates.

Every predicate here is total: any input value is accepted and the answer is
always a plain ``bool``. Malformed input simply evaluates to ``False``.

Note:
    Truthiness is narrower than Python's own: only ``None`` and
    ``False`` are falsy. Empty strings, ``0`` and empty containers count as
    present values.

Examples:
    >>> is_truthy("")
    True
    >>> is_falsy(None)
    True
    >>> is_number(float("nan"))
    False
"""

import math
import numbers
import typing as tp
from collections.abc import Mapping

import numpy as np

__all__ = [
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
]

_BOOLEAN_TYPES = (bool, np.bool_)
_ARRAY_TYPES = (list, tuple)


def exists(value: tp.Any) -> bool:
    """Return ``False`` only for the absence sentinel ``None``."""
    return value is not None


def is_truthy(value: tp.Any) -> bool:
    """Check whether ``value`` exists and is not the boolean ``False``.

    Args:
        value: Any value.

    Returns:
        The boolean itself for booleans (NumPy booleans included), ``False``
        for ``None`` and ``True`` for everything else.
    """
    if not exists(value):
        return False
    if isinstance(value, _BOOLEAN_TYPES):
        return bool(value)
    return True


def is_falsy(value: tp.Any) -> bool:
    return not is_truthy(value)


def is_empty_string(value: tp.Any) -> bool:
    return isinstance(value, str) and len(value) == 0


def is_non_empty_string(value: tp.Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_empty_array(value: tp.Any) -> bool:
    """Check for an empty list or tuple."""
    return isinstance(value, _ARRAY_TYPES) and len(value) == 0


def is_non_empty_array(value: tp.Any) -> bool:
    """Check for a list or tuple with at least one element."""
    return isinstance(value, _ARRAY_TYPES) and len(value) > 0


def is_empty_object(value: tp.Any) -> bool:
    """Check for a mapping without keys. Lists and tuples never qualify."""
    return isinstance(value, Mapping) and len(value) == 0


def is_non_empty_object(value: tp.Any) -> bool:
    """Check for a mapping with at least one key."""
    return isinstance(value, Mapping) and len(value) > 0


def is_function(value: tp.Any) -> bool:
    return callable(value)


def is_number(value: tp.Any) -> bool:
    """Check whether ``value`` is a usable real number.

    Python and NumPy integers and floats qualify. Booleans are excluded even
    though ``bool`` subclasses ``int``, and so is NaN.

    Args:
        value: Any value.

    Returns:
        ``True`` if ``value`` is a real, non-NaN, non-boolean number.
    """
    if isinstance(value, _BOOLEAN_TYPES) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return not math.isnan(value)
