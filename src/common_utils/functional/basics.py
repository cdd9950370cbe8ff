"""Tiny building blocks shared by the other functional modules."""

import typing as tp

from common_utils.core.types import T, BinaryPredicate, Comparator
from common_utils.functional.predicates import is_truthy

__all__ = ["noop", "negate", "identity", "converter"]


def noop(*args: tp.Any, **kwargs: tp.Any) -> None:
    """Do nothing and return ``None``, whatever the arguments."""
    return None


def negate(value: bool) -> bool:
    return not value


def identity(value: T) -> T:
    return value


def converter(predicate: BinaryPredicate) -> Comparator:
    """Lift a "strictly precedes" predicate into a three-way comparator.

    The comparator returns ``-1`` when ``predicate(x, y)`` holds, ``1`` when
    ``predicate(y, x)`` holds and ``0`` when neither does.

    Args:
        predicate: Two-argument function answering "does x come before y?".

    Returns:
        A comparator suitable for :func:`functools.cmp_to_key`.

    Example:
        >>> from functools import cmp_to_key
        >>> sorted([3, 1, 2], key=cmp_to_key(converter(lambda x, y: x < y)))
        [1, 2, 3]
    """

    def comparator(x: T, y: T) -> int:
        if is_truthy(predicate(x, y)):
            return -1
        if is_truthy(predicate(y, x)):
            return 1
        return 0

    return comparator
