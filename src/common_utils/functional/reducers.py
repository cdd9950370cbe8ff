"""Terminal operations that force a sequence into a concrete value.

Unlike the combinators in :mod:`common_utils.functional.sequences`, every
function here consumes its input. Materializing functions
(:func:`to_list`, :func:`to_ndarray`) need a finite source; they honour the
configured ``MATERIALIZE_LIMIT`` so an accidental infinite source fails loudly
instead of hanging.

Examples:
    >>> from common_utils.functional.sequences import infinite, take
    >>> to_list(take(5, infinite()))
    [0, 1, 2, 3, 4]
    >>> reduce(lambda acc, item: acc + item, [1, 2, 3, 4])
    10
    >>> nth(10, [1, 2, 3]) is None
    True
"""

import inspect
import itertools
import typing as tp
from collections.abc import Sequence

import numpy as np

from common_utils.core.config import settings
from common_utils.core.errors import (
    EmptySequenceError,
    InvalidArgumentError,
    MaterializationLimitError,
)
from common_utils.core.types import T, U, validate_integer, validate_limit
from common_utils.functional.predicates import exists, is_function
from common_utils.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "to_list",
    "to_ndarray",
    "nth",
    "first",
    "reduce",
]

_MISSING: tp.Any = object()

# Default for ``limit``: defer to the configured MATERIALIZE_LIMIT
_CONFIGURED: tp.Any = object()


def to_list(seq: tp.Iterable[T], limit: tp.Optional[int] = _CONFIGURED) -> list[T]:
    """Materialize ``seq`` into a new list.

    Args:
        seq: Any finite iterable.
        limit: Maximum number of elements to accept, a positive integer.
            When omitted the configured ``MATERIALIZE_LIMIT`` applies (which
            may itself be unset). Pass ``None`` explicitly to materialize
            without any limit.

    Returns:
        A list with the elements of ``seq`` in order.

    Raises:
        InvalidArgumentError: If ``limit`` is neither ``None`` nor a positive
            integer.
        MaterializationLimitError: If ``seq`` yields more than ``limit``
            elements.
    """
    if limit is _CONFIGURED:
        limit = settings.materialize_limit
    elif exists(limit):
        limit = validate_limit(limit, "limit")

    if not exists(limit):
        items = list(seq)
    else:
        # Pull one element past the limit to detect overflow
        items = list(itertools.islice(seq, limit + 1))
        if len(items) > limit:
            logger.warning(f"Materialization stopped after {limit} elements")
            raise MaterializationLimitError(limit)

    logger.debug(f"Materialized {len(items)} elements")
    return items


def to_ndarray(
    seq: tp.Iterable[tp.Any],
    dtype: tp.Any = None,
    limit: tp.Optional[int] = _CONFIGURED,
) -> np.ndarray:
    """Materialize ``seq`` into a NumPy array.

    Args:
        seq: Any finite iterable of array-compatible values.
        dtype: Optional NumPy dtype, passed to :func:`numpy.asarray`.
        limit: Same as for :func:`to_list`.

    Returns:
        A NumPy array built from the elements of ``seq``.
    """
    return np.asarray(to_list(seq, limit=limit), dtype=dtype)


def nth(index: int, seq: tp.Iterable[T], default: U = None) -> tp.Union[T, U]:
    """Return the element at zero-based ``index``.

    Indexable sequences are indexed directly; any other iterable is advanced
    until ``index`` is reached. Either way an index outside the sequence,
    negative indices included, gives back ``default``.

    Args:
        index: Zero-based position. Integral floats are accepted.
        seq: The sequence to look into.
        default: Value returned when ``seq`` has no element at ``index``.

    Returns:
        The element at ``index`` or ``default``.

    Raises:
        InvalidArgumentError: If ``index`` is not a whole number.
    """
    index = validate_integer(index, "index")
    if index < 0:
        return default

    if isinstance(seq, Sequence):
        return seq[index] if index < len(seq) else default

    return next(itertools.islice(seq, index, None), default)


def first(seq: tp.Iterable[T], default: U = None) -> tp.Union[T, U]:
    """Return the first element of ``seq`` or ``default`` when it is empty."""
    return nth(0, seq, default)


def _accepts_count(fn: tp.Callable) -> bool:
    """Whether ``fn`` requires a third positional argument.

    Optional parameters (those with a default) are left alone, so
    ``fn(acc, item, scale=1)`` is still called with two arguments.
    """
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # Some builtins expose no signature; assume the plain binary form
        return False

    positional = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ) and parameter.default is inspect.Parameter.empty:
            positional += 1
    return positional >= 3


def reduce(
    fn: tp.Callable[..., U],
    seq: tp.Iterable[T],
    initial: tp.Any = _MISSING,
) -> U:
    """Fold ``seq`` left to right into a single value.

    Without ``initial`` the first element seeds the accumulator and folding
    starts from the second element.

    The reducer is called as ``fn(acc, item)``. If it has a third required
    positional parameter, or takes ``*args``, it is called as
    ``fn(acc, item, count)`` instead, where ``count`` is the 1-based number
    of the fold being performed. A third parameter with a default value is
    never filled with the count.

    Args:
        fn: Reducer function.
        seq: A finite iterable.
        initial: Optional starting value for the accumulator.

    Returns:
        The accumulated value.

    Raises:
        InvalidArgumentError: If ``fn`` is not callable.
        EmptySequenceError: If ``seq`` is empty and no ``initial`` is given.

    Example:
        >>> reduce(lambda acc, item, count: acc + [(count, item)], "ab", [])
        [(1, 'a'), (2, 'b')]
    """
    if not is_function(fn):
        raise InvalidArgumentError("fn", fn, "must be callable")

    iterator = iter(seq)
    if initial is _MISSING:
        initial = next(iterator, _MISSING)
        if initial is _MISSING:
            raise EmptySequenceError()

    with_count = _accepts_count(fn)
    acc = initial
    for count, item in enumerate(iterator, start=1):
        acc = fn(acc, item, count) if with_count else fn(acc, item)
    return acc
