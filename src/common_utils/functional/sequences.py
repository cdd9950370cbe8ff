"""Lazy sequence combinators.

Every function in this module returns an iterator that produces its elements
on demand; nothing is pulled from the source until the result is iterated.
Arguments are validated at call time, so a bad ``n`` or a non-callable ``fn``
fails immediately rather than on the first ``next()``.

Finiteness:
    :func:`infinite` never ends, and most combinators are happy to sit on top
    of it (:func:`take`, :func:`slice`, :func:`drop`, :func:`map`, ...).
    :func:`reverse` has to see the whole source before producing anything and
    therefore needs a finite one. :func:`drop_right` and :func:`interpose`
    keep up with an infinite source but only ever finish on a finite one.

One-shot sources:
    When the source is an iterator (e.g. a generator) it is consumed as the
    result is iterated, and iterating it again yields nothing. Lists, tuples
    and strings can be fed to the combinators any number of times.

Examples:
    >>> from common_utils.functional.reducers import to_list
    >>> to_list(take(5, infinite()))
    [0, 1, 2, 3, 4]
    >>> to_list(slice(2, 3, "abcde"))
    ['c', 'd']
    >>> to_list(interpose(lambda n: -n, [1, 2, 3]))
    [1, -1, 2, -2, 3]

Note:
    ``map``, ``filter`` and ``slice`` shadow the builtins of the same name
    inside this module. Import the module rather than star-importing it if
    the builtins are needed alongside.
"""

import itertools
import typing as tp
from collections import deque
from collections.abc import Sequence

from common_utils.core.errors import InvalidArgumentError
from common_utils.core.types import T, U, Predicate, validate_count, validate_integer
from common_utils.functional.predicates import is_function
from common_utils.functional.reducers import to_list

__all__ = [
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
]


def _require_callable(fn: tp.Any, argument: str = "fn") -> None:
    if not is_function(fn):
        raise InvalidArgumentError(argument, fn, "must be callable")


# =============================================================================
# Producers
# =============================================================================


def infinite(start: int = 0) -> tp.Iterator[int]:
    """Count upwards from the integer ``start`` forever.

    Each call returns an independent stream. Integral floats such as ``2.0``
    are accepted and converted, so the stream always holds ints.

    Example:
        >>> to_list(take(3, infinite(10)))
        [10, 11, 12]
    """
    start = validate_integer(start, "start")
    return itertools.count(start)


def cat(*seqs: tp.Iterable[T]) -> tp.Iterator[T]:
    """Concatenate sequences left to right, keeping each one's order."""
    return itertools.chain.from_iterable(seqs)


def construct(head: T, tail: tp.Iterable[T]) -> tp.Iterator[T]:
    """Yield ``head`` followed by every element of ``tail``."""
    return cat((head,), tail)


# =============================================================================
# Windows
# =============================================================================
# Functions that select a contiguous run of the source by position.


def take(n: int, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    """Yield at most the first ``n`` elements of ``seq``.

    The source is never advanced past the ``n``-th element, which matters for
    one-shot iterators shared with other consumers.

    Args:
        n: Number of elements to keep. ``n <= 0`` gives an empty sequence.
        seq: Any iterable, possibly infinite.

    Returns:
        An iterator over the leading elements.
    """
    n = validate_integer(n, "n")
    return itertools.islice(seq, max(n, 0))


def slice(start: int, end: int, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    """Yield the elements whose index lies in ``start..end``, both inclusive.

    Elements before ``start`` are still pulled from the source and thrown
    away. Iteration stops as soon as ``end`` is reached, so an infinite
    source is fine.

    Args:
        start: First index to yield.
        end: Last index to yield. Note this is inclusive, unlike Python's own
            slices.
        seq: Any iterable.

    Returns:
        An iterator over the selected elements.
    """
    start = validate_integer(start, "start")
    end = validate_integer(end, "end")
    return _slice(start, end, seq)


def _slice(start: int, end: int, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    if end < 0 or end < start:
        return

    for index, item in enumerate(seq):
        if index >= start:
            yield item
        if index >= end:
            return


def drop(n: int = 1, seq: tp.Iterable[T] = ()) -> tp.Iterator[T]:
    """Skip the first ``n`` elements of ``seq`` and yield the rest.

    Skipped elements are consumed from the source lazily, on the first pull.

    Args:
        n: Number of leading elements to skip.
        seq: Any iterable.

    Raises:
        InvalidArgumentError: If ``n`` is not a non-negative integer.
    """
    n = validate_count(n, "n")
    return itertools.islice(seq, n, None)


def drop_right(n: int = 1, seq: tp.Iterable[T] = ()) -> tp.Iterator[T]:
    """Yield all but the last ``n`` elements of ``seq``.

    Elements are held back in a buffer of ``n`` and released once ``n`` newer
    ones have arrived, so only a finite source ever finishes.

    Args:
        n: Number of trailing elements to drop.
        seq: A finite iterable.

    Raises:
        InvalidArgumentError: If ``n`` is not a non-negative integer.
    """
    n = validate_count(n, "n")
    return _drop_right(n, seq)


def _drop_right(n: int, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    pending: deque = deque()
    for item in seq:
        pending.append(item)
        if len(pending) > n:
            yield pending.popleft()


# =============================================================================
# Transforms
# =============================================================================


def map(fn: tp.Callable[[T], U], seq: tp.Iterable[T]) -> tp.Iterator[U]:
    """Apply ``fn`` to every element, keeping order and count."""
    _require_callable(fn)
    return _map(fn, seq)


def _map(fn: tp.Callable[[T], U], seq: tp.Iterable[T]) -> tp.Iterator[U]:
    for item in seq:
        yield fn(item)


def flat_map(
    fn: tp.Callable[[T], tp.Iterable[U]], seq: tp.Iterable[T]
) -> tp.Iterator[U]:
    """Apply ``fn`` to every element and concatenate the resulting sequences.

    Example:
        >>> to_list(flat_map(lambda n: [n, n * 3], [0, 1, 2]))
        [0, 0, 1, 3, 2, 6]
    """
    _require_callable(fn)
    return _flat_map(fn, seq)


def _flat_map(
    fn: tp.Callable[[T], tp.Iterable[U]], seq: tp.Iterable[T]
) -> tp.Iterator[U]:
    for item in seq:
        yield from fn(item)


def map_cat(fn: tp.Callable[[T], tp.Iterable[U]], seq: tp.Iterable[T]) -> list[U]:
    """Eager :func:`flat_map` returning a list."""
    return to_list(flat_map(fn, seq))


def interpose(fn: tp.Callable[[T], T], seq: tp.Iterable[T]) -> tp.Iterator[T]:
    """Insert ``fn(previous)`` between each pair of adjacent elements.

    No separator is added before the first or after the last element; an
    empty or single-element source comes back unchanged.

    Args:
        fn: Called with each element to build the separator that follows it.
        seq: Any iterable.

    Example:
        >>> to_list(interpose(lambda _: ",", ["a", "b", "c"]))
        ['a', ',', 'b', ',', 'c']
    """
    _require_callable(fn)
    return drop_right(1, flat_map(lambda item: construct(item, (fn(item),)), seq))


def filter(predicate: Predicate, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    """Yield the elements for which ``predicate`` returns a true value."""
    _require_callable(predicate, "predicate")
    return _filter(predicate, seq)


def _filter(predicate: Predicate, seq: tp.Iterable[T]) -> tp.Iterator[T]:
    for item in seq:
        if predicate(item):
            yield item


def reverse(seq: tp.Iterable[T]) -> tp.Iterator[T]:
    """Yield the elements of a finite ``seq`` from last to first.

    Indexable sequences are walked backwards in place. Anything else is
    materialized with :func:`~common_utils.functional.reducers.to_list` when
    the result is first pulled.
    """
    if isinstance(seq, Sequence):
        return reversed(seq)
    return _reverse(seq)


def _reverse(seq: tp.Iterable[T]) -> tp.Iterator[T]:
    yield from reversed(to_list(seq))
