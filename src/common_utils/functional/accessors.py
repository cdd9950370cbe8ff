"""Safe-access helpers: default substitution and key projection."""

import typing as tp
from collections.abc import Mapping

from common_utils.core.types import T, U
from common_utils.functional.predicates import exists

__all__ = ["get_value", "pick"]


def get_value(value: tp.Optional[T], default: U) -> tp.Union[T, U]:
    """Return ``value`` unless it is ``None``, in which case return ``default``.

    Example:
        >>> get_value(user.get("gender"), "unknown")
    """
    return value if exists(value) else default


def pick(keys: tp.Iterable[tp.Hashable], obj: tp.Any) -> dict:
    """Build a new dict holding only the requested keys of ``obj``.

    Only the object's own keys are considered: the keys of a mapping, or the
    instance attributes (``vars(obj)``) of a plain object. Class-level
    attributes are inherited and therefore skipped. Keys that are absent are
    left out silently; no default is substituted.

    Args:
        keys: Keys to keep, in the order they should appear in the result.
        obj: A mapping or an object with a ``__dict__``.

    Returns:
        A new dict mapping each present key to its original value.

    Example:
        >>> pick(["foo"], {"foo": "a", "bar": 1, "baz": False})
        {'foo': 'a'}
    """
    if isinstance(obj, Mapping):
        own = obj
    elif hasattr(obj, "__dict__"):
        own = vars(obj)
    else:
        return {}

    return {key: own[key] for key in keys if key in own}
