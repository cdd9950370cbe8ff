"""Exceptions raised by common_utils.

Argument errors subclass ``ValueError`` so callers that already guard
against bad input with ``except ValueError`` keep working.
"""

import typing as tp

__all__ = [
    "CommonUtilsError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "MaterializationLimitError",
]


class CommonUtilsError(Exception):
    """Base exception for all common_utils errors."""


class InvalidArgumentError(CommonUtilsError, ValueError):
    """An argument violates the documented precondition of a function."""

    def __init__(self, argument: str, value: tp.Any, reason: str):
        super().__init__(f"Invalid argument '{argument}' ({value!r}): {reason}")
        self.argument = argument
        self.value = value
        self.reason = reason


class EmptySequenceError(InvalidArgumentError):
    """Reduction of an empty sequence without an initial value."""

    def __init__(self, argument: str = "seq"):
        super().__init__(
            argument, [], "cannot reduce an empty sequence without an initial value"
        )


class MaterializationLimitError(CommonUtilsError, OverflowError):
    """A sequence produced more elements than the materialization limit."""

    def __init__(self, limit: int):
        super().__init__(
            f"Sequence exceeded the materialization limit of {limit} elements. "
            "Is the source infinite?"
        )
        self.limit = limit
