"""Configuration, error types and type aliases shared across the package."""

from common_utils.core.config import Settings, settings
from common_utils.core.errors import (
    CommonUtilsError,
    InvalidArgumentError,
    EmptySequenceError,
    MaterializationLimitError,
)

__all__ = [
    "Settings",
    "settings",
    "CommonUtilsError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "MaterializationLimitError",
]
