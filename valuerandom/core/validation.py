"""
valuerandom.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise a ValidationError subclass on failure.
"""

import operator
from typing import Any

from .exceptions import InvalidArgumentError, InvalidRangeError


INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT32_MAX = (1 << 32) - 1


def validate_not_none(
    value: Any,
    name: str = "argument"
) -> None:
    """Validate a required reference is present.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


def validate_uint32(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is an unsigned 32-bit integer word."""
    if not isinstance(value, int) or not (0 <= value <= UINT32_MAX):
        raise InvalidArgumentError(
            f"{name} must be an unsigned 32-bit integer, got {value!r}"
        )


def validate_seed(
    value: int,
    name: str = "seed"
) -> None:
    """Validate value is a signed 32-bit integer seed."""
    if not isinstance(value, int) or not (INT32_MIN <= value <= INT32_MAX):
        raise InvalidArgumentError(
            f"{name} must be a signed 32-bit integer, got {value!r}"
        )


def as_int(
    value: Any,
    name: str = "value"
) -> int:
    """Coerce an integer-like value (int, numpy integer) to a Python int.

    Fixed-width numpy scalars wrap on subtraction; the result does not.

    Raises:
        InvalidArgumentError: If value is not an integer (bools and
            floats included).
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {value!r}"
        ) from None


def validate_int32(
    value: int,
    name: str = "bound"
) -> None:
    """Validate an integer bound fits signed 32-bit arithmetic."""
    value = as_int(value, name)
    if not (INT32_MIN <= value <= INT32_MAX):
        raise InvalidRangeError(
            f"{name} must be in [{INT32_MIN}, {INT32_MAX}], got {value}"
        )


def validate_int64(
    value: int,
    name: str = "bound"
) -> None:
    """Validate an integer bound fits signed 64-bit arithmetic."""
    value = as_int(value, name)
    if not (INT64_MIN <= value <= INT64_MAX):
        raise InvalidRangeError(
            f"{name} must be in [{INT64_MIN}, {INT64_MAX}], got {value}"
        )


def validate_bounds(
    lower_bound: float,
    upper_bound: float,
) -> None:
    """Validate lower_bound <= upper_bound.

    Raises:
        InvalidRangeError: If the bounds are reversed.
    """
    if lower_bound > upper_bound:
        raise InvalidRangeError(
            f"upper_bound must be >= lower_bound, got [{lower_bound}, {upper_bound})"
        )


def validate_upper_bound(
    upper_bound: float,
) -> None:
    """Validate a single-bound [0, upper_bound) call."""
    if upper_bound < 0:
        raise InvalidRangeError(f"upper_bound must be >= 0, got {upper_bound}")


def validate_non_negative(
    value: int,
    name: str = "value"
) -> None:
    """Validate a count or length is non-negative."""
    if value < 0:
        raise InvalidRangeError(f"{name} must be non-negative, got {value}")

