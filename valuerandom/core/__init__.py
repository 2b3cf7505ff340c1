"""
valuerandom.core

Core infrastructure for valuerandom.

Exports:
- Exception classes
- Generator state and transition
- Validation utilities
"""

from .exceptions import (
    ValueRandomError,
    ValidationError,
    InvalidRangeError,
    InvalidArgumentError,
    ConfigError,
    NumericalError,
)

from .state import (
    ValueRandom,
    advance,
    seed,
    tick_seed,
    to_int32,
)

from .validation import (
    as_int,
    validate_not_none,
    validate_uint32,
    validate_seed,
    validate_int32,
    validate_int64,
    validate_bounds,
    validate_upper_bound,
    validate_non_negative,
)

__all__ = [
    # Exceptions
    "ValueRandomError",
    "ValidationError",
    "InvalidRangeError",
    "InvalidArgumentError",
    "ConfigError",
    "NumericalError",
    # State
    "ValueRandom",
    "advance",
    "seed",
    "tick_seed",
    "to_int32",
    # Validation
    "as_int",
    "validate_not_none",
    "validate_uint32",
    "validate_seed",
    "validate_int32",
    "validate_int64",
    "validate_bounds",
    "validate_upper_bound",
    "validate_non_negative",
]
