"""
valuerandom.core.exceptions

All custom exceptions for valuerandom.

Design: Fail fast and loud with informative errors.
"""


class ValueRandomError(Exception):
    """Base exception for all valuerandom errors."""
    pass


class ValidationError(ValueRandomError):
    """Input validation failed.

    Raised when arguments fail boundary checks at the public API.
    """
    pass


class InvalidRangeError(ValidationError):
    """Sampling bounds are invalid.

    Raised when lower_bound > upper_bound, when a single-bound call
    receives a negative bound, or when a bound does not fit the
    integer width of the operation.
    """
    pass


class InvalidArgumentError(ValidationError):
    """A required argument is absent or malformed.

    Raised for missing collections/buffers, read-only buffers,
    and state words or seeds outside their integer width.
    """
    pass


class ConfigError(ValueRandomError):
    """Configuration invalid or missing.

    Raised when config files are malformed or required fields are absent.
    """
    pass


class NumericalError(ValueRandomError):
    """Result is not representable.

    Raised when a sample cannot be expressed in its declared width,
    e.g. the absolute value of the minimum signed 64-bit integer.
    """
    pass
