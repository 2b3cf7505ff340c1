"""
Tests for valuerandom.core.exceptions

Verify exception hierarchy and basic behavior.
"""

import pytest
from valuerandom.core.exceptions import (
    ValueRandomError,
    ValidationError,
    InvalidRangeError,
    InvalidArgumentError,
    ConfigError,
    NumericalError,
)


class TestExceptionHierarchy:
    """All exceptions inherit from ValueRandomError."""

    def test_validation_error_is_base_error(self):
        assert issubclass(ValidationError, ValueRandomError)

    def test_invalid_range_is_validation_error(self):
        assert issubclass(InvalidRangeError, ValidationError)

    def test_invalid_argument_is_validation_error(self):
        assert issubclass(InvalidArgumentError, ValidationError)

    def test_config_error_is_base_error(self):
        assert issubclass(ConfigError, ValueRandomError)

    def test_numerical_error_is_base_error(self):
        assert issubclass(NumericalError, ValueRandomError)

    def test_range_and_argument_errors_are_distinct(self):
        assert not issubclass(InvalidRangeError, InvalidArgumentError)
        assert not issubclass(InvalidArgumentError, InvalidRangeError)


class TestExceptionRaising:
    """Exceptions can be raised and caught."""

    def test_raise_invalid_range(self):
        with pytest.raises(InvalidRangeError, match="test message"):
            raise InvalidRangeError("test message")

    def test_catch_as_base_error(self):
        with pytest.raises(ValueRandomError):
            raise InvalidArgumentError("caught as base")

    def test_catch_as_exception(self):
        with pytest.raises(Exception):
            raise NumericalError("caught as Exception")
