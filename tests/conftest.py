"""
Pytest configuration and shared fixtures for valuerandom tests.
"""

import pytest
from valuerandom.core.state import ValueRandom
from valuerandom.config.schema import ValueRandomConfig


@pytest.fixture
def rng():
    """Provide a state seeded with 42."""
    return ValueRandom.from_seed(42)


@pytest.fixture
def default_config():
    """Provide default ValueRandomConfig."""
    return ValueRandomConfig()


@pytest.fixture
def minimal_config():
    """Provide minimal ValueRandomConfig for fast tests."""
    return ValueRandomConfig.minimal()
