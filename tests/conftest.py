"""
Pytest configuration and fixtures for mixsim testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest

from mixsim.components.mixing.mixer import Mixer
from mixsim.core.stream import StreamFactory


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def stream_factory():
    """Provide a fresh stream name sequence starting at s1."""
    return StreamFactory()


@pytest.fixture
def mixer():
    """Provide an unwired two-inlet mixer."""
    return Mixer(input_capacity=2)
