"""
Pytest configuration and fixtures for procflow testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest
import tempfile
from pathlib import Path

from procflow.core.stream import StreamCounter


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture(autouse=True)
def set_test_environment():
    """Set up test environment variables."""
    import os
    os.environ['PROCFLOW_ENV'] = 'test'
    yield
    # Teardown
    if 'PROCFLOW_ENV' in os.environ:
        del os.environ['PROCFLOW_ENV']


@pytest.fixture
def counter():
    """Fresh stream naming counter for each scenario."""
    return StreamCounter()


@pytest.fixture
def make_stream(counter):
    """Factory for auto-named streams with an optional mass flow."""
    def _make(mass_flow=None):
        return counter.new_stream(mass_flow)
    return _make
