"""Pytest configuration and shared fixtures for optres tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from optres import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from optres import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from optres import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from optres import Nothing

    return Nothing


@pytest.fixture
def call_counter():
    """Callable that records how often it was invoked."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, *args, **kwargs):
            self.calls += 1
            return 0

    return Counter()
