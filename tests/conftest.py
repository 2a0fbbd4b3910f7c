"""
Pytest fixtures for the common_assertions test suite.

Provides:
- Logging isolation between tests
- A call-counting message supplier
"""

import pytest

from common_assertions.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    yield
    reset_logging()


class CountingSupplier:
    """Zero-argument message supplier that records how often it ran."""

    def __init__(self, message: str = "custom"):
        self.message = message
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.message


@pytest.fixture
def counting_supplier() -> CountingSupplier:
    return CountingSupplier()
