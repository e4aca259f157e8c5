"""
Main pytest configuration for all factorial service tests.

Fixtures and utilities shared by unit and API tests.
"""

import os

# Set test environment variables before importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest

from factorial_service.domain.factorial.value_objects import TTL
from factorial_service.infrastructure.repositories.factorial_cache_repository import (
    InMemoryFactorialCacheStore,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory cache store driven by the fake clock."""
    return InMemoryFactorialCacheStore(clock=clock)


@pytest.fixture
def ttl():
    """Default ten hour cache TTL."""
    return TTL.hours(10)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "redis: marks tests as Redis-related")
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP layer")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "redis" in item.nodeid:
            item.add_marker(pytest.mark.redis)
        if "/api/" in item.nodeid:
            item.add_marker(pytest.mark.api)
