"""Pytest configuration and shared fixtures for ferrum tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ferrum._config import reset_config
from ferrum._logging import clear_log_hooks, reset_logging


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return 'asyncio'


@pytest.fixture(autouse=True)
def isolated_runtime() -> Iterator[None]:
    """Restore configuration, log hooks and root logging after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    reset_config()
    clear_log_hooks()
    reset_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from ferrum import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from ferrum import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from ferrum import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from ferrum import Err

    return Err(ValueError('test error'))


class CallSpy:
    """Callable that records every call and returns a fixed value."""

    def __init__(self, returns=None):
        self.calls: list[tuple] = []
        self.returns = returns

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def spy():
    """Factory for call-recording callables."""
    return CallSpy
