"""Pytest configuration and shared fixtures for kettle-result tests."""

import logging

import pytest
import structlog

from kettle_result._logging import clear_log_hooks
from kettle_result.config import reset_config


@pytest.fixture
def fresh_config():
    """Start and end the test with no cached configuration and no log hooks.

    Also restores structlog and the root logger, which configure_logging()
    changes process-wide.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from kettle_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from kettle_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from kettle_result import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from kettle_result import Nothing

    return Nothing


@pytest.fixture
def foo_bar():
    """Collection {'foo': 1, 'bar': 2}."""
    from kettle_result import Collection

    return Collection.from_iterable([('foo', 1), ('bar', 2)])


@pytest.fixture
def foo_baz():
    """Collection {'foo': 3, 'baz': 4}."""
    from kettle_result import Collection

    return Collection.from_iterable([('foo', 3), ('baz', 4)])
