"""Pytest configuration and shared fixtures for klaw-struct tests."""

import pytest
from klaw_struct import _config
from klaw_struct._logging import clear_log_hooks


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from klaw_struct import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_struct import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_struct import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_struct import Nothing

    return Nothing


@pytest.fixture
def order_struct():
    """Nested struct used by the path tests."""
    from klaw_struct import array, defaulted, enums, number, object_, string

    return object_({
        'id': string,
        'status': enums(['open', 'closed']),
        'items': array(object_({'sku': string, 'qty': number})),
        'note': defaulted(string, ''),
    })


@pytest.fixture
def fresh_config(monkeypatch):
    """Reset the active configuration and log hooks around a test."""
    monkeypatch.setattr(_config, '_config', None)
    monkeypatch.delenv('KLAW_STRUCT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KLAW_STRUCT_LOG_JSON', raising=False)
    clear_log_hooks()
    yield
    clear_log_hooks()
