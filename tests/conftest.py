"""
Pytest configuration and shared fixtures for httpfacade tests.
"""

import tempfile
from pathlib import Path

import pytest
import responses

from httpfacade.core.config import reset_config
from httpfacade.logging import logging_manager


@pytest.fixture(autouse=True)
def clean_config():
    """Every test starts and ends with the default timeout and no proxy."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def mock_responses():
    """HTTP mocking fixture.

    Provides a responses.RequestsMock that intercepts every request made
    through requests; unmatched URLs raise ConnectionError.

    Example:
        def test_api_call(mock_responses):
            mock_responses.add(responses.GET, "https://api.example.com/x", json={"ok": True})
    """
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def reset_logging():
    """Detach handlers installed by a test."""
    yield logging_manager
    logging_manager.reset()
    logging_manager.package_logger.setLevel("NOTSET")
