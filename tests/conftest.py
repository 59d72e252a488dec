"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient

from maxprofit.config.settings import Settings, get_settings
from maxprofit.main import create_app
from maxprofit.utils.logging import logging_manager


@pytest.fixture(autouse=True)
def reset_logging():
    """Reconfigure logging per test so handlers bind to the current streams."""
    logging_manager.configured = False
    yield
    logging_manager.clear_correlation_id()
    logging_manager.configured = False


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of Settings."""
    for name in ("ALLOW_EMPTY_SERIES", "MAX_SERIES_LENGTH", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by the test application."""
    return Settings(_env_file=None, LOG_FORMAT="console", LOG_LEVEL="DEBUG")


@pytest.fixture
def app(test_settings):
    """Application with settings overridden."""
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: test_settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Create test HTTP client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_prices():
    """Price series with a profitable trade: buy at 1, sell at 6."""
    return [7, 1, 5, 3, 6, 4]
