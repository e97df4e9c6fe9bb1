"""Shared test fixtures for all test categories."""

import pytest

from workflows_sdk.config import WorkflowClientSettings
from workflows_sdk.dependencies import get_client_settings

_SETTINGS_ENV_VARS = (
    "WORKFLOWS_API_URL",
    "WORKFLOWS_API_KEY",
    "WORKFLOWS_API_TIMEOUT_SECONDS",
    "WORKFLOWS_USE_MOCK_TRANSPORT",
)


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch):
    """Keep developer environment variables and cached settings out of tests."""

    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_client_settings.cache_clear()
    yield
    get_client_settings.cache_clear()


@pytest.fixture
def default_settings() -> WorkflowClientSettings:
    """Provide a default settings instance for tests."""

    return WorkflowClientSettings(_env_file=None)
