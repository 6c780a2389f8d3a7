"""Shared fixtures for the composition idioms test suite."""

import os
import sys

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from composition_idioms.config.manager import ENV_OVERRIDES, CONFIG_FILE_ENV  # noqa: E402
from composition_idioms.config.schemas import AppConfig  # noqa: E402
from composition_idioms.infrastructure.patterns.singleton_registry import (  # noqa: E402
    SingletonRegistry,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables from leaking into configuration."""
    for env_name in list(ENV_OVERRIDES) + [CONFIG_FILE_ENV]:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test an uninitialized singleton registry."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture
def app_config():
    """Default application configuration."""
    return AppConfig()
