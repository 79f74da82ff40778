"""Pytest configuration and shared fixtures for the fallible test suite."""

import logging
import os
from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings

from fallible.config import reset_settings
from fallible.logging_config import PACKAGE_LOGGER

FALLIBLE_ENV_VARS = (
    "FALLIBLE_LOG_LEVEL",
    "FALLIBLE_LOG_CAPTURED_FAILURES",
    "FALLIBLE_LOG_FORMAT",
)

# Environment isolation runs once per test, not once per generated example.
settings.register_profile(
    "fallible", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.register_profile(
    "quick",
    max_examples=20,
    deadline=2000,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fallible"))


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from FALLIBLE_* variables and cached settings."""
    for key in FALLIBLE_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    for key in FALLIBLE_ENV_VARS:
        os.environ.pop(key, None)
    reset_settings()


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """The fallible logger, restored to its original state after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
