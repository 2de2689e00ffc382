"""Shared test fixtures and configuration for all tests.

Date checks depend on the process time zone, so tests that compare naive
dates pin DEFAULT_TIMEZONE through the `utc_timezone` fixture.
"""

import pytest

from value_guard.config import Settings, settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.DEFAULT_TIMEZONE = "Europe/Rome"
    """
    return Settings(
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        DEFAULT_TIMEZONE=None,
        METRICS_ENABLED=False,
    )


@pytest.fixture
def utc_timezone(monkeypatch):
    """Interpret naive dates as UTC for the duration of a test."""
    monkeypatch.setattr(settings, "DEFAULT_TIMEZONE", "UTC")
    return "UTC"


@pytest.fixture
def metrics_enabled(monkeypatch):
    """Force metric recording on regardless of environment."""
    monkeypatch.setattr(settings, "METRICS_ENABLED", True)
