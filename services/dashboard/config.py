"""
Configuration classes for the dashboard service.

The dashboard is a stateless presentation service: it renders one page,
polls the commerce API's health endpoint, and runs mock load tests that
only exist in its own memory.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration for all dashboard environments."""

    SECRET_KEY: str = os.environ.get(
        "SECRET_KEY", "dashboard-service-dev-secret-change-in-production"
    )

    # Base URL of the commerce API whose /health endpoint is polled
    COMMERCE_API_URL: str = os.environ.get("COMMERCE_API_URL", "http://localhost:3001")
    HEALTH_POLL_INTERVAL: float = float(os.environ.get("HEALTH_POLL_INTERVAL", "5"))
    HEALTH_CHECK_TIMEOUT: float = float(os.environ.get("HEALTH_CHECK_TIMEOUT", "2"))
    HEALTH_MONITOR_ENABLED: bool = _env_bool("HEALTH_MONITOR_ENABLED", True)

    # Bounds of the random delay before a mock test "completes"
    TEST_MIN_DELAY_SECONDS: float = float(os.environ.get("TEST_MIN_DELAY_SECONDS", "3"))
    TEST_MAX_DELAY_SECONDS: float = float(os.environ.get("TEST_MAX_DELAY_SECONDS", "8"))


class DevelopmentConfig(Config):
    """Development configuration with debug mode enabled."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing configuration.

    The background health poller stays off; tests drive
    :meth:`HealthMonitor.check` directly against a non-routable host.
    """

    DEBUG: bool = True
    TESTING: bool = True
    COMMERCE_API_URL: str = os.environ.get("TEST_COMMERCE_API_URL", "http://commerce.test")
    HEALTH_CHECK_TIMEOUT: float = 1
    HEALTH_MONITOR_ENABLED: bool = False


class ProductionConfig(Config):
    """Production configuration with debug mode disabled."""

    DEBUG: bool = False
    TESTING: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """Resolve configuration class by environment name."""
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
