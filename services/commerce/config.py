"""
Configuration for the mock commerce service.

Provides environment-aware configuration classes that follow Flask's
recommended pattern: a shared ``Config`` base class holds defaults, and
environment-specific subclasses (``DevelopmentConfig``, ``TestingConfig``,
``ProductionConfig``) override only what differs.  The ``get_config``
factory resolves the correct class at runtime based on an environment
variable or an explicit argument.

Key Concepts Demonstrated:
- Inheritance-based configuration hierarchy
- Environment variable overrides with sensible defaults
- JWT-specific settings (private/public keys, expiry, clock skew)
- Seed-data and simulated-latency knobs that tests can switch off
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
# keys/generate.py writes the development key pair here
DEV_KEYS_DIR = BASE_DIR.parent.parent / "keys"


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``1``/``true``/``yes`` from the environment."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str) -> int | None:
    """Read an optional integer; unset or blank means ``None``."""
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


def _load_key(raw_env_var: str, path_env_var: str, fallback: Path | None = None) -> str:
    """
    Load a PEM key from raw environment variable or file-path variable.

    The raw PEM variable takes precedence over the path variable so
    orchestrators can inject secrets directly without mounting files.
    When neither is set, *fallback* (the development key file) is used
    if it exists.
    """
    raw_key = os.environ.get(raw_env_var, "").strip()
    if raw_key:
        return raw_key

    key_path = os.environ.get(path_env_var, "").strip()
    if key_path:
        try:
            return Path(key_path).read_text(encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(
                f"Unable to read JWT key file at '{key_path}' from {path_env_var}."
            ) from exc

    if fallback is not None and fallback.exists():
        return fallback.read_text(encoding="utf-8")

    raise RuntimeError(
        f"Missing JWT key configuration: set {raw_env_var} or {path_env_var}, "
        "or run keys/generate.py for a development key pair."
    )


def _has_key_source(raw_env_var: str, path_env_var: str) -> bool:
    """Return True when at least one key source variable is configured."""
    return bool(
        os.environ.get(raw_env_var, "").strip()
        or os.environ.get(path_env_var, "").strip()
    )


def load_commerce_keys(*, testing: bool, allow_dev_keys: bool = True) -> tuple[str, str]:
    """
    Resolve the JWT private/public keys for the selected environment.

    In testing mode, TEST_* vars are used when configured; otherwise it falls
    back to the standard JWT_* variables and finally to ``keys/dev.*.pem``.
    With *allow_dev_keys* off the development key files are never read.
    """
    if testing and (
        _has_key_source("TEST_JWT_PRIVATE_KEY", "TEST_JWT_PRIVATE_KEY_PATH")
        or _has_key_source("TEST_JWT_PUBLIC_KEY", "TEST_JWT_PUBLIC_KEY_PATH")
    ):
        return (
            _load_key("TEST_JWT_PRIVATE_KEY", "TEST_JWT_PRIVATE_KEY_PATH"),
            _load_key("TEST_JWT_PUBLIC_KEY", "TEST_JWT_PUBLIC_KEY_PATH"),
        )

    private_fallback = DEV_KEYS_DIR / "dev.private.pem" if allow_dev_keys else None
    public_fallback = DEV_KEYS_DIR / "dev.public.pem" if allow_dev_keys else None
    return (
        _load_key("JWT_PRIVATE_KEY", "JWT_PRIVATE_KEY_PATH", private_fallback),
        _load_key("JWT_PUBLIC_KEY", "JWT_PUBLIC_KEY_PATH", public_fallback),
    )


class Config:
    """
    Base configuration shared by all environments.

    Subclasses should override only the values that need to change.
    Every setting can also be controlled via an environment variable so
    that load-test environments can be reshaped without code changes.
    """

    SECRET_KEY: str = os.environ.get(
        "SECRET_KEY", "commerce-service-dev-secret-change-in-production"
    )

    # How many hours a newly issued token remains valid before expiring
    JWT_EXPIRY_HOURS: int = int(os.environ.get("JWT_EXPIRY_HOURS", "24"))
    # Seconds of tolerance for clock differences between issuer and verifier
    JWT_CLOCK_SKEW_SECONDS: int = int(os.environ.get("JWT_CLOCK_SKEW_SECONDS", "30"))

    # Synthetic data generated once at startup
    CATALOG_SIZE: int = int(os.environ.get("CATALOG_SIZE", "1000"))
    SEED_USERS: int = int(os.environ.get("SEED_USERS", "100"))
    SEED_USER_PASSWORD: str = os.environ.get("SEED_USER_PASSWORD", "password123")
    CATALOG_SEED: int | None = _env_optional_int("CATALOG_SEED")

    # Artificial per-endpoint pauses so load-test numbers look realistic
    SIMULATED_LATENCY_ENABLED: bool = _env_bool("SIMULATED_LATENCY_ENABLED", True)
    SIMULATED_LATENCY_SCALE: float = float(os.environ.get("SIMULATED_LATENCY_SCALE", "1.0"))

    MAX_PAGE_LIMIT: int = int(os.environ.get("MAX_PAGE_LIMIT", "100"))
    CORS_ALLOWED_ORIGIN: str = os.environ.get("CORS_ALLOWED_ORIGIN", "*")
    # Sent on every response
    FRAME_OPTIONS: str = os.environ.get("FRAME_OPTIONS", "DENY")

    # Fall back to keys/dev.*.pem when no key variables are set
    ALLOW_DEV_KEYS: bool = True


class DevelopmentConfig(Config):
    """
    Configuration for local development.

    Enables debug mode for auto-reload and rich tracebacks while keeping
    ``TESTING`` off so that Flask error handlers behave normally.
    """

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Configuration for the automated test suite.

    Shrinks the seeded dataset and turns the simulated latency off so that
    tests are fast and deterministic.  ``CATALOG_SEED`` pins the random
    catalog so assertions on prices and categories are repeatable.
    """

    DEBUG: bool = True
    TESTING: bool = True
    JWT_EXPIRY_HOURS: int = int(os.environ.get("TEST_JWT_EXPIRY_HOURS", "1"))
    CATALOG_SIZE: int = int(os.environ.get("TEST_CATALOG_SIZE", "60"))
    SEED_USERS: int = int(os.environ.get("TEST_SEED_USERS", "3"))
    CATALOG_SEED: int | None = 1234
    SIMULATED_LATENCY_ENABLED: bool = False


class ProductionConfig(Config):
    """
    Configuration for production-like deployments (e.g. a shared load-test rig).

    Disables debug mode and testing flags.  Keys **must** be supplied
    through environment variables or mounted files.
    """

    DEBUG: bool = False
    TESTING: bool = False
    ALLOW_DEV_KEYS: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Resolve a configuration class by environment name.

    Args:
        env: One of ``"development"``, ``"testing"``, or
            ``"production"``.  When ``None``, the ``FLASK_ENV``
            environment variable is consulted, falling back to
            ``"development"`` if unset.

    Returns:
        The configuration class (not an instance) corresponding to the
        requested environment.  Falls back to ``DevelopmentConfig`` for
        unrecognised names.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
