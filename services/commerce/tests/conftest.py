"""
Shared pytest fixtures for commerce service tests.

Provides the reusable test infrastructure (a freshly seeded store, the
Flask app and HTTP client built on it, and a user factory) needed by the
unit and integration suites in this service.

Key SDET Concepts Demonstrated:
- Function-scoped state so every test starts from the same seeded data
- Factory-pattern fixtures for flexible test-data creation
- Environment variable overrides for deterministic test configuration
- Faker for unique, realistic user identities
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest
from faker import Faker

from shared.test_helpers import TEST_PRIVATE_KEY, TEST_PUBLIC_KEY, auth_headers

os.environ["FLASK_ENV"] = "testing"
os.environ["TEST_JWT_PRIVATE_KEY"] = TEST_PRIVATE_KEY
os.environ["TEST_JWT_PUBLIC_KEY"] = TEST_PUBLIC_KEY

from commerce_app import create_app
from commerce_app.services import AccountService
from commerce_app.store import CommerceStore

TEST_CATALOG_SIZE = 40
TEST_SEED_USERS = 3
TEST_SEED_PASSWORD = "password123"
TEST_CATALOG_SEED = 1234

fake = Faker()


@pytest.fixture
def store() -> CommerceStore:
    """
    Provide a small, deterministic store for a single test.

    The catalog seed is pinned so product attributes are repeatable, and
    a new instance per test means carts, orders and stock never leak.
    """
    return CommerceStore.seeded(
        catalog_size=TEST_CATALOG_SIZE,
        seed_users=TEST_SEED_USERS,
        seed_password=TEST_SEED_PASSWORD,
        seed=TEST_CATALOG_SEED,
    )


@pytest.fixture
def app(store):
    """Provide a testing-config app serving the per-test store."""
    application = create_app("testing", store=store)
    yield application


@pytest.fixture
def client(app):
    """
    Provide a Flask test client scoped to a single test function.

    Opens a new test-client context for every test so that request
    state never leaks between tests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def account_service(store) -> AccountService:
    return AccountService(
        store,
        private_key=TEST_PRIVATE_KEY,
        public_key=TEST_PUBLIC_KEY,
        expiry_hours=1,
    )


@pytest.fixture
def user_payload() -> Callable[..., dict[str, str]]:
    """Build a registration body with unique Faker defaults."""

    def _build(**overrides: str) -> dict[str, str]:
        payload = {
            "username": f"{fake.user_name()}_{fake.unique.random_int(1, 10**6)}",
            "email": fake.unique.email(),
            "password": fake.password(length=12),
        }
        payload.update(overrides)
        return payload

    return _build


@pytest.fixture
def registered_user(client, user_payload) -> Callable[..., dict[str, Any]]:
    """
    Provide a factory that registers users through the API.

    Returns a dict with the submitted ``payload``, the issued ``token``,
    the public ``user`` projection and ready-made ``headers``.
    """

    def _register(**overrides: str) -> dict[str, Any]:
        payload = user_payload(**overrides)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.get_json()
        body = response.get_json()
        return {
            "payload": payload,
            "token": body["token"],
            "user": body["user"],
            "headers": auth_headers(body["token"]),
        }

    return _register


@pytest.fixture
def auth_client_headers(registered_user) -> dict[str, str]:
    """Bearer headers for a freshly registered user."""
    return registered_user()["headers"]
