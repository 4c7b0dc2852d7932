"""
Integration tests for the commerce authentication endpoints.

Exercises ``/api/auth/register`` and ``/api/auth/login`` through the
Flask test client, verifying status codes, response bodies and the
tokens they issue.

Key SDET Concepts Demonstrated:
- Integration testing through the full HTTP request/response cycle
- Status-code assertions (200, 201, 400, 401, 409)
- Parametrised tests for input validation
- Faker-backed payload factories for unique identities
"""

from __future__ import annotations

import pytest

from shared.test_helpers import auth_headers

pytestmark = pytest.mark.integration


@pytest.mark.security
def test_register_user_success(client, user_payload):
    """Test that a valid registration returns 201, a token and the public user."""
    # Arrange
    payload = user_payload()

    # Act
    response = client.post("/api/auth/register", json=payload)

    # Assert
    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "User registered successfully"
    assert body["token"].count(".") == 2
    assert body["user"]["username"] == payload["username"]
    assert body["user"]["email"] == payload["email"]
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]


def test_registration_token_works_immediately(client, registered_user):
    """Test that the token returned by registration authorises protected routes."""
    # Arrange
    user = registered_user()

    # Act
    response = client.get("/api/cart", headers=user["headers"])

    # Assert
    assert response.status_code == 200


@pytest.mark.parametrize("missing", ["username", "email", "password"])
def test_register_missing_field_returns_400(client, user_payload, missing):
    """Test that omitting any required field returns 400."""
    # Arrange
    payload = user_payload()
    payload.pop(missing)

    # Act
    response = client.post("/api/auth/register", json=payload)

    # Assert
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing required fields"}


def test_register_non_json_body_returns_400(client):
    """Test that a non-JSON body is treated as missing fields."""
    # Act
    response = client.post("/api/auth/register", data="username=x", content_type="text/plain")

    # Assert
    assert response.status_code == 400


@pytest.mark.parametrize("field", ["username", "email"])
def test_register_duplicate_returns_409(client, registered_user, user_payload, field):
    """Test that reusing a username or email returns 409."""
    # Arrange
    existing = registered_user()["payload"]
    payload = user_payload(**{field: existing[field]})

    # Act
    response = client.post("/api/auth/register", json=payload)

    # Assert
    assert response.status_code == 409
    assert response.get_json() == {"error": "User already exists"}


@pytest.mark.parametrize("login_field", ["username", "email"])
def test_login_with_username_or_email(client, registered_user, login_field):
    """Test that login accepts either identifier in the ``username`` field."""
    # Arrange
    user = registered_user()
    credentials = {
        "username": user["payload"][login_field],
        "password": user["payload"]["password"],
    }

    # Act
    response = client.post("/api/auth/login", json=credentials)

    # Assert
    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == user["user"]["id"]
    assert client.get("/api/orders", headers=auth_headers(body["token"])).status_code == 200


def test_login_seeded_account(client):
    """Test that seeded accounts are available with the shared password."""
    # Act
    response = client.post(
        "/api/auth/login", json={"username": "user2", "password": "password123"}
    )

    # Assert
    assert response.status_code == 200
    assert response.get_json()["user"]["id"] == "user_2"


@pytest.mark.security
@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "user1", "password": "wrong"},
        {"username": "nobody_here", "password": "password123"},
    ],
)
def test_login_invalid_credentials_returns_401(client, credentials):
    """Test that wrong passwords and unknown users get the same vague 401."""
    # Act
    response = client.post("/api/auth/login", json=credentials)

    # Assert
    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials"}


@pytest.mark.parametrize("payload", [{}, {"username": "user1"}, {"password": "password123"}])
def test_login_missing_fields_returns_400(client, payload):
    """Test that incomplete login bodies return 400."""
    # Act
    response = client.post("/api/auth/login", json=payload)

    # Assert
    assert response.status_code == 400
    assert response.get_json() == {"error": "Username and password required"}
