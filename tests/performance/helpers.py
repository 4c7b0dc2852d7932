"""
Helper utilities for Locust performance scenarios.

Provides the request-level building blocks every Locust user class relies
on: authentication workflows that validate responses in-band through
Locust's ``catch_response`` protocol, and header construction.  Random
payload generation lives in :mod:`tests.performance.data`.

Key Concepts Demonstrated:
- Reusable auth helpers that wrap Locust's ``catch_response`` protocol
- Treating malformed bodies as failures instead of crashing the user
"""

from __future__ import annotations

from typing import Any

from locust.clients import HttpSession


def _safe_json(response: Any) -> dict[str, Any]:
    """
    Return response JSON as dict, or an empty dict if parsing fails.

    Responses may contain non-JSON bodies (e.g. on 5xx errors), so
    parsing failures become an empty dict instead of an exception.
    """
    try:
        data = response.json()
    except ValueError:
        return {}

    if isinstance(data, dict):
        return data
    return {}


def _token_from(response: Any, expected_status: int) -> str | None:
    """Validate an auth response and return its token, marking the outcome."""
    if response.status_code != expected_status:
        response.failure(f"Expected {expected_status}, got {response.status_code}")
        return None

    body = _safe_json(response)
    token = body.get("token")
    user = body.get("user")
    if not isinstance(token, str) or not token:
        response.failure("Auth response missing token")
        return None
    if not isinstance(user, dict) or not user.get("id"):
        response.failure("Auth response missing user payload")
        return None

    response.success()
    return token


def register_user(
    client: HttpSession, *, username: str, email: str, password: str
) -> str | None:
    """
    Register a user and return the token the commerce API issues with it.

    Returns:
        The JWT string on ``201 Created``, or ``None`` on any failure.
    """
    with client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
        name="/api/auth/register [POST]",
        catch_response=True,
    ) as response:
        return _token_from(response, 201)


def login_user(client: HttpSession, *, username: str, password: str) -> str | None:
    """
    Log in (by username or email) and return a bearer token.

    Returns:
        The JWT string on success, or ``None`` if the login request
        failed or the response lacked a token.
    """
    with client.post(
        "/api/auth/login",
        json={"username": username, "password": password},
        name="/api/auth/login [POST]",
        catch_response=True,
    ) as response:
        return _token_from(response, 200)


def auth_header(token: str) -> dict[str, str]:
    """Build standard bearer auth headers for API requests."""
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
