"""
Bearer-token protection for commerce endpoints.

Provides a decorator that verifies the ``Authorization: Bearer <token>``
header through :class:`~commerce_app.services.AccountService` and stores
the caller's identity on ``flask.g`` for the wrapped view.

Key Concepts Demonstrated:
- Decorator pattern for endpoint authentication (``require_auth``)
- Using ``flask.g`` to store request-scoped user identity
- Distinguishing a missing token (401) from a bad one (403)
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Response, g, request

from .state import account_service


def extract_bearer_token() -> str | None:
    """
    Return the token from ``Authorization: Bearer <token>``.

    Returns ``None`` when the header is absent, uses another scheme, or
    carries an empty token.
    """
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme != "Bearer":
        return None
    token = token.strip()
    return token or None


def require_auth(view_func: Callable[..., tuple[Response, int] | Response]):
    """
    Decorator that enforces Bearer-token authentication on API endpoints.

    On success ``g.user_id`` and ``g.username`` are set before the view
    runs.  On failure :class:`~commerce_app.errors.AuthError` propagates
    to the app's error handler, which answers 401 or 403.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        identity = account_service().verify_token(extract_bearer_token())
        g.user_id = identity["user_id"]
        g.username = identity["username"]
        return view_func(*args, **kwargs)

    return wrapper
