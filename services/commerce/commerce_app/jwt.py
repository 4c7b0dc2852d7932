"""
JWT token creation and decoding for the commerce service.

Tokens are signed with the RS256 (RSA-SHA256) asymmetric algorithm.  The
commerce service both issues and verifies them, but keeping the two keys
separate means an external verifier only ever needs the public half.

Token structure (claims):
    - ``user_id``  -- opaque string identifier of the authenticated user.
    - ``username`` -- carried for convenience so handlers can log it
      without a store lookup.
    - ``iat``      -- *issued-at* timestamp (UTC epoch seconds).
    - ``exp``      -- *expiration* timestamp (UTC epoch seconds).

Key Concepts Demonstrated:
- RS256 asymmetric signing with PyJWT
- Canonical JWT claims (iat, exp) and custom claims
- Input validation before token creation
- UTC-only timestamps to avoid timezone ambiguity
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

ALGORITHM = "RS256"
# Every token produced by this service MUST contain these four claims.
REQUIRED_TOKEN_CLAIMS = ["user_id", "username", "iat", "exp"]


def create_token(
    user_id: str,
    username: str,
    private_key: str,
    expiry_hours: int,
) -> str:
    """
    Create an RS256-signed JWT containing canonical auth claims.

    Args:
        user_id: Identifier of the authenticated user.  Must be a
            non-empty string.
        username: Display name of the user.  Must be a non-empty string.
        private_key: The RSA private key in PEM format used to sign the
            token.
        expiry_hours: Number of hours from *now* until the token expires.

    Returns:
        A compact JWS string (``header.payload.signature``) suitable for
        use as a Bearer token in HTTP ``Authorization`` headers.

    Raises:
        ValueError: If *user_id* or *username* is blank.
    """
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValueError("user_id must be a non-empty string")
    if not isinstance(username, str) or not username.strip():
        raise ValueError("username must be a non-empty string")

    now = datetime.now(timezone.utc)
    expires_at = now + timedelta(hours=int(expiry_hours))

    payload: dict[str, Any] = {
        "user_id": user_id,
        "username": username,
        # RFC 7519 NumericDate: seconds since the epoch
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, private_key, algorithm=ALGORITHM)


def decode_token(token: str, public_key: str, leeway: int = 30) -> dict[str, Any]:
    """
    Decode and validate a token issued by :func:`create_token`.

    Verifies the signature, checks expiration with *leeway* seconds of
    clock-skew tolerance, requires all canonical claims, and checks that
    the identity claims are non-blank strings.

    Raises:
        jwt.InvalidTokenError: If any of the checks fail.
    """
    payload = jwt.decode(
        token,
        public_key,
        algorithms=[ALGORITHM],
        options={"require": REQUIRED_TOKEN_CLAIMS},
        leeway=leeway,
    )
    if not isinstance(payload.get("user_id"), str) or not payload["user_id"].strip():
        raise jwt.InvalidTokenError("Invalid user_id claim")
    if not isinstance(payload.get("username"), str) or not payload["username"].strip():
        raise jwt.InvalidTokenError("Invalid username claim")
    return payload
