"""
Registration, login and token verification.

Passwords are hashed with Werkzeug (PBKDF2 by default) and sessions are
RS256 JWTs issued by :mod:`commerce_app.jwt`.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

import jwt as pyjwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..errors import AuthError, ValidationError
from ..jwt import create_token, decode_token
from ..models import Profile, User
from ..store import CommerceStore

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class AccountService:
    """
    Credential and session use cases.

    Args:
        store: The shared state store.
        private_key: PEM key used to sign tokens.
        public_key: PEM key used to verify tokens.
        expiry_hours: Lifetime of newly issued tokens.
        clock_skew_seconds: Leeway when checking ``exp``.
    """

    def __init__(
        self,
        store: CommerceStore,
        *,
        private_key: str,
        public_key: str,
        expiry_hours: int = 24,
        clock_skew_seconds: int = 30,
    ):
        self.store = store
        self.private_key = private_key
        self.public_key = public_key
        self.expiry_hours = expiry_hours
        self.clock_skew_seconds = clock_skew_seconds

    def _issue(self, user: User) -> dict[str, Any]:
        token = create_token(
            user_id=user.id,
            username=user.username,
            private_key=self.private_key,
            expiry_hours=self.expiry_hours,
        )
        return {"token": token, "user": user.to_dict()}

    def register(self, username: Any, email: Any, password: Any) -> dict[str, Any]:
        """
        Create an account and sign the new user in.

        Raises:
            ValidationError: If any field is missing or blank.
            ConflictError: If the username or email is already registered.
        """
        if _is_blank(username) or _is_blank(email) or _is_blank(password):
            raise ValidationError("Missing required fields")

        user = User(
            id=uuid.uuid4().hex,
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            profile=Profile(name=username),
        )
        self.store.add_user(user)
        logger.info("Registered user %s (%s)", user.username, user.id)
        return self._issue(user)

    def login(self, login: Any, password: Any) -> dict[str, Any]:
        """
        Authenticate by username or email and issue a fresh token.

        Raises:
            ValidationError: If either field is missing.
            AuthError: If no user matches or the password is wrong.  The
                message is the same in both cases.
        """
        if _is_blank(login) or _is_blank(password):
            raise ValidationError("Username and password required")

        user = self.store.find_user_by_login(login)
        if user is None or not check_password_hash(user.password_hash, password):
            logger.warning("Failed login attempt for %s", login)
            raise AuthError("Invalid credentials", 401)

        return self._issue(user)

    def verify_token(self, token: str | None) -> dict[str, str]:
        """
        Validate a bearer token and return the identity it carries.

        Raises:
            AuthError: 401 when no token is given, 403 when the token is
                malformed, tampered with or expired.
        """
        if not token:
            raise AuthError("Access token required", 401)
        try:
            payload = decode_token(token, self.public_key, leeway=self.clock_skew_seconds)
        except pyjwt.InvalidTokenError as exc:
            raise AuthError("Invalid token", 403) from exc
        return {"user_id": payload["user_id"], "username": payload["username"]}
