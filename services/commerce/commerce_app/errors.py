"""
Domain exceptions for the commerce service.

Service classes raise these instead of building HTTP responses; a single
error handler registered in :func:`commerce_app.create_app` maps each one
to a ``{"error": "..."}`` JSON body with the matching status code.
"""

from __future__ import annotations


class CommerceError(Exception):
    """Base class for failures that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def public_message(self) -> str:
        """Text that is safe to send back to the client."""
        return self.message


class ValidationError(CommerceError):
    """Missing or invalid input."""

    status_code = 400


class AuthError(CommerceError):
    """
    Authentication failure.

    Bad credentials and a missing token are 401; a token that is present
    but malformed, tampered or expired is 403.
    """

    status_code = 401


class ConflictError(CommerceError):
    """Duplicate registration."""

    status_code = 409


class NotFoundError(CommerceError):
    """Unknown identifier."""

    status_code = 404


class InternalError(CommerceError):
    """Unexpected state; the detail is logged, never returned."""

    status_code = 500

    @property
    def public_message(self) -> str:
        return "Internal server error"
