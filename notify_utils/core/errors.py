"""
Failure outcomes of the access token pipeline.

Every expected failure is an ``AccessTokenError`` carrying a ``kind`` so
callers can branch on one attribute instead of guessing payload shapes. The
offending token record is attached whenever one was loaded.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from notify_utils.models.records import AccessToken


class FailureKind(str, Enum):
    """Closed set of failure kinds raised by the pipeline."""

    COOKIE_NOT_FOUND = "cookie_not_found"
    TOKEN_NOT_FOUND = "token_not_found"
    INVALID_TOKEN = "invalid_token"
    INVALID_TOKEN_REMOVED = "invalid_token_removed"
    USER_NOT_FOUND = "user_not_found"


class AccessTokenError(Exception):
    """Base class for expected access token failures."""

    kind: FailureKind
    default_message = "access token error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        token: Optional["AccessToken"] = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.token = token


class CookieNotFoundError(AccessTokenError):
    """Raised when the requested cookie is absent from the cookie header."""

    kind = FailureKind.COOKIE_NOT_FOUND
    default_message = "cookie not found"


class TokenNotFoundError(AccessTokenError):
    """Raised when no token is carried by the request or stored for a value."""

    kind = FailureKind.TOKEN_NOT_FOUND
    default_message = "token not found"


class InvalidTokenError(AccessTokenError):
    """Raised when a token fails its expiry or origin check."""

    kind = FailureKind.INVALID_TOKEN
    default_message = "invalid token"


class TokenRemovalError(InvalidTokenError):
    """Raised when deleting an invalid token from the store failed.

    The store exception is chained as ``__cause__``.
    """

    default_message = "invalid token could not be removed"


class InvalidTokenRemovedError(AccessTokenError):
    """Raised once an invalid token has been deleted from the store."""

    kind = FailureKind.INVALID_TOKEN_REMOVED
    default_message = "invalid token removed"


class UserNotFoundError(AccessTokenError):
    """Raised when a valid token points at a user record that does not exist."""

    kind = FailureKind.USER_NOT_FOUND
    default_message = "user not found"


__all__ = [
    "AccessTokenError",
    "CookieNotFoundError",
    "FailureKind",
    "InvalidTokenError",
    "InvalidTokenRemovedError",
    "TokenNotFoundError",
    "TokenRemovalError",
    "UserNotFoundError",
]
