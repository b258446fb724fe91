"""
Common access token utilities used throughout the Notify project.

The four entry points mirror the request pipeline: locate the token on a
request, validate it, and resolve its owner from the record store.
"""

from notify_utils.core.errors import (
    AccessTokenError,
    CookieNotFoundError,
    FailureKind,
    InvalidTokenError,
    InvalidTokenRemovedError,
    TokenNotFoundError,
    TokenRemovalError,
    UserNotFoundError,
)
from notify_utils.models import AccessToken, RecordType, UserRecord
from notify_utils.schemas import TokenLocation, TokenValidationResult, ValidationOptions
from notify_utils.services import (
    TokenValidator,
    get_cookie_value,
    get_token_from_request,
    get_user_by_token,
    validate_token,
)

__all__ = [
    "AccessToken",
    "AccessTokenError",
    "CookieNotFoundError",
    "FailureKind",
    "InvalidTokenError",
    "InvalidTokenRemovedError",
    "RecordType",
    "TokenLocation",
    "TokenNotFoundError",
    "TokenRemovalError",
    "TokenValidationResult",
    "TokenValidator",
    "UserNotFoundError",
    "UserRecord",
    "ValidationOptions",
    "get_cookie_value",
    "get_token_from_request",
    "get_user_by_token",
    "validate_token",
]
