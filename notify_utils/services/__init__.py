"""Service layer exports."""

from .cookies import get_cookie_value, parse_cookie_header
from .token_locator import get_token_from_request
from .token_validation import TokenValidator, validate_token
from .user_resolver import get_user_by_token

__all__ = [
    "TokenValidator",
    "get_cookie_value",
    "get_token_from_request",
    "get_user_by_token",
    "parse_cookie_header",
    "validate_token",
]
