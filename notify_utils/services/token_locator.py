"""
Locate the access token carried by an HTTP request.

Browsers carry the token in a cookie (logged in users) while bots send it in a
header. The cookie wins when both are present.
"""

from __future__ import annotations

from typing import Mapping

from notify_utils.core.errors import CookieNotFoundError, TokenNotFoundError
from notify_utils.schemas.auth import TokenLocation
from notify_utils.services.cookies import get_cookie_value

COOKIE_HEADER = "cookie"


def get_token_from_request(headers: Mapping[str, str], location: TokenLocation) -> str:
    """Return the raw access token from ``headers``.

    Raises ``TokenNotFoundError`` when neither the cookie nor the header named
    by ``location`` is present. Header names are looked up as given, so
    case-sensitivity follows the mapping passed in.
    """
    try:
        return get_cookie_value(headers.get(COOKIE_HEADER), location.cookie_name)
    except CookieNotFoundError:
        token = headers.get(location.header_name)

    if token is None:
        raise TokenNotFoundError(
            f"no access token in cookie {location.cookie_name!r} "
            f"or header {location.header_name!r}"
        )
    return token


__all__ = ["COOKIE_HEADER", "get_token_from_request"]
