"""Cookie header parsing helpers."""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import unquote_plus

from notify_utils.core.errors import CookieNotFoundError

COOKIE_SEPARATOR = "; "


def parse_cookie_header(cookie_header: Optional[str]) -> Dict[str, str]:
    """Parse a ``name=value; name=value`` header into a mapping.

    Names and values are percent-decoded the way query strings are. When a
    name repeats, the first occurrence wins.
    """
    cookies: Dict[str, str] = {}
    if not cookie_header:
        return cookies

    for pair in cookie_header.split(COOKIE_SEPARATOR):
        if not pair:
            continue
        name, _, value = pair.partition("=")
        cookies.setdefault(unquote_plus(name), unquote_plus(value))
    return cookies


def get_cookie_value(cookie_header: Optional[str], name: str) -> str:
    """Return the value of cookie ``name`` or raise ``CookieNotFoundError``."""
    cookies = parse_cookie_header(cookie_header)
    try:
        return cookies[name]
    except KeyError:
        raise CookieNotFoundError(f"cookie {name!r} not found") from None


__all__ = ["COOKIE_SEPARATOR", "get_cookie_value", "parse_cookie_header"]
