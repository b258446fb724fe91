"""
Access token validation.

A token is valid when it is not older than ``max_age`` seconds and was issued
for the expected origin. Either check is skipped when its option is unset.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from notify_utils.models.records import AccessToken
from notify_utils.schemas.auth import TokenValidationResult, ValidationOptions

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _expiry(created: datetime, max_age: int) -> Optional[datetime]:
    """Return ``created + max_age`` or ``None`` when past the datetime range."""
    try:
        return created + timedelta(seconds=max_age)
    except OverflowError:
        # Beyond datetime.max the token can never expire.
        return None


def validate_token(
    token: AccessToken,
    options: ValidationOptions,
    *,
    now: Optional[datetime] = None,
) -> TokenValidationResult:
    """Validate ``token`` against ``options`` at instant ``now`` (defaults to now).

    Never raises for an invalid token; inspect ``valid`` and ``reason`` on the
    returned result instead.
    """
    now = now or _utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    expires_at: Optional[datetime] = None
    if options.max_age is not None:
        expires_at = _expiry(token.created, options.max_age)
        if expires_at is not None and not now < expires_at:
            return TokenValidationResult(
                token=token, valid=False, reason="expired", expires_at=expires_at
            )

    if options.origin is not None and token.origin != options.origin:
        return TokenValidationResult(
            token=token, valid=False, reason="origin_mismatch", expires_at=expires_at
        )

    return TokenValidationResult(token=token, valid=True, expires_at=expires_at)


class TokenValidator:
    """Validates tokens against a clock. Injected into the user resolver."""

    def __init__(self, clock: Clock = _utcnow) -> None:
        self._clock = clock

    def validate(
        self, token: AccessToken, options: ValidationOptions
    ) -> TokenValidationResult:
        return validate_token(token, options, now=self._clock())


__all__ = ["Clock", "TokenValidator", "validate_token"]
