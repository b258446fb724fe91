"""Schemas describing how access tokens are located and validated."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from notify_utils.models.records import AccessToken


class TokenLocation(BaseModel):
    """Names of the cookie and header an access token may be carried in."""

    cookie_name: str = Field(..., description="Cookie holding the access token.")
    header_name: str = Field(..., description="Header holding the access token.")


class ValidationOptions(BaseModel):
    """Checks applied to a token. A check is skipped when its option is unset."""

    max_age: Optional[int] = Field(
        None, ge=0, description="Token lifetime in seconds."
    )
    origin: Optional[str] = Field(
        None, description="Origin the token must have been issued for."
    )


class TokenValidationResult(BaseModel):
    """Outcome of validating a token. Invalidity is a normal result, not an error."""

    token: AccessToken
    valid: bool
    reason: Optional[Literal["expired", "origin_mismatch"]] = None
    expires_at: Optional[datetime] = None


__all__ = ["TokenLocation", "TokenValidationResult", "ValidationOptions"]
