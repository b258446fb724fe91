"""
Domain models for records read from the Notify store.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Stores assign ids of their own choosing; both shapes pass through untouched.
RecordId = Union[str, int]


class RecordType(str, Enum):
    """Record collections the access token pipeline reads from."""

    TOKENS = "tokens"
    USERS = "users"


class AccessToken(BaseModel):
    """Represents an issued access token as stored.

    Records are never updated in place, only deleted, so the model is frozen.
    Validity is derived on demand and never stored.
    """

    model_config = ConfigDict(frozen=True)

    id: RecordId = Field(..., description="Store-assigned record identifier.")
    value: str = Field(..., description="Opaque secret presented by the client.")
    created: datetime = Field(..., description="Instant the token was issued.")
    origin: Optional[str] = Field(
        None, description="Origin (scheme and host) the token was issued for."
    )
    user: RecordId = Field(..., description="Identifier of the owning user record.")

    @field_validator("created")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class UserRecord(BaseModel):
    """Owner of an access token. Profile fields beyond ``id`` are kept as-is."""

    model_config = ConfigDict(extra="allow")

    id: RecordId


__all__ = ["AccessToken", "RecordId", "RecordType", "UserRecord"]
