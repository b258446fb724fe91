"""
Configuration models and helpers.

Centralizes settings management so the HTTP integration and any embedding
service share one view of where access tokens live and how they are validated.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notify_utils.schemas.auth import TokenLocation, ValidationOptions

_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    populate_by_name=True,
)


class AccessTokenSettings(BaseSettings):
    """Where access tokens are carried on a request and how they are checked."""

    model_config = _SETTINGS_CONFIG

    cookie_name: str = Field("access_token", validation_alias="ACCESS_TOKEN_COOKIE")
    header_name: str = Field("x-access-token", validation_alias="ACCESS_TOKEN_HEADER")
    max_age: Optional[int] = Field(
        None,
        validation_alias="ACCESS_TOKEN_MAX_AGE",
        description="Token lifetime in seconds. Expiry is not checked when unset.",
    )
    origin: Optional[str] = Field(
        None,
        validation_alias="ACCESS_TOKEN_ORIGIN",
        description="Origin tokens must have been issued for. Not checked when unset.",
    )

    @field_validator("max_age")
    @classmethod
    def _non_negative_max_age(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("ACCESS_TOKEN_MAX_AGE must not be negative.")
        return value

    @field_validator("origin", mode="before")
    @classmethod
    def _blank_origin_is_unset(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty ``ACCESS_TOKEN_ORIGIN`` the same as leaving it out."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def location(self) -> TokenLocation:
        return TokenLocation(cookie_name=self.cookie_name, header_name=self.header_name)

    def validation_options(self) -> ValidationOptions:
        return ValidationOptions(max_age=self.max_age, origin=self.origin)


class AppSettings(BaseSettings):
    """Root settings object for the HTTP integration."""

    model_config = _SETTINGS_CONFIG

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    record_store_path: str = Field(
        "data/records.db",
        validation_alias="RECORD_STORE_PATH",
        description="SQLite file backing the token and user records.",
    )
    access_token: AccessTokenSettings = Field(default_factory=AccessTokenSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AccessTokenSettings",
    "AppSettings",
    "get_settings",
]
