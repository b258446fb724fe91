"""
FastAPI dependency exposing application settings.

Overridden in tests to point the auth dependency at alternative cookie and
header names or validation rules.
"""

from fastapi import Depends

from notify_utils.core.config import AppSettings, get_settings


def get_app_settings() -> AppSettings:
    """FastAPI dependency returning the cached application settings."""
    return get_settings()


SettingsDependency = Depends(get_app_settings)

__all__ = ["SettingsDependency", "get_app_settings"]
