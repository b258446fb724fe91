"""Expose dependency helpers for FastAPI routers."""

from .auth import CurrentUser, get_current_user
from .clients import get_record_store, get_token_validator
from .config import SettingsDependency, get_app_settings

__all__ = [
    "CurrentUser",
    "SettingsDependency",
    "get_app_settings",
    "get_current_user",
    "get_record_store",
    "get_token_validator",
]
