"""
Factory functions providing the record store and validator as FastAPI dependencies.
"""

from functools import lru_cache

from notify_utils.clients import SQLiteStore
from notify_utils.core.config import get_settings
from notify_utils.services import TokenValidator


@lru_cache()
def get_record_store() -> SQLiteStore:
    """Provide shared SQLite record store."""
    return SQLiteStore(get_settings().record_store_path)


def get_token_validator() -> TokenValidator:
    """Provide a validator bound to the wall clock."""
    return TokenValidator()


__all__ = ["get_record_store", "get_token_validator"]
