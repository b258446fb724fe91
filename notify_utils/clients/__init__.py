"""Expose record store contract and adapters."""

from .record_store import RecordStore
from .sqlite_store import SQLiteStore

__all__ = ["RecordStore", "SQLiteStore"]
