"""Pytest configuration shared across the suite."""

from __future__ import annotations

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

from typing import Any, Optional

import pytest

from notify_utils.models.records import RecordType
from notify_utils.schemas.store import FindOptions, FindPayload, FindResult


class FakeRecordStore:
    """In-memory record store that records every call made to it."""

    def __init__(self) -> None:
        self.records: dict[RecordType, dict[str, dict]] = {
            RecordType.TOKENS: {},
            RecordType.USERS: {},
        }
        self.find_calls: list[tuple[RecordType, Optional[str], Optional[FindOptions]]] = []
        self.delete_calls: list[tuple[RecordType, str]] = []
        self.delete_error: Optional[Exception] = None

    def add(self, record_type: RecordType, record: dict[str, Any]) -> None:
        self.records[record_type][record["id"]] = record

    async def find(
        self,
        record_type: RecordType,
        record_id: Optional[str] = None,
        options: Optional[FindOptions] = None,
    ) -> FindResult:
        self.find_calls.append((record_type, record_id, options))
        matches = list(self.records[record_type].values())
        if record_id is not None:
            matches = [record for record in matches if record["id"] == record_id]
        if options is not None:
            matches = [
                record
                for record in matches
                if all(record.get(key) == value for key, value in options.match.items())
            ]
        return FindResult(payload=FindPayload(count=len(matches), records=matches))

    async def delete(self, record_type: RecordType, record_id: str) -> None:
        self.delete_calls.append((record_type, record_id))
        if self.delete_error is not None:
            raise self.delete_error
        self.records[record_type].pop(record_id, None)


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def record_store() -> FakeRecordStore:
    return FakeRecordStore()
