"""
Record store contract consumed by the access token pipeline.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from notify_utils.models.records import RecordId, RecordType
from notify_utils.schemas.store import FindOptions, FindResult


@runtime_checkable
class RecordStore(Protocol):
    """Asynchronous find/delete capability over token and user records."""

    async def find(
        self,
        record_type: RecordType,
        record_id: Optional[RecordId] = None,
        options: Optional[FindOptions] = None,
    ) -> FindResult:
        """Return records of ``record_type`` matching an id and/or ``options.match``."""
        ...

    async def delete(self, record_type: RecordType, record_id: RecordId) -> None:
        """Delete a single record. Failures are raised to the caller."""
        ...


__all__ = ["RecordStore"]
