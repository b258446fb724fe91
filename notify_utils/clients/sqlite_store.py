"""SQLite-backed record store for token and user records."""

from __future__ import annotations

import asyncio
import json
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from notify_utils.models.records import RecordId, RecordType
from notify_utils.schemas.store import FindOptions, FindPayload, FindResult


class SQLiteStore:
    """Record store using a single table keyed by (type, id) with JSON payloads.

    Ids are stored as text, so integer and string ids of the same value are
    the same record.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path)
        if self._db_path.parent and not self._db_path.parent.exists():
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and is always closed."""
        with closing(sqlite3.connect(self._db_path)) as conn:
            conn.row_factory = sqlite3.Row
            with conn:
                yield conn

    def _ensure_schema(self) -> None:
        with self._transaction() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS records (
                    type TEXT NOT NULL,
                    id TEXT NOT NULL,
                    data TEXT NOT NULL,
                    PRIMARY KEY (type, id)
                )
                """
            )

    def put_record(self, record_type: RecordType, record: Mapping[str, Any]) -> None:
        """Insert or replace a record. Used to seed tokens and users."""
        record_id = record.get("id")
        if record_id is None or record_id == "":
            raise ValueError("Record must include an 'id' key")

        data_json = json.dumps(dict(record), default=_json_default)
        with self._transaction() as conn:
            conn.execute(
                """
                INSERT INTO records (type, id, data)
                VALUES (?, ?, ?)
                ON CONFLICT(type, id) DO UPDATE SET data = excluded.data
                """,
                (record_type.value, str(record_id), data_json),
            )

    async def find(
        self,
        record_type: RecordType,
        record_id: Optional[RecordId] = None,
        options: Optional[FindOptions] = None,
    ) -> FindResult:
        match = options.match if options else {}
        records = await asyncio.to_thread(
            self._select, record_type, record_id, match
        )
        return FindResult(payload=FindPayload(count=len(records), records=records))

    async def delete(self, record_type: RecordType, record_id: RecordId) -> None:
        await asyncio.to_thread(self._delete, record_type, record_id)

    def _select(
        self,
        record_type: RecordType,
        record_id: Optional[RecordId],
        match: Mapping[str, Any],
    ) -> List[Dict[str, Any]]:
        query = "SELECT data FROM records WHERE type = ?"
        params: List[Any] = [record_type.value]
        if record_id is not None:
            query += " AND id = ?"
            params.append(str(record_id))
        for field, expected in match.items():
            query += " AND json_extract(data, ?) = ?"
            params.extend([f'$."{field}"', expected])
        query += " ORDER BY id"

        with self._transaction() as conn:
            rows = conn.execute(query, params).fetchall()
        return [json.loads(row["data"]) for row in rows]

    def _delete(self, record_type: RecordType, record_id: RecordId) -> None:
        with self._transaction() as conn:
            conn.execute(
                "DELETE FROM records WHERE type = ? AND id = ?",
                (record_type.value, str(record_id)),
            )


def _json_default(value: Any) -> Any:
    isoformat = getattr(value, "isoformat", None)
    if callable(isoformat):
        return isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


__all__ = ["SQLiteStore"]
