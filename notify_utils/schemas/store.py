"""Wire shapes exchanged with the record store."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class FindOptions(BaseModel):
    """Query options for a ``find`` call."""

    match: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field values every returned record must equal.",
    )


class FindPayload(BaseModel):
    count: int
    records: List[Dict[str, Any]] = Field(default_factory=list)


class FindResult(BaseModel):
    """Result of a ``find`` call."""

    payload: FindPayload


__all__ = ["FindOptions", "FindPayload", "FindResult"]
