"""
Resolve the owner of an access token.

The token is looked up (when given by value), validated, and then either its
owner is fetched or the token is deleted because it is no longer valid.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from notify_utils.clients.record_store import RecordStore
from notify_utils.core.errors import (
    InvalidTokenRemovedError,
    TokenNotFoundError,
    TokenRemovalError,
    UserNotFoundError,
)
from notify_utils.models.records import AccessToken, RecordType, UserRecord
from notify_utils.schemas.auth import ValidationOptions
from notify_utils.schemas.store import FindOptions
from notify_utils.services.token_validation import TokenValidator

logger = logging.getLogger(__name__)

TokenInput = Union[str, AccessToken, Mapping[str, Any]]


async def get_user_by_token(
    token: TokenInput,
    store: RecordStore,
    options: Optional[ValidationOptions] = None,
    *,
    validator: Optional[TokenValidator] = None,
) -> UserRecord:
    """Return the user owning ``token``.

    ``token`` is either the raw value presented by a client or an already
    fetched token record. Raises:

    * ``TokenNotFoundError`` when no stored token has the given value, or the
      token record is malformed.
    * ``InvalidTokenRemovedError`` when the token failed validation; the token
      record has been deleted before this is raised.
    * ``TokenRemovalError`` when the token failed validation and deleting it
      failed.
    * ``UserNotFoundError`` when the token is valid but its owner is missing
      or malformed.
    """
    options = options or ValidationOptions()
    validator = validator or TokenValidator()

    if isinstance(token, str):
        record = await _retrieve_token(store, token)
    elif isinstance(token, AccessToken):
        record = token
    else:
        record = _parse_token(token)

    result = validator.validate(record, options)
    if not result.valid:
        await _remove_token(store, record)
        logger.info(
            "Removed invalid access token",
            extra={"token_id": record.id, "reason": result.reason},
        )
        raise InvalidTokenRemovedError(
            f"invalid token removed ({result.reason})", token=record
        )

    return await _retrieve_user(store, record)


def _parse_token(data: Mapping[str, Any]) -> AccessToken:
    try:
        return AccessToken.model_validate(data)
    except ValidationError as exc:
        logger.warning(
            "Malformed access token record", extra={"token_id": data.get("id")}
        )
        raise TokenNotFoundError("malformed token record") from exc


async def _retrieve_token(store: RecordStore, value: str) -> AccessToken:
    result = await store.find(
        RecordType.TOKENS, None, FindOptions(match={"value": value})
    )
    payload = result.payload
    if payload.count != 1:
        if payload.count > 1:
            logger.warning(
                "Access token value matched several records",
                extra={"count": payload.count},
            )
        raise TokenNotFoundError()
    return _parse_token(payload.records[0])


async def _remove_token(store: RecordStore, record: AccessToken) -> None:
    try:
        await store.delete(RecordType.TOKENS, record.id)
    except Exception as exc:
        logger.warning(
            "Failed to remove invalid access token", extra={"token_id": record.id}
        )
        raise TokenRemovalError(token=record) from exc


async def _retrieve_user(store: RecordStore, record: AccessToken) -> UserRecord:
    result = await store.find(RecordType.USERS, record.user)
    payload = result.payload
    if payload.count != 1:
        logger.warning(
            "Access token owner not found",
            extra={"token_id": record.id, "count": payload.count},
        )
        raise UserNotFoundError(token=record)

    try:
        return UserRecord.model_validate(payload.records[0])
    except ValidationError as exc:
        logger.warning(
            "Malformed user record for access token", extra={"token_id": record.id}
        )
        raise UserNotFoundError("malformed user record", token=record) from exc


__all__ = ["TokenInput", "get_user_by_token"]
