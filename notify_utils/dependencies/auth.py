"""
Authentication dependency resolving the calling user from their access token.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status

from notify_utils.core.config import AppSettings
from notify_utils.core.errors import AccessTokenError
from notify_utils.models.records import UserRecord
from notify_utils.services import get_token_from_request, get_user_by_token
from notify_utils.services.token_validation import TokenValidator

from .clients import get_record_store, get_token_validator
from .config import get_app_settings

logger = logging.getLogger(__name__)


async def get_current_user(
    request: Request,
    settings: Annotated[AppSettings, Depends(get_app_settings)],
    store: Annotated[Any, Depends(get_record_store)],
    validator: Annotated[TokenValidator, Depends(get_token_validator)],
) -> UserRecord:
    """Return the user owning the request's access token or respond 401.

    Every pipeline failure maps to the same response; the failure kind is
    only logged.
    """
    token_settings = settings.access_token
    try:
        token = get_token_from_request(request.headers, token_settings.location())
        return await get_user_by_token(
            token,
            store,
            token_settings.validation_options(),
            validator=validator,
        )
    except AccessTokenError as exc:
        logger.info(
            "Rejected unauthenticated request",
            extra={"kind": exc.kind.value, "path": request.url.path},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated.",
        ) from exc


CurrentUser = Annotated[UserRecord, Depends(get_current_user)]

__all__ = ["CurrentUser", "get_current_user"]
