"""
FastAPI routes exposing the authenticated caller.
"""

from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter

from notify_utils.dependencies import CurrentUser

router = APIRouter()


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get("/me", status_code=HTTPStatus.OK)
async def read_current_user(user: CurrentUser) -> dict:
    """Return the profile of the user owning the presented access token."""
    return user.model_dump()
