"""
FastAPI application entrypoint demonstrating access token authentication.
"""

from __future__ import annotations

from fastapi import FastAPI

from notify_utils.api.routes import router as api_router
from notify_utils.core.config import get_settings
from notify_utils.core.logging import configure_logging


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Notify Access Tokens",
        version="0.1.0",
        description="Resolves the caller of a request from its access token.",
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()

__all__ = ["app", "create_app"]
