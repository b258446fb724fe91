"""Public schema exports."""

from .auth import TokenLocation, TokenValidationResult, ValidationOptions
from .store import FindOptions, FindPayload, FindResult

__all__ = [
    "FindOptions",
    "FindPayload",
    "FindResult",
    "TokenLocation",
    "TokenValidationResult",
    "ValidationOptions",
]
