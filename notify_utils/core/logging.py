"""
Logging utilities for services embedding the access token helpers.

Context passed through ``extra=`` (token ids, failure kinds) is appended to
each line so rejected requests can be traced without logging token values.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s%(context)s"

CONTEXT_FIELDS = ("token_id", "kind", "reason", "count", "path")


class ContextFormatter(logging.Formatter):
    """Formatter rendering known ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            f"{field}={getattr(record, field)}"
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        ]
        record.context = f" | {' '.join(pairs)}" if pairs else ""
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the context-aware format on stdout."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler])


__all__ = ["CONTEXT_FIELDS", "ContextFormatter", "LOG_FORMAT", "configure_logging"]
