try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import logging

from notify_utils.core.logging import LOG_FORMAT, ContextFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="notify_utils.services.user_resolver",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Removed invalid access token",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_fields_are_appended() -> None:
    line = ContextFormatter(LOG_FORMAT).format(_record(token_id=1, reason="expired"))

    assert line.endswith("Removed invalid access token | token_id=1 reason=expired")


def test_line_without_context_has_no_suffix() -> None:
    line = ContextFormatter(LOG_FORMAT).format(_record())

    assert line.endswith("| notify_utils.services.user_resolver | Removed invalid access token")
