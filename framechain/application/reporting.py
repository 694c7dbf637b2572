"""Reporting an error trail through a structured logger.

Usage:
    from framechain import log_error

    try:
        run()
    except ContextualError as exc:
        log_error(exc, "job failed", job_id=job_id)
"""

from typing import Any

from framechain.core.container import get_logger
from framechain.domain.protocols import LoggerProtocol


def log_error(
    error: BaseException,
    message: str = "error_trail",
    *,
    logger: LoggerProtocol | None = None,
    **context: Any,
) -> None:
    """Emit one ERROR event describing ``error``.

    The logger adapter expands the exception into error_type and
    error_message, and for a ContextualError into error_code and
    error_trail (rendered frames, outermost first).

    Args:
        error: Exception to report.
        message: Event message.
        logger: Logger to use; the process-wide logger when omitted.
        **context: Extra structured context for the event.
    """
    (logger or get_logger()).error(message, error=error, **context)
