"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Errors passed through ``error=`` are expanded into structured fields. A
ContextualError additionally contributes its code and its full frame trail,
outermost first, so one log event carries the whole provenance.

The adapter builds its own structlog pipeline with ``structlog.wrap_logger``
and never calls ``structlog.configure``, so a host application's global
structlog configuration is not affected.

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from framechain.domain.errors import ContextualError


def error_context(error: BaseException) -> dict[str, Any]:
    """Structured fields describing an exception.

    Args:
        error: Exception to describe.

    Returns:
        dict: error_type and error_message; for a ContextualError also
        error_code and error_trail (rendered frames, outermost first).
    """
    context: dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    if isinstance(error, ContextualError):
        context["error_code"] = error.code
        context["error_trail"] = error.chain.render_lines()
    return context


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stdout),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (BaseException | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context.update(error_context(error))
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message (str): Message text.
            error (BaseException | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context.update(error_context(error))
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
