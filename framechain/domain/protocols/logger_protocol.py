"""LoggerProtocol definition for structured logging.

Backend-agnostic logging contract used at the reporting boundary. Callers
may pass any object with these call signatures (PEP 544 structural
subtyping); the default implementation is the structlog ConsoleAdapter.

Usage:
    from framechain.core.container import get_logger
    from framechain.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.error("import failed", error=exc, batch_id=batch_id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception; implementations add error_type and
                error_message, and the frame trail for a ContextualError.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
