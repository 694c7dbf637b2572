"""Dependency factories (composition root).

Settings are read lazily, on the first get_logger() call, so importing the
package never depends on the FRAMECHAIN_* environment being valid.

Usage:
    from framechain.core.container import get_logger

    logger = get_logger()
    logger.info("started")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from framechain.core.config import get_settings

if TYPE_CHECKING:
    from framechain.domain.protocols import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.

    Raises:
        pydantic.ValidationError: If FRAMECHAIN_* variables are invalid.
    """
    from framechain.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    use_json = env in {"testing", "ci", "production"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
