"""Logging adapters.

Usage:
    from framechain.infrastructure.logging import ConsoleAdapter
"""

from framechain.infrastructure.logging.console_adapter import ConsoleAdapter, error_context

__all__ = ["ConsoleAdapter", "error_context"]
