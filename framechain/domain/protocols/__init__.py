"""Domain protocols package."""

from framechain.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
