"""Core enums package.

Usage:
    from framechain.core.enums import Environment
"""

from framechain.core.enums.environment import Environment

__all__ = ["Environment"]
