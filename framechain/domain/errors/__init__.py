"""Domain errors package.

Usage:
    from framechain.domain.errors import ContextualError, classify_cause
"""

from framechain.domain.errors.contextual_error import (
    ContextualError,
    classify_cause,
    describe_foreign,
)

__all__ = [
    "ContextualError",
    "classify_cause",
    "describe_foreign",
]
