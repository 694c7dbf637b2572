"""Application layer: construction, chaining and reporting entry points."""

from framechain.application.chaining import annotate, chain_error, chain_result
from framechain.application.construction import (
    fail,
    fail_wrapped,
    make_error,
    raise_error,
    raise_wrapped,
    wrap_error,
)
from framechain.application.reporting import log_error

__all__ = [
    "annotate",
    "chain_error",
    "chain_result",
    "fail",
    "fail_wrapped",
    "log_error",
    "make_error",
    "raise_error",
    "raise_wrapped",
    "wrap_error",
]
