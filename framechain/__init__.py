"""framechain: exceptions that keep a location trail across layers.

Usage:
    from framechain import ContextualError, chain_error, make_error

    err = make_error("disk full", 28)
    err = chain_error(err, "flush failed")
    print(err.render_detailed())
    # app.py:7 | save() | flush failed
    #     app.py:6 | save() | [code=28] disk full
"""

from framechain.application import (
    annotate,
    chain_error,
    chain_result,
    fail,
    fail_wrapped,
    log_error,
    make_error,
    raise_error,
    raise_wrapped,
    wrap_error,
)
from framechain.core.result import Failure, Result, Success
from framechain.domain.errors import ContextualError, classify_cause
from framechain.domain.value_objects import (
    Cause,
    ForeignCause,
    Frame,
    FrameChain,
    SourceLocation,
    capture_location,
    render_summary,
)

__all__ = [
    "Cause",
    "ContextualError",
    "Failure",
    "ForeignCause",
    "Frame",
    "FrameChain",
    "Result",
    "SourceLocation",
    "Success",
    "annotate",
    "capture_location",
    "chain_error",
    "chain_result",
    "classify_cause",
    "fail",
    "fail_wrapped",
    "log_error",
    "make_error",
    "raise_error",
    "raise_wrapped",
    "render_summary",
    "wrap_error",
]
