"""Construction entry points for ContextualError.

Each function captures the location of its caller unless an explicit
``location`` is given. Three flavors exist for each operation:

- make_error / wrap_error: return the error value
- raise_error / raise_wrapped: raise it
- fail / fail_wrapped: return it inside a Failure

Usage:
    from framechain import raise_wrapped, wrap_error

    try:
        sock.send(payload)
    except OSError as exc:
        raise_wrapped("send failed", exc, 32)
"""

from typing import NoReturn

from framechain.core.result import Failure
from framechain.domain.errors import ContextualError
from framechain.domain.value_objects import NO_CODE, SourceLocation, capture_location


def make_error(
    message: str = "",
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> ContextualError:
    """Create an error with a single base frame at the caller's location.

    Args:
        message: Context message (may be empty).
        code: Numeric code; 0 means no code.
        location: Explicit location; captured from the caller when omitted.

    Returns:
        ContextualError: New error with no child frames.
    """
    return ContextualError(
        message, code, location=location or capture_location(stacklevel=2)
    )


def wrap_error(
    message: str,
    error: BaseException,
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> ContextualError:
    """Create an error that supersedes another exception.

    A ContextualError contributes its base frame and children as child
    frames of the new error. Any other exception is appended to the message
    as text (``"<message>, <description>"``) and leaves no child frames.

    Args:
        message: Context message for the new base frame.
        error: Exception being wrapped. Not modified.
        code: Numeric code; 0 means no code.
        location: Explicit location; captured from the caller when omitted.

    Returns:
        ContextualError: New error, with ``__cause__`` set to ``error``.
    """
    return ContextualError(
        message,
        code,
        location=location or capture_location(stacklevel=2),
        cause=error,
    )


def raise_error(
    message: str = "",
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> NoReturn:
    """Raise a new ContextualError located at the caller."""
    raise make_error(message, code, location=location or capture_location(stacklevel=2))


def raise_wrapped(
    message: str,
    error: BaseException,
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> NoReturn:
    """Raise a ContextualError wrapping ``error``, chained ``from error``."""
    raise wrap_error(
        message, error, code, location=location or capture_location(stacklevel=2)
    ) from error


def fail(
    message: str = "",
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> Failure[ContextualError]:
    """Return a new ContextualError inside a Failure."""
    return Failure(
        error=make_error(message, code, location=location or capture_location(stacklevel=2))
    )


def fail_wrapped(
    message: str,
    error: BaseException,
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> Failure[ContextualError]:
    """Return a ContextualError wrapping ``error`` inside a Failure."""
    return Failure(
        error=wrap_error(
            message, error, code, location=location or capture_location(stacklevel=2)
        )
    )
