"""Re-annotating an in-flight error at each layer.

chain_error replaces a held error with a new one that keeps the old trail
underneath; the caller rebinds its variable to the result. An empty slot
stays empty, so the call is safe on every return path:

    err = step_one()
    err = chain_error(err, "loading profile failed")
    if err is not None:
        return err

chain_result does the same for Result values, and annotate does it for
exceptions escaping a block or a function.
"""

from contextlib import ContextDecorator
from types import TracebackType
from typing import Self, TypeVar

from framechain.application.construction import wrap_error
from framechain.core.result import Failure, Result, Success
from framechain.domain.errors import ContextualError
from framechain.domain.value_objects import NO_CODE, SourceLocation, capture_location

T = TypeVar("T")


def chain_error(
    slot: BaseException | None,
    message: str,
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> ContextualError | None:
    """Supersede a held error with a new one at the caller's location.

    Args:
        slot: Currently held error, or None.
        message: Context message for the new base frame.
        code: Numeric code; 0 means no code.
        location: Explicit location; captured from the caller when omitted.

    Returns:
        None when ``slot`` is None. For a ContextualError, a new error whose
        children are ``slot``'s base frame followed by ``slot``'s children.
        Any other exception is wrapped as by wrap_error (its text is
        flattened into the message). ``slot`` itself is not modified.
    """
    if slot is None:
        return None

    location = location or capture_location(stacklevel=2)
    if not isinstance(slot, ContextualError):
        return wrap_error(message, slot, code, location=location)

    error = ContextualError(message, code, location=location)
    error.merge(slot)
    error.__cause__ = slot
    return error


def chain_result(
    result: Result[T, BaseException],
    message: str,
    code: int = NO_CODE,
    *,
    location: SourceLocation | None = None,
) -> Result[T, ContextualError]:
    """Re-annotate the error of a Failure; pass a Success through unchanged.

    A Failure holding a foreign exception is wrapped (its text is flattened
    into the new message) rather than chained.
    """
    location = location or capture_location(stacklevel=2)
    match result:
        case Success():
            return result
        case Failure(error=error):
            return Failure(error=chain_error(error, message, code, location=location))
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


class annotate(ContextDecorator):
    """Wrap any Exception escaping a block in a ContextualError.

    The new error is located where ``annotate(...)`` was called (for the
    decorator form, the decoration site) and is raised ``from`` the
    original. BaseExceptions that are not Exceptions pass through.

    Coroutine functions are not supported: decorating an ``async def``
    wraps only the creation of the coroutine, so exceptions raised while it
    is awaited escape unannotated. Put ``with annotate(...):`` inside the
    coroutine body instead.

    Usage:
        with annotate("reading config", 2):
            data = path.read_text()

        @annotate("syncing accounts")
        def sync() -> None:
            ...
    """

    def __init__(
        self,
        message: str,
        code: int = NO_CODE,
        *,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.location = location or capture_location(stacklevel=2)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        raise wrap_error(self.message, exc, self.code, location=self.location) from exc
