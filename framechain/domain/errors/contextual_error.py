"""ContextualError: an exception that carries its own location trail.

Each ContextualError owns one FrameChain. The base frame records where this
error was raised or last re-annotated; the children record every error it
superseded, outer to inner. Layers that catch an error and re-raise it with
more context keep the whole trail instead of replacing it.

Architecture:
- Domain layer error (raised, or returned inside Failure)
- Inherits from Exception so it can be raised and caught
- Frame data lives in immutable value objects (Frame, FrameChain)
- Foreign exceptions are reduced to text once, in classify_cause

Usage:
    from framechain.domain.errors import ContextualError

    try:
        flush()
    except OSError as exc:
        raise ContextualError("flush failed", 28, cause=exc) from exc

    print(error.render_detailed())
    # io.py:42 | flush() | [code=28] flush failed, disk err
"""

from framechain.domain.value_objects import (
    NO_CODE,
    Cause,
    ForeignCause,
    Frame,
    FrameChain,
    SourceLocation,
    capture_location,
)


class ContextualError(Exception):
    """Exception with a base frame and the frames of the errors it supersedes.

    ``str(error)`` is the one-line summary of the base frame, computed once
    at construction. Accessors read the base frame only; inherited frames
    are visible through ``child_frames`` and ``render_detailed()``.

    Args:
        message: Context message (may be empty).
        code: Numeric code; 0 means no code.
        location: Where the error is raised. Captured from the caller of the
            constructor when omitted.
        cause: Optional exception being wrapped. A ContextualError cause
            contributes its whole trail; any other exception is appended to
            the message as text.
    """

    def __init__(
        self,
        message: str = "",
        code: int = NO_CODE,
        *,
        location: SourceLocation | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if location is None:
            location = capture_location(stacklevel=2)

        chain = FrameChain(Frame.at(location, message, code))
        if cause is not None:
            match classify_cause(cause):
                case FrameChain() as inherited:
                    chain = chain.absorb(inherited)
                case ForeignCause() as foreign:
                    chain = chain.with_message(foreign.flatten_into(message))
            self.__cause__ = cause

        self._chain = chain
        self._summary = chain.base.render_summary()
        super().__init__(self._summary)

    def __str__(self) -> str:
        return self._summary

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, "
            f"location={self.file}:{self.line}, children={len(self.child_frames)})"
        )

    @property
    def chain(self) -> FrameChain:
        """Current frame chain (immutable snapshot)."""
        return self._chain

    @property
    def base_frame(self) -> Frame:
        return self._chain.base

    @property
    def child_frames(self) -> tuple[Frame, ...]:
        return self._chain.children

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._chain.frames

    @property
    def message(self) -> str:
        return self._chain.base.message

    @property
    def code(self) -> int:
        return self._chain.base.code

    @property
    def has_code(self) -> bool:
        return self._chain.base.has_code

    @property
    def file(self) -> str:
        return self._chain.base.file

    @property
    def line(self) -> int:
        return self._chain.base.line

    @property
    def function(self) -> str:
        return self._chain.base.function

    @property
    def summary(self) -> str:
        """One-line rendering of the base frame, cached at construction."""
        return self._summary

    def merge(self, other: "ContextualError") -> None:
        """Append another error's base frame and children to our children.

        Child depths are renumbered afterwards. The base frame and the
        cached summary are unchanged. ``other`` is not modified; callers
        should treat it as consumed.

        Args:
            other: Error whose trail is absorbed.
        """
        self._chain = self._chain.absorb(other.chain)

    def render_detailed(self) -> str:
        """Render the whole trail, outermost context first.

        Returns:
            str: Base summary, then one indented line per child frame.
        """
        return self._chain.render_detailed()


def describe_foreign(error: BaseException) -> str:
    """Text description of an exception that carries no frame chain.

    Falls back to the class name when ``str(error)`` is empty.
    """
    return str(error) or type(error).__name__


def classify_cause(error: BaseException) -> Cause:
    """Map an exception onto the cause sum type.

    Args:
        error: Any exception.

    Returns:
        FrameChain for a ContextualError, ForeignCause for anything else.
    """
    if isinstance(error, ContextualError):
        return error.chain
    return ForeignCause(describe_foreign(error))
