"""Call-site location value object and capture.

A SourceLocation identifies the point in the caller's code where an error
was raised or re-annotated: file basename, line number and the name of the
enclosing function. Capture walks the interpreter stack; every public entry
point also accepts an explicit location, which bypasses capture.

Usage:
    from framechain.domain.value_objects import capture_location

    def open_db() -> None:
        here = capture_location()  # SourceLocation("db.py", 4, "open_db")
"""

import inspect
from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Self


def file_basename(path: str) -> str:
    """Strip directories from a source path.

    Both ``/`` and ``\\`` are treated as separators, so Windows paths
    reduce the same way POSIX paths do.

    Example:
        >>> file_basename("/srv/app/io.py")
        'io.py'
        >>> file_basename("C:\\\\app\\\\io.py")
        'io.py'
    """
    return PureWindowsPath(path).name or path


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Immutable source point.

    Attributes:
        file: Source file basename.
        line: Line number.
        function: Unqualified name of the enclosing function.
    """

    file: str
    line: int
    function: str

    @classmethod
    def from_path(cls, path: str, line: int, function: str) -> Self:
        """Build a location from a full source path."""
        return cls(file=file_basename(path), line=line, function=function)


UNKNOWN_LOCATION = SourceLocation(file="<unknown>", line=0, function="<unknown>")


def capture_location(stacklevel: int = 1) -> SourceLocation:
    """Capture the location of a caller on the current stack.

    Args:
        stacklevel: How many frames above the caller of capture_location to
            report. 1 is the function calling capture_location, 2 its caller,
            and so on (same meaning as ``warnings.warn(stacklevel=...)``).

    Returns:
        SourceLocation of the selected frame, or UNKNOWN_LOCATION when the
        interpreter does not expose frames or the stack is shallower than
        requested.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        return SourceLocation.from_path(
            frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name
        )
    finally:
        # Frame objects hold references to every local on the stack.
        del frame
