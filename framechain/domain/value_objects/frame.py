"""Immutable trace frame.

A Frame records one point where an error was raised or re-annotated:
message, numeric code and source location, plus its depth inside the
owning error's trail (0 for the base frame, 1.. for inherited frames).

Rendering contract (one line, bit-exact):
    <file>:<line> | <function>() | [code=<code>] <message>

The ``[code=<code>] `` segment is omitted when code is 0.
"""

from dataclasses import dataclass
from typing import Self

from framechain.domain.value_objects.source_location import SourceLocation

NO_CODE = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class Frame:
    """One recorded (message, code, location) triple.

    Attributes:
        message: Context message, may be empty.
        code: Numeric code; 0 means no code was provided.
        file: Source file basename.
        line: Line number.
        function: Enclosing function name.
        depth: Position in the owning trail (0 = base frame).
    """

    message: str
    code: int = NO_CODE
    file: str
    line: int
    function: str
    depth: int = 0

    @classmethod
    def at(cls, location: SourceLocation, message: str, code: int = NO_CODE) -> Self:
        """Build a base frame (depth 0) at a captured location."""
        return cls(
            message=message,
            code=code,
            file=location.file,
            line=location.line,
            function=location.function,
        )

    @property
    def has_code(self) -> bool:
        return self.code != NO_CODE

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(file=self.file, line=self.line, function=self.function)

    def render_summary(self) -> str:
        """Render the frame as a single line.

        Example:
            >>> Frame(message="disk full", code=28, file="io.cc", line=42,
            ...       function="Flush").render_summary()
            'io.cc:42 | Flush() | [code=28] disk full'
        """
        code_segment = f"[code={self.code}] " if self.has_code else ""
        return f"{self.file}:{self.line} | {self.function}() | {code_segment}{self.message}"


def render_summary(frame: Frame) -> str:
    """Render a frame as a single line (see Frame.render_summary)."""
    return frame.render_summary()
