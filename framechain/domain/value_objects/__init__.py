"""Domain value objects.

Usage:
    from framechain.domain.value_objects import Frame, FrameChain, SourceLocation
"""

from framechain.domain.value_objects.frame import NO_CODE, Frame, render_summary
from framechain.domain.value_objects.frame_chain import (
    DETAIL_INDENT,
    Cause,
    ForeignCause,
    FrameChain,
    renumber,
)
from framechain.domain.value_objects.source_location import (
    UNKNOWN_LOCATION,
    SourceLocation,
    capture_location,
    file_basename,
)

__all__ = [
    "Cause",
    "DETAIL_INDENT",
    "ForeignCause",
    "Frame",
    "FrameChain",
    "NO_CODE",
    "SourceLocation",
    "UNKNOWN_LOCATION",
    "capture_location",
    "file_basename",
    "render_summary",
    "renumber",
]
