"""Frame chain and the cause sum type.

A cause absorbed by a new error is one of two variants:

- FrameChain: the structured trail of a ContextualError (base frame plus
  inherited children). Merged frame by frame.
- ForeignCause: any other exception, reduced to its text description.
  Flattened into the new base frame's message.

The variant is chosen once, where the cause enters the system
(``classify_cause``); everything downstream dispatches on it with ``match``.

Merge semantics:
    a.absorb(b).children == a.children + (b.base,) + b.children

with every child's depth renumbered to ``index + 1``. The base frame keeps
depth 0. Chains are immutable; absorb returns a new chain.

Reference:
    - framechain/domain/errors/contextual_error.py
"""

from dataclasses import dataclass, replace
from typing import Self

from framechain.domain.value_objects.frame import Frame

DETAIL_INDENT = "    "


def renumber(frames: tuple[Frame, ...]) -> tuple[Frame, ...]:
    """Return frames with depth set to their 1-based position."""
    return tuple(
        frame if frame.depth == depth else replace(frame, depth=depth)
        for depth, frame in enumerate(frames, start=1)
    )


@dataclass(frozen=True, slots=True)
class FrameChain:
    """Structured trail: one base frame and the frames it supersedes.

    Attributes:
        base: Current (outermost) context, depth 0.
        children: Inherited frames, outer to inner, depths 1..n.

    Raises:
        ValueError: If the depth invariants do not hold.
    """

    base: Frame
    children: tuple[Frame, ...] = ()

    def __post_init__(self) -> None:
        if self.base.depth != 0:
            raise ValueError(f"Base frame depth must be 0, got {self.base.depth}")
        for index, child in enumerate(self.children):
            if child.depth != index + 1:
                raise ValueError(
                    f"Child frame {index} must have depth {index + 1}, got {child.depth}"
                )

    @property
    def frames(self) -> tuple[Frame, ...]:
        """Base frame followed by all children."""
        return (self.base, *self.children)

    def absorb(self, other: "FrameChain") -> Self:
        """Append another chain (its base, then its children) to our children.

        Args:
            other: Chain being superseded. Not modified.

        Returns:
            New chain with the same base and renumbered children.
        """
        inherited = (*self.children, other.base, *other.children)
        return replace(self, children=renumber(inherited))

    def with_message(self, message: str) -> Self:
        """Return a chain whose base frame carries a different message."""
        return replace(self, base=replace(self.base, message=message))

    def render_lines(self) -> list[str]:
        """Rendered frames, outermost first, without indentation."""
        return [frame.render_summary() for frame in self.frames]

    def render_detailed(self) -> str:
        """Render the base frame, then each child on its own indented line.

        Example:
            main.py:5 | main() | init failed
                db.py:10 | open() | open failed
        """
        base, *children = self.render_lines()
        return "".join([base, *(f"\n{DETAIL_INDENT}{line}" for line in children)])


@dataclass(frozen=True, slots=True)
class ForeignCause:
    """Opaque cause: an exception that carries no frame chain.

    Attributes:
        description: Text description of the exception.
    """

    description: str

    def flatten_into(self, message: str) -> str:
        """Append the description to a context message.

        Example:
            >>> ForeignCause("disk err").flatten_into("flush failed")
            'flush failed, disk err'
            >>> ForeignCause("disk err").flatten_into("")
            'disk err'
        """
        if not message:
            return self.description
        return f"{message}, {self.description}"


type Cause = FrameChain | ForeignCause
