"""Unit tests for FrameChain and ForeignCause.

Tests cover:
- absorb() ordering and depth renumbering
- Depth invariant validation
- Detailed rendering
- ForeignCause message flattening
"""

import pytest

from framechain.domain.value_objects import ForeignCause, FrameChain, renumber
from tests.conftest import create_frame


def chain_of(name: str, children: int = 0) -> FrameChain:
    """Helper to build a chain whose frames are labelled name, name.1, ..."""
    base = create_frame(name)
    kids = tuple(create_frame(f"{name}.{i}", depth=i) for i in range(1, children + 1))
    return FrameChain(base, kids)


@pytest.mark.unit
class TestFrameChainAbsorb:
    """Test FrameChain.absorb()."""

    def test_absorb_appends_base_then_children(self):
        """Test other's base precedes other's children."""
        merged = chain_of("a").absorb(chain_of("b", children=2))

        assert [f.message for f in merged.children] == ["b", "b.1", "b.2"]

    def test_repeated_absorb_preserves_order(self):
        """Test absorbing B then C yields [B.base, B.children, C.base, C.children]."""
        b = chain_of("b", children=1)
        c = chain_of("c", children=2)

        merged = chain_of("a").absorb(b).absorb(c)

        assert [f.message for f in merged.children] == ["b", "b.1", "c", "c.1", "c.2"]

    def test_absorb_renumbers_depths(self):
        """Test every child depth equals its index + 1 after absorbing."""
        merged = chain_of("a", children=1).absorb(chain_of("b", children=2)).absorb(chain_of("c"))

        assert [f.depth for f in merged.children] == [1, 2, 3, 4, 5]
        assert merged.base.depth == 0

    def test_absorb_keeps_base(self):
        """Test the base frame is unchanged by absorbing."""
        a = chain_of("a")

        assert a.absorb(chain_of("b")).base == a.base

    def test_absorb_does_not_modify_inputs(self):
        """Test both chains are left as they were."""
        a = chain_of("a")
        b = chain_of("b", children=1)

        a.absorb(b)

        assert a.children == ()
        assert [f.depth for f in b.frames] == [0, 1]

    def test_absorb_does_not_deduplicate(self):
        """Test absorbing the same chain twice repeats its frames."""
        b = chain_of("b")

        merged = chain_of("a").absorb(b).absorb(b)

        assert [f.message for f in merged.children] == ["b", "b"]
        assert [f.depth for f in merged.children] == [1, 2]


@pytest.mark.unit
class TestFrameChainInvariants:
    """Test depth invariant validation."""

    def test_rejects_non_zero_base_depth(self):
        """Test the base frame must sit at depth 0."""
        with pytest.raises(ValueError, match="Base frame depth must be 0"):
            FrameChain(create_frame(depth=1))

    def test_rejects_misnumbered_children(self):
        """Test children must be numbered from depth 1."""
        with pytest.raises(ValueError, match="must have depth 1"):
            FrameChain(create_frame(), (create_frame(depth=2),))

    def test_renumber(self):
        """Test renumber() assigns depths by position."""
        frames = (create_frame("x", depth=7), create_frame("y", depth=0))

        assert [f.depth for f in renumber(frames)] == [1, 2]


@pytest.mark.unit
class TestFrameChainRendering:
    """Test detailed rendering."""

    def test_single_frame_renders_one_line(self):
        """Test a chain without children renders its summary."""
        chain = FrameChain(create_frame("only", 0, "a.py", 1, "f"))

        assert chain.render_detailed() == "a.py:1 | f() | only"

    def test_children_are_indented(self):
        """Test each child line is indented once."""
        chain = FrameChain(create_frame("init failed", 0, "main.cc", 5, "Main")).absorb(
            FrameChain(create_frame("open failed", 0, "db.cc", 10, "Open"))
        )

        assert chain.render_detailed() == (
            "main.cc:5 | Main() | init failed\n    db.cc:10 | Open() | open failed"
        )

    def test_render_lines_outermost_first(self):
        """Test render_lines() lists base frame first."""
        chain = chain_of("a").absorb(chain_of("b", children=1))

        lines = chain.render_lines()

        assert len(lines) == 3
        assert lines[0].endswith("| a")
        assert lines[2].endswith("| b.1")


@pytest.mark.unit
class TestForeignCause:
    """Test ForeignCause.flatten_into()."""

    def test_flatten_appends_description(self):
        """Test the description follows a comma."""
        assert ForeignCause("disk err").flatten_into("flush failed") == "flush failed, disk err"

    def test_flatten_into_empty_message(self):
        """Test an empty message becomes the description."""
        assert ForeignCause("disk err").flatten_into("") == "disk err"
