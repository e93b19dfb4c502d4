#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_render_state.py
"""Unit tests for BufferStack, ListStateTracker and SiblingFrame."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import make_block

from notion2html.renderers.base import BufferStack
from notion2html.renderers.state import ListStateTracker, SiblingFrame


@pytest.mark.unit
class TestBufferStack:
    """Tests for the output buffer stack."""

    def test_push_write_pop(self):
        """Test text written after a push is returned by the pop."""
        buffers = BufferStack()
        buffers.push()
        buffers.write("<p>")
        buffers.write("Hi</p>")
        assert buffers.pop() == "<p>Hi</p>"

    def test_nested_capture(self):
        """Test an inner buffer does not leak into the outer one."""
        buffers = BufferStack()
        buffers.push()
        buffers.write("<td>")
        buffers.push()
        buffers.write("cell")
        assert buffers.depth == 2
        inner = buffers.pop()
        buffers.write(inner.upper() + "</td>")
        assert buffers.pop() == "<td>CELL</td>"
        assert buffers.depth == 0

    def test_pop_empty_buffer(self):
        """Test an empty pushed buffer pops as an empty string."""
        buffers = BufferStack()
        buffers.push()
        assert buffers.pop() == ""

    def test_pop_without_push(self):
        """Test popping an empty stack raises."""
        with pytest.raises(RuntimeError):
            BufferStack().pop()

    def test_write_without_push(self):
        """Test writing to an empty stack raises."""
        with pytest.raises(RuntimeError):
            BufferStack().write("x")

    def test_clear(self):
        """Test clear drops every buffer."""
        buffers = BufferStack()
        buffers.push()
        buffers.push()
        buffers.clear()
        assert buffers.depth == 0

    @given(st.lists(st.text(max_size=10), max_size=10))
    def test_pop_returns_concatenation(self, parts):
        """Test pop returns every write in order."""
        buffers = BufferStack()
        buffers.push()
        for part in parts:
            buffers.write(part)
        assert buffers.pop() == "".join(parts)


@pytest.mark.unit
class TestListStateTracker:
    """Tests for the numbered-list counter."""

    def test_counts_consecutive_items(self):
        """Test consecutive items count up from 1."""
        tracker = ListStateTracker()
        assert [tracker.advance(False), tracker.advance(True), tracker.advance(True)] == [1, 2, 3]

    def test_interruption_resets(self):
        """Test an item after a non-list sibling restarts at 1."""
        tracker = ListStateTracker()
        tracker.advance(False)
        tracker.advance(True)
        assert tracker.advance(False) == 1
        assert tracker.advance(True) == 2


@pytest.mark.unit
class TestSiblingFrame:
    """Tests for sibling look-behind and look-ahead."""

    def test_neighbours(self):
        """Test previous and next blocks around the current index."""
        blocks = [make_block("a", "text"), make_block("b", "numbered_list"), make_block("c", "divider")]
        frame = SiblingFrame(blocks, index=1)
        assert frame.prev_block is blocks[0]
        assert frame.next_block is blocks[2]
        assert frame.is_prev_of_type("text")
        assert frame.is_next_of_type("divider")
        assert not frame.is_next_of_type("text")

    def test_edges(self):
        """Test the first and last positions have no neighbour on one side."""
        blocks = [make_block("a", "text"), make_block("b", "text")]
        assert SiblingFrame(blocks, index=0).prev_block is None
        assert SiblingFrame(blocks, index=1).next_block is None

    def test_missing_neighbour(self):
        """Test a None sibling never matches a type."""
        frame = SiblingFrame([None, make_block("b", "text")], index=1)
        assert frame.prev_block is None
        assert not frame.is_prev_of_type("text")

    def test_each_frame_has_its_own_tracker(self):
        """Test trackers are not shared between frames."""
        first, second = SiblingFrame([]), SiblingFrame([])
        first.tracker.advance(False)
        assert second.tracker.counter == 0
