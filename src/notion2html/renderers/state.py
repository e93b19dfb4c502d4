#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/state.py
"""Traversal state kept by the HTML converter while walking a block tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from notion2html.ast.nodes import Block


class ListStateTracker:
    """Item counter for a run of numbered-list blocks.

    Consecutive numbered-list siblings are emitted as separate ``<ol>``
    elements, so each one carries an explicit ``start`` number.

    Examples
    --------
        >>> tracker = ListStateTracker()
        >>> [tracker.advance(False), tracker.advance(True), tracker.advance(True)]
        [1, 2, 3]
        >>> tracker.advance(False)
        1

    """

    def __init__(self) -> None:
        self.counter = 0

    def advance(self, continues: bool) -> int:
        """Return the number of the next list item.

        Parameters
        ----------
        continues : bool
            Whether the previous sibling is also a numbered-list item

        """
        self.counter = self.counter + 1 if continues else 1
        return self.counter


@dataclass
class SiblingFrame:
    """The children of one block being rendered, with the current position."""

    blocks: list[Optional[Block]]
    index: int = 0
    tracker: ListStateTracker = field(default_factory=ListStateTracker)

    @property
    def prev_block(self) -> Optional[Block]:
        if self.index <= 0:
            return None
        return self.blocks[self.index - 1]

    @property
    def next_block(self) -> Optional[Block]:
        if self.index + 1 >= len(self.blocks):
            return None
        return self.blocks[self.index + 1]

    def is_prev_of_type(self, block_type: str) -> bool:
        prev = self.prev_block
        return prev is not None and prev.type == block_type

    def is_next_of_type(self, block_type: str) -> bool:
        nxt = self.next_block
        return nxt is not None and nxt.type == block_type
