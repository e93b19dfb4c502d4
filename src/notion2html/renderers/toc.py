#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/toc.py
"""Table-of-contents helpers.

Entries are indented relative to the previous header, not by absolute level:
going from H1 to H2 indents one step, from H3 to H2 outdents one step. The
running sum is what ends up in the ``table_of_contents-indent-N`` class, so a
page that starts with an H2 after an H3 can produce negative values; they are
emitted as-is.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from notion2html.ast.nodes import HEADER_BLOCK_TYPES, Block, BlockType


def collect_header_blocks(blocks: Iterable[Block | None]) -> list[Block]:
    """Collect header blocks from a subtree in document order.

    Children of header blocks are not searched.
    """
    result: list[Block] = []
    for block in blocks:
        if block is None:
            continue
        if block.type in HEADER_BLOCK_TYPES:
            result.append(block)
            continue
        result.extend(collect_header_blocks(block.content))
    return result


def compare_header_types(prev: str, curr: str) -> int:
    """Return the indent change when going from header ``prev`` to ``curr``.

    Examples
    --------
        >>> compare_header_types("header", "sub_header")
        1
        >>> compare_header_types("sub_sub_header", "header")
        -1

    """
    if prev == curr:
        return 0
    if prev == BlockType.HEADER:
        return 1
    if prev == BlockType.SUB_HEADER:
        return -1 if curr == BlockType.HEADER else 1
    if prev == BlockType.SUB_SUB_HEADER:
        return -1
    raise ValueError(f"not a header type: {prev!r}")


def indent_levels(headers: Sequence[Block]) -> list[int]:
    """Indent level of each header entry; the first one is at 0."""
    levels: list[int] = []
    level = 0
    for i, header in enumerate(headers):
        if i > 0:
            level += compare_header_types(headers[i - 1].type, header.type)
        levels.append(level)
    return levels
