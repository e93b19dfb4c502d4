#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/__init__.py
"""In-memory page model.

- spans: rich-text spans and their attributes
- nodes: blocks, pages, users and collections
- serialization: building pages from dict / JSON data
"""

from notion2html.ast.nodes import (
    HEADER_BLOCK_TYPES,
    Block,
    BlockType,
    Collection,
    CollectionColumn,
    CollectionRow,
    CollectionView,
    CollectionViewInfo,
    NotionUser,
    Page,
)
from notion2html.ast.spans import Attribute, AttrType, Date, TextSpan, text_spans_to_string

__all__ = [
    "HEADER_BLOCK_TYPES",
    "Attribute",
    "AttrType",
    "Block",
    "BlockType",
    "Collection",
    "CollectionColumn",
    "CollectionRow",
    "CollectionView",
    "CollectionViewInfo",
    "Date",
    "NotionUser",
    "Page",
    "TextSpan",
    "text_spans_to_string",
]
