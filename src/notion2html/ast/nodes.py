#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/nodes.py
"""Block tree classes for page representation.

This module defines the in-memory tree that the HTML converter walks. A
:class:`Page` wraps a root :class:`Block`; every block owns an ordered list of
child blocks, so the tree is a strict hierarchy.

Blocks do not hold a reference to their parent. The page builds an id index
and a parent index from the tree structure on first use, and parent or
ancestor lookups go through it. The tree is assumed to be acyclic; no cycle
detection is done.

Tabular data lives in :class:`Collection` (schema), :class:`CollectionView`
(visible columns) and :class:`CollectionRow` (raw cell values), tied together
per block by :class:`CollectionViewInfo`.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from notion2html.ast.spans import TextSpan
from notion2html.utils.ids import to_dash_id, to_no_dash_id


class BlockType(str, Enum):
    """Closed set of block type tags known to the converter."""

    PAGE = "page"
    TEXT = "text"
    EQUATION = "equation"
    NUMBERED_LIST = "numbered_list"
    BULLETED_LIST = "bulleted_list"
    HEADER = "header"
    SUB_HEADER = "sub_header"
    SUB_SUB_HEADER = "sub_sub_header"
    TODO = "to_do"
    TOGGLE = "toggle"
    QUOTE = "quote"
    DIVIDER = "divider"
    CODE = "code"
    BOOKMARK = "bookmark"
    IMAGE = "image"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    COLLECTION_VIEW = "collection_view"
    COLLECTION_VIEW_PAGE = "collection_view_page"
    EMBED = "embed"
    GIST = "gist"
    MAPS = "maps"
    CODEPEN = "codepen"
    TWEET = "tweet"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    DRIVE = "drive"
    FIGMA = "figma"
    PDF = "pdf"
    CALLOUT = "callout"
    TABLE_OF_CONTENTS = "table_of_contents"
    BREADCRUMB = "breadcrumb"
    FACTORY = "factory"


HEADER_BLOCK_TYPES = (BlockType.HEADER, BlockType.SUB_HEADER, BlockType.SUB_SUB_HEADER)


@dataclass
class NotionUser:
    """A user that can be referenced from ``u`` attributes."""

    id: str
    given_name: str = ""
    family_name: str = ""
    email: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.given_name} {self.family_name}".strip()


@dataclass
class CollectionColumn:
    """Schema entry for one collection column.

    Parameters
    ----------
    name : str
        Display name
    type : str
        Declared type, e.g. ``title``, ``text``, ``multi_select``

    """

    name: str
    type: str = "text"


@dataclass
class Collection:
    """Schema-described tabular data source.

    Parameters
    ----------
    id : str
        Collection identifier
    name : str, default ""
        Display name
    icon : str, default ""
        Icon URL or emoji
    schema : dict, default empty
        Ordered mapping from column key to :class:`CollectionColumn`

    """

    id: str
    name: str = ""
    icon: str = ""
    schema: dict[str, CollectionColumn] = field(default_factory=dict)


@dataclass
class CollectionView:
    """One visible arrangement of a collection.

    ``columns`` is None when the view carries no table format, which the
    renderer treats as nothing to show.
    """

    id: str
    collection_id: str = ""
    type: str = "table"
    columns: Optional[list[str]] = None


@dataclass
class CollectionRow:
    """A row: column key to raw (unparsed) inline token value."""

    id: str
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class CollectionViewInfo:
    """A view together with the collection it shows and its rows."""

    view: CollectionView
    collection: Collection
    rows: list[CollectionRow] = field(default_factory=list)


@dataclass(eq=False)
class Block:
    """A node of the page tree.

    Parameters
    ----------
    id : str
        Stable identifier
    type : str
        Type tag; known tags are the :class:`BlockType` values
    content : list of Block, default empty
        Children in document order
    title : str, default ""
        Plain title text
    inline_content : list of TextSpan, default empty
        Body rich text
    format : dict, default empty
        Free-form formatting properties (``page_icon``, ``block_color``,
        ``column_ratio``, ``drive_properties`` ...)
    file_ids : list of str, default empty
        Attached uploaded files, for media blocks
    source : str, default ""
        Source URI, for media and embed blocks
    link : str, default ""
        Target URI, for bookmarks
    code : str, default ""
        Code text, for code blocks
    code_language : str, default ""
        Language name, for code blocks
    is_checked : bool, default False
        Checked state, for to-do blocks
    caption : list of TextSpan or None, default None
        Caption rich text, for media blocks
    collection_id : str, default ""
        Referenced collection, for collection view pages
    collection_views : list of CollectionViewInfo, default empty
        Associated views, for collection view blocks

    """

    id: str
    type: str
    content: list[Block] = field(default_factory=list)
    title: str = ""
    inline_content: list[TextSpan] = field(default_factory=list)
    format: dict[str, Any] = field(default_factory=dict)
    file_ids: list[str] = field(default_factory=list)
    source: str = ""
    link: str = ""
    code: str = ""
    code_language: str = ""
    is_checked: bool = False
    caption: Optional[list[TextSpan]] = None
    collection_id: str = ""
    collection_views: list[CollectionViewInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Known tags are stored as plain strings
        if isinstance(self.type, BlockType):
            self.type = self.type.value

    def format_value(self, path: str, default: Any = None) -> Any:
        """Look up a format property by dotted path.

        Examples
        --------
            >>> block = Block(id="b", type="drive", format={"drive_properties": {"url": "u"}})
            >>> block.format_value("drive_properties.url")
            'u'

        """
        value: Any = self.format
        for key in path.split("."):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def format_str(self, path: str) -> str:
        """Like :meth:`format_value` but returns ``""`` for missing or non-string values."""
        value = self.format_value(path)
        return value if isinstance(value, str) else ""

    def iter_blocks(self) -> Iterator[Block]:
        """Yield this block and all descendants depth-first, in document order."""
        stack: list[Block] = [self]
        while stack:
            block = stack.pop()
            yield block
            stack.extend(reversed([child for child in block.content if child is not None]))


@dataclass(eq=False)
class Page:
    """A page: the root block plus lookup indices.

    Parameters
    ----------
    id : str
        Page identifier (same as the root block id)
    root : Block
        Root block, of type ``page``
    users : dict, default empty
        User id to :class:`NotionUser`
    collections : dict, default empty
        Collection id to :class:`Collection`

    """

    id: str
    root: Block
    users: dict[str, NotionUser] = field(default_factory=dict)
    collections: dict[str, Collection] = field(default_factory=dict)
    _blocks: Optional[dict[str, Block]] = field(default=None, init=False, repr=False)
    _parents: Optional[dict[str, Block]] = field(default=None, init=False, repr=False)

    def _build_index(self) -> None:
        blocks: dict[str, Block] = {}
        parents: dict[str, Block] = {}
        for block in self.root.iter_blocks():
            block_id = to_dash_id(block.id)
            blocks[block_id] = block
            for child in block.content:
                if child is not None:
                    parents[to_dash_id(child.id)] = block
        self._blocks = blocks
        self._parents = parents

    def reindex(self) -> None:
        """Drop the lookup indices so they are rebuilt from the current tree."""
        self._blocks = None
        self._parents = None

    def block_by_id(self, block_id: str) -> Optional[Block]:
        """Return the block with the given id (dashed or not), or None."""
        if self._blocks is None:
            self._build_index()
        assert self._blocks is not None
        return self._blocks.get(to_dash_id(block_id))

    def parent_of(self, block: Block) -> Optional[Block]:
        """Return the parent of ``block`` within this page, or None."""
        if self._parents is None:
            self._build_index()
        assert self._parents is not None
        return self._parents.get(to_dash_id(block.id))

    def ancestors(self, block: Block) -> list[Block]:
        """Return the ancestors of ``block``, nearest first."""
        result = []
        parent = self.parent_of(block)
        while parent is not None:
            result.append(parent)
            parent = self.parent_of(parent)
        return result

    def is_root(self, block: Block) -> bool:
        return block is self.root or to_dash_id(block.id) == to_dash_id(self.root.id)

    def is_sub_page(self, block: Block) -> bool:
        """Whether a page block is a child page of this page.

        The alternative is a link to a page that lives elsewhere. Walks up the
        parents until it meets this page's root (sub-page) or another page
        (link).
        """
        for parent in self.ancestors(block):
            if self.is_root(parent):
                return True
            if parent.type == BlockType.PAGE:
                return False
        return False

    def user_name(self, user_id: str) -> Optional[str]:
        user = self.users.get(user_id)
        if user is None:
            return None
        return user.display_name

    def collection_by_id(self, collection_id: str) -> Optional[Collection]:
        """Return a collection by id, looking at block views too."""
        wanted = to_dash_id(collection_id)
        for key, collection in self.collections.items():
            if to_dash_id(key) == wanted:
                return collection
        for block in self.root.iter_blocks():
            for info in block.collection_views:
                if to_dash_id(info.collection.id) == wanted:
                    return info.collection
        return None

    @property
    def notion_url(self) -> str:
        return "https://www.notion.so/" + to_no_dash_id(self.id)
