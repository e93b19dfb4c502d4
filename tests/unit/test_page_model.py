#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_page_model.py
"""Unit tests for blocks, pages, spans and the exception hierarchy."""

import pytest
from utils import ROOT_ID, make_block, make_page

from notion2html.ast.nodes import Block, BlockType, Collection, CollectionView, CollectionViewInfo, NotionUser
from notion2html.ast.spans import Attribute, AttrType, Date, TextSpan, text_spans_to_string
from notion2html.exceptions import (
    ConfigurationError,
    DecodeError,
    InvalidOptionsError,
    Notion2HtmlError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedBlockError,
    ValidationError,
)

CHILD_ID = "5a0b8a52-8f5e-4f39-9d5e-0b7a9b8f2c11"


@pytest.mark.unit
class TestBlock:
    """Tests for Block."""

    def test_enum_type_stored_as_string(self):
        """Test a BlockType tag is normalised to its string value."""
        block = Block(id="b", type=BlockType.TOGGLE)
        assert block.type == "toggle"
        assert type(block.type) is str

    def test_format_value(self):
        """Test dotted format lookups."""
        block = make_block("d", "drive", format={"drive_properties": {"url": "u"}, "block_width": 10})
        assert block.format_value("drive_properties.url") == "u"
        assert block.format_value("drive_properties.missing", "x") == "x"
        assert block.format_value("block_width.inner") is None
        assert block.format_str("block_width") == ""

    def test_iter_blocks_document_order(self):
        """Test depth-first iteration in document order, skipping None."""
        root = make_block("r", "page", children=[make_block("a", "text", children=[make_block("b", "text")]), None, make_block("c", "text")])
        assert [block.id for block in root.iter_blocks()] == ["r", "a", "b", "c"]


@pytest.mark.unit
class TestPage:
    """Tests for Page lookups."""

    def test_block_by_id_either_spelling(self):
        """Test lookups accept dashed and plain ids."""
        child = make_block(CHILD_ID, "text", "Hi")
        page = make_page([child])
        assert page.block_by_id(CHILD_ID) is child
        assert page.block_by_id(CHILD_ID.replace("-", "")) is child
        assert page.block_by_id("missing") is None

    def test_parents_and_ancestors(self):
        """Test the parent index."""
        leaf = make_block("leaf", "text")
        toggle = make_block("t", "toggle", children=[leaf])
        page = make_page([toggle])
        assert page.parent_of(leaf) is toggle
        assert page.ancestors(leaf) == [toggle, page.root]
        assert page.parent_of(page.root) is None

    def test_reindex(self):
        """Test blocks added after the first lookup are found after reindex."""
        page = make_page()
        assert page.block_by_id("late") is None
        page.root.content.append(make_block("late", "text"))
        page.reindex()
        assert page.block_by_id("late") is not None

    def test_sub_page_vs_link(self):
        """Test a page under the root is a sub-page, a page under another page is not."""
        nested = make_block("nested", "page", "Nested")
        child = make_block("child", "page", "Child", [nested])
        page = make_page([make_block("t", "toggle", children=[child])])
        assert page.is_sub_page(child)
        assert not page.is_sub_page(nested)
        assert page.is_root(page.root)

    def test_user_name(self):
        """Test user name resolution."""
        page = make_page(users={"u": NotionUser(id="u", given_name="Grace", family_name="Hopper")})
        assert page.user_name("u") == "Grace Hopper"
        assert page.user_name("x") is None

    def test_collection_by_id_from_views(self):
        """Test collections referenced only from a view are found."""
        info = CollectionViewInfo(view=CollectionView(id="v"), collection=Collection(id="c9", name="Inline"))
        page = make_page([make_block("cv", "collection_view", collection_views=[info])])
        assert page.collection_by_id("c9").name == "Inline"
        assert page.collection_by_id("nope") is None

    def test_notion_url(self):
        """Test the page URL uses the plain id."""
        assert make_page().notion_url == "https://www.notion.so/" + ROOT_ID.replace("-", "")


@pytest.mark.unit
class TestSpans:
    """Tests for TextSpan and Attribute."""

    def test_payload_checks(self):
        """Test attribute payloads must match their kind."""
        with pytest.raises(TypeError):
            Attribute(AttrType.BOLD, "x")
        with pytest.raises(TypeError):
            Attribute(AttrType.LINK)
        with pytest.raises(TypeError):
            Attribute(AttrType.DATE, "2019-01-01")
        assert Attribute("b").type is AttrType.BOLD

    def test_get_returns_last(self):
        """Test get returns the last attribute of a kind."""
        span = TextSpan("x", (Attribute.link("a"), Attribute.bold(), Attribute.link("b")))
        assert span.get(AttrType.LINK).value == "b"
        assert span.get(AttrType.ITALIC) is None

    def test_is_plain(self):
        """Test plain detection."""
        assert TextSpan("x").is_plain
        assert TextSpan("x", (Attribute.comment("c"),)).is_plain
        assert not TextSpan("x", (Attribute.date(Date(start_date="2020-01-01")),)).is_plain

    def test_attrs_become_tuple(self):
        """Test attribute lists are frozen into tuples."""
        span = TextSpan("x", [Attribute.italic()])  # type: ignore[arg-type]
        assert span.attrs == (Attribute.italic(),)

    def test_text_spans_to_string(self):
        """Test plain text concatenation."""
        assert text_spans_to_string([TextSpan("a", (Attribute.bold(),)), TextSpan("b")]) == "ab"


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error,parent",
        [
            (ConfigurationError("x"), ValidationError),
            (InvalidOptionsError("html", int, str), ValidationError),
            (DecodeError("x"), ParsingError),
            (UnsupportedBlockError("mystery"), RenderingError),
            (OutputWriteError("out.html"), RenderingError),
        ],
    )
    def test_hierarchy(self, error, parent):
        """Test each error is catchable by its parent and the base class."""
        assert isinstance(error, parent)
        assert isinstance(error, Notion2HtmlError)

    def test_default_messages(self):
        """Test generated messages."""
        assert str(UnsupportedBlockError("mystery", block_id="b1")) == "Unsupported block type 'mystery' (block b1)"
        assert str(InvalidOptionsError("html", int, str)) == "html expected options of type 'int' but received 'str'."
        assert str(OutputWriteError("out.html")) == "Failed to write output to: out.html"

    def test_original_error_kept(self):
        """Test wrapped errors are kept."""
        cause = OSError("disk full")
        assert OutputWriteError("out.html", original_error=cause).original_error is cause
