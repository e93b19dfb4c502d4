#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_serialization.py
"""Unit tests for building pages from dict and JSON data."""

import json

import pytest
from utils import ROOT_ID

from notion2html.ast.nodes import BlockType
from notion2html.ast.serialization import block_from_dict, collection_from_dict, page_from_dict, page_from_json
from notion2html.ast.spans import AttrType, TextSpan
from notion2html.exceptions import DecodeError, ParsingError

PAGE_DATA = {
    "root": {
        "id": ROOT_ID,
        "type": "page",
        "title": [["Employee Handbook"]],
        "format": {"page_icon": "📘"},
        "content": [
            {"id": "p1", "type": "text", "title": [["Hello ", [["b"]]], ["world"]]},
            {"id": "img", "type": "image", "source": "https://example.com/a.png", "caption": [["Figure 1"]]},
            None,
            {
                "id": "cv",
                "type": "collection_view",
                "collection_views": [
                    {
                        "view": {"id": "v1", "columns": ["title"]},
                        "collection": {"id": "c1", "name": "Tasks", "schema": {"title": {"name": "Name", "type": "title"}}},
                        "rows": [{"id": "r1", "properties": {"title": [["Row"]]}}],
                    }
                ],
            },
        ],
    },
    "users": {"u1": {"given_name": "Ada", "family_name": "Lovelace"}},
    "collections": {"c2": {"name": "Other", "icon": "🗂"}},
}


@pytest.mark.unit
class TestPageFromDict:
    """Tests for page_from_dict and page_from_json."""

    def test_page(self):
        """Test the root block, users and collections are built."""
        page = page_from_dict(PAGE_DATA)
        assert page.id == ROOT_ID
        assert page.root.type == BlockType.PAGE
        assert page.root.title == "Employee Handbook"
        assert page.root.format_str("page_icon") == "📘"
        assert page.user_name("u1") == "Ada Lovelace"
        assert page.collections["c2"].icon == "🗂"

    def test_children(self):
        """Test children keep order, including unloaded ones."""
        page = page_from_dict(PAGE_DATA)
        content = page.root.content
        assert [child.id if child else None for child in content] == ["p1", "img", None, "cv"]
        assert content[0].title == "Hello world"
        assert [span.text for span in content[0].inline_content] == ["Hello ", "world"]
        assert content[0].inline_content[0].attrs[0].type is AttrType.BOLD
        assert content[1].caption == [TextSpan("Figure 1")]

    def test_collection_view(self):
        """Test collection views keep raw row values."""
        info = page_from_dict(PAGE_DATA).root.content[3].collection_views[0]
        assert info.view.columns == ["title"]
        assert info.view.collection_id == "c1"
        assert info.collection.schema["title"].type == "title"
        assert info.rows[0].properties == {"title": [["Row"]]}

    def test_block_lookup(self):
        """Test the page index finds nested blocks and parents."""
        page = page_from_dict(PAGE_DATA)
        image = page.block_by_id("img")
        assert image is not None
        assert page.parent_of(image) is page.root
        assert page.collection_by_id("c1").name == "Tasks"

    def test_explicit_id(self):
        """Test an explicit page id wins over the root id."""
        page = page_from_dict({"id": "other", "root": {"id": ROOT_ID, "type": "page"}})
        assert page.id == "other"

    def test_from_json(self):
        """Test JSON input."""
        page = page_from_json(json.dumps(PAGE_DATA))
        assert page.root.title == "Employee Handbook"

    def test_invalid_json(self):
        """Test malformed JSON is a parsing error."""
        with pytest.raises(ParsingError) as exc_info:
            page_from_json("{not json")
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)
        assert exc_info.value.parsing_stage == "page_data"

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {},
            {"root": "page"},
            {"root": {"type": "page"}},
            {"root": {"id": ROOT_ID}},
            {"root": {"id": ROOT_ID, "type": "page", "content": "x"}},
            {"root": {"id": ROOT_ID, "type": "page"}, "users": ["u1"]},
        ],
    )
    def test_bad_shapes(self, data):
        """Test data with the wrong shape."""
        with pytest.raises(ParsingError):
            page_from_dict(data)


@pytest.mark.unit
class TestBlockFromDict:
    """Tests for block_from_dict."""

    def test_none(self):
        """Test None stands for an unloaded block."""
        assert block_from_dict(None) is None

    def test_string_title(self):
        """Test a plain string title with separate inline content."""
        block = block_from_dict({"id": "b", "type": "header", "title": "Plain", "inline_content": [["Rich", [["i"]]]]})
        assert block.title == "Plain"
        assert block.inline_content[0].attrs[0].type is AttrType.ITALIC

    def test_title_from_inline_content(self):
        """Test the plain title is derived from inline content."""
        block = block_from_dict({"id": "b", "type": "text", "inline_content": [["A"], ["B", [["b"]]]]})
        assert block.title == "AB"

    def test_unknown_type_kept(self):
        """Test unknown type tags are kept for the renderer to handle."""
        assert block_from_dict({"id": "b", "type": "mystery"}).type == "mystery"

    def test_fields(self):
        """Test the remaining scalar fields."""
        block = block_from_dict(
            {
                "id": "b",
                "type": "to_do",
                "is_checked": True,
                "code": "x = 1",
                "code_language": "Python",
                "file_ids": ["f1"],
                "link": "https://example.com",
            }
        )
        assert block.is_checked is True
        assert block.code == "x = 1"
        assert block.code_language == "Python"
        assert block.file_ids == ["f1"]
        assert block.link == "https://example.com"
        assert block.caption is None

    def test_malformed_title(self):
        """Test malformed rich text surfaces as DecodeError."""
        with pytest.raises(DecodeError):
            block_from_dict({"id": "b", "type": "text", "title": [["x", [["q"]]]]})

    def test_non_string_field(self):
        """Test a string field of the wrong type."""
        with pytest.raises(ParsingError, match="source"):
            block_from_dict({"id": "b", "type": "image", "source": 5})

    def test_bad_view_columns(self):
        """Test view columns must be strings."""
        data = {
            "id": "b",
            "type": "collection_view",
            "collection_views": [{"view": {"id": "v", "columns": [1]}, "collection": {"id": "c"}}],
        }
        with pytest.raises(ParsingError, match="columns"):
            block_from_dict(data)


@pytest.mark.unit
class TestCollectionFromDict:
    """Tests for collection_from_dict."""

    def test_schema_order_and_default_type(self):
        """Test the schema keeps its order and defaults to text columns."""
        collection = collection_from_dict("c", {"name": "N", "schema": {"b": {"name": "B"}, "a": {"name": "A", "type": "title"}}})
        assert list(collection.schema) == ["b", "a"]
        assert collection.schema["b"].type == "text"
        assert collection.schema["a"].type == "title"
