#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/serialization.py
"""Build pages from plain dict / JSON data.

The loader that fetches pages from the service (or a cache) is a separate
concern; this module accepts the data it produces in a simple JSON shape::

    {
        "id": "3b617da4-0945-4a52-bc3a-920ba8832bf7",
        "root": {
            "id": "3b617da4-0945-4a52-bc3a-920ba8832bf7",
            "type": "page",
            "title": [["Employee Handbook"]],
            "format": {"page_icon": "📘"},
            "content": [
                {"id": "...", "type": "text", "title": [["Hello ", [["b"]]]]}
            ]
        },
        "users": {"<user id>": {"given_name": "Ada", "family_name": "Lovelace"}},
        "collections": {"<collection id>": {"name": "Tasks", "schema": {...}}}
    }

Rich text (``title``, ``inline_content``, ``caption`` and collection row
values) uses the service's token-array encoding. Block titles and captions are
decoded here through :func:`~notion2html.parsers.inline.parse_text_spans`;
row values stay raw and are decoded when the table is rendered.

Examples
--------
    >>> page = page_from_json(json_str)
    >>> page.root.title
    'Employee Handbook'

"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from notion2html.ast.nodes import (
    Block,
    Collection,
    CollectionColumn,
    CollectionRow,
    CollectionView,
    CollectionViewInfo,
    NotionUser,
    Page,
)
from notion2html.ast.spans import text_spans_to_string
from notion2html.exceptions import ParsingError
from notion2html.parsers.inline import parse_text_spans

_PARSING_STAGE = "page_data"


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ParsingError(f"{what} must be an object, got {type(data).__name__}", parsing_stage=_PARSING_STAGE)
    return data


def _require_str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ParsingError(f"{what} is missing a '{key}' string", parsing_stage=_PARSING_STAGE)
    return value


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParsingError(f"field '{key}' must be a string, got {type(value).__name__}", parsing_stage=_PARSING_STAGE)
    return value


def user_from_dict(user_id: str, data: Mapping[str, Any]) -> NotionUser:
    data = _require_mapping(data, f"user {user_id}")
    return NotionUser(
        id=user_id,
        given_name=_str_field(data, "given_name"),
        family_name=_str_field(data, "family_name"),
        email=_str_field(data, "email"),
    )


def collection_from_dict(collection_id: str, data: Mapping[str, Any]) -> Collection:
    """Build a collection; ``schema`` maps column keys to ``{"name", "type"}``."""
    data = _require_mapping(data, f"collection {collection_id}")
    schema: dict[str, CollectionColumn] = {}
    for key, column in _require_mapping(data.get("schema") or {}, "collection schema").items():
        column = _require_mapping(column, f"schema column '{key}'")
        schema[key] = CollectionColumn(name=_str_field(column, "name"), type=_str_field(column, "type") or "text")
    return Collection(
        id=collection_id,
        name=_str_field(data, "name"),
        icon=_str_field(data, "icon"),
        schema=schema,
    )


def _view_info_from_dict(data: Mapping[str, Any]) -> CollectionViewInfo:
    data = _require_mapping(data, "collection view info")
    collection_data = _require_mapping(data.get("collection"), "collection")
    collection = collection_from_dict(_require_str(collection_data, "id", "collection"), collection_data)

    view_data = _require_mapping(data.get("view"), "collection view")
    columns = view_data.get("columns")
    if columns is not None and not (isinstance(columns, list) and all(isinstance(c, str) for c in columns)):
        raise ParsingError("collection view 'columns' must be a list of strings", parsing_stage=_PARSING_STAGE)
    view = CollectionView(
        id=_require_str(view_data, "id", "collection view"),
        collection_id=_str_field(view_data, "collection_id") or collection.id,
        type=_str_field(view_data, "type") or "table",
        columns=columns,
    )

    rows = []
    for row_data in data.get("rows") or []:
        row_data = _require_mapping(row_data, "collection row")
        rows.append(
            CollectionRow(
                id=_require_str(row_data, "id", "collection row"),
                properties=dict(_require_mapping(row_data.get("properties") or {}, "row properties")),
            )
        )
    return CollectionViewInfo(view=view, collection=collection, rows=rows)


def block_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[Block]:
    """Build a block and its subtree.

    Parameters
    ----------
    data : dict or None
        Block data. None (a block that could not be loaded) gives None.

    Returns
    -------
    Block or None
        The block, with children built recursively

    Raises
    ------
    ParsingError
        If a required field is missing or has the wrong type
    DecodeError
        If a title or caption is not a valid token array

    """
    if data is None:
        return None
    data = _require_mapping(data, "block")
    block_id = _require_str(data, "id", "block")
    block_type = _require_str(data, "type", f"block {block_id}")

    raw_title = data.get("title")
    inline_content = parse_text_spans(data.get("inline_content"))
    if isinstance(raw_title, list):
        if not inline_content:
            inline_content = parse_text_spans(raw_title)
        title = text_spans_to_string(parse_text_spans(raw_title))
    elif raw_title is None:
        title = text_spans_to_string(inline_content)
    else:
        title = _str_field(data, "title")

    raw_caption = data.get("caption")
    caption = parse_text_spans(raw_caption) if raw_caption is not None else None

    content = data.get("content") or []
    if not isinstance(content, list):
        raise ParsingError(f"block {block_id} 'content' must be a list", parsing_stage=_PARSING_STAGE)

    file_ids = data.get("file_ids") or []
    if not isinstance(file_ids, list):
        raise ParsingError(f"block {block_id} 'file_ids' must be a list", parsing_stage=_PARSING_STAGE)

    return Block(
        id=block_id,
        type=block_type,
        content=[block_from_dict(child) for child in content],  # type: ignore[misc]
        title=title,
        inline_content=inline_content,
        format=dict(_require_mapping(data.get("format") or {}, f"block {block_id} format")),
        file_ids=[str(file_id) for file_id in file_ids],
        source=_str_field(data, "source"),
        link=_str_field(data, "link"),
        code=_str_field(data, "code"),
        code_language=_str_field(data, "code_language"),
        is_checked=bool(data.get("is_checked", False)),
        caption=caption,
        collection_id=_str_field(data, "collection_id"),
        collection_views=[_view_info_from_dict(info) for info in data.get("collection_views") or []],
    )


def page_from_dict(data: Mapping[str, Any]) -> Page:
    """Build a page from its dict representation.

    ``id`` defaults to the root block id.

    Raises
    ------
    ParsingError
        If the data does not have the expected shape
    DecodeError
        If a title or caption is not a valid token array

    """
    data = _require_mapping(data, "page")
    root = block_from_dict(_require_mapping(data.get("root"), "page root"))
    assert root is not None

    users = {
        user_id: user_from_dict(user_id, user)
        for user_id, user in _require_mapping(data.get("users") or {}, "users").items()
    }
    collections = {
        collection_id: collection_from_dict(collection_id, collection)
        for collection_id, collection in _require_mapping(data.get("collections") or {}, "collections").items()
    }
    return Page(id=_str_field(data, "id") or root.id, root=root, users=users, collections=collections)


def page_from_json(json_str: str) -> Page:
    """Build a page from a JSON string.

    Raises
    ------
    ParsingError
        If the string is not valid JSON or does not describe a page

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid page JSON: {e}", parsing_stage=_PARSING_STAGE, original_error=e) from e
    return page_from_dict(data)
