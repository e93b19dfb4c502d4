"""Test utilities for the notion2html test suite.

Helpers for building small block trees and pages without going through the
JSON loader.
"""

from __future__ import annotations

from typing import Any, Optional

from notion2html.ast.nodes import Block, Collection, NotionUser, Page
from notion2html.ast.spans import TextSpan
from notion2html.parsers.inline import parse_text_spans

ROOT_ID = "3b617da4-0945-4a52-bc3a-920ba8832bf7"


def spans(*raw: Any) -> list[TextSpan]:
    """Decode token elements, e.g. ``spans(["Hello "], ["world", [["b"]]])``."""
    return parse_text_spans(list(raw))


def text(value: str) -> list[TextSpan]:
    return [TextSpan(value)]


def make_block(block_id: str, block_type: str, title: str = "", children: Optional[list] = None, **kwargs: Any) -> Block:
    """Build a block whose inline content is the plain ``title`` unless given."""
    kwargs.setdefault("inline_content", text(title) if title else [])
    return Block(id=block_id, type=block_type, title=title, content=children or [], **kwargs)


def make_page(
    children: Optional[list] = None,
    title: str = "Root Page",
    users: Optional[dict[str, NotionUser]] = None,
    collections: Optional[dict[str, Collection]] = None,
    **root_kwargs: Any,
) -> Page:
    root = make_block(ROOT_ID, "page", title, children, **root_kwargs)
    return Page(id=ROOT_ID, root=root, users=users or {}, collections=collections or {})


def page_body(html: str) -> str:
    """Return what is inside ``<div class="page-body">`` of a rendered fragment."""
    start = html.index('<div class="page-body">') + len('<div class="page-body">')
    end = html.rindex("</div></article>")
    return html[start:end]
