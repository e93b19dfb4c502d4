#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/__init__.py
"""notion2html - render Notion-style block pages to HTML.

A page is a tree of typed blocks (text, headers, lists, toggles, media,
columns, databases ...) whose rich text is stored in a compact token-array
encoding. notion2html decodes that encoding and walks the tree, producing HTML
that is structurally close to the service's own export.

Examples
--------
Convert a page loaded from JSON:

    >>> from notion2html import to_html
    >>> html = to_html(page_json, full_html=True)

Use the converter directly, with an override hook:

    >>> from notion2html import HtmlConverter, HtmlRendererOptions
    >>> converter = HtmlConverter(page, HtmlRendererOptions(add_header_anchor=True))
    >>> html = converter.to_html()

"""

import logging
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}. "
        "notion2html requires Python 3.10 or newer."
    )

__version__ = "1.0.0"

from notion2html.api import html_file_name_for_page, to_html
from notion2html.ast.nodes import Block, BlockType, Collection, NotionUser, Page
from notion2html.ast.serialization import page_from_dict, page_from_json
from notion2html.ast.spans import Attribute, AttrType, Date, TextSpan
from notion2html.exceptions import (
    ConfigurationError,
    DecodeError,
    DependencyError,
    ExternalToolError,
    Notion2HtmlError,
    ParsingError,
    RenderingError,
    UnsupportedBlockError,
    ValidationError,
)
from notion2html.options import HtmlRendererOptions
from notion2html.parsers.inline import parse_text_spans
from notion2html.renderers.html import HtmlConverter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "to_html",
    "html_file_name_for_page",
    "HtmlConverter",
    "HtmlRendererOptions",
    "parse_text_spans",
    "page_from_dict",
    "page_from_json",
    # Data model
    "Attribute",
    "AttrType",
    "Block",
    "BlockType",
    "Collection",
    "Date",
    "NotionUser",
    "Page",
    "TextSpan",
    # Exceptions
    "Notion2HtmlError",
    "ValidationError",
    "ConfigurationError",
    "ParsingError",
    "DecodeError",
    "RenderingError",
    "UnsupportedBlockError",
    "ExternalToolError",
    "DependencyError",
]
