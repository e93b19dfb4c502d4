#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/paths.py
"""Output-location helpers.

Pages are exported as a directory tree named after page titles: a sub-page
``Child`` of ``Root`` lives at ``Root/Child.html`` and a file uploaded to a
block in ``Child`` is stored as ``Root/Child/<block title>/<file name>``.
These functions compute those relative paths. Ancestor chains are taken from
the :class:`~notion2html.ast.nodes.Page` parent index.
"""

from __future__ import annotations

import re

from notion2html.ast.nodes import Block, BlockType, Collection, Page
from notion2html.constants import (
    BUILTIN_COVER_HOST,
    BUILTIN_COVER_PATH_PREFIX,
    PUBLIC_COVER_URL_PREFIXES,
    SECURE_FILE_URL_PREFIX,
    UNTITLED,
    UNTITLED_DATABASE,
)

_UNSAFE_CHARS_RE = re.compile(r"[^0-9A-Za-z]")
_MULTI_SPACE_RE = re.compile(r" {2,}")


def safe_name(text: str) -> str:
    """Return a file-system safe version of ``text``.

    Every character outside ``[0-9A-Za-z]`` becomes a space, runs of spaces
    collapse to one, and leading/trailing spaces are dropped.

    Examples
    --------
        >>> safe_name("Tom's  Notes: 2019!")
        'Tom s Notes 2019'

    """
    result = _UNSAFE_CHARS_RE.sub(" ", text)
    result = _MULTI_SPACE_RE.sub(" ", result)
    return result.strip(" ")


def url_base_name(uri: str) -> str:
    """Return the last ``/``-separated component of a URI."""
    return uri.split("/")[-1]


def html_file_name(title: str) -> str:
    return safe_name(title) + ".html"


def _page_titles(page: Page, block: Block) -> list[str]:
    """Safe titles of the page-type ancestors of ``block``, outermost first."""
    titles = [safe_name(parent.title) for parent in page.ancestors(block) if parent.type == BlockType.PAGE]
    titles.reverse()
    return titles


def _join(prefix: list[str], name: str) -> str:
    return "/".join(prefix + [name])


def file_path_for_page(page: Page, block: Block) -> str:
    """Relative path of the HTML file for a page block."""
    return _join(_page_titles(page, block), html_file_name(block.title))


def file_path_for_collection(page: Page, collection: Collection) -> str:
    """Relative path of the HTML file for a full-page collection."""
    return safe_name(page.root.title) + "/" + html_file_name(collection.name)


def collection_file_name(page: Page, collection: Collection, uri: str) -> str:
    """Relative path of a file (e.g. the icon) downloaded for a collection."""
    return safe_name(page.root.title) + "/" + safe_name(collection.name) + "/" + url_base_name(uri)


def title_column_url(page: Page, block: Block, collection: Collection, row_title: str) -> str:
    """Relative path of a collection row's own page.

    Parameters
    ----------
    page : Page
        Page containing the collection view block
    block : Block
        The collection view block
    collection : Collection
        Collection the row belongs to
    row_title : str
        Plain text of the row's title cell

    """
    name = html_file_name(row_title or UNTITLED)
    collection_name = collection.name or UNTITLED_DATABASE
    return _join(_page_titles(page, block), safe_name(collection_name) + "/" + name)


def page_cover_path(block: Block, uri: str) -> str:
    """Map a page cover URL to the URL or local path used in the output.

    Covers hosted on well-known public hosts are kept as-is and the
    service's built-in covers get an absolute URL. Anything else is
    assumed downloaded next to the page.
    """
    if uri.startswith(PUBLIC_COVER_URL_PREFIXES):
        return uri
    if uri.startswith(BUILTIN_COVER_PATH_PREFIX):
        return BUILTIN_COVER_HOST + uri
    return safe_name(block.title) + "/" + url_base_name(uri)


def downloaded_file_name(page: Page, block: Block, uri: str) -> str:
    """Local path for a file uploaded to a block, or ``uri`` if not an upload.

    Only files stored on the service's secure file host are downloaded. The
    path is the block's page ancestry, then the block title (except for file
    blocks), then the file name.
    """
    if not uri.startswith(SECURE_FILE_URL_PREFIX):
        return uri
    name = url_base_name(uri)
    if block.type != BlockType.FILE:
        name = safe_name(block.title) + "/" + name
    result = _join(_page_titles(page, block), name)
    while "//" in result:
        result = result.replace("//", "/")
    return result


def file_or_source_url(page: Page, block: Block) -> str:
    """Source URI of a media block, local when the block has downloaded files."""
    if block.file_ids:
        return downloaded_file_name(page, block, block.source)
    return block.source


def is_url(uri: str) -> bool:
    return uri.startswith(("http://", "https://"))
