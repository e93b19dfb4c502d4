#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/collection.py
"""Rendering of inline collection views (databases) as HTML tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notion2html.ast.nodes import Block, Collection, CollectionColumn, CollectionRow, CollectionViewInfo
from notion2html.ast.spans import TextSpan, text_spans_to_string
from notion2html.constants import UNTITLED
from notion2html.parsers.inline import parse_text_spans
from notion2html.utils.escape import escape_html
from notion2html.utils.ids import to_no_dash_id
from notion2html.utils.paths import title_column_url

if TYPE_CHECKING:
    from notion2html.renderers.html import HtmlConverter

logger = logging.getLogger(__name__)


class CollectionTableRenderer:
    """Render the first view of a collection view block as a table.

    Parameters
    ----------
    converter : HtmlConverter
        Converter whose buffers, page and inline renderer are used

    Notes
    -----
    Cell values are stored as raw rich-text token arrays and decoded here;
    a malformed value raises :class:`~notion2html.exceptions.DecodeError`.

    """

    def __init__(self, converter: HtmlConverter):
        self.converter = converter

    def render(self, block: Block) -> None:
        page_id = to_no_dash_id(self.converter.page.id)
        if not block.collection_views:
            logger.info("Missing collection views for block %s %s in page %s", block.id, block.type, page_id)
            return

        info = block.collection_views[0]
        columns = info.view.columns
        if columns is None:
            logger.info("Missing table format for view of block %s %s in page %s", block.id, block.type, page_id)
            return

        write = self.converter.write
        write(f'<div id="{block.id}" class="collection-content">')
        write(f'<h4 class="collection-title">{escape_html(info.collection.name)}</h4>')
        write('<table class="collection-content">')
        self._render_head(info, columns)
        write("<tbody>")
        for row in info.rows:
            self._render_row(block, info, columns, row)
        write("</tbody>")
        write("</table>")
        write("</div>")

    def _render_head(self, info: CollectionViewInfo, columns: list[str]) -> None:
        write = self.converter.write
        write("<thead>")
        write("<tr>")
        for key in columns:
            column = info.collection.schema.get(key)
            name = escape_html(column.name) if column is not None else ""
            write(f"<th>{name}</th>")
        write("</tr>")
        write("</thead>")

    def _render_row(self, block: Block, info: CollectionViewInfo, columns: list[str], row: CollectionRow) -> None:
        write = self.converter.write
        write(f'<tr id="{row.id}">')
        for key in columns:
            spans = parse_text_spans(row.properties.get(key))
            column = info.collection.schema.get(key) or CollectionColumn(name="")
            value = self.render_cell(block, info.collection, column, spans)
            write(f'<td class="cell-{escape_html(key)}">{value}</td>')
        write("</tr>\n")

    def render_cell(self, block: Block, collection: Collection, column: CollectionColumn, spans: list[TextSpan]) -> str:
        """Render the contents of one table cell.

        Parameters
        ----------
        block : Block
            The collection view block, used to compute row page paths
        collection : Collection
            Collection the row belongs to
        column : CollectionColumn
            Schema entry of the cell's column
        spans : list of TextSpan
            Decoded cell value

        Returns
        -------
        str
            Cell HTML without the ``<td>`` wrapper

        """
        converter = self.converter
        converter.buffers.push()
        converter.write_spans(spans)
        value = converter.buffers.pop()

        if column.type == "title":
            row_title = spans[0].text if spans else ""
            uri = converter.rewrite_url(title_column_url(converter.page, block, collection, row_title))
            return f'<a href="{escape_html(uri)}">{value or UNTITLED}</a>'

        if column.type == "multi_select":
            # Displayed in reverse order of the stored value
            parts = text_spans_to_string(spans).split(",")
            return "".join(
                f'<span class="selected-value">{escape_html(part)}</span>' for part in reversed(parts) if part
            )

        return value
