#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/inline.py
"""Rendering of rich-text spans to HTML.

Each :class:`~notion2html.ast.spans.TextSpan` is rendered on its own. Its
attributes are walked in reverse: the attribute declared last ends up as the
outermost tag, so ``["x", [["b"], ["a", url]]]`` renders as
``<a href="url"><strong>x</strong></a>``.

Mentions (page, user and date attributes) replace the span text with a
rendered fragment. Comment attributes produce no markup.

"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from notion2html.ast.nodes import Page
from notion2html.ast.spans import Attribute, AttrType, Date, TextSpan
from notion2html.options.html import HtmlRendererOptions
from notion2html.utils.dates import format_date
from notion2html.utils.escape import escape_html
from notion2html.utils.ids import to_no_dash_id
from notion2html.utils.paths import safe_name

logger = logging.getLogger(__name__)

PageTitleResolver = Callable[[str], Optional[str]]

_WRAPPING_TAGS = {
    AttrType.BOLD: ("<strong>", "</strong>"),
    AttrType.ITALIC: ("<em>", "</em>"),
    AttrType.STRIKETHROUGH: ("<del>", "</del>"),
    AttrType.CODE: ("<code>", "</code>"),
}


class InlineRenderer:
    """Render text spans of one page.

    Parameters
    ----------
    page : Page
        Page being rendered, used to resolve user names and page titles
    options : HtmlRendererOptions
        Rendering options (``rewrite_url`` and ``page_url_base`` are used)
    page_title_resolver : callable, optional
        ``page_id -> title or None`` fallback for pages not found in ``page``,
        typically a lookup over related pages

    """

    def __init__(
        self,
        page: Page,
        options: HtmlRendererOptions,
        page_title_resolver: Optional[PageTitleResolver] = None,
    ):
        self.page = page
        self.options = options
        self.page_title_resolver = page_title_resolver

    def rewrite_url(self, uri: str) -> str:
        """Apply the configured URL rewrite hook to a non-empty URI."""
        if uri and self.options.rewrite_url is not None:
            return self.options.rewrite_url(uri)
        return uri

    def resolve_page_title(self, page_id: str) -> str:
        block = self.page.block_by_id(page_id)
        if block is not None:
            return block.title
        if self.page_title_resolver is not None:
            title = self.page_title_resolver(page_id)
            if title is not None:
                return title
        logger.debug("Cannot resolve title of mentioned page %s", page_id)
        return ""

    def resolve_user_name(self, user_id: str) -> str:
        name = self.page.user_name(user_id)
        if not name:
            logger.debug("Cannot resolve name of mentioned user %s", user_id)
            return user_id
        return name

    def page_url(self, page_id: str, title: str) -> str:
        """URL of a mentioned page: ``<base><Title-With-Dashes>-<id>``."""
        rel_url = to_no_dash_id(page_id)
        if title:
            rel_url = safe_name(title).replace(" ", "-") + "-" + rel_url
        return self.rewrite_url(self.options.page_url_base + rel_url)

    def render_date(self, date: Date) -> str:
        return f"<time>@{escape_html(format_date(date))}</time>"

    def render_span(self, span: TextSpan) -> str:
        """Render a single span to HTML.

        Parameters
        ----------
        span : TextSpan
            Span to render

        Returns
        -------
        str
            Escaped text wrapped in the markup of its attributes

        """
        start = ""
        close = ""
        text = span.text
        for attr in reversed(span.attrs):
            wrap = _WRAPPING_TAGS.get(attr.type)
            if wrap is not None:
                start += wrap[0]
                close = wrap[1] + close
            elif attr.type == AttrType.HIGHLIGHT:
                start += f'<mark class="highlight-{escape_html(_str_value(attr))}">'
                close = "</mark>" + close
            elif attr.type == AttrType.LINK:
                uri = self.rewrite_url(_str_value(attr))
                start += f'<a href="{escape_html(uri)}">' if uri else "<a>"
                close = "</a>" + close
            elif attr.type == AttrType.PAGE:
                page_id = _str_value(attr)
                title = self.resolve_page_title(page_id)
                start += f'<a href="{escape_html(self.page_url(page_id, title))}">{escape_html(title)}</a>'
                text = ""
            elif attr.type == AttrType.USER:
                name = self.resolve_user_name(_str_value(attr))
                start += f'<span class="user">@{escape_html(name)}</span>'
                text = ""
            elif attr.type == AttrType.DATE:
                assert isinstance(attr.value, Date)
                start += self.render_date(attr.value)
                text = ""
            # comments add no markup
        return start + escape_html(text) + close

    def render_spans(self, spans: Iterable[TextSpan]) -> str:
        """Render spans in order and concatenate the results."""
        return "".join(self.render_span(span) for span in spans)


def _str_value(attr: Attribute) -> str:
    return attr.value if isinstance(attr.value, str) else ""
