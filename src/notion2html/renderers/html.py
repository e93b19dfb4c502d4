#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/html.py
"""HTML converter for page block trees.

This module provides :class:`HtmlConverter`, which walks a
:class:`~notion2html.ast.nodes.Page` depth-first and writes HTML close to the
service's own export. Each block type maps to one ``render_*`` rule through a
dispatch table; an optional override hook can take over any block.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from notion2html.ast.nodes import Block, BlockType, Collection, Page
from notion2html.ast.spans import TextSpan, text_spans_to_string
from notion2html.constants import (
    DEFAULT_COLUMN_RATIO,
    DEFAULT_CSS,
    DEFAULT_PAGE_FONT,
    DEPS_JINJA,
    HEADER_ANCHOR_SVG,
    KATEX_CSS_URL,
    UNTITLED_DATABASE,
)
from notion2html.exceptions import ConfigurationError, ExternalToolError, RenderingError, UnsupportedBlockError
from notion2html.options.html import HtmlRendererOptions
from notion2html.renderers.base import BaseRenderer, BufferStack
from notion2html.renderers.collection import CollectionTableRenderer
from notion2html.renderers.inline import InlineRenderer
from notion2html.renderers.state import SiblingFrame
from notion2html.renderers.toc import collect_header_blocks, indent_levels
from notion2html.utils.dependencies import debug_timer, requires_dependencies
from notion2html.utils.escape import clean_attr, escape_html
from notion2html.utils.ids import to_dash_id, to_no_dash_id
from notion2html.utils.katex import equation_to_html, find_katex
from notion2html.utils.paths import (
    collection_file_name,
    downloaded_file_name,
    file_or_source_url,
    file_path_for_collection,
    file_path_for_page,
    is_url,
    page_cover_path,
)

logger = logging.getLogger(__name__)

BlockRule = Callable[[Block], None]


def _format_number(value: float) -> str:
    """Format a percentage or size without a trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _block_color_class(block: Block) -> str:
    color = block.format_str("block_color")
    if not color:
        return ""
    return "block-color-" + color


class HtmlConverter(BaseRenderer):
    """Render a page to HTML.

    Parameters
    ----------
    page : Page
        Page to render
    options : HtmlRendererOptions or None, default None
        Rendering options; defaults are used when None
    data : Any, default None
        Arbitrary caller data, available to ``render_block_override`` hooks
        as ``converter.data``

    Examples
    --------
        >>> converter = HtmlConverter(page, HtmlRendererOptions(full_html=True))
        >>> html_bytes = converter.to_html()

    A hook that replaces the rendering of dividers:

        >>> def override(block, converter):
        ...     if block.type == "divider":
        ...         converter.write("<hr/>")
        ...         return True
        ...     return False
        >>> options = HtmlRendererOptions(render_block_override=override)

    """

    def __init__(self, page: Page, options: HtmlRendererOptions | None = None, data: Any = None):
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.page = page
        self.data = data

        self.buffers = BufferStack()
        self._frames: list[SiblingFrame] = []
        self._katex_path: Optional[str] = None
        self._did_import_katex_css = False
        self._id_to_page: Optional[dict[str, Page]] = None

        self.inline = InlineRenderer(page, options, page_title_resolver=self._related_page_title)
        self.collections = CollectionTableRenderer(self)
        self._rules: dict[str, Optional[BlockRule]] = self._build_dispatch()

    def _build_dispatch(self) -> dict[str, Optional[BlockRule]]:
        rules: dict[BlockType, Optional[BlockRule]] = {
            BlockType.PAGE: self.render_page,
            BlockType.TEXT: self.render_text,
            BlockType.EQUATION: self.render_equation,
            BlockType.NUMBERED_LIST: self.render_numbered_list,
            BlockType.BULLETED_LIST: self.render_bulleted_list,
            BlockType.HEADER: self.render_header,
            BlockType.SUB_HEADER: self.render_sub_header,
            BlockType.SUB_SUB_HEADER: self.render_sub_sub_header,
            BlockType.TODO: self.render_todo,
            BlockType.TOGGLE: self.render_toggle,
            BlockType.QUOTE: self.render_quote,
            BlockType.DIVIDER: self.render_divider,
            BlockType.CODE: self.render_code,
            BlockType.BOOKMARK: self.render_bookmark,
            BlockType.IMAGE: self.render_image,
            BlockType.COLUMN_LIST: self.render_column_list,
            BlockType.COLUMN: self.render_column,
            BlockType.COLLECTION_VIEW: self.render_collection_view,
            BlockType.COLLECTION_VIEW_PAGE: self.render_collection_view_page,
            BlockType.EMBED: self.render_embed,
            BlockType.GIST: self.render_generic_embed,
            BlockType.MAPS: self.render_generic_embed,
            BlockType.CODEPEN: self.render_generic_embed,
            BlockType.TWEET: self.render_generic_embed,
            BlockType.VIDEO: self.render_media,
            BlockType.AUDIO: self.render_media,
            BlockType.FILE: self.render_file,
            BlockType.DRIVE: self.render_drive,
            BlockType.FIGMA: self.render_figma,
            BlockType.PDF: self.render_file,
            BlockType.CALLOUT: self.render_callout,
            BlockType.TABLE_OF_CONTENTS: self.render_table_of_contents,
            BlockType.BREADCRUMB: self.render_breadcrumb,
            BlockType.FACTORY: None,
        }
        return {block_type.value: rule for block_type, rule in rules.items()}

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, page: Page | None = None) -> str:
        """Render the page to an HTML string.

        Parameters
        ----------
        page : Page or None, default None
            Page to render instead of the one given at construction

        Returns
        -------
        str
            HTML fragment (``<article>``) or full document

        Raises
        ------
        ConfigurationError
            If equation typesetting is enabled and katex cannot be found
        UnsupportedBlockError
            In strict mode, for a block type without a rendering rule
        DecodeError
            If a collection cell holds malformed rich text

        """
        if page is not None and page is not self.page:
            self.page = page
            self.inline.page = page

        self._reset()
        if self.options.katex_enabled:
            self._katex_path = find_katex(self.options.katex_path)

        with debug_timer(logger, f"Rendering page {to_no_dash_id(self.page.id)}"):
            self.buffers.push()
            self.render_block(self.page.root)
            result = self.buffers.pop()
        return result

    def to_html(self) -> bytes:
        """Render the page to UTF-8 encoded HTML."""
        return self.render_to_bytes(self.page)

    def _reset(self) -> None:
        self.buffers.clear()
        self._frames = []
        self._katex_path = None
        self._did_import_katex_css = False

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Append raw HTML to the current output buffer."""
        self.buffers.write(text)

    def write_spans(self, spans: list[TextSpan]) -> None:
        self.buffers.write(self.inline.render_spans(spans))

    def rewrite_url(self, uri: str) -> str:
        return self.inline.rewrite_url(uri)

    def inline_content(self, spans: list[TextSpan]) -> str:
        """Render spans to a string without touching the current buffer."""
        if not spans:
            return ""
        self.buffers.push()
        self.write_spans(spans)
        return self.buffers.pop()

    def a(self, uri: str, text: str, cls: str = "") -> None:
        """Write an ``<a>`` element; both ``uri`` and ``text`` are escaped."""
        uri = escape_html(self.rewrite_url(uri))
        text = escape_html(text)
        cls_attr = f' class="{cls}"' if cls else ""
        if not uri:
            self.write(f"<a{cls_attr}>{text}</a>")
            return
        self.write(f'<a{cls_attr} href="{uri}">{text}</a>')

    def render_caption(self, block: Block) -> None:
        if block.caption is None:
            return
        self.write("<figcaption>")
        self.write_spans(block.caption)
        self.write("</figcaption>")

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    @property
    def current_frame(self) -> Optional[SiblingFrame]:
        return self._frames[-1] if self._frames else None

    def prev_block(self) -> Optional[Block]:
        frame = self.current_frame
        return frame.prev_block if frame else None

    def next_block(self) -> Optional[Block]:
        frame = self.current_frame
        return frame.next_block if frame else None

    def is_prev_block_of_type(self, block_type: str) -> bool:
        frame = self.current_frame
        return frame is not None and frame.is_prev_of_type(block_type)

    def is_next_block_of_type(self, block_type: str) -> bool:
        frame = self.current_frame
        return frame is not None and frame.is_next_of_type(block_type)

    def render_children(self, block: Block) -> None:
        """Render the children of ``block`` inside a new sibling frame.

        Text blocks with children wrap them in ``<div class="indented">``.
        """
        if not block.content:
            return

        indent = block.type == BlockType.TEXT
        if indent:
            self.write('<div class="indented">')

        frame = SiblingFrame(block.content)
        self._frames.append(frame)
        try:
            for i, child in enumerate(block.content):
                frame.index = i
                self.render_block(child)
        finally:
            self._frames.pop()

        if indent:
            self.write("</div>")

    def render_block(self, block: Optional[Block]) -> None:
        """Render one block through the override hook or its dispatch rule.

        Raises
        ------
        UnsupportedBlockError
            If the block type has no rule and the mode is ``"strict"``

        """
        if block is None:
            return

        override = self.options.render_block_override
        if override is not None and override(block, self):
            return

        if block.type not in self._rules:
            self.render_unsupported(block)
            return

        rule = self._rules[block.type]
        if rule is not None:
            rule(block)

    def render_unsupported(self, block: Block) -> None:
        if self.options.unsupported_block_mode == "strict":
            raise UnsupportedBlockError(
                block.type,
                block_id=block.id,
                message=f"Unsupported block type '{block.type}' in {self.page.notion_url}",
            )
        logger.warning("Unsupported block type '%s' (block %s) in %s", block.type, block.id, self.page.notion_url)
        self.render_nyi(block)

    def render_nyi(self, block: Block) -> None:
        self.write(f"<div>TODO: '{escape_html(block.type)}' NYI!</div>")

    # ------------------------------------------------------------------
    # Related pages
    # ------------------------------------------------------------------

    def page_by_id(self, page_id: str) -> Optional[Page]:
        """Return the related page with the given id, or None."""
        if not self.options.related_pages:
            return None
        if self._id_to_page is None:
            self._id_to_page = {to_dash_id(page.id): page for page in self.options.related_pages}
        return self._id_to_page.get(to_dash_id(page_id))

    def _related_page_title(self, page_id: str) -> Optional[str]:
        page = self.page_by_id(page_id)
        if page is not None:
            return page.root.title
        for related in self.options.related_pages:
            block = related.block_by_id(page_id)
            if block is not None:
                return block.title
        return None

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def render_page(self, block: Block) -> None:
        if self.page.is_root(block):
            self._render_root_page(block)
        elif self.page.is_sub_page(block):
            self._render_sub_page(block)
        else:
            self._render_link_to_page(block)

    def _render_root_page(self, block: Block) -> None:
        if not self.options.full_html:
            self._render_article(block)
            return

        if self.options.template_file:
            self.buffers.push()
            self._render_article(block)
            article = self.buffers.pop()
            self.write(self._apply_template(block, article))
            return

        self.write("<html>")
        self.write("<head>")
        self.write('<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>')
        self.write(f"<title>{escape_html(block.title)}</title>")
        self.write(f"<style>{DEFAULT_CSS}\t\n</style>")
        self.write("</head>")
        self.write("<body>")
        self._render_article(block)
        self.write("</body></html>")

    def _render_article(self, block: Block) -> None:
        font = block.format_str("page_font") or DEFAULT_PAGE_FONT
        self.write(f'<article id="{block.id}" class="page {escape_html(font)}">')
        self._render_page_header(block)
        self.write('<div class="page-body">')
        self.render_children(block)
        self.write("</div>")
        self.write("</article>")

    def _render_page_header(self, block: Block) -> None:
        self.write("<header>")
        cover = block.format_str("page_cover")
        if cover:
            position = block.format_value("page_cover_position", 0)
            if not isinstance(position, (int, float)):
                position = 0
            cover_url = escape_html(page_cover_path(block, cover))
            self.write(
                f'<img class="page-cover-image" src="{cover_url}" '
                f'style="object-position:center {_format_number((1 - position) * 100)}%"/>'
            )

        icon = block.format_str("page_icon")
        if icon:
            # "undefined" matches the service's export
            cls_cover = "page-header-icon-with-cover" if cover else "undefined"
            self.write(f'<div class="page-header-icon {cls_cover}">')
            self._render_icon(block, icon)
            self.write("</div>")

        self.write('<h1 class="page-title">')
        self.write_spans(block.inline_content)
        self.write("</h1>")
        self.write("</header>")

    def _render_icon(self, block: Block, icon: str) -> None:
        if is_url(icon):
            self.write(f'<img class="icon" src="{escape_html(downloaded_file_name(self.page, block, icon))}"/>')
        else:
            self.write(f'<span class="icon">{escape_html(icon)}</span>')

    def _render_sub_page(self, block: Block) -> None:
        self._render_link_to_page(block)

    def _render_link_to_page(self, block: Block) -> None:
        uri = self.rewrite_url(file_path_for_page(self.page, block))
        cls = clean_attr(_block_color_class(block) + " link-to-page")
        self.write(f'<figure id="{block.id}" class="{cls}">')
        self.write(f'<a href="{escape_html(uri)}">')
        icon = block.format_str("page_icon")
        if icon:
            self._render_icon(block, icon)
        self.write(escape_html(block.title))
        self.write("</a>")
        self.write("</figure>")

    @requires_dependencies("template", DEPS_JINJA)
    def _apply_template(self, block: Block, content: str) -> str:
        """Render the document envelope from a Jinja2 template.

        The template receives ``title``, ``content`` (the rendered article),
        ``css`` (the default stylesheet) and ``page``.

        Raises
        ------
        ConfigurationError
            If the template file does not exist
        DependencyError
            If Jinja2 is not installed

        """
        from jinja2 import Environment, FileSystemLoader, select_autoescape
        from markupsafe import Markup

        assert self.options.template_file is not None
        template_path = Path(self.options.template_file)
        if not template_path.is_file():
            raise ConfigurationError(
                f"Template file not found: {self.options.template_file}", parameter_name="template_file"
            )

        # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
        env = Environment(
            loader=FileSystemLoader(str(template_path.parent)), autoescape=select_autoescape(["html", "xml"])
        )
        template = env.get_template(template_path.name)
        return template.render(
            title=block.title,
            content=Markup(content),
            css=Markup(DEFAULT_CSS),
            page=self.page,
        )

    # ------------------------------------------------------------------
    # Text blocks
    # ------------------------------------------------------------------

    def render_text(self, block: Block) -> None:
        self.write(f'<p id="{block.id}" class="{_block_color_class(block)}">')
        self.write_spans(block.inline_content)
        self.render_children(block)
        self.write("</p>")

    def render_equation(self, block: Block) -> None:
        if self._katex_path is None:
            self._render_equation_fallback(block)
            return

        try:
            html = equation_to_html(
                self._katex_path, text_spans_to_string(block.inline_content), timeout=self.options.katex_timeout
            )
        except ExternalToolError as e:
            logger.warning("Equation %s could not be typeset: %s", block.id, e)
            self._render_equation_fallback(block)
            return

        self.write(f'<figure id="{block.id}" class="equation">')
        if not self._did_import_katex_css:
            self.write(f"<style>@import url('{KATEX_CSS_URL}')</style>")
            self._did_import_katex_css = True
        self.write('<div class="equation-container">')
        self.write(html)
        self.write("</div>")
        self.write("</figure>")

    def _render_equation_fallback(self, block: Block) -> None:
        self.write(f'<figure id="{block.id}" class="equation">')
        self.write_spans(block.inline_content)
        self.write("</figure>")

    def render_numbered_list(self, block: Block) -> None:
        frame = self.current_frame
        if frame is not None:
            number = frame.tracker.advance(frame.is_prev_of_type(BlockType.NUMBERED_LIST))
        else:
            number = 1

        cls = clean_attr(_block_color_class(block) + " numbered-list")
        self.write(f'<ol id="{block.id}" class="{cls}" start="{number}">')
        self.write("<li>")
        self.write_spans(block.inline_content)
        self.render_children(block)
        self.write("</li>")
        self.write("</ol>")

    def render_bulleted_list(self, block: Block) -> None:
        cls = clean_attr(_block_color_class(block) + " bulleted-list")
        self.write(f'<ul id="{block.id}" class="{cls}">')
        self.write("<li>")
        self.write_spans(block.inline_content)
        self.render_children(block)
        self.write("</li>")
        self.write("</ul>")

    def _render_header_level(self, block: Block, level: int) -> None:
        self.write(f'<h{level} id="{block.id}" class="{_block_color_class(block)}">')
        if self.options.add_header_anchor:
            self.write(f'<a class="notion-header-anchor" href="#{block.id}" aria-hidden="true">{HEADER_ANCHOR_SVG}</a>')
        self.write_spans(block.inline_content)
        self.write(f"</h{level}>")

    def render_header(self, block: Block) -> None:
        self._render_header_level(block, 1)

    def render_sub_header(self, block: Block) -> None:
        self._render_header_level(block, 2)

    def render_sub_sub_header(self, block: Block) -> None:
        self._render_header_level(block, 3)

    def render_todo(self, block: Block) -> None:
        self.write(f'<ul id="{block.id}" class="to-do-list">')
        self.write("<li>")
        checkbox = "checkbox-on" if block.is_checked else "checkbox-off"
        self.write(f'<div class="checkbox {checkbox}"></div>')
        children_cls = "to-do-children-checked" if block.is_checked else "to-do-children-unchecked"
        self.write(f'<span class="{children_cls}">')
        self.write_spans(block.inline_content)
        self.write("</span>")
        self.render_children(block)
        self.write("</li>")
        self.write("</ul>")

    def render_toggle(self, block: Block) -> None:
        cls = clean_attr(_block_color_class(block) + " toggle")
        self.write(f'<ul id="{block.id}" class="{cls}">')
        self.write("<li>")
        self.write('<details open="">')
        self.write("<summary>")
        self.write_spans(block.inline_content)
        self.write("</summary>")
        self.render_children(block)
        self.write("</details>")
        self.write("</li>")
        self.write("</ul>")

    def render_quote(self, block: Block) -> None:
        self.write(f'<blockquote id="{block.id}" class="">')
        self.write_spans(block.inline_content)
        self.render_children(block)
        self.write("</blockquote>")

    def render_callout(self, block: Block) -> None:
        cls = clean_attr(_block_color_class(block) + " callout")
        self.write(f'<figure class="{cls}" style="white-space:pre-wrap;display:flex" id="{block.id}">')
        self.write('<div style="font-size:1.5em">')
        self.write(f'<span class="icon">{escape_html(block.format_str("page_icon"))}</span>')
        self.write("</div>")
        self.write('<div style="width:100%">')
        self.write_spans(block.inline_content)
        self.write("</div>")
        self.write("</figure>")

    def render_table_of_contents(self, block: Block) -> None:
        cls = clean_attr(_block_color_class(block) + " table_of_contents")
        self.write(f'<nav id="{block.id}" class="{cls}">')
        headers = collect_header_blocks(self.page.root.content)
        for header, indent in zip(headers, indent_levels(headers)):
            content = self.inline_content(header.inline_content)
            self.write(f'<div class="table_of_contents-item table_of_contents-indent-{indent}">')
            self.write(f'<a class="table_of_contents-link" href="#{header.id}">{content}</a>')
            self.write("</div>")
        self.write("</nav>")

    def render_divider(self, block: Block) -> None:
        self.write(f'<hr id="{block.id}"/>')

    def render_code(self, block: Block) -> None:
        self.write(f'<pre id="{block.id}" class="code">')
        self.write(f"<code>{escape_html(block.code)}</code>")
        self.write("</pre>")

    def render_breadcrumb(self, block: Block) -> None:
        if self.options.notion_compat:
            # not part of the service's export
            return
        self.render_nyi(block)

    # ------------------------------------------------------------------
    # Media and embeds
    # ------------------------------------------------------------------

    def render_bookmark(self, block: Block) -> None:
        self.write(f'<figure id="{block.id}">')
        cls = clean_attr(_block_color_class(block) + " bookmark source")
        self.write(f'<div class="{cls}">')
        self.a(block.link, block.title)
        self.write("<br/>")
        self.a(block.link, block.link, "bookmark-href")
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_media(self, block: Block) -> None:
        """Render audio and video blocks as a link to the (downloaded) source."""
        self.write(f'<figure id="{block.id}">')
        self.write('<div class="source">')
        source = block.source
        if not source:
            self.write("<a></a>")
        else:
            file_name = downloaded_file_name(self.page, block, source) if block.file_ids else source
            self.a(file_name, source)
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_generic_embed(self, block: Block) -> None:
        self.write(f'<figure id="{block.id}">')
        self.write('<div class="source">')
        self.a(block.source, block.source)
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_embed(self, block: Block) -> None:
        self.write(f'<figure id="{block.id}">')
        self.write('<div class="source">')
        self.a(file_or_source_url(self.page, block), block.source)
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_figma(self, block: Block) -> None:
        self.write(f'<figure id="{block.id}">')
        self.write('<div class="source">')
        self.a(block.source, block.source)
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_file(self, block: Block) -> None:
        """Render file and PDF blocks."""
        self.write(f'<figure id="{block.id}">')
        self.write('<div class="source">')
        self.a(downloaded_file_name(self.page, block, block.source), block.source)
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_drive(self, block: Block) -> None:
        icon = escape_html(block.format_str("drive_properties.icon"))
        url = block.format_str("drive_properties.url")
        title = escape_html(block.format_str("drive_properties.title"))
        href = escape_html(self.rewrite_url(url))

        self.write(f'<figure id="{block.id}">')
        self.write('<div class="bookmark source">')
        self.write(
            f'<img style="width:1em;height:1em;margin-right:0.5em;vertical-align:text-bottom" src="{icon}"/>'
        )
        self.write(f'<a href="{href}">{title}</a>')
        self.write("<br/>")
        self.write(f'<a class="bookmark-href" href="{href}">{escape_html(url)}</a>')
        self.write("</div>")
        self.render_caption(block)
        self.write("</figure>")

    def render_image(self, block: Block) -> None:
        uri = file_or_source_url(self.page, block)
        width = block.format_value("block_width", 0)
        if not isinstance(width, (int, float)):
            width = 0
        style = f'style="width:{int(width)}px" ' if width else ""

        self.write(f'<figure id="{block.id}" class="image">')
        self.write(f'<a href="{escape_html(self.rewrite_url(uri))}">')
        self.write(f'<img {style}src="{escape_html(uri)}"/>')
        self.write("</a>")
        self.render_caption(block)
        self.write("</figure>")

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def render_column_list(self, block: Block) -> None:
        """Render a column list; its children are column blocks.

        Raises
        ------
        RenderingError
            In strict mode, if the column list has no columns

        """
        if not block.content:
            message = f"Column list {block.id} in {self.page.notion_url} has no columns"
            if self.options.unsupported_block_mode == "strict":
                raise RenderingError(message, rendering_stage="column_list")
            logger.warning(message)
            return

        self.write(f'<div id="{block.id}" class="column-list">')
        self.render_children(block)
        self.write("</div>")

    def render_column(self, block: Block) -> None:
        ratio = block.format_value("column_ratio", DEFAULT_COLUMN_RATIO)
        if not isinstance(ratio, (int, float)):
            ratio = DEFAULT_COLUMN_RATIO
        self.write(f'<div id="{block.id}" style="width:{_format_number(ratio * 100)}%" class="column">')
        self.render_children(block)
        self.write("</div>")

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def render_collection_view(self, block: Block) -> None:
        self.collections.render(block)

    def render_collection_view_page(self, block: Block) -> None:
        collection = self.page.collection_by_id(block.collection_id)
        if collection is None:
            logger.warning("Collection %s not found for block %s in %s", block.collection_id, block.id, self.page.notion_url)
            collection = Collection(id=block.collection_id, name=UNTITLED_DATABASE)

        uri = self.rewrite_url(file_path_for_collection(self.page, collection))
        self.write(f'<figure id="{block.id}" class="link-to-page">')
        self.write(f'<a href="{escape_html(uri)}">')
        if collection.icon:
            icon_uri = collection_file_name(self.page, collection, collection.icon)
            self.write(f'<img class="icon" src="{escape_html(icon_uri)}"/>')
        self.write(f"{escape_html(collection.name)}</a>")
        self.write("</figure>")

