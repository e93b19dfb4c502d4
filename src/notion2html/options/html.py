#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/options/html.py
"""Configuration options for rendering pages to HTML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from notion2html.constants import (
    DEFAULT_ADD_HEADER_ANCHOR,
    DEFAULT_FULL_HTML,
    DEFAULT_KATEX_TIMEOUT,
    DEFAULT_NOTION_COMPAT,
    DEFAULT_PAGE_URL_BASE,
    DEFAULT_UNSUPPORTED_BLOCK_MODE,
    DEFAULT_USE_KATEX,
    UNSUPPORTED_BLOCK_MODES,
    UnsupportedBlockMode,
)
from notion2html.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from notion2html.ast.nodes import Block, Page
    from notion2html.renderers.html import HtmlConverter


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a page to HTML.

    Parameters
    ----------
    notion_compat : bool, default False
        Produce output structurally aligned with the service's own HTML
        export. Implies ``use_katex``.
    full_html : bool, default False
        Wrap the page in ``<html>``/``<head>``/``<body>`` with embedded CSS.
        Otherwise only the ``<article>`` fragment is produced.
    add_header_anchor : bool, default False
        Add a clickable anchor link to H1-H3 headers.
    use_katex : bool, default False
        Typeset equations with the external ``katex`` binary.
    katex_path : str or None, default None
        Path of the katex binary. When None or missing, ``PATH`` is searched.
    katex_timeout : float, default 10.0
        Seconds allowed for one katex invocation.
    rewrite_url : callable or None, default None
        ``uri -> uri`` function applied to every emitted link target.
    render_block_override : callable or None, default None
        ``(block, converter) -> bool`` hook consulted before the default rule
        for each block. Returning True skips the default rule; the hook writes
        its own output through ``converter.write()``.
    related_pages : sequence of Page, default ()
        Other exported pages, used to resolve page mentions by id.
    unsupported_block_mode : {"strict", "permissive"}, default "strict"
        How to handle block types without a rendering rule:
        - "strict": raise UnsupportedBlockError
        - "permissive": log a warning and emit a placeholder
    page_url_base : str, default "https://www.notion.so/"
        URL prefix of links generated for page mentions.
    template_file : str or None, default None
        Jinja2 template used as the document envelope when ``full_html``
        is set. The template receives ``title``, ``content``, ``css`` and
        ``page``. Requires the ``template`` extra.

    """

    notion_compat: bool = field(
        default=DEFAULT_NOTION_COMPAT,
        metadata={"help": "Mimic the service's own HTML export (forces use_katex)", "importance": "core"},
    )
    full_html: bool = field(
        default=DEFAULT_FULL_HTML,
        metadata={"help": "Generate a complete HTML document with embedded CSS", "importance": "core"},
    )
    add_header_anchor: bool = field(
        default=DEFAULT_ADD_HEADER_ANCHOR,
        metadata={"help": "Add anchor links to headers", "importance": "core"},
    )
    use_katex: bool = field(
        default=DEFAULT_USE_KATEX,
        metadata={"help": "Render equations with the katex binary", "importance": "core"},
    )
    katex_path: Optional[str] = field(
        default=None,
        metadata={"help": "Path of the katex binary (searched on PATH when unset)", "importance": "advanced"},
    )
    katex_timeout: float = field(
        default=DEFAULT_KATEX_TIMEOUT,
        metadata={"help": "Timeout in seconds for one katex invocation", "type": float, "importance": "advanced"},
    )
    rewrite_url: Optional[Callable[[str], str]] = field(
        default=None,
        metadata={"help": "Function applied to every emitted link URL", "importance": "advanced"},
    )
    render_block_override: Optional[Callable[["Block", "HtmlConverter"], bool]] = field(
        default=None,
        metadata={"help": "Hook consulted before rendering each block", "importance": "advanced"},
    )
    related_pages: Sequence["Page"] = field(
        default=(),
        metadata={"help": "Pages used to resolve page mentions by id", "importance": "advanced"},
    )
    unsupported_block_mode: UnsupportedBlockMode = field(
        default=DEFAULT_UNSUPPORTED_BLOCK_MODE,
        metadata={
            "help": "How to handle unsupported blocks: 'strict' raises, 'permissive' emits a placeholder",
            "choices": UNSUPPORTED_BLOCK_MODES,
            "importance": "advanced",
        },
    )
    page_url_base: str = field(
        default=DEFAULT_PAGE_URL_BASE,
        metadata={"help": "URL prefix for links to mentioned pages", "importance": "advanced"},
    )
    template_file: Optional[str] = field(
        default=None,
        metadata={"help": "Jinja2 template used as the document envelope", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If a value is outside its valid range or choices.

        """
        super().__post_init__()

        if self.unsupported_block_mode not in UNSUPPORTED_BLOCK_MODES:
            raise ValueError(
                f"unsupported_block_mode must be one of {UNSUPPORTED_BLOCK_MODES}, "
                f"got {self.unsupported_block_mode!r}"
            )

        if self.katex_timeout <= 0:
            raise ValueError(f"katex_timeout must be positive, got {self.katex_timeout}")

        if self.rewrite_url is not None and not callable(self.rewrite_url):
            raise ValueError("rewrite_url must be callable")

        if self.render_block_override is not None and not callable(self.render_block_override):
            raise ValueError("render_block_override must be callable")

        # Frozen dataclass: store a tuple copy
        if not isinstance(self.related_pages, tuple):
            object.__setattr__(self, "related_pages", tuple(self.related_pages))

    @property
    def katex_enabled(self) -> bool:
        """Whether equations are typeset with katex."""
        return self.use_katex or self.notion_compat
