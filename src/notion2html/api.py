#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/api.py
"""Public conversion functions."""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Union

from notion2html.ast.nodes import Page
from notion2html.ast.serialization import page_from_dict, page_from_json
from notion2html.exceptions import ValidationError
from notion2html.options.html import HtmlRendererOptions
from notion2html.renderers.html import HtmlConverter
from notion2html.utils.paths import html_file_name

logger = logging.getLogger(__name__)

PageSource = Union[Page, Mapping[str, Any], str]


def _to_page(source: PageSource) -> Page:
    if isinstance(source, Page):
        return source
    if isinstance(source, str):
        return page_from_json(source)
    return page_from_dict(source)


def _merge_options(options: Optional[HtmlRendererOptions], kwargs: dict[str, Any]) -> HtmlRendererOptions:
    options = options or HtmlRendererOptions()
    if not kwargs:
        return options
    known = {f.name for f in fields(HtmlRendererOptions)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ValidationError(
            f"Unknown HTML renderer option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )
    return options.create_updated(**kwargs)


def to_html(
    page: PageSource,
    options: Optional[HtmlRendererOptions] = None,
    *,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> bytes:
    """Convert a page to HTML.

    Parameters
    ----------
    page : Page, dict, or str
        Page to convert. A dict or JSON string is first built into a
        :class:`Page` (see :mod:`notion2html.ast.serialization`).
    options : HtmlRendererOptions, optional
        Rendering options
    output : str, Path, IO[bytes], IO[str], or None, default None
        When given, the HTML is also written there
    kwargs : Any
        Individual option overrides, e.g. ``full_html=True``; they take
        precedence over the fields of ``options``

    Returns
    -------
    bytes
        UTF-8 encoded HTML

    Raises
    ------
    ValidationError
        If a keyword is not an HTML renderer option
    ConfigurationError
        If equation typesetting is enabled and katex cannot be found
    RenderingError
        If a block cannot be rendered (e.g. unsupported type in strict mode)
    ParsingError
        If page data or rich text is malformed

    Examples
    --------
        >>> html = to_html(page, full_html=True, add_header_anchor=True)
        >>> to_html(page_json, output="page.html")

    """
    resolved = _to_page(page)
    converter = HtmlConverter(resolved, _merge_options(options, kwargs))
    html = converter.to_html()
    if output is not None:
        converter.write_text_output(html.decode("utf-8"), output)
        logger.debug("Wrote %d bytes of HTML to %s", len(html), output)
    return html


def html_file_name_for_page(page: Page) -> str:
    """Return the file name a page is exported to.

    Examples
    --------
        >>> html_file_name_for_page(page)  # root title "Tom's Notes"
        'Tom s Notes.html'

    """
    return html_file_name(page.root.title)
