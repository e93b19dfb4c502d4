#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/escape.py
"""HTML escaping helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str) -> str:
    """Escape HTML special characters the way the service's own export does.

    ``&``, ``<``, ``>`` become named entities, ``"`` becomes ``&quot;`` and
    ``'`` becomes ``&#x27;`` (never ``&#39;`` or ``&#34;``).

    Examples
    --------
        >>> escape_html('Tom\\'s "quote" <b>')
        'Tom&#x27;s &quot;quote&quot; &lt;b&gt;'

    """
    return _html_escape(text, quote=True).replace("&#39;", "&#x27;").replace("&#34;", "&quot;")


def clean_attr(value: str) -> str:
    """Trim an attribute value and collapse runs of spaces.

    Used for class lists assembled from optional parts, e.g.
    ``" numbered-list"`` when there is no block color.
    """
    value = value.strip()
    while "  " in value:
        value = value.replace("  ", " ")
    return value
