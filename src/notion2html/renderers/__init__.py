#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/__init__.py
"""Page renderers."""

from notion2html.renderers.base import BaseRenderer, BufferStack
from notion2html.renderers.html import HtmlConverter
from notion2html.renderers.inline import InlineRenderer

__all__ = ["BaseRenderer", "BufferStack", "HtmlConverter", "InlineRenderer"]
