#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/options/__init__.py
"""Dataclass-based configuration options for notion2html renderers."""

from __future__ import annotations

from notion2html.options.base import BaseRendererOptions, CloneFrozenMixin
from notion2html.options.html import HtmlRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
]
