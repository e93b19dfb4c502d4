#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/parsers/__init__.py
"""Decoders for the service's data encodings."""

from notion2html.parsers.inline import parse_attribute, parse_date, parse_text_span, parse_text_spans

__all__ = ["parse_attribute", "parse_date", "parse_text_span", "parse_text_spans"]
